"""
Configuration constants for the speedtest report tool.

This module contains all configuration parameters including:
- Archive layout (metadata entry name, result entry suffix)
- Unit conversion bases (binary and decimal)
- Report formatting constants
- CLI and logging defaults
"""

import os

# =============================================================================
# ARCHIVE LAYOUT
# =============================================================================

# Entry holding the cluster metadata (software version) inside a result archive
CLUSTER_INFO_FILENAME: str = "cluster.info"

# Any archive entry with this suffix is a candidate result document
RESULT_FILE_SUFFIX: str = ".json"

# =============================================================================
# UNIT CONVERSION
# =============================================================================

BINARY_BASE: int = 1024  # KiB, MiB, GiB
DECIMAL_BASE: int = 1000  # kB, MB, GB

UNIT_BASES = {
    "binary": BINARY_BASE,
    "decimal": DECIMAL_BASE,
}

# Unit labels per base, used by the report renderer
UNIT_LABELS = {
    BINARY_BASE: {"kib": "KiB", "mib": "MiB", "gib": "GiB"},
    DECIMAL_BASE: {"kib": "kB", "mib": "MB", "gib": "GB"},
}

# Default base, overridable with SPEEDTEST_UNIT_BASE=binary|decimal
UNIT_BASE: int = UNIT_BASES.get(
    os.getenv("SPEEDTEST_UNIT_BASE", "binary").lower(), BINARY_BASE
)

# Durations are encoded as integer nanoseconds on the wire
NANOSECONDS_PER_SECOND: int = 1_000_000_000

# =============================================================================
# REPORT FORMATTING
# =============================================================================

CHECK_MARK: str = "✔"
JSON_INDENT: int = 2
PRODUCT_NAME: str = "MinIO"

# =============================================================================
# CLI DEFAULTS
# =============================================================================

DEFAULT_OUTPUT_DIR: str = "results"
DEFAULT_PLOTS_DIR: str = "plots"

# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL: str = os.getenv("SPEEDTEST_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT: str = "%(asctime)s - %(levelname)s - %(message)s"
