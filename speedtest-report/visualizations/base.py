"""
Base classes for plot visualization.
"""

import logging
from typing import Dict, Optional

import pandas as pd

from configuration import UNIT_BASE, UNIT_LABELS

logger = logging.getLogger(__name__)


class BasePlotter:
    """Base class for all plotters with common functionality."""

    def __init__(self, frames: Dict[str, pd.DataFrame], output_dir: str,
                 unit_base: int = UNIT_BASE):
        self.frames = frames
        self.output_dir = output_dir
        self.units = UNIT_LABELS[unit_base]

    def get_frame(self, section: str) -> Optional[pd.DataFrame]:
        """Get the DataFrame of a section, or None if it is missing or empty."""
        df = self.frames.get(section)
        if df is None or len(df) == 0:
            return None
        return df

    def get_colors(self, count: int):
        """Generate a color per bar group."""
        import matplotlib.pyplot as plt
        return plt.cm.Set1(range(count))
