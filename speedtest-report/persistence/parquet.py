"""
Parquet export for speedtest results.
"""

import os
import logging
from typing import Dict, List
from datetime import datetime

import pandas as pd

from configuration import DEFAULT_OUTPUT_DIR, UNIT_BASE
from speedtest.result import Result

logger = logging.getLogger(__name__)


def result_to_frames(result: Result, unit_base: int = UNIT_BASE) -> Dict[str, pd.DataFrame]:
    """Flatten the present sections of a result into one DataFrame each.

    Byte columns hold raw byte counts; ``*_mib_s`` / ``*_gib_s`` columns hold
    the rates converted with ``unit_base``.

    Args:
        result: Parsed speedtest result
        unit_base: Divisor used for the converted columns

    Returns:
        Mapping of section name to DataFrame, only for present sections
    """
    frames: Dict[str, pd.DataFrame] = {}

    if result.network.is_present():
        frames['network'] = pd.DataFrame([
            {
                'endpoint': server.endpoint,
                'rx_bps': int(server.perf.rx_bps()),
                'tx_bps': int(server.perf.tx_bps()),
                'rx_gib_s': server.perf.rx_bps().gib(unit_base),
                'tx_gib_s': server.perf.tx_bps().gib(unit_base),
            }
            for server in result.network.servers
        ])

    if result.drive.is_present():
        frames['drive'] = pd.DataFrame([
            {
                'endpoint': server.endpoint,
                'path': disk.path,
                'read_throughput': int(disk.read_throughput),
                'write_throughput': int(disk.write_throughput),
                'read_mib_s': disk.read_throughput.mib(unit_base),
                'write_mib_s': disk.write_throughput.mib(unit_base),
            }
            for server in result.drive.servers
            for disk in server.disks
        ], columns=['endpoint', 'path', 'read_throughput', 'write_throughput',
                    'read_mib_s', 'write_mib_s'])

    if result.object.is_present():
        obj = result.object
        frames['object'] = pd.DataFrame([
            {
                'operation': name,
                'throughput': int(operation.perf.throughput),
                'throughput_gib_s': operation.perf.throughput.gib(unit_base),
                'objects_per_sec': operation.perf.objects_per_sec,
                'object_size': int(obj.object_size),
                'threads': obj.threads,
                'servers': len(operation.servers),
                'latency_avg': int(operation.perf.response_time.avg),
                'latency_p99': int(operation.perf.response_time.p99),
                'ttfb_avg': int(operation.perf.ttfb.avg),
            }
            for name, operation in (('PUT', obj.put), ('GET', obj.get))
        ])

    if result.client.is_present():
        client = result.client
        frames['client'] = pd.DataFrame([{
            'endpoint': client.endpoint,
            'bytes_sent': int(client.bytes_sent),
            'time_spent_ns': client.time_spent,
            'throughput': int(client.throughput()),
            'throughput_mib_s': client.throughput().mib(unit_base),
        }])

    if result.site_replication.is_present():
        frames['site_replication'] = pd.DataFrame([
            {
                'endpoint': site.endpoint,
                'rx_bps': int(site.perf.rx_bps()),
                'tx_bps': int(site.perf.tx_bps()),
                'rx_mib_s': site.perf.rx_bps().mib(unit_base),
                'tx_mib_s': site.perf.tx_bps().mib(unit_base),
            }
            for site in result.site_replication.servers
        ])

    return frames


class ResultParquetExporter:
    """Writes the sections of a speedtest result to Parquet files.

    Attributes:
        output_dir: Directory where Parquet files will be saved
        unit_base: Divisor used for the converted rate columns
    """

    def __init__(self, output_dir: str = DEFAULT_OUTPUT_DIR, unit_base: int = UNIT_BASE):
        """Initialize the exporter.

        Args:
            output_dir: Directory for saving Parquet files (default: 'results')
            unit_base: 1024 or 1000
        """
        self.output_dir: str = output_dir
        self.unit_base: int = unit_base

        os.makedirs(output_dir, exist_ok=True)

    def save(self, result: Result, filename_prefix: str = "speedtest") -> List[str]:
        """Save every present section to its own Parquet file.

        Args:
            result: Parsed speedtest result
            filename_prefix: Prefix for the generated filenames (default: 'speedtest')

        Returns:
            Paths of the written files, empty if no section is present
        """
        frames = result_to_frames(result, self.unit_base)
        if not frames:
            logger.warning("Result has no sections to export")
            return []

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        paths = []
        for section, df in frames.items():
            filename = f"{filename_prefix}_{section}_{timestamp}.parquet"
            filepath = os.path.join(self.output_dir, filename)
            df.to_parquet(filepath, index=False)
            logger.info(f"Saved {len(df)} {section} rows to {filepath}")
            paths.append(filepath)

        return paths
