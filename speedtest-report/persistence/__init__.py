"""
Export of speedtest results to tabular files.
"""

from .parquet import ResultParquetExporter, result_to_frames

__all__ = ['ResultParquetExporter', 'result_to_frames']
