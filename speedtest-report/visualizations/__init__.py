"""
Plot visualization modules for speedtest results.
"""

from .base import BasePlotter
from .throughput_plots import ThroughputPlotter

__all__ = ['BasePlotter', 'ThroughputPlotter']
