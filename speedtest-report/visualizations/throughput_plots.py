"""
Throughput visualization plots.
"""

import logging
import os

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from .base import BasePlotter

logger = logging.getLogger(__name__)


class ThroughputPlotter(BasePlotter):
    """Plotter for per-node and per-operation throughput bar charts."""

    def _grouped_bars(self, labels, series, title, ylabel, filename):
        """Draw side-by-side bars, one group per label, and save the figure."""
        x = np.arange(len(labels))
        width = 0.8 / len(series)
        colors = self.get_colors(len(series))

        fig, ax = plt.subplots(figsize=(max(8, len(labels) * 1.5), 6))
        for i, (name, values) in enumerate(series):
            ax.bar(x + (i - (len(series) - 1) / 2) * width, values, width,
                   label=name, color=colors[i], edgecolor='black', alpha=0.8)

        ax.set_title(title, fontsize=14)
        ax.set_ylabel(ylabel, fontsize=12)
        ax.set_xticks(x)
        ax.set_xticklabels(labels, rotation=45, ha='right')
        ax.grid(True, axis='y', alpha=0.3)
        ax.legend()
        fig.tight_layout()

        output_file = os.path.join(self.output_dir, filename)
        fig.savefig(output_file, dpi=150, bbox_inches='tight')
        plt.close(fig)
        return output_file

    def create_network_throughput_chart(self):
        """Create RX/TX bar chart per node."""
        df = self.get_frame('network')
        if df is None:
            logger.warning("No network data available for throughput chart")
            return None

        output_file = self._grouped_bars(
            list(df['endpoint']),
            [('RX', df['rx_gib_s']), ('TX', df['tx_gib_s'])],
            'Network Throughput per Node', f"Throughput ({self.units['gib']}/s)",
            'network_throughput.png',
        )
        logger.info(f"Created network throughput chart: {output_file}")
        return output_file

    def create_drive_throughput_chart(self):
        """Create read/write bar chart per drive."""
        df = self.get_frame('drive')
        if df is None:
            logger.warning("No drive data available for throughput chart")
            return None

        labels = [f"{endpoint}:{path}" for endpoint, path in zip(df['endpoint'], df['path'])]
        output_file = self._grouped_bars(
            labels,
            [('Read', df['read_mib_s']), ('Write', df['write_mib_s'])],
            'Drive Throughput', f"Throughput ({self.units['mib']}/s)",
            'drive_throughput.png',
        )
        logger.info(f"Created drive throughput chart: {output_file}")
        return output_file

    def create_object_throughput_chart(self):
        """Create PUT/GET throughput chart."""
        df = self.get_frame('object')
        if df is None:
            logger.warning("No object data available for throughput chart")
            return None

        output_file = self._grouped_bars(
            list(df['operation']),
            [('Throughput', df['throughput_gib_s'])],
            'Object Throughput', f"Throughput ({self.units['gib']}/s)",
            'object_throughput.png',
        )
        logger.info(f"Created object throughput chart: {output_file}")
        return output_file

    def create_all_plots(self):
        """Create every chart for which data is available."""
        plots = [
            self.create_network_throughput_chart(),
            self.create_drive_throughput_chart(),
            self.create_object_throughput_chart(),
        ]
        return [plot for plot in plots if plot is not None]
