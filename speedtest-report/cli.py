import os
import sys
import logging
import argparse

# Add the current directory to Python path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from configuration import (
    DEFAULT_OUTPUT_DIR, DEFAULT_PLOTS_DIR, LOG_FORMAT, LOG_LEVEL, UNIT_BASE, UNIT_BASES
)
from speedtest import SpeedtestError, load_result, render

logger = logging.getLogger(__name__)


def resolve_log_level(name: str, verbose: bool = False) -> int:
    """Map a level name to a logging level, falling back to WARNING if unknown."""
    if verbose:
        return logging.DEBUG
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.WARNING


class SpeedtestReportCLI:
    """CLI that prints a report for a speedtest result file or archive."""

    def __init__(self):
        self.parser = self._create_parser()

    def _create_parser(self):
        """Create the argument parser."""
        parser = argparse.ArgumentParser(
            description='Render a MinIO speedtest result as a text report',
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Print the report for a single JSON result
  python cli.py speedtest.json

  # Read a support archive with per-node results and cluster.info
  python cli.py perf-results.zip

  # Re-encode the parsed result as indented JSON
  python cli.py speedtest.json --json

  # Export the sections to Parquet and draw throughput charts
  python cli.py perf-results.zip --export-dir results --plots-dir plots
            """
        )

        parser.add_argument('path', help='Speedtest result (.json) or archive (.zip)')
        parser.add_argument('--json', action='store_true',
                            help='Print the parsed result as JSON instead of the report')
        parser.add_argument('--unit-base', choices=sorted(UNIT_BASES),
                            help='Binary (GiB) or decimal (GB) units (default: from SPEEDTEST_UNIT_BASE)')
        parser.add_argument('--export-dir', type=str, nargs='?', const=DEFAULT_OUTPUT_DIR,
                            help=f'Write each section to a Parquet file in this directory (default: {DEFAULT_OUTPUT_DIR})')
        parser.add_argument('--plots-dir', type=str, nargs='?', const=DEFAULT_PLOTS_DIR,
                            help=f'Write throughput charts to this directory (default: {DEFAULT_PLOTS_DIR})')
        parser.add_argument('-v', '--verbose', action='store_true',
                            help='Enable debug logging')

        return parser

    def run_export(self, result, args, unit_base):
        """Write Parquet files for the result."""
        from persistence.parquet import ResultParquetExporter

        exporter = ResultParquetExporter(args.export_dir, unit_base)
        prefix = os.path.splitext(os.path.basename(args.path))[0]
        paths = exporter.save(result, filename_prefix=prefix)
        for path in paths:
            logger.info(f"  - {path}")
        return paths

    def run_plots(self, result, args, unit_base):
        """Write throughput charts for the result."""
        from persistence.parquet import result_to_frames
        from visualizations.throughput_plots import ThroughputPlotter

        os.makedirs(args.plots_dir, exist_ok=True)
        plotter = ThroughputPlotter(result_to_frames(result, unit_base), args.plots_dir, unit_base)
        plots = plotter.create_all_plots()
        if plots:
            logger.info(f"Created {len(plots)} plots in {args.plots_dir}")
        else:
            logger.warning("No plots were created")
        return plots

    def run(self, args=None):
        """Run the CLI with the given arguments."""
        if args is None:
            args = sys.argv[1:]

        parsed_args = self.parser.parse_args(args)

        if not logging.root.handlers:
            logging.basicConfig(level=resolve_log_level(LOG_LEVEL, parsed_args.verbose),
                                format=LOG_FORMAT)

        unit_base = UNIT_BASES[parsed_args.unit_base] if parsed_args.unit_base else UNIT_BASE

        if not os.path.exists(parsed_args.path):
            logger.error(f"File not found: {parsed_args.path}")
            return 1

        try:
            result = load_result(parsed_args.path)
        except SpeedtestError as e:
            logger.error(f"Cannot parse {parsed_args.path}. "
                         f"This doesn't seem to be a MinIO speedtest result file: {e}")
            return 1
        except OSError as e:
            logger.error(f"Cannot read {parsed_args.path}: {e}")
            return 1

        if parsed_args.json:
            print(result.to_json())
        else:
            print(render(result, unit_base), end='')

        try:
            if parsed_args.export_dir:
                self.run_export(result, parsed_args, unit_base)
            if parsed_args.plots_dir:
                self.run_plots(result, parsed_args, unit_base)
        except Exception as e:
            logger.error(f"Unexpected error: {e}")
            return 1

        return 0


def main():
    """Main entry point."""
    cli = SpeedtestReportCLI()
    sys.exit(cli.run())


if __name__ == '__main__':
    main()
