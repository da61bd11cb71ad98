"""Test suite for tabular export and throughput charts."""

import sys
import os

import pandas as pd
import pytest

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from configuration import BINARY_BASE
from persistence.parquet import ResultParquetExporter, result_to_frames
from speedtest.result import Result
from visualizations.throughput_plots import ThroughputPlotter

GIB = 1024 ** 3
MIB = 1024 ** 2


@pytest.fixture
def full_result(full_document_bytes):
    return Result.from_json(full_document_bytes)


def test_frames_for_every_section(full_result):
    frames = result_to_frames(full_result, BINARY_BASE)
    assert set(frames) == {'network', 'drive', 'object', 'client', 'site_replication'}


def test_network_frame(full_result):
    df = result_to_frames(full_result, BINARY_BASE)['network']
    assert list(df['endpoint']) == ['node1:9000', 'node2:9000']
    assert list(df['rx_bps']) == [2 * GIB, 3 * GIB]
    assert list(df['tx_gib_s']) == [1.0, 0.5]


def test_drive_frame_has_row_per_disk(full_result):
    df = result_to_frames(full_result, BINARY_BASE)['drive']
    assert len(df) == 3
    assert list(df['path']) == ['/mnt/disk1', '/mnt/disk2', '/mnt/disk1']
    assert list(df['read_mib_s']) == [500.0, 510.0, 490.0]


def test_drive_frame_without_disks():
    result = Result.from_json(b'{"drive": {"servers": [{"endpoint": "n1"}]}}')
    df = result_to_frames(result, BINARY_BASE)['drive']
    assert len(df) == 0
    assert 'read_mib_s' in df.columns


def test_object_and_client_frames(full_result):
    frames = result_to_frames(full_result, BINARY_BASE)
    obj = frames['object']
    assert list(obj['operation']) == ['PUT', 'GET']
    assert list(obj['objects_per_sec']) == [107, 214]
    assert list(obj['servers']) == [2, 2]
    assert frames['client'].iloc[0]['throughput'] == 10 * MIB
    assert frames['site_replication'].iloc[0]['rx_mib_s'] == 10.0


def test_empty_result_has_no_frames():
    assert result_to_frames(Result(), BINARY_BASE) == {}


class TestResultParquetExporter:
    """Writing sections to Parquet files."""

    def test_save_writes_file_per_section(self, tmp_path, full_result):
        exporter = ResultParquetExporter(str(tmp_path / "out"), BINARY_BASE)
        paths = exporter.save(full_result, filename_prefix="perf")

        assert len(paths) == 5
        for path in paths:
            assert os.path.exists(path)
            assert os.path.basename(path).startswith("perf_")

        drive_path = next(p for p in paths if "_drive_" in p)
        df = pd.read_parquet(drive_path)
        assert len(df) == 3

    def test_save_empty_result(self, tmp_path):
        exporter = ResultParquetExporter(str(tmp_path), BINARY_BASE)
        assert exporter.save(Result()) == []


class TestThroughputPlotter:
    """Bar charts from exported frames."""

    def test_create_all_plots(self, tmp_path, full_result):
        plotter = ThroughputPlotter(result_to_frames(full_result, BINARY_BASE), str(tmp_path))
        plots = plotter.create_all_plots()
        assert [os.path.basename(p) for p in plots] == [
            'network_throughput.png', 'drive_throughput.png', 'object_throughput.png'
        ]
        for plot in plots:
            assert os.path.getsize(plot) > 0

    def test_missing_sections_are_skipped(self, tmp_path):
        result = Result.from_json(b'{"object": {"threads": 4}}')
        plotter = ThroughputPlotter(result_to_frames(result, BINARY_BASE), str(tmp_path))
        assert plotter.create_network_throughput_chart() is None
        assert plotter.create_drive_throughput_chart() is None
        assert len(plotter.create_all_plots()) == 1
