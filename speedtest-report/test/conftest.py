"""Shared fixtures for speedtest report tests."""

import json
import os
import sys

import pytest

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

GIB = 1024 ** 3
MIB = 1024 ** 2
SECOND_NS = 1_000_000_000


@pytest.fixture
def full_document():
    """A result carrying every section, in the revision that records durations."""
    return {
        "network": {
            "servers": [
                {"endpoint": "node1:9000",
                 "perf": {"rx": 20 * GIB, "rxTotalDuration": 10 * SECOND_NS,
                          "tx": 10 * GIB, "txTotalDuration": 10 * SECOND_NS}},
                {"endpoint": "node2:9000",
                 "perf": {"rx": 3 * GIB, "tx": GIB // 2}},
            ]
        },
        "drive": {
            "servers": [
                {"endpoint": "node1:9000",
                 "perf": [
                     {"path": "/mnt/disk1", "readThroughput": 500 * MIB, "writeThroughput": 250 * MIB},
                     {"path": "/mnt/disk2", "readThroughput": 510 * MIB, "writeThroughput": 260 * MIB},
                 ]},
                {"endpoint": "node2:9000",
                 "perf": [
                     {"path": "/mnt/disk1", "readThroughput": 490 * MIB, "writeThroughput": 240 * MIB},
                 ]},
            ]
        },
        "object": {
            "objectSize": 10 * MIB,
            "threads": 32,
            "PUT": {"perf": {"throughput": GIB, "objectsPerSec": 107,
                             "responseTime": {"avg": 120, "p99": 300}},
                    "servers": [{"endpoint": "node1:9000"}, {"endpoint": "node2:9000"}]},
            "GET": {"perf": {"throughput": 2 * GIB, "objectsPerSec": 214,
                             "ttfb": {"avg": 15}},
                    "servers": [{"endpoint": "node1:9000"}, {"endpoint": "node2:9000"}]},
        },
        "client": {
            "endpoint": "client1:9000",
            "bytesSent": 100 * MIB,
            "timeSpent": 10 * SECOND_NS,
        },
        "siteReplication": {
            "servers": [
                {"endpoint": "site-a:9000",
                 "perf": {"rx": 50 * MIB, "rxTotalDuration": 5 * SECOND_NS,
                          "tx": 25 * MIB, "txTotalDuration": 5 * SECOND_NS}},
            ]
        },
    }


@pytest.fixture
def full_document_bytes(full_document):
    return json.dumps(full_document).encode()
