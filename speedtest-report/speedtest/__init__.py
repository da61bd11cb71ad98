"""
Parsing and reporting for object storage speedtest results.
"""

from .archive import from_json_file, from_zip_file, load_result
from .errors import MalformedDocumentError, NoResultInArchiveError, SpeedtestError
from .report import render
from .result import (
    Client,
    Cluster,
    ClusterInfo,
    Drive,
    DriveServer,
    Network,
    NetworkServer,
    ObjectOperation,
    ObjectPerf,
    ObjectServer,
    Perf,
    ResponseTime,
    Result,
    SiteReplication,
    SiteReplicationServer,
)
from .units import ByteCount

__all__ = [
    'ByteCount',
    'Client',
    'Cluster',
    'ClusterInfo',
    'Drive',
    'DriveServer',
    'MalformedDocumentError',
    'Network',
    'NetworkServer',
    'NoResultInArchiveError',
    'ObjectOperation',
    'ObjectPerf',
    'ObjectServer',
    'Perf',
    'ResponseTime',
    'Result',
    'SiteReplication',
    'SiteReplicationServer',
    'SpeedtestError',
    'from_json_file',
    'from_zip_file',
    'load_result',
    'render',
]
