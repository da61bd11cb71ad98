"""
Data structures for speedtest results.

The speed test has shipped several revisions of its JSON output. They share
section names (``network``, ``drive``, ``object``, ``client``) and nested
``servers``/``perf`` keys, so a single set of dataclasses covers all of them:
every field is optional, missing keys keep their zero value and unknown keys
are ignored. Decoding only fails on invalid JSON or on a key whose value has
the wrong JSON type.
"""

import json
import logging
from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any, Dict, List, Union, get_args, get_origin, get_type_hints

from configuration import JSON_INDENT, NANOSECONDS_PER_SECOND

from .errors import MalformedDocumentError
from .report import render
from .units import ByteCount

logger = logging.getLogger(__name__)


def _json_field(name: str, default=None, default_factory=None):
    """Dataclass field stored under ``name`` in the JSON document."""
    if default_factory is not None:
        return field(default_factory=default_factory, metadata={"json": name})
    return field(default=default, metadata={"json": name})


def _per_second(count: ByteCount, duration_ns: int) -> ByteCount:
    """Bytes per whole second, or the raw count if there is no usable duration.

    Older revisions never wrote a duration and stored the rate itself in the
    byte count field.
    """
    seconds = duration_ns // NANOSECONDS_PER_SECOND if duration_ns > 0 else 0
    if seconds > 0:
        return ByteCount(int(count) // seconds)
    return ByteCount(count)


@dataclass
class ResponseTime:
    """Latency distribution.

    The wire format carries these as plain integers, so they share the byte
    count type even though they are time values.
    """
    avg: ByteCount = ByteCount(0)
    p50: ByteCount = ByteCount(0)
    p75: ByteCount = ByteCount(0)
    p95: ByteCount = ByteCount(0)
    p99: ByteCount = ByteCount(0)
    p999: ByteCount = ByteCount(0)
    l5p: ByteCount = ByteCount(0)
    s5p: ByteCount = ByteCount(0)
    max: ByteCount = ByteCount(0)
    min: ByteCount = ByteCount(0)
    sdev: ByteCount = ByteCount(0)
    range: ByteCount = ByteCount(0)


@dataclass
class Perf:
    """Measurements for a node, a disk or a replication site."""
    throughput: ByteCount = ByteCount(0)
    objects_per_sec: int = _json_field("objectsPerSec", 0)
    response_time: ResponseTime = _json_field("responseTime", default_factory=ResponseTime)
    ttfb: ResponseTime = field(default_factory=ResponseTime)
    tx: ByteCount = ByteCount(0)
    tx_total_duration: int = _json_field("txTotalDuration", 0)
    rx: ByteCount = ByteCount(0)
    rx_total_duration: int = _json_field("rxTotalDuration", 0)
    path: str = ""
    read_throughput: ByteCount = _json_field("readThroughput", ByteCount(0))
    write_throughput: ByteCount = _json_field("writeThroughput", ByteCount(0))

    def rx_bps(self) -> ByteCount:
        """Received bytes per second."""
        return _per_second(self.rx, self.rx_total_duration)

    def tx_bps(self) -> ByteCount:
        """Transmitted bytes per second."""
        return _per_second(self.tx, self.tx_total_duration)


@dataclass
class NetworkServer:
    endpoint: str = ""
    perf: Perf = field(default_factory=Perf)


@dataclass
class Network:
    servers: List[NetworkServer] = field(default_factory=list)

    def is_present(self) -> bool:
        return len(self.servers) > 0


@dataclass
class DriveServer:
    endpoint: str = ""
    disks: List[Perf] = _json_field("perf", default_factory=list)


@dataclass
class Drive:
    servers: List[DriveServer] = field(default_factory=list)

    def is_present(self) -> bool:
        return len(self.servers) > 0


@dataclass
class ObjectServer:
    endpoint: str = ""


@dataclass
class ObjectOperation:
    """PUT or GET half of the object benchmark."""
    perf: Perf = field(default_factory=Perf)
    servers: List[ObjectServer] = field(default_factory=list)


@dataclass
class ObjectPerf:
    object_size: ByteCount = _json_field("objectSize", ByteCount(0))
    threads: int = 0
    put: ObjectOperation = _json_field("PUT", default_factory=ObjectOperation)
    get: ObjectOperation = _json_field("GET", default_factory=ObjectOperation)

    def is_present(self) -> bool:
        return self.threads > 0


@dataclass
class Client:
    endpoint: str = ""
    bytes_sent: ByteCount = _json_field("bytesSent", ByteCount(0))
    time_spent: int = _json_field("timeSpent", 0)

    def is_present(self) -> bool:
        return self.endpoint != ""

    def throughput(self) -> ByteCount:
        """Bytes sent per whole second; zero when less than a second elapsed."""
        seconds = self.time_spent // NANOSECONDS_PER_SECOND
        if seconds <= 0:
            return ByteCount(0)
        return ByteCount(int(self.bytes_sent) // seconds)


@dataclass
class SiteReplicationServer:
    endpoint: str = ""
    perf: Perf = field(default_factory=Perf)


@dataclass
class SiteReplication:
    servers: List[SiteReplicationServer] = field(default_factory=list)

    def is_present(self) -> bool:
        return len(self.servers) > 0


@dataclass
class ClusterInfo:
    version: str = _json_field("minio_version", "")


@dataclass
class Cluster:
    """Cluster metadata shipped as ``cluster.info`` inside result archives."""
    info: ClusterInfo = field(default_factory=ClusterInfo)

    @classmethod
    def from_json(cls, data: Union[bytes, str]) -> "Cluster":
        return _load(cls, data)


@dataclass
class Result:
    """A complete speedtest result.

    ``version`` is only filled in when the result was read from an archive
    that carried cluster metadata.
    """
    version: str = ""
    network: Network = field(default_factory=Network)
    drive: Drive = field(default_factory=Drive)
    object: ObjectPerf = field(default_factory=ObjectPerf)
    client: Client = field(default_factory=Client)
    site_replication: SiteReplication = _json_field("siteReplication", default_factory=SiteReplication)

    @classmethod
    def from_json(cls, data: Union[bytes, str]) -> "Result":
        """Decode a result document.

        Raises:
            MalformedDocumentError: if the document is not valid JSON or a
                field has the wrong type
        """
        return _load(cls, data)

    def to_dict(self) -> Dict[str, Any]:
        return _encode(self)

    def to_json(self) -> str:
        """Encode the result as indented JSON with the keys it was read with."""
        return json.dumps(self.to_dict(), indent=JSON_INDENT, ensure_ascii=False)

    def __str__(self):
        return render(self)


# =============================================================================
# DECODING
# =============================================================================

def _load(cls, data: Union[bytes, str]):
    try:
        document = json.loads(data)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise MalformedDocumentError(f"invalid JSON: {e}") from e
    if document is None:
        return cls()
    return _decode_value(cls, document, "$")


def _zero_value(tp):
    if get_origin(tp) is list:
        return []
    return tp()


def _type_error(path: str, expected: str, value) -> MalformedDocumentError:
    return MalformedDocumentError(
        f"cannot decode {type(value).__name__} into {expected} at {path}"
    )


def _decode_value(tp, value, path: str):
    if value is None:
        return _zero_value(tp)

    if get_origin(tp) is list:
        if not isinstance(value, list):
            raise _type_error(path, "list", value)
        (item_type,) = get_args(tp)
        return [
            _decode_value(item_type, item, f"{path}[{i}]")
            for i, item in enumerate(value)
        ]

    if is_dataclass(tp):
        if not isinstance(value, dict):
            raise _type_error(path, "object", value)
        return _decode_object(tp, value, path)

    if tp is str:
        if not isinstance(value, str):
            raise _type_error(path, "string", value)
        return value

    # int and ByteCount; 16.0 and 1e6 are floats and rejected
    if isinstance(value, bool) or not isinstance(value, int):
        raise _type_error(path, "integer", value)
    return tp(value)


def _decode_object(cls, data: Dict[str, Any], path: str):
    hints = get_type_hints(cls)
    by_name = {}
    by_folded = {}
    for f in fields(cls):
        name = f.metadata.get("json", f.name)
        by_name[name] = f
        by_folded.setdefault(name.lower(), f)

    # Keys are applied in document order, so when a field appears under
    # several casings the last one wins. null leaves the field untouched.
    kwargs = {}
    for key, raw in data.items():
        f = by_name.get(key) or by_folded.get(key.lower())
        if f is None or raw is None:
            continue
        kwargs[f.name] = _decode_value(hints[f.name], raw, f"{path}.{key}")
    return cls(**kwargs)


# =============================================================================
# ENCODING
# =============================================================================

def _is_empty(value) -> bool:
    return value in (0, "", None) or value == [] or value == {}


def _encode(value):
    if is_dataclass(value):
        encoded = {}
        for f in fields(value):
            item = _encode(getattr(value, f.name))
            if not _is_empty(item):
                encoded[f.metadata.get("json", f.name)] = item
        return encoded
    if isinstance(value, list):
        return [_encode(item) for item in value]
    if isinstance(value, int):
        return int(value)
    return value
