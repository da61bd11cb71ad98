"""
Loading speedtest results from plain JSON files and zip archives.
"""

import logging
import zipfile
import zlib
from typing import Optional

from configuration import CLUSTER_INFO_FILENAME, RESULT_FILE_SUFFIX

from .errors import MalformedDocumentError, NoResultInArchiveError
from .result import Cluster, Result

logger = logging.getLogger(__name__)


def _try_result(name: str, data: bytes) -> Optional[Result]:
    try:
        return Result.from_json(data)
    except MalformedDocumentError as e:
        logger.debug(f"Skipping archive entry {name}: {e}")
        return None


def _try_cluster(name: str, data: bytes) -> Optional[Cluster]:
    try:
        return Cluster.from_json(data)
    except MalformedDocumentError as e:
        logger.debug(f"Ignoring unreadable cluster metadata {name}: {e}")
        return None


def from_zip_file(zip_file: str) -> Result:
    """Read a result from a zip archive.

    Every entry is scanned in archive order. ``cluster.info`` supplies the
    version label and any ``*.json`` entry is a candidate result; the last
    one that decodes wins. Other entries are never read. Entries that cannot
    be read (unsupported compression, encryption, bad CRC) or decoded are
    skipped.

    Raises:
        zipfile.BadZipFile: if the file is not a zip archive
        OSError: if the file cannot be read
        NoResultInArchiveError: if no entry decodes as a result
    """
    result = None
    cluster = None

    with zipfile.ZipFile(zip_file) as archive:
        for entry in archive.infolist():
            is_cluster = entry.filename == CLUSTER_INFO_FILENAME
            is_result = entry.filename.endswith(RESULT_FILE_SUFFIX)
            if entry.is_dir() or not (is_cluster or is_result):
                continue
            try:
                data = archive.read(entry)
            except (zipfile.BadZipFile, zlib.error, OSError, NotImplementedError, RuntimeError) as e:
                logger.warning(f"Cannot read archive entry {entry.filename}: {e}")
                continue

            if is_cluster:
                cluster = _try_cluster(entry.filename, data) or cluster
            if is_result:
                result = _try_result(entry.filename, data) or result

    if result is None:
        raise NoResultInArchiveError(zip_file)

    if cluster is not None:
        result.version = cluster.info.version
    else:
        logger.info(f"No cluster metadata in {zip_file}, version left empty")
    return result


def from_json_file(json_file: str) -> Result:
    """Read a result from a plain JSON file."""
    with open(json_file, "rb") as f:
        return Result.from_json(f.read())


def load_result(path: str) -> Result:
    """Read a result from ``path``, which may be a zip archive or a JSON file."""
    try:
        result = from_zip_file(path)
        logger.info(f"Loaded result from archive {path}")
        return result
    except zipfile.BadZipFile:
        logger.debug(f"{path} is not a zip archive, reading it as JSON")
    return from_json_file(path)
