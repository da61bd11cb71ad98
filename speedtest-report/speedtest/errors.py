"""
Exceptions raised while loading speedtest results.

File system and archive failures (``OSError``, ``zipfile.BadZipFile``) are not
wrapped and reach the caller unchanged.
"""


class SpeedtestError(Exception):
    """Base class for speedtest result errors."""


class MalformedDocumentError(SpeedtestError, ValueError):
    """The input is not valid JSON for the declared result structure."""


class NoResultInArchiveError(SpeedtestError):
    """A zip archive was opened but none of its entries held a usable result."""

    def __init__(self, archive_path: str):
        self.archive_path = archive_path
        super().__init__(f"no valid .json file in .zip archive {archive_path}")
