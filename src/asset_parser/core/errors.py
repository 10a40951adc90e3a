"""
Fatal error hierarchy.

These are program faults (unreadable input, malformed JSON, broken bundled
reference data, unwritable output). They abort the run immediately and are
never mixed with validation findings, which are collected as data instead.
"""

from typing import Optional


class AssetParserError(Exception):
    """Root of the fatal error hierarchy."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class InputFileError(AssetParserError):
    """Input catalog is missing, unreadable, not JSON, or the wrong shape."""


class ReferenceDataError(AssetParserError):
    """A bundled reference table could not be parsed."""


class OutputFileError(AssetParserError):
    """A normalized catalog could not be written."""
