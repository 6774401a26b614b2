"""Participant document error classes.

Raised by the loader when a document cannot be used at all. A document that
parses but simply has nobody in it is not an error; see LoadStatus.
"""

from __future__ import annotations


class DocumentError(Exception):
    """Base exception for participant document errors."""

    pass


class DocumentNotFoundError(DocumentError):
    """Raised when the document path does not exist or cannot be read."""

    pass


class DocumentParseError(DocumentError):
    """Raised when the document is not valid YAML or not a mapping."""

    pass


class InvalidEntryError(DocumentError):
    """Raised when a participant entry fails validation."""

    pass
