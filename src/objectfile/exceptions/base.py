# objectfile/exceptions/base.py
"""Exception hierarchy for objectfile.

Filesystem failures are not wrapped: they reach the caller as the ``OSError``
subclass raised by the standard library.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "ObjectFileError",
    "UnsupportedFormatError",
    "FormatSyntaxError",
    "NotFoundError",
    "ParserUnavailableError",
]


class ObjectFileError(Exception):
    """Base for all objectfile exceptions."""


# ----------------------------------------------------------------------------
# Registry errors
# ----------------------------------------------------------------------------
class UnsupportedFormatError(ObjectFileError, LookupError):
    """No live parser is registered for the requested format key."""

    def __init__(self, message: str, *, format_key: str = ""):
        super().__init__(message)
        self.format_key = format_key


class ParserUnavailableError(ObjectFileError, ImportError):
    """A parser was constructed but its optional library is not installed."""


# ----------------------------------------------------------------------------
# Parser errors
# ----------------------------------------------------------------------------
class FormatSyntaxError(ObjectFileError, ValueError):
    """Text is not valid for the grammar, or a value cannot be represented in it.

    The exception raised by the format library is chained as ``__cause__`` and
    kept on ``original``.
    """

    def __init__(self, message: str, *, format_key: str = "", original: BaseException | None = None):
        super().__init__(message)
        self.format_key = format_key
        self.original = original


# ----------------------------------------------------------------------------
# Lookup errors
# ----------------------------------------------------------------------------
class NotFoundError(ObjectFileError, FileNotFoundError):
    """Strict probing found no file matching the base name."""

    def __init__(self, message: str, *, base_name: Any = None):
        super().__init__(message)
        self.base_name = base_name
