"""objectfile exceptions"""
from .base import (
    FormatSyntaxError,
    NotFoundError,
    ObjectFileError,
    ParserUnavailableError,
    UnsupportedFormatError,
)

__all__ = [
    "ObjectFileError",
    "UnsupportedFormatError",
    "FormatSyntaxError",
    "NotFoundError",
    "ParserUnavailableError",
]
