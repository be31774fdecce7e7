"""Format-key registry of parsers."""

from .base import ParserRegistry, ParsersMap, merge_parsers, normalize_format_key
from .defaults import build_default_registry

__all__ = [
    "ParserRegistry",
    "ParsersMap",
    "merge_parsers",
    "normalize_format_key",
    "build_default_registry",
]
