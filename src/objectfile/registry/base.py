# objectfile/registry/base.py
"""
Format-key → parser mapping.

A key mapped to ``None`` is an explicit "disabled" slot: it reads as
unsupported, like a missing key, but when merged it clears the entry inherited
from the base mapping.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Iterator, Literal, Mapping, Optional, overload

from asgiref.sync import sync_to_async

from ..parsers.base import ObjectFileParser

logger = logging.getLogger(__name__)

__all__ = ("ParserRegistry", "ParsersMap", "merge_parsers", "normalize_format_key")

ParsersMap = Mapping[str, Optional[ObjectFileParser]]


def normalize_format_key(key: Any) -> str:
    """Lowercase *key* and drop a single leading ``.`` (``".JSON"`` -> ``"json"``)."""
    key = str(key).lower()
    if key.startswith("."):
        key = key[1:]
    return key


def merge_parsers(base: ParsersMap, *overrides: ParsersMap | None) -> dict[str, ObjectFileParser | None]:
    """
    Apply *overrides* onto *base*, left to right.

    Every key present in an override replaces the entry in the result, including
    an explicit ``None``. Keys an override does not mention are left alone.
    """
    merged: dict[str, ObjectFileParser | None] = {normalize_format_key(k): v for k, v in base.items()}
    for override in overrides:
        if not override:
            continue
        for key, parser in override.items():
            if parser is not None and not isinstance(parser, ObjectFileParser):
                raise TypeError(f"Parser for {key!r} must be an ObjectFileParser or None, got {parser!r}")
            merged[normalize_format_key(key)] = parser
    return merged


class ParserRegistry(Mapping[str, Optional[ObjectFileParser]]):
    """Immutable mapping of format keys to parsers (or ``None`` for disabled slots)."""

    def __init__(self, parsers: ParsersMap | None = None) -> None:
        self._store = MappingProxyType(merge_parsers(parsers or {}))

    # Mapping protocol -------------------------------------------------
    def __getitem__(self, key: str) -> ObjectFileParser | None:
        return self._store[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._store)

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        return f"ParserRegistry({dict(self._store)!r})"

    # --- retrieval ---

    def lookup(self, key: str) -> ObjectFileParser | None:
        """
        Return the parser registered under *key*, or None.

        The key is matched exactly; callers normalize it first.

        :param key: A lowercase format key such as ``"yaml"``.
        :return: The parser, or None for a disabled or unknown key.
        :rtype: ObjectFileParser | None
        """
        return self._store.get(key)

    async def alookup(self, key: str) -> ObjectFileParser | None:
        """Async wrapper around `lookup`."""
        return await sync_to_async(self.lookup)(key)

    def is_supported(self, key: str) -> bool:
        """True when *key* maps to a live parser."""
        return self._store.get(key) is not None

    def supported_formats(self) -> tuple[str, ...]:
        """Keys with a live parser, in insertion order."""
        return tuple(k for k, v in self._store.items() if v is not None)

    @overload
    def keys(self) -> tuple[str, ...]: ...
    @overload
    def keys(self, *, as_csv: Literal[True]) -> str: ...
    @overload
    def keys(self, *, as_csv: Literal[False]) -> tuple[str, ...]: ...

    def keys(self, *, as_csv: bool = False):
        """
        Return all keys, disabled slots included.

        When `as_csv` is True, returns a comma-separated string for
        logging/debugging purposes.
        """
        keys_tuple = tuple(self._store.keys())
        if as_csv:
            return ",".join(keys_tuple)
        return keys_tuple

    # --- merging ---

    def merge(self, *overrides: ParsersMap | None) -> "ParserRegistry":
        """Return a new registry with *overrides* applied on top of this one."""
        merged = ParserRegistry(merge_parsers(self._store, *overrides))
        logger.debug("Merged parser registry: %s", merged.keys(as_csv=True))
        return merged
