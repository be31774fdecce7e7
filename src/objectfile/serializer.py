# objectfile/serializer.py
"""
Format-dispatching serializer.

``ObjectSerializer`` picks a parser from its registry, either by an explicit
format key or by the extension of a filename, and hands it the read, write,
parse or stringify call. It can also probe a directory for a file with a known
base name and any registered extension.

Every file operation comes in a blocking form and an ``a``-prefixed async form.
The async forms move only the filesystem call off the event loop; both return
identical results for identical inputs.
"""

from __future__ import annotations

import logging
import os
from typing import Any

from asgiref.sync import sync_to_async

from .conf import SerializerSettings, SettingsOverride, resolve_settings
from .exceptions import NotFoundError, UnsupportedFormatError
from .parsers.base import ObjectFileParser, PathLike
from .registry import ParserRegistry, build_default_registry, normalize_format_key

logger = logging.getLogger(__name__)

__all__ = ("ObjectSerializer", "default_serializer")


class ObjectSerializer:
    """
    Read and write structured values in whichever format a file name implies.

    :param overrides: Mappings or ``SerializerSettings`` layered over the defaults,
                      in order; later overrides win. Shape:
                      ``{"parsers": {key: parser_or_None}, "hybrid_json": bool,
                      "json": {...}, "json5": {...}, "yaml": {...}}``.

    Example:

    >>> from objectfile.parsers import JsonParser
    >>> s = ObjectSerializer({"parsers": {"json": JsonParser()}})
    >>> s.parse("json", '{"a": 1}')
    {'a': 1}
    """

    def __init__(self, *overrides: SettingsOverride | None) -> None:
        self._overrides: list[SettingsOverride | None] = []
        self._settings: SerializerSettings
        self._registry: ParserRegistry
        self.reconfigure(*overrides)

    # --- configuration ---------------------------------------------------
    def reconfigure(self, *overrides: SettingsOverride | None) -> "ObjectSerializer":
        """Layer *overrides* on top of those already applied and rebuild the registry."""
        layered = [*self._overrides, *overrides]
        settings = resolve_settings(*layered)
        base = build_default_registry(
            hybrid_json=settings.hybrid_json,
            json_options=settings.json_options,
            json5_options=settings.json5_options,
            yaml_options=settings.yaml_options,
        )
        self._overrides = layered
        self._settings = settings
        self._registry = base.merge(settings.parsers)
        return self

    @property
    def settings(self) -> SerializerSettings:
        return self._settings

    @property
    def registry(self) -> ParserRegistry:
        return self._registry

    # --- resolution ------------------------------------------------------
    @staticmethod
    def extension_of(filename: PathLike) -> str:
        """
        Return the lowercased extension of the last path segment, without its dot.

        ``"cfg/app.YML"`` -> ``"yml"``; ``"foo"``, ``".json"`` and ``"foo."`` -> ``""``.
        """
        _, ext = os.path.splitext(os.path.basename(os.fspath(filename)))
        return ext[1:].lower()

    ext_from_filename = extension_of

    def _parser_for_format(self, fmt: str) -> ObjectFileParser:
        key = normalize_format_key(fmt)
        parser = self._registry.lookup(key)
        if parser is None:
            raise UnsupportedFormatError(f"Unknown type: {fmt}", format_key=key)
        return parser

    def _parser_for_file(self, filename: PathLike) -> ObjectFileParser:
        key = self.extension_of(filename)
        parser = self._registry.lookup(key)
        if parser is None:
            raise UnsupportedFormatError(f"Unknown type for file: {os.fspath(filename)}", format_key=key)
        logger.debug("Dispatching %s to %r", os.fspath(filename), parser)
        return parser

    # --- text ------------------------------------------------------------
    def parse(self, fmt: str, raw: str) -> Any:
        """Parse *raw* text using the parser registered for *fmt*."""
        return self._parser_for_format(fmt).parse(raw)

    def stringify(self, fmt: str, value: Any) -> str:
        """Serialize *value* using the parser registered for *fmt*."""
        return self._parser_for_format(fmt).stringify(value)

    # --- files -----------------------------------------------------------
    def load_file(self, filename: PathLike) -> Any:
        """Load *filename* with the parser its extension selects."""
        return self._parser_for_file(filename).read_file(filename)

    async def aload_file(self, filename: PathLike) -> Any:
        """Async variant of :meth:`load_file`."""
        return await self._parser_for_file(filename).aread_file(filename)

    def save_file(self, filename: PathLike, value: Any) -> Any:
        """Write *value* to *filename* and return it unchanged."""
        return self._parser_for_file(filename).write_file(filename, value)

    async def asave_file(self, filename: PathLike, value: Any) -> Any:
        """Async variant of :meth:`save_file`."""
        return await self._parser_for_file(filename).awrite_file(filename, value)

    # --- probing ---------------------------------------------------------
    def _split_base_name(self, base_name: PathLike) -> tuple[str, str]:
        base_name = os.fspath(base_name)
        # "cfg/app/" names the segment "app"; a bare root stays as is.
        base_name = base_name.rstrip(os.sep + (os.altsep or "")) or base_name
        return os.path.dirname(base_name), f"{os.path.basename(base_name)}."

    def _scan(self, directory: str, stem: str) -> str | None:
        # First match in listing order wins; the order is whatever the
        # filesystem returns and is deliberately not sorted.
        with os.scandir(directory or os.curdir) as entries:
            for entry in entries:
                if not entry.is_file():
                    continue
                if not entry.name.startswith(stem):
                    continue
                if self._registry.is_supported(self.extension_of(entry.name)):
                    return os.path.join(directory, entry.name) if directory else entry.name
        return None

    def _not_found(self, base_name: PathLike, error_if_not_found: bool) -> None:
        if error_if_not_found:
            raise NotFoundError(f"No matching file found: {os.fspath(base_name)}", base_name=base_name)
        return None

    def find_file(self, base_name: PathLike, error_if_not_found: bool = False) -> str | None:
        """
        Find ``<base_name>.<ext>`` for any registered extension.

        Only regular files directly inside the directory of *base_name* are
        considered. If several extensions exist for the same base name, the
        one the filesystem lists first wins.

        :param base_name: Path without extension, e.g. ``"cfg/app"``.
        :param error_if_not_found: Raise instead of returning None when nothing matches.
        :return: The matching path, or None when nothing matches.
        :rtype: str | None
        :raises NotFoundError: If nothing matches and *error_if_not_found* is True.
        :raises FileNotFoundError: If the directory itself does not exist.
        """
        directory, stem = self._split_base_name(base_name)
        found = self._scan(directory, stem)
        logger.debug("Probed %s: %s", os.fspath(base_name), found)
        if found is None:
            return self._not_found(base_name, error_if_not_found)
        return found

    async def afind_file(self, base_name: PathLike, error_if_not_found: bool = False) -> str | None:
        """Async variant of :meth:`find_file`; the directory scan runs off the event loop."""
        directory, stem = self._split_base_name(base_name)
        found = await sync_to_async(self._scan)(directory, stem)
        logger.debug("Probed %s: %s", os.fspath(base_name), found)
        if found is None:
            return self._not_found(base_name, error_if_not_found)
        return found

    def find_and_load(self, base_name: PathLike, error_if_not_found: bool = False) -> Any:
        """Find a file for *base_name* and load it; None when there is none."""
        filename = self.find_file(base_name, error_if_not_found)
        if filename is None:
            return None
        return self.load_file(filename)

    async def afind_and_load(self, base_name: PathLike, error_if_not_found: bool = False) -> Any:
        """Async variant of :meth:`find_and_load`."""
        filename = await self.afind_file(base_name, error_if_not_found)
        if filename is None:
            return None
        return await self.aload_file(filename)

    def __repr__(self) -> str:
        return f"<ObjectSerializer formats={','.join(self._registry.supported_formats())}>"


default_serializer = ObjectSerializer()
