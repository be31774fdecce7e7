# objectfile/parsers/hybrid.py
"""
Hybrid JSON: read hand-edited ``.json`` files that carry comments, write back
canonical JSON.
"""

from __future__ import annotations

from typing import Any

from ..exceptions import FormatSyntaxError
from .base import ObjectFileParser
from .json5_ import Json5Parser
from .json_ import JsonParser

__all__ = ("HybridJsonParser",)


class HybridJsonParser(ObjectFileParser):
    """Parse with a JSON5 reader, stringify with a strict JSON writer."""

    format_name = "json"

    def __init__(self, reader: Json5Parser | None = None, writer: JsonParser | None = None):
        self.reader = reader or Json5Parser()
        self.writer = writer or JsonParser()

    @classmethod
    def available(cls) -> bool:
        return Json5Parser.available()

    def parse(self, raw: str) -> Any:
        try:
            return self.reader.parse(raw)
        except FormatSyntaxError as err:
            # Report the key the caller used, not the reader's grammar.
            raise self._syntax_error("parse", err.original or err) from err

    def stringify(self, value: Any) -> str:
        return self.writer.stringify(value)
