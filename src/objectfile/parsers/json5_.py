# objectfile/parsers/json5_.py
"""JSON5 parser: JSON superset with comments, unquoted keys and trailing commas."""

from __future__ import annotations

from typing import Any

from ..exceptions import ParserUnavailableError
from .base import ObjectFileParser
from .options import Json5Options

try:
    import json5
except ImportError:  # pragma: no cover - exercised only without json5
    json5 = None

__all__ = ("Json5Parser",)


class Json5Parser(ObjectFileParser):
    """
    Parse and emit JSON5 via the ``json5`` library.

    *lib* may be given explicitly (any module exposing ``loads``/``dumps``);
    otherwise the installed ``json5`` is used.
    """

    format_name = "json5"

    def __init__(self, lib: Any = None, options: Json5Options | None = None):
        lib = lib if lib is not None else json5
        if lib is None:
            raise ParserUnavailableError("No JSON5 library provided or found")
        self.lib = lib
        self.options = options or Json5Options()

    @classmethod
    def available(cls) -> bool:
        return json5 is not None

    def parse(self, raw: str) -> Any:
        try:
            return self.lib.loads(raw, object_hook=self.options.object_hook)
        except ValueError as err:
            raise self._syntax_error("parse", err) from err

    def stringify(self, value: Any) -> str:
        opts = self.options
        try:
            return self.lib.dumps(
                value,
                indent=opts.indent or None,
                sort_keys=opts.sort_keys,
                ensure_ascii=opts.ensure_ascii,
                default=opts.default,
                quote_keys=opts.quote_keys,
                trailing_commas=opts.trailing_commas,
            )
        except (TypeError, ValueError) as err:
            raise self._syntax_error("stringify", err) from err
