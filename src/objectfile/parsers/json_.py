# objectfile/parsers/json_.py
"""Strict JSON parser backed by the standard library."""

from __future__ import annotations

import json
from typing import Any

from .base import ObjectFileParser
from .options import JsonOptions

__all__ = ("JsonParser",)

COMPACT_SEPARATORS = (",", ":")


class JsonParser(ObjectFileParser):
    """
    Parse and emit strict JSON.

    >>> JsonParser().stringify({"test": "out.json"})
    '{\\n  "test": "out.json"\\n}'
    """

    format_name = "json"

    def __init__(self, options: JsonOptions | None = None):
        self.options = options or JsonOptions()

    def parse(self, raw: str) -> Any:
        try:
            return json.loads(raw, object_hook=self.options.object_hook)
        except ValueError as err:
            raise self._syntax_error("parse", err) from err

    def stringify(self, value: Any) -> str:
        opts = self.options
        indent = opts.indent or None
        try:
            return json.dumps(
                value,
                indent=indent,
                separators=None if indent else COMPACT_SEPARATORS,
                sort_keys=opts.sort_keys,
                ensure_ascii=opts.ensure_ascii,
                default=opts.default,
                allow_nan=False,
            )
        except (TypeError, ValueError) as err:
            raise self._syntax_error("stringify", err) from err
