# objectfile/parsers/options.py
"""
Per-parser option records.

Options are captured when a parser is constructed and never consulted from the
call site, so every record is frozen.
"""

from __future__ import annotations

from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field

__all__ = ("JsonOptions", "Json5Options", "YamlOptions")


class JsonOptions(BaseModel):
    """
    Options for the standard-library JSON parser.

    ``object_hook`` is applied to every decoded object (the reviver analogue);
    ``default`` converts values ``json`` cannot encode (the replacer analogue).
    An ``indent`` of ``0`` or ``None`` produces compact output.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    indent: int | str | None = 2
    sort_keys: bool = False
    ensure_ascii: bool = False
    object_hook: Callable[[dict[str, Any]], Any] | None = None
    default: Callable[[Any], Any] | None = None


class Json5Options(JsonOptions):
    """Options for the JSON5 parser; adds the JSON5-only output switches."""

    quote_keys: bool = False
    trailing_commas: bool = True


class YamlOptions(BaseModel):
    """
    Options for the YAML parser.

    ``loader``/``dumper`` default to PyYAML's safe classes when left unset.
    ``dump`` holds extra keyword arguments for ``yaml.dump``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    loader: Any = None
    dumper: Any = None
    dump: dict[str, Any] = Field(
        default_factory=lambda: {
            "default_flow_style": False,
            "sort_keys": False,
            "allow_unicode": True,
        }
    )
