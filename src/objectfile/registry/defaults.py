# objectfile/registry/defaults.py
"""Built-in parser registry."""

from __future__ import annotations

import logging

from ..parsers import (
    HybridJsonParser,
    Json5Options,
    Json5Parser,
    JsonOptions,
    JsonParser,
    ObjectFileParser,
    YamlOptions,
    YamlParser,
)
from .base import ParserRegistry

logger = logging.getLogger(__name__)

__all__ = ("build_default_registry",)


def build_default_registry(
    *,
    hybrid_json: bool = True,
    json_options: JsonOptions | None = None,
    json5_options: Json5Options | None = None,
    yaml_options: YamlOptions | None = None,
) -> ParserRegistry:
    """
    Build the baseline registry: ``json``, ``json5``, ``yml`` and ``yaml``.

    A format whose optional library is not installed gets a ``None`` slot, so
    the failure surfaces only when that format is used. ``json`` falls back to
    the strict parser when JSON5 is unavailable or *hybrid_json* is off.
    """
    json_options = json_options or JsonOptions()
    json_parser: ObjectFileParser = JsonParser(json_options)

    json5_parser: ObjectFileParser | None = None
    if Json5Parser.available():
        json5_parser = Json5Parser(options=json5_options)
        if hybrid_json:
            # The hybrid reader shares the ".json" decode hook; output stays strict JSON.
            reader = Json5Parser(options=Json5Options(object_hook=json_options.object_hook))
            json_parser = HybridJsonParser(reader=reader, writer=json_parser)
    else:
        logger.debug("json5 is not installed; 'json5' format disabled")

    yaml_parser: ObjectFileParser | None = None
    if YamlParser.available():
        yaml_parser = YamlParser(options=yaml_options)
    else:
        logger.debug("PyYAML is not installed; 'yaml'/'yml' formats disabled")

    registry = ParserRegistry(
        {
            "json": json_parser,
            "yml": yaml_parser,
            "yaml": yaml_parser,
            "json5": json5_parser,
        }
    )
    logger.debug("Built default parser registry: %s", registry.keys(as_csv=True))
    return registry
