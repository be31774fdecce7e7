"""Format parsers: JSON, JSON5, YAML and hybrid JSON."""

from .base import ObjectFileParser, PathLike
from .hybrid import HybridJsonParser
from .json5_ import Json5Parser
from .json_ import JsonParser
from .options import Json5Options, JsonOptions, YamlOptions
from .yaml_ import YamlParser

__all__ = [
    "ObjectFileParser",
    "PathLike",
    "JsonParser",
    "Json5Parser",
    "YamlParser",
    "HybridJsonParser",
    "JsonOptions",
    "Json5Options",
    "YamlOptions",
]
