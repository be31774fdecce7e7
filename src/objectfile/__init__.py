"""
objectfile — read and write structured files in whichever format their name implies.

Formats
-------
- ``json``  : strict JSON on write; comments and JSON5 syntax tolerated on read
              when ``json5`` is installed (the hybrid parser).
- ``json5`` : JSON5 via the ``json5`` library.
- ``yaml`` / ``yml`` : YAML via PyYAML.

Import Guidelines:
------------------
- Use `objectfile.ObjectSerializer` (or the shared `default_serializer`) to
  load, save, parse, stringify and probe for files.
- Use `objectfile.parsers` to construct parsers with custom options or to add
  a format of your own by subclassing `ObjectFileParser`.
- Use `objectfile.exceptions` for standardized error handling.
"""

from importlib.metadata import PackageNotFoundError, version

from .conf import SerializerSettings
from .exceptions import (
    FormatSyntaxError,
    NotFoundError,
    ObjectFileError,
    ParserUnavailableError,
    UnsupportedFormatError,
)
from .parsers import (
    HybridJsonParser,
    Json5Options,
    Json5Parser,
    JsonOptions,
    JsonParser,
    ObjectFileParser,
    YamlOptions,
    YamlParser,
)
from .registry import ParserRegistry, build_default_registry, merge_parsers
from .serializer import ObjectSerializer, default_serializer

try:
    __version__ = version("objectfile")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "ObjectSerializer",
    "default_serializer",
    "SerializerSettings",
    "ParserRegistry",
    "build_default_registry",
    "merge_parsers",
    "ObjectFileParser",
    "JsonParser",
    "Json5Parser",
    "YamlParser",
    "HybridJsonParser",
    "JsonOptions",
    "Json5Options",
    "YamlOptions",
    "ObjectFileError",
    "UnsupportedFormatError",
    "FormatSyntaxError",
    "NotFoundError",
    "ParserUnavailableError",
]
