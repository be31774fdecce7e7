# objectfile/parsers/yaml_.py
"""YAML parser backed by PyYAML."""

from __future__ import annotations

from typing import Any

from ..exceptions import ParserUnavailableError
from .base import ObjectFileParser
from .options import YamlOptions

try:
    import yaml
except ImportError:  # pragma: no cover - exercised only without pyyaml
    yaml = None

__all__ = ("YamlParser",)


class YamlParser(ObjectFileParser):
    """
    Parse and emit YAML.

    Loading and dumping use PyYAML's safe loader/dumper unless
    :class:`YamlOptions` names other classes.
    """

    format_name = "yaml"

    def __init__(self, lib: Any = None, options: YamlOptions | None = None):
        lib = lib if lib is not None else yaml
        if lib is None:
            raise ParserUnavailableError("No YAML library provided or found")
        self.lib = lib
        self.options = options or YamlOptions()
        self._loader = self.options.loader or lib.SafeLoader
        self._dumper = self.options.dumper or lib.SafeDumper

    @classmethod
    def available(cls) -> bool:
        return yaml is not None

    def parse(self, raw: str) -> Any:
        try:
            return self.lib.load(raw, Loader=self._loader)
        except self.lib.YAMLError as err:
            raise self._syntax_error("parse", err) from err

    def stringify(self, value: Any) -> str:
        try:
            return self.lib.dump(value, Dumper=self._dumper, **self.options.dump)
        except self.lib.YAMLError as err:
            raise self._syntax_error("stringify", err) from err
