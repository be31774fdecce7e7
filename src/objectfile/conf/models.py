# objectfile/conf/models.py

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..parsers.base import ObjectFileParser
from ..parsers.options import Json5Options, JsonOptions, YamlOptions
from ..registry.base import normalize_format_key

__all__ = ("SerializerSettings",)


class SerializerSettings(BaseModel):
    """
    Resolved configuration of an ``ObjectSerializer``.

    ``parsers`` is a partial registry applied over the built-in one; a ``None``
    value disables that format. The option records configure the built-in
    parsers only; parsers passed through ``parsers`` carry their own options.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, arbitrary_types_allowed=True)

    parsers: dict[str, Optional[ObjectFileParser]] = Field(default_factory=dict)
    hybrid_json: bool = True

    json_options: JsonOptions = Field(default_factory=JsonOptions, alias="json")
    json5_options: Json5Options = Field(default_factory=Json5Options, alias="json5")
    yaml_options: YamlOptions = Field(default_factory=YamlOptions, alias="yaml")

    @field_validator("parsers", mode="before")
    @classmethod
    def _normalize_keys(cls, value):
        if isinstance(value, dict):
            return {normalize_format_key(k): v for k, v in value.items()}
        return value
