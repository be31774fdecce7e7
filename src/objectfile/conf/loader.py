# objectfile/conf/loader.py
"""
Resolve a stack of configuration overrides into one ``SerializerSettings``.

Precedence order (last wins):
  defaults < override 1 < override 2 < ...
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Mapping, Union

from pydantic import BaseModel

from ..registry.base import normalize_format_key
from .defaults import DEFAULTS
from .models import SerializerSettings

logger = logging.getLogger(__name__)

__all__ = ("SettingsOverride", "resolve_settings")

SettingsOverride = Union[Mapping[str, Any], SerializerSettings]


def _deep_merge(a: dict[str, Any], b: Mapping[str, Any]) -> dict[str, Any]:
    """
    Merge b into a (recursive for dicts). Returns a (mutated).

    Non-mapping values, ``None`` included, replace what is in *a*.
    """
    for k, v in b.items():
        if isinstance(v, Mapping) and isinstance(a.get(k), dict):
            _deep_merge(a[k], v)
        else:
            a[k] = dict(v) if isinstance(v, Mapping) else v
    return a


def _coerce_override(override: SettingsOverride | None) -> dict[str, Any]:
    """Turn one override into a plain dict with normalized parser keys."""
    if override is None:
        return {}
    if isinstance(override, BaseModel):
        data = override.model_dump(by_alias=True, exclude_unset=True)
    elif isinstance(override, Mapping):
        data = dict(override)
    else:
        raise TypeError(f"Unsupported settings override: {override!r}")

    for key, value in data.items():
        if isinstance(value, BaseModel):
            data[key] = value.model_dump(exclude_unset=True)

    parsers = data.get("parsers")
    if isinstance(parsers, Mapping):
        data["parsers"] = {normalize_format_key(k): v for k, v in parsers.items()}
    return data


def resolve_settings(*overrides: SettingsOverride | None) -> SerializerSettings:
    """Deep-merge *overrides* onto the defaults and validate the result."""
    merged: dict[str, Any] = copy.deepcopy(DEFAULTS)
    for override in overrides:
        _deep_merge(merged, _coerce_override(override))
    settings = SerializerSettings.model_validate(merged)
    logger.debug(
        "Resolved serializer settings from %d override(s): parsers=%s hybrid_json=%s",
        len(overrides),
        ",".join(settings.parsers),
        settings.hybrid_json,
    )
    return settings
