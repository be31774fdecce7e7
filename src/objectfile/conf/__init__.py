"""Configuration model, defaults and override resolution."""

from .defaults import DEFAULTS
from .loader import SettingsOverride, resolve_settings
from .models import SerializerSettings

__all__ = ["DEFAULTS", "SerializerSettings", "SettingsOverride", "resolve_settings"]
