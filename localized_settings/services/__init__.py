"""
Services Package

Settings access layer for localized-settings.
"""

from .settings_accessor import (
    ResolvedItem,
    SettingsAccessor,
    decode_value,
    encode_value,
    resolve_localized,
    setting,
)

__all__ = [
    "ResolvedItem",
    "SettingsAccessor",
    "decode_value",
    "encode_value",
    "resolve_localized",
    "setting",
]
