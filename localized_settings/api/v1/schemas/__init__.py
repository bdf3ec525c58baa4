"""
V1 API Schemas Package

Pydantic models for settings API request and response data.
"""

from .requests import SettingUpdateRequest
from .responses import (
    HealthResponse,
    SettingFieldResponse,
    SettingKeysResponse,
    SettingResponse,
)

__all__ = [
    "SettingUpdateRequest",
    "SettingResponse",
    "SettingFieldResponse",
    "SettingKeysResponse",
    "HealthResponse",
]
