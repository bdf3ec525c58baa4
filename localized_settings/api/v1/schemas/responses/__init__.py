"""
V1 API Response Schemas
"""

from .health_response import HealthResponse
from .settings_responses import (
    SettingFieldResponse,
    SettingKeysResponse,
    SettingResponse,
)

__all__ = [
    "HealthResponse",
    "SettingResponse",
    "SettingFieldResponse",
    "SettingKeysResponse",
]
