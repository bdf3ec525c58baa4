"""
V1 API Request Schemas
"""

from .settings_requests import SettingUpdateRequest

__all__ = ["SettingUpdateRequest"]
