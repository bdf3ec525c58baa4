"""
localized-settings Package

Localized key-value settings stored in a relational table, with FastAPI
admin endpoints and a small CLI.

    from localized_settings import setting

    setting("website").save({"title": {"en": "Shop", "ar": "متجر"}})
    setting("website", "ar").title
"""

__version__ = "0.1.0"

from localized_settings.services.settings_accessor import (  # noqa: E402
    SettingsAccessor,
    setting,
)

__all__ = ["SettingsAccessor", "setting", "__version__"]
