"""
Stores Package

Data persistence for localized-settings.

This package follows a fast-failing import strategy: missing dependencies
cause immediate import errors rather than graceful degradation.
"""

from .database import (
    Base,
    SessionLocal,
    create_tables,
    database_session,
    dispose_engine,
    engine,
    get_db_dependency,
    get_pool_status,
    test_connection,
)
from .settings_store import SettingsStore

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "get_db_dependency",
    "database_session",
    "create_tables",
    "test_connection",
    "get_pool_status",
    "dispose_engine",
    # Record store
    "SettingsStore",
]
