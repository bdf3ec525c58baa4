"""
Models Package

SQLAlchemy models for localized-settings.
"""

from .base import Base, TimestampMixin
from .setting import Setting

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    # Database models
    "Setting",
]
