"""
API Package

FastAPI admin surface for localized-settings.
"""

from .factory import create_api
from .router import router

__all__ = ["router", "create_api"]
