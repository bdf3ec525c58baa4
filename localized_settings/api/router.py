"""
FastAPI router for the localized-settings API.
"""

from fastapi import APIRouter

from localized_settings.api.v1 import router as v1_router

router = APIRouter()
router.include_router(v1_router, prefix="/v1")

__all__ = ["router"]
