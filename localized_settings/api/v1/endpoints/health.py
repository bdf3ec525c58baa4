"""
API Health Check Endpoint
"""

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter

from localized_settings.api.schemas.error import ErrorResponse
from localized_settings.api.v1.schemas.responses import HealthResponse
from localized_settings.core.config import settings
from localized_settings.core.exceptions import DatabaseException
from localized_settings.core.logger import get_logger
from localized_settings.stores.database import test_connection

logger = get_logger(__name__)

router = APIRouter()


def check_database_health() -> Dict[str, Any]:
    """Check database connection health."""
    try:
        return {"status": "healthy", "details": test_connection()}
    except DatabaseException as e:
        logger.warning("Database health check failed: %s", e.message)
        return {"status": "unhealthy", "error": e.message}


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="API Health Check",
    description="Check the health of the API and, if enabled, the database",
    responses={
        200: {"model": HealthResponse, "description": "Health check results"},
        503: {"model": ErrorResponse, "description": "Service unavailable"},
    },
)
def health_check() -> HealthResponse:
    """Report API status and, when health__check_database is set, database status."""
    components: Dict[str, Any] = {"api": {"status": "healthy"}}
    overall_healthy = True

    if settings.health__check_database:
        components["database"] = check_database_health()
        overall_healthy = components["database"]["status"] == "healthy"

    return HealthResponse(
        status="healthy" if overall_healthy else "unhealthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=settings.api__version,
        environment=settings.environment,
        default_language=settings.locale__default_language,
        components=components,
    )
