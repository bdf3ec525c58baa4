"""
API Error Response Schemas

Pydantic models for standardized error responses in FastAPI.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorDetail(BaseModel):
    """Detailed error information."""

    type: str = Field(..., description="Exception type", examples=["NotFoundException"])
    message: str = Field(..., description="Human-readable error message")
    code: Optional[str] = Field(
        None, description="Machine-readable error code", examples=["API_NOT_FOUND"]
    )
    details: Optional[Dict[str, Any]] = Field(
        None, description="Additional error details"
    )
    debug: Optional[Dict[str, Any]] = Field(
        None, description="Debug information (only in debug mode)"
    )


class ErrorResponse(BaseModel):
    """Standard error response format."""

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "examples": [
                {
                    "error": {
                        "type": "NotFoundException",
                        "message": "Setting not found: website",
                        "code": "API_NOT_FOUND",
                        "details": {"key": "website"},
                    },
                    "request_id": "req_123456789",
                    "path": "/api/v1/settings/website",
                    "method": "GET",
                }
            ]
        },
    )

    error: ErrorDetail = Field(..., description="Error details")
    request_id: Optional[str] = Field(None, description="Request ID for tracing")
    path: Optional[str] = Field(
        None, description="Request path", examples=["/api/v1/settings/website"]
    )
    method: Optional[str] = Field(None, description="HTTP method", examples=["GET"])
