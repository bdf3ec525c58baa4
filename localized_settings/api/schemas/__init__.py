"""
API Schemas

Pydantic models shared by all API versions.
"""

from .error import ErrorDetail, ErrorResponse

__all__ = ["ErrorResponse", "ErrorDetail"]
