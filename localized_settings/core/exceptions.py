"""
Custom Exceptions

Application-specific exception classes.

USAGE GUIDELINES:
- Always pass ErrorCode enum members, not string literals
- Each exception subclass uses its corresponding domain error code
- Use wrap() to preserve the chain when converting lower-level exceptions
- Absent settings, fields or translations are NOT errors; readers get None
"""

import json
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from localized_settings.core.error_codes import ErrorCode


def _safe_serialize(obj: Any) -> Any:
    """Safely serialize an object for JSON, using repr() for non-serializable objects."""
    try:
        json.dumps(obj)
        return obj
    except (TypeError, ValueError):
        return repr(obj)


class ApplicationException(Exception):
    """Base exception for localized-settings errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional["ErrorCode | str"] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        safe_details = {k: _safe_serialize(v) for k, v in self.details.items()}

        result = {
            "message": self.message,
            "code": (
                self.error_code.value
                if self.error_code is not None and hasattr(self.error_code, "value")
                else self.error_code
            ),
            "details": safe_details,
        }

        # Priority: custom cause > __cause__ > __context__
        cause = self.cause or self.__cause__ or self.__context__
        if cause:
            result["cause"] = {"type": cause.__class__.__name__, "message": str(cause)}

        return result

    @classmethod
    def wrap(
        cls,
        exc: Exception,
        message: str,
        error_code: Optional["ErrorCode"] = None,
        **context: Any,
    ) -> "ApplicationException":
        """
        Wrap a lower-level exception while preserving the exception chain.

        Example:
            try:
                db.query(Setting).filter(Setting.key == key).first()
            except SQLAlchemyError as e:
                raise DatabaseException.wrap(
                    e, "Failed to load setting",
                    DatabaseErrorCode.QUERY_FAILED,
                    key=key,
                ) from e
        """
        return cls(message=message, error_code=error_code, details=context, cause=exc)

    def with_context(self, **kwargs: Any) -> "ApplicationException":
        """Add context details to the exception."""
        self.details.update(kwargs)
        return self

    def __str__(self) -> str:
        parts = [self.message]
        if self.error_code:
            code_str = (
                self.error_code.value
                if hasattr(self.error_code, "value")
                else self.error_code
            )
            parts.append(f"[{code_str}]")
        if self.details:
            parts.append(f"Details: {self.details}")
        return " ".join(parts)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code!r}, "
            f"details={self.details!r}, "
            f"cause={self.cause!r})"
        )

    @property
    def http_status(self) -> int:
        """Get HTTP status code for this exception (lazy-loaded)."""
        if self.error_code:
            from localized_settings.core.error_codes import get_http_status_code

            return get_http_status_code(self.error_code)
        return 500


class ConfigurationException(ApplicationException):
    """Exception raised for configuration-related errors."""


class DatabaseException(ApplicationException):
    """Exception raised when the settings table cannot be read or written."""


class ValidationException(ApplicationException):
    """Exception raised for invalid input such as saving without a key."""


class NotFoundException(ApplicationException):
    """Exception raised by the admin surface for a missing setting."""
