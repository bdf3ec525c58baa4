"""
API Layer Converters

Converters between API layer schemas and service layer objects.
"""

from .settings_converters import (
    convert_accessor_to_field_response,
    convert_accessor_to_response,
)

__all__ = [
    "convert_accessor_to_response",
    "convert_accessor_to_field_response",
]
