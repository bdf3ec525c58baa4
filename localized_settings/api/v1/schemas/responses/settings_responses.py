"""Settings response schemas."""

from typing import Any, List

from pydantic import BaseModel, Field


class SettingResponse(BaseModel):
    """A stored setting with its raw value and resolved list items."""

    key: str = Field(..., description="Setting key")
    language: str = Field(..., description="Language used for resolution")
    value: Any = Field(None, description="Decoded value as stored")
    items: List[Any] = Field(
        default_factory=list,
        description="Resolved items (list-shaped settings only)",
    )


class SettingFieldResponse(BaseModel):
    """One resolved field of a setting."""

    key: str = Field(..., description="Setting key")
    field: str = Field(..., description="Field name")
    language: str = Field(..., description="Language used for resolution")
    value: Any = Field(None, description="Resolved value, null when absent")


class SettingKeysResponse(BaseModel):
    """All stored setting keys."""

    keys: List[str] = Field(default_factory=list, description="Stored keys")
    total: int = Field(..., description="Number of stored keys")
