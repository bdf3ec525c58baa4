"""Settings request schemas."""

from typing import Any

from pydantic import BaseModel, Field


class SettingUpdateRequest(BaseModel):
    """Request payload for saving a setting."""

    value: Any = Field(
        ...,
        description=(
            "A string, a record of fields, or a list of records. Field values "
            "may be language maps such as {\"en\": \"...\", \"ar\": \"...\"}"
        ),
        examples=[{"title": {"en": "Shop", "ar": "متجر"}, "email": "hi@example.com"}],
    )
