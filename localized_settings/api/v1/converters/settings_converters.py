"""Settings converters."""

from typing import Any

from localized_settings.api.v1.schemas.responses import (
    SettingFieldResponse,
    SettingResponse,
)
from localized_settings.services.settings_accessor import (
    ResolvedItem,
    SettingsAccessor,
)


def _item_to_payload(item: Any) -> Any:
    if isinstance(item, ResolvedItem):
        return item.to_dict()
    return item


def convert_accessor_to_response(accessor: SettingsAccessor) -> SettingResponse:
    """Convert a loaded accessor to the API response."""

    return SettingResponse(
        key=accessor.key or "",
        language=accessor.language,
        value=accessor.raw_value,
        items=[_item_to_payload(item) for item in accessor.get()],
    )


def convert_accessor_to_field_response(
    accessor: SettingsAccessor, field: str
) -> SettingFieldResponse:
    """Convert one resolved field of an accessor to the API response."""

    return SettingFieldResponse(
        key=accessor.key or "",
        field=field,
        language=accessor.language,
        value=_item_to_payload(accessor.get_field(field)),
    )
