"""Settings endpoints."""

from fastapi import APIRouter, Depends, Request, Response

from localized_settings.api.v1.converters import (
    convert_accessor_to_field_response,
    convert_accessor_to_response,
)
from localized_settings.api.v1.schemas.requests import SettingUpdateRequest
from localized_settings.api.v1.schemas.responses import (
    SettingFieldResponse,
    SettingKeysResponse,
    SettingResponse,
)
from localized_settings.core.error_codes import APIErrorCode
from localized_settings.core.exceptions import NotFoundException
from localized_settings.core.locale import get_active_language
from localized_settings.services.settings_accessor import SettingsAccessor
from localized_settings.stores.settings_store import SettingsStore

router = APIRouter(prefix="/settings", tags=["settings"])


def get_settings_store() -> SettingsStore:
    return SettingsStore()


def get_request_language(request: Request) -> str:
    """Language chosen by LocaleMiddleware for this request."""
    return getattr(request.state, "language", None) or get_active_language()


def _load_existing(key: str, language: str, store: SettingsStore) -> SettingsAccessor:
    # A stored JSON null decodes to None, so existence is checked on the row
    if store.find_by_key(key) is None:
        raise NotFoundException(
            f"Setting not found: {key}", APIErrorCode.NOT_FOUND, details={"key": key}
        )
    return SettingsAccessor(key, language, store=store)


@router.get("", response_model=SettingKeysResponse)
def list_settings(
    store: SettingsStore = Depends(get_settings_store),
) -> SettingKeysResponse:
    """List all stored setting keys."""
    keys = store.list_keys()
    return SettingKeysResponse(keys=keys, total=len(keys))


@router.get("/{key}", response_model=SettingResponse)
def get_setting(
    key: str,
    language: str = Depends(get_request_language),
    store: SettingsStore = Depends(get_settings_store),
) -> SettingResponse:
    """Return a setting's stored value and its resolved list items."""
    return convert_accessor_to_response(_load_existing(key, language, store))


@router.get("/{key}/fields/{field}", response_model=SettingFieldResponse)
def get_setting_field(
    key: str,
    field: str,
    language: str = Depends(get_request_language),
    store: SettingsStore = Depends(get_settings_store),
) -> SettingFieldResponse:
    """Return one field of a setting resolved for the request language."""
    accessor = _load_existing(key, language, store)
    return convert_accessor_to_field_response(accessor, field)


@router.put("/{key}", response_model=SettingResponse)
def save_setting(
    key: str,
    request: SettingUpdateRequest,
    language: str = Depends(get_request_language),
    store: SettingsStore = Depends(get_settings_store),
) -> SettingResponse:
    """Create or replace a setting."""
    accessor = SettingsAccessor(key, language, store=store)
    accessor.save(request.value)
    return convert_accessor_to_response(accessor)


@router.delete("/{key}", status_code=204)
def delete_setting(
    key: str,
    store: SettingsStore = Depends(get_settings_store),
) -> Response:
    """Delete a setting."""
    if not store.delete(key):
        raise NotFoundException(
            f"Setting not found: {key}", APIErrorCode.NOT_FOUND, details={"key": key}
        )
    return Response(status_code=204)


__all__ = ["router", "get_settings_store"]
