"""
Settings Accessor

Read and write access to one named setting, with per-language resolution of
localized fields.

A stored value is either opaque text or JSON. Decoded JSON may be a single
record (field -> value) or an ordered list of records, and any field value
may itself be a language map such as ``{"ar": "...", "en": "..."}``. Reading
a language map picks the accessor's language and falls back to the
first-inserted translation.

Absent data never raises: a missing key, field or translation reads as None
(or an empty list from ``get()``). Store failures propagate to the caller.

Example:
    setting("website").save({"title": {"en": "Shop", "ar": "متجر"}})
    setting("website", "ar").title        # "متجر"
    setting("website", "fr").title        # "Shop" (first translation)

    setting("slides").save([{"caption": {"en": "One"}}, {"caption": {"en": "Two"}}])
    [item.caption for item in setting("slides").get()]   # ["One", "Two"]
"""

from __future__ import annotations

import json
from types import SimpleNamespace
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Union

from localized_settings.core.error_codes import ValidationErrorCode
from localized_settings.core.exceptions import ValidationException
from localized_settings.core.locale import get_active_language
from localized_settings.core.logger import get_logger
from localized_settings.stores.settings_store import SettingsStore

logger = get_logger(__name__)

Scalar = Union[str, int, float, bool]
LocalizedMap = Dict[str, Any]
Value = Union[None, Scalar, Dict[str, Any], List[Any]]


class ResolvedItem(SimpleNamespace):
    """One list entry with every language map reduced to a single value."""

    def to_dict(self) -> Dict[str, Any]:
        return dict(vars(self))


def encode_value(data: Any) -> str:
    """Encode data for the ``value`` column: strings as-is, anything else as JSON."""
    if isinstance(data, str):
        return data
    return json.dumps(data, ensure_ascii=False, allow_nan=False)


def _reject_constant(token: str) -> Any:
    # NaN and Infinity are accepted by the json module but are not JSON
    raise ValueError(f"Invalid JSON constant: {token}")


def decode_value(text: Optional[str]) -> Value:
    """Decode stored text; text that is not valid JSON is kept as an opaque string."""
    if text is None:
        return None
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError:
        return text


def resolve_localized(mapping: Mapping[str, Any], language: str) -> Any:
    """Pick ``language`` from a language map, else its first-inserted entry."""
    value = mapping.get(language)
    if value is not None:
        return value
    return next(iter(mapping.values()), None)


def _resolve_field(value: Any, language: str) -> Any:
    if isinstance(value, Mapping):
        return resolve_localized(value, language)
    return value


def _is_empty(value: Any) -> bool:
    if value is None or value == "":
        return True
    return isinstance(value, (dict, list)) and not value


class SettingsAccessor:
    """
    Accessor for a single named setting.

    The current value is loaded once, at construction. ``raw_value`` always
    holds exactly what the last load or save produced.

    Fields are read with ``get_field(name)``, attribute access
    (``accessor.title``) or item access (``accessor["title"]``). Names that
    collide with accessor attributes (``key``, ``save``, ``get``...) must go
    through ``get_field``. Item assignment and deletion are ignored.
    """

    def __init__(
        self,
        key: Optional[str],
        language: Optional[str] = None,
        store: Optional[SettingsStore] = None,
    ) -> None:
        self.raw_value: Value = None
        self.key = key
        self.language = language or get_active_language()
        self.store = store or SettingsStore()
        self._load()

    def _load(self) -> None:
        if self.key is None:
            self.raw_value = None
            return

        record = self.store.find_by_key(self.key)
        self.raw_value = decode_value(record.value) if record is not None else None
        logger.debug(
            "Loaded setting '%s' (%s)",
            self.key,
            "found" if record is not None else "missing",
        )

    def save(self, data: Any) -> None:
        """
        Persist ``data`` under this accessor's key (update-or-create).

        Args:
            data: A string, a record of fields, or a list of records. Field
                values may be scalars or language maps.

        Raises:
            ValidationException: If the accessor has no key, or
                ``data`` cannot be stored as JSON.
            DatabaseException: If the store write fails.
        """
        if self.key is None:
            raise ValidationException(
                "Cannot save a setting without a key",
                ValidationErrorCode.MISSING_FIELD,
            )

        try:
            stored = encode_value(data)
        except (TypeError, ValueError) as exc:
            raise ValidationException.wrap(
                exc,
                f"Cannot encode value for setting '{self.key}'",
                ValidationErrorCode.INVALID_FORMAT,
                key=self.key,
            ) from exc

        self.store.update_or_create(self.key, stored)
        self.raw_value = decode_value(stored)

    def get(self) -> List[Any]:
        """
        Return the resolved items of a list-shaped setting.

        Built fresh on every call. Anything that is not a list (missing,
        scalar, single record) yields an empty list.
        """
        if not isinstance(self.raw_value, list):
            return []
        return [self._resolve_item(item) for item in self.raw_value]

    def each(self, callback: Callable[[Any, int], Any]) -> "SettingsAccessor":
        """Call ``callback(item, index)`` for every item of ``get()``; returns self."""
        for index, item in enumerate(self.get()):
            callback(item, index)
        return self

    def get_field(self, name: Union[str, int]) -> Any:
        """
        Resolve one field of the stored value.

        - record: the field, with language maps resolved; None if the field
          is missing or empty
        - list: an integer index returns the resolved item, anything else None
        - bare scalar: the whole value, whatever the name
        - nothing stored: None
        """
        value = self.raw_value
        if value is None:
            return None

        if isinstance(value, dict):
            if not isinstance(name, (str, int)):
                return None
            field = value.get(name)  # type: ignore[call-overload]
            if _is_empty(field):
                return None
            return _resolve_field(field, self.language)

        if isinstance(value, list):
            if self._is_index(name) and name < len(value):  # type: ignore[operator]
                return self._resolve_item(value[name])  # type: ignore[index]
            return None

        # Opaque single-value settings answer every field name with the value
        return value

    def has_field(self, name: Union[str, int]) -> bool:
        """Whether the stored value holds a non-null entry under ``name``."""
        value = self.raw_value
        if isinstance(value, dict):
            if not isinstance(name, (str, int)):
                return False
            return value.get(name) is not None  # type: ignore[call-overload]
        if isinstance(value, list):
            return (
                self._is_index(name)
                and name < len(value)  # type: ignore[operator]
                and value[name] is not None  # type: ignore[index]
            )
        return False

    def to_raw(self) -> Value:
        """Return the decoded value as stored (``{}`` when nothing is stored)."""
        return self.raw_value if self.raw_value is not None else {}

    def _resolve_item(self, item: Any) -> Any:
        if isinstance(item, Mapping):
            return ResolvedItem(
                **{
                    str(field): _resolve_field(value, self.language)
                    for field, value in item.items()
                }
            )
        return item

    @staticmethod
    def _is_index(name: Any) -> bool:
        return isinstance(name, int) and not isinstance(name, bool) and name >= 0

    def __getattr__(self, name: str) -> Any:
        # Only reached for names that are not real attributes
        if name.startswith("_"):
            raise AttributeError(name)
        return self.get_field(name)

    def __getitem__(self, name: Union[str, int]) -> Any:
        return self.get_field(name)

    def __contains__(self, name: object) -> bool:
        return self.has_field(name)  # type: ignore[arg-type]

    def __setitem__(self, name: Union[str, int], value: Any) -> None:
        logger.debug("Ignoring item assignment '%s' on setting '%s'", name, self.key)

    def __delitem__(self, name: Union[str, int]) -> None:
        logger.debug("Ignoring item deletion '%s' on setting '%s'", name, self.key)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.get())

    def __repr__(self) -> str:
        return f"SettingsAccessor(key={self.key!r}, language={self.language!r})"


def setting(key: Optional[str], language: Optional[str] = None) -> SettingsAccessor:
    """Return an accessor for ``key``, loaded with its current value."""
    return SettingsAccessor(key, language)


__all__ = [
    "ResolvedItem",
    "SettingsAccessor",
    "decode_value",
    "encode_value",
    "resolve_localized",
    "setting",
]
