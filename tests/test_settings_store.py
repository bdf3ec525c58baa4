from contextlib import contextmanager

import pytest
from sqlalchemy.exc import OperationalError

from localized_settings.core.error_codes import DatabaseErrorCode
from localized_settings.core.exceptions import DatabaseException
from localized_settings.models import Setting
from localized_settings.stores import settings_store
from localized_settings.stores.settings_store import SettingsStore


class FakeQuery:
    def __init__(self, first_result=None, error=None):
        self.filters = []
        self.first_result = first_result
        self.error = error

    def filter(self, condition):
        self.filters.append(condition)
        return self

    def first(self):
        if self.error is not None:
            raise self.error
        return self.first_result


class FakeSession:
    def __init__(self, query):
        self._query = query
        self.added = []
        self.committed = False
        self.refreshed = []

    def query(self, model):
        assert model is Setting
        return self._query

    def add(self, obj):
        self.added.append(obj)

    def commit(self):
        self.committed = True

    def refresh(self, obj):
        self.refreshed.append(obj)


def _patch_database_session(
    monkeypatch: pytest.MonkeyPatch, session: FakeSession
) -> None:
    @contextmanager
    def fake_database_session():
        yield session

    monkeypatch.setattr(settings_store, "database_session", fake_database_session)


def _filters_on_key(filters, expected: str) -> bool:
    for condition in filters:
        left = getattr(condition, "left", None)
        right = getattr(condition, "right", None)
        if getattr(left, "key", None) == "key" and getattr(right, "value", None) == expected:
            return True
    return False


def test_find_by_key_filters_on_key(monkeypatch: pytest.MonkeyPatch) -> None:
    record = Setting(key="website", value='{"name": "A"}')
    query = FakeQuery(first_result=record)
    _patch_database_session(monkeypatch, FakeSession(query))

    assert SettingsStore().find_by_key("website") is record
    assert _filters_on_key(query.filters, "website")


def test_find_by_key_returns_none_when_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_database_session(monkeypatch, FakeSession(FakeQuery()))

    assert SettingsStore().find_by_key("missing") is None


def test_update_or_create_inserts_new_row(monkeypatch: pytest.MonkeyPatch) -> None:
    session = FakeSession(FakeQuery())
    _patch_database_session(monkeypatch, session)

    record = SettingsStore().update_or_create("website", "value")

    assert session.added == [record]
    assert record.key == "website"
    assert record.value == "value"
    assert session.committed is True
    assert session.refreshed == [record]


def test_update_or_create_overwrites_existing_row(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    existing = Setting(key="website", value="old")
    session = FakeSession(FakeQuery(first_result=existing))
    _patch_database_session(monkeypatch, session)

    record = SettingsStore().update_or_create("website", "new")

    assert record is existing
    assert existing.value == "new"
    assert session.added == []
    assert session.committed is True


def test_store_errors_surface_as_database_exception(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    error = OperationalError("SELECT", {}, Exception("database is locked"))
    _patch_database_session(monkeypatch, FakeSession(FakeQuery(error=error)))

    with pytest.raises(DatabaseException) as exc_info:
        SettingsStore().find_by_key("website")

    assert exc_info.value.error_code == DatabaseErrorCode.QUERY_FAILED
    assert exc_info.value.details == {"key": "website"}
    assert exc_info.value.__cause__ is error


def test_delete_and_list_keys(settings_db) -> None:
    store = SettingsStore()
    store.update_or_create("b_key", "2")
    store.update_or_create("a_key", "1")

    assert store.list_keys() == ["a_key", "b_key"]
    assert store.delete("a_key") is True
    assert store.delete("a_key") is False
    assert store.list_keys() == ["b_key"]


def test_update_or_create_keeps_a_single_row(settings_db) -> None:
    store = SettingsStore()
    first = store.update_or_create("website", "one")
    second = store.update_or_create("website", "two")

    assert store.list_keys() == ["website"]
    assert store.find_by_key("website").value == "two"
    assert second.created_at == first.created_at
