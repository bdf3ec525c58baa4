import pytest
from fastapi.testclient import TestClient

from localized_settings.api.factory import create_api
from localized_settings.services.settings_accessor import setting

pytestmark = pytest.mark.usefixtures("settings_db")


@pytest.fixture
def client():
    return TestClient(create_api(), raise_server_exceptions=False)


def test_put_then_get_resolves_items_for_requested_language(client):
    payload = {
        "value": [
            {"name": {"ar": "1ar", "en": "1en"}},
            {"name": {"ar": "2ar", "en": "2en"}},
        ]
    }

    put = client.put("/api/v1/settings/slides", json=payload)
    assert put.status_code == 200

    response = client.get("/api/v1/settings/slides", params={"lang": "ar"})

    assert response.status_code == 200
    body = response.json()
    assert body["key"] == "slides"
    assert body["language"] == "ar"
    assert body["value"] == payload["value"]
    assert [item["name"] for item in body["items"]] == ["1ar", "2ar"]
    assert response.headers["Content-Language"] == "ar"


def test_field_endpoint_uses_accept_language(client):
    setting("website").save({"title": {"en": "Shop", "ar": "متجر"}})

    response = client.get(
        "/api/v1/settings/website/fields/title",
        headers={"Accept-Language": "ar-EG,ar;q=0.9"},
    )

    assert response.status_code == 200
    assert response.json() == {
        "key": "website",
        "field": "title",
        "language": "ar",
        "value": "متجر",
    }


def test_unsupported_language_falls_back_to_default(client):
    setting("website").save({"title": {"ar": "متجر", "en": "Shop"}})

    response = client.get("/api/v1/settings/website/fields/title?lang=fr")

    assert response.json()["language"] == "en"
    assert response.json()["value"] == "Shop"


def test_missing_setting_returns_not_found_envelope(client):
    response = client.get(
        "/api/v1/settings/never_saved", headers={"X-Request-ID": "req-1"}
    )

    assert response.status_code == 404
    body = response.json()
    assert body["error"]["code"] == "API_NOT_FOUND"
    assert body["error"]["details"] == {"key": "never_saved"}
    assert body["request_id"] == "req-1"


def test_list_and_delete_settings(client):
    setting("b").save("2")
    setting("a").save("1")

    assert client.get("/api/v1/settings").json() == {"keys": ["a", "b"], "total": 2}

    assert client.delete("/api/v1/settings/a").status_code == 204
    assert client.delete("/api/v1/settings/a").status_code == 404
    assert client.get("/api/v1/settings").json()["keys"] == ["b"]


def test_put_requires_value(client):
    response = client.put("/api/v1/settings/website", json={})

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_INVALID_INPUT"


def test_health_reports_default_language(client):
    response = client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["default_language"] == "en"


def test_null_value_is_stored_and_readable(client):
    put = client.put("/api/v1/settings/empty", json={"value": None})
    assert put.status_code == 200

    assert client.get("/api/v1/settings").json()["keys"] == ["empty"]

    response = client.get("/api/v1/settings/empty")
    assert response.status_code == 200
    assert response.json()["value"] is None
    assert response.json()["items"] == []

    field = client.get("/api/v1/settings/empty/fields/title")
    assert field.status_code == 200
    assert field.json()["value"] is None
