import pytest

from localized_settings.services.settings_accessor import (
    decode_value,
    encode_value,
    resolve_localized,
)


def test_strings_are_stored_verbatim():
    assert encode_value("plain text") == "plain text"
    assert encode_value('{"already": "json"}') == '{"already": "json"}'


def test_structures_are_stored_as_json():
    assert encode_value({"name": {"ar": "اسم", "en": "Name"}}) == (
        '{"name": {"ar": "اسم", "en": "Name"}}'
    )
    assert encode_value([{"a": 1}]) == '[{"a": 1}]'
    assert encode_value(None) == "null"
    assert encode_value(True) == "true"


def test_decode_keeps_invalid_json_as_text():
    assert decode_value("hello") == "hello"
    assert decode_value("") == ""
    assert decode_value(None) is None


def test_decode_preserves_insertion_order():
    decoded = decode_value('{"name": {"en": "N-en", "ar": "N-ar"}}')

    assert list(decoded["name"]) == ["en", "ar"]


def test_resolve_localized_prefers_language_then_first_entry():
    translations = {"ar": "N-ar", "en": "N-en"}

    assert resolve_localized(translations, "en") == "N-en"
    assert resolve_localized(translations, "fr") == "N-ar"
    assert resolve_localized({"ar": "N-ar", "en": None}, "en") == "N-ar"
    assert resolve_localized({}, "en") is None


@pytest.mark.parametrize("text", ["NaN", "Infinity", "-Infinity", '{"a": NaN}'])
def test_decode_keeps_non_standard_constants_as_text(text):
    assert decode_value(text) == text


def test_encode_rejects_non_finite_numbers():
    with pytest.raises(ValueError):
        encode_value(float("nan"))
    with pytest.raises(ValueError):
        encode_value({"ratio": float("inf")})
