import pytest

from localized_settings import setting
from localized_settings.core.exceptions import ValidationException
from localized_settings.core.locale import use_language
from localized_settings.services.settings_accessor import (
    ResolvedItem,
    SettingsAccessor,
)

pytestmark = pytest.mark.usefixtures("settings_db")


def test_save_scalar_round_trips_raw_value():
    accessor = setting("site_name")
    accessor.save("x")

    assert accessor.to_raw() == "x"
    assert setting("site_name").to_raw() == "x"


def test_single_record_fields():
    setting("item_single").save({"name": "A", "email": "B"})

    assert setting("item_single").name == "A"
    assert setting("item_single").email == "B"


def test_localized_field_uses_accessor_language():
    setting("single_language").save({"name": {"ar": "N-ar", "en": "N-en"}})

    assert setting("single_language", "en").name == "N-en"
    assert setting("single_language", "ar").name == "N-ar"


def test_localized_field_falls_back_to_first_inserted_translation():
    setting("fallback").save({"name": {"ar": "N-ar", "en": "N-en"}})
    setting("fallback_reversed").save({"name": {"en": "N-en", "ar": "N-ar"}})

    assert setting("fallback", "fr").name == "N-ar"
    assert setting("fallback_reversed", "fr").name == "N-en"


def test_single_record_is_not_enumerable():
    accessor = setting("single")
    accessor.save({"name": "A", "email": "B"})

    assert accessor.get() == []
    assert setting("single").get() == []


def test_list_items_are_resolved_in_order():
    setting("multiple_language_items").save(
        [
            {"name": {"ar": "1ar", "en": "1en"}, "email": "one@example.com"},
            {"name": {"ar": "2ar", "en": "2en"}, "email": "two@example.com"},
        ]
    )

    items = setting("multiple_language_items", "en").get()

    assert len(items) == 2
    assert all(isinstance(item, ResolvedItem) for item in items)
    assert [item.name for item in items] == ["1en", "2en"]
    assert [item.email for item in items] == ["one@example.com", "two@example.com"]

    arabic = setting("multiple_language_items", "ar").get()
    assert [item.name for item in arabic] == ["1ar", "2ar"]


def test_fresh_accessor_matches_saving_accessor():
    data = [
        {"name": "name 1", "email": "email 1"},
        {"name": "name 2", "email": "email 2"},
    ]
    saving = setting("multiple_items", "en")
    saving.save(data)

    fresh = setting("multiple_items", "en")

    assert fresh.to_raw() == saving.to_raw() == data
    assert [i.to_dict() for i in fresh.get()] == [i.to_dict() for i in saving.get()]


def test_missing_key_reads_as_empty():
    accessor = setting("never_saved")

    assert accessor.raw_value is None
    assert accessor.to_raw() == {}
    assert accessor.name is None
    assert accessor["name"] is None
    assert "name" not in accessor
    assert accessor.get() == []


def test_each_skips_single_record():
    setting("single_each").save({"name": "A"})
    calls = []

    setting("single_each").each(lambda item, index: calls.append(index))

    assert calls == []


def test_each_visits_items_with_index_and_chains():
    setting("each_items").save([{"name": "a"}, {"name": "b"}])
    seen = []

    accessor = setting("each_items")
    result = accessor.each(lambda item, index: seen.append((index, item.name)))

    assert result is accessor
    assert seen == [(0, "a"), (1, "b")]


def test_each_propagates_callback_errors():
    setting("each_error").save([{"name": "a"}, {"name": "b"}])
    seen = []

    def callback(item, index):
        seen.append(index)
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        setting("each_error").each(callback)
    assert seen == [0]


def test_get_builds_new_items_each_call():
    setting("fresh_items").save([{"name": "a"}])
    accessor = setting("fresh_items")

    first = accessor.get()
    first[0].name = "changed"

    assert accessor.get()[0].name == "a"


def test_bare_scalar_answers_any_field_with_whole_value():
    setting("logo").save("website/logo.png")

    accessor = setting("logo")

    assert accessor.logo_path == "website/logo.png"
    assert accessor.get_field("anything") == "website/logo.png"
    assert "logo_path" not in accessor


def test_empty_fields_read_as_none():
    setting("empties").save({"blank": "", "nothing": None, "no_translations": {}})
    accessor = setting("empties")

    assert accessor.blank is None
    assert accessor.nothing is None
    assert accessor.no_translations is None
    assert accessor.missing is None


def test_zero_and_false_are_real_values():
    setting("flags").save({"count": 0, "enabled": False})
    accessor = setting("flags")

    assert accessor.count == 0
    assert accessor.enabled is False


def test_item_access_is_read_only():
    setting("read_only").save({"name": "A"})
    accessor = setting("read_only")

    accessor["name"] = "B"
    del accessor["name"]

    assert accessor["name"] == "A"
    assert "name" in accessor
    assert setting("read_only").name == "A"


def test_list_setting_supports_index_lookup():
    setting("indexed").save([{"name": {"en": "first"}}, {"name": {"en": "second"}}])
    accessor = setting("indexed", "en")

    assert accessor[1].name == "second"
    assert 0 in accessor
    assert 5 not in accessor
    assert accessor[5] is None
    assert accessor.name is None
    assert [item.name for item in accessor] == ["first", "second"]


def test_non_json_text_is_kept_opaque():
    setting("raw").save("{not json")

    assert setting("raw").to_raw() == "{not json"


def test_json_text_saved_as_string_is_decoded():
    setting("json_text").save('{"name": "A"}')

    assert setting("json_text").name == "A"


def test_numbers_round_trip():
    accessor = setting("limit")
    accessor.save(25)

    assert accessor.to_raw() == 25
    assert setting("limit").to_raw() == 25


def test_save_overwrites_existing_value():
    setting("overwrite").save({"name": "old"})
    setting("overwrite").save({"name": "new"})

    assert setting("overwrite").name == "new"


def test_default_language_comes_from_active_context():
    setting("contextual").save({"title": {"en": "Shop", "ar": "متجر"}})

    with use_language("ar"):
        accessor = setting("contextual")

    assert accessor.language == "ar"
    assert accessor.title == "متجر"
    assert setting("contextual").language == "en"


def test_none_key_has_no_value_and_cannot_save():
    accessor = SettingsAccessor(None)

    assert accessor.to_raw() == {}
    assert accessor.name is None

    with pytest.raises(ValidationException):
        accessor.save({"name": "A"})


def test_private_names_are_not_treated_as_fields():
    setting("private").save("value")

    with pytest.raises(AttributeError):
        setting("private")._missing


def test_constant_like_strings_round_trip_as_text():
    for text in ("NaN", "Infinity", "-Infinity"):
        accessor = setting("constant")
        accessor.save(text)

        assert accessor.to_raw() == text
        assert setting("constant").to_raw() == text


def test_non_finite_number_is_rejected_before_write():
    accessor = setting("ratio")

    with pytest.raises(ValidationException) as exc_info:
        accessor.save({"value": float("nan")})

    assert exc_info.value.error_code == "VALIDATION_INVALID_FORMAT"
    assert setting("ratio").to_raw() == {}


def test_unhashable_names_read_as_absent():
    setting("record").save({"name": "A"})
    setting("rows").save([{"name": "A"}])

    for key in ("record", "rows"):
        accessor = setting(key)
        assert [] not in accessor
        assert accessor.get_field([]) is None
        assert accessor[{}] is None
