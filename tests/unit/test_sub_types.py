"""Unit tests for the property parameter table."""

import pytest

from vcardio.contexts.types.sub_types import VCardSubTypes


@pytest.mark.unit
def test_names_are_case_insensitive():
    params = VCardSubTypes()
    params.put("type", "home")
    params.put("TYPE", "voice")

    assert params.get("Type") == ["home", "voice"]
    assert params.names() == ["TYPE"]
    assert "type" in params


@pytest.mark.unit
def test_initial_mapping_accepts_strings_and_lists():
    params = VCardSubTypes({"pref": "1", "type": ["work", "voice"]})

    assert params.get("PREF") == ["1"]
    assert params.types == ["work", "voice"]
    assert len(params) == 2


@pytest.mark.unit
def test_replace_returns_previous_values():
    params = VCardSubTypes({"type": ["home", "work"]})

    previous = params.replace("type", "cell")

    assert previous == ["home", "work"]
    assert params.types == ["cell"]


@pytest.mark.unit
def test_replace_with_none_removes():
    params = VCardSubTypes({"language": "en"})
    params.language = None

    assert params.language is None
    assert params.is_empty()


@pytest.mark.unit
def test_get_returns_copy():
    params = VCardSubTypes({"type": "home"})
    params.get("type").append("work")

    assert params.types == ["home"]


@pytest.mark.unit
def test_copy_is_independent():
    params = VCardSubTypes({"type": "home"})
    duplicate = params.copy()
    duplicate.add_type("work")

    assert params.types == ["home"]
    assert duplicate.types == ["home", "work"]
    assert duplicate != params


@pytest.mark.unit
def test_pref_is_integer():
    params = VCardSubTypes()
    params.pref = 1

    assert params.get("PREF") == ["1"]
    assert params.pref == 1


@pytest.mark.unit
def test_pref_not_integer_raises():
    params = VCardSubTypes({"pref": "high"})

    with pytest.raises(ValueError, match="not an integer"):
        _ = params.pref


@pytest.mark.unit
def test_typed_accessors():
    params = VCardSubTypes()
    params.value = "uri"
    params.alt_id = "1"
    params.media_type = "text/plain"
    params.sort_as = ["Smith", "Anna"]

    assert params.value == "uri"
    assert params.alt_id == "1"
    assert params.media_type == "text/plain"
    assert params.sort_as == ["Smith", "Anna"]
    assert params.names() == ["VALUE", "ALTID", "MEDIATYPE", "SORT-AS"]


@pytest.mark.unit
def test_items_preserves_insertion_order():
    params = VCardSubTypes()
    params.put("pref", "1")
    params.put("type", "home")
    params.put("pref", "2")

    assert list(params.items()) == [("PREF", ["1", "2"]), ("TYPE", ["home"])]


@pytest.mark.unit
def test_remove_all_missing_returns_empty():
    assert VCardSubTypes().remove_all("type") == []
