from __future__ import annotations

import pytest

from formhtml.htmltemplate.context import RenderContext
from formhtml.htmltemplate.naming import parse_post_name, resolve_id, resolve_post_name, transliterate


@pytest.mark.parametrize(
    "name, expected",
    [
        ("FirstName", "first_name"),
        ("Field[0]", "field_0"),
        ("Address1", "address_1"),
        ("PrimaryPhoneExt", "primary_phone_ext"),
        ("O'Brien.Name", "obrien_name"),
        ("city", "city"),
    ],
)
def test_transliterate(name: str, expected: str) -> None:
    assert transliterate(name) == expected


def test_resolve_id_generates_from_name() -> None:
    assert resolve_id("FirstName", {}) == ("first_name", {})
    assert resolve_id("Field[0]", None) == ("field_0", {})


def test_resolve_id_prefers_explicit_id_and_removes_it() -> None:
    attrs = {"id": "custom", "class": "c"}
    assert resolve_id("FirstName", attrs) == ("custom", {"class": "c"})
    assert attrs == {"id": "custom", "class": "c"}


def test_resolve_post_name() -> None:
    assert resolve_post_name("City", "FieldValues") == "FieldValues[City]"
    assert resolve_post_name("Tags[]", "FieldValues") == "Multiple[Tags][]"
    assert resolve_post_name("Field[0]", "FieldValues") == "Multiple[Field][0]"
    assert resolve_post_name("City", "Encrypt") == "Encrypt[City]"
    assert resolve_post_name("Tags[]", "Verify") == "Verify[Tags][]"
    assert resolve_post_name("City", "") == "City"


@pytest.mark.parametrize("name", ["Tags[]", "Field[0]", "Grid[2][Cell]"])
def test_post_name_parses_back_to_segments(name: str) -> None:
    prefix, segments = parse_post_name(resolve_post_name(name, "FieldValues"))
    assert prefix == "Multiple"
    expected = name.replace("]", "").split("[")
    assert segments == expected


def test_parse_plain_names() -> None:
    assert parse_post_name("FieldValues[City]") == ("FieldValues", ["City"])
    assert parse_post_name("City") == (None, ["City"])


def test_unique_ids_never_collide() -> None:
    ctx = RenderContext("FieldValues", add_unique_id=True)
    assert ctx.unique_id("city") == "city_1"
    assert ctx.unique_id("city") == "city_2"
    assert ctx.elem_unique_id == "city_2"


def test_unique_suffix_disabled() -> None:
    ctx = RenderContext("FieldValues", add_unique_id=False)
    assert ctx.unique_id("city") == "city"
    assert ctx.counter == 0


def test_post_array_override_is_restored() -> None:
    ctx = RenderContext("FieldValues")
    with ctx.post_array("Encrypt"):
        assert ctx.post_array_name == "Encrypt"
    assert ctx.post_array_name == "FieldValues"

    with pytest.raises(RuntimeError):
        with ctx.post_array("Obsolete"):
            raise RuntimeError("boom")
    assert ctx.post_array_name == "FieldValues"
