from plotly_typegen.domain.catalogs import (
    NAMED_ENUMERATION_REPRESENTATIVES,
    find_named_flag_list,
    find_named_object_type,
    fresh_enumeration_registry,
)


def test_object_type_matches_exact_field_set_only():
    assert find_named_object_type({"color", "size", "family"}) == "Font"
    assert find_named_object_type({"family", "size"}) is None
    assert find_named_object_type({"family", "size", "color", "weight"}) is None


def test_sourced_font_is_not_confused_with_font():
    fields = {"family", "size", "color", "familysrc", "sizesrc", "colorsrc"}
    assert find_named_object_type(fields) == "SourcedFont"


def test_flag_list_match_ignores_order():
    assert find_named_flag_list(["name", "text", "theta", "r"]) == "PolarHoverInfo"
    assert find_named_flag_list(["r", "theta", "text"]) is None


def test_fresh_registries_are_independent():
    first = fresh_enumeration_registry()
    second = fresh_enumeration_registry()
    first["gregorian"].values = ["gregorian"]
    assert second["gregorian"].values is None
    assert set(first) == set(NAMED_ENUMERATION_REPRESENTATIVES)
