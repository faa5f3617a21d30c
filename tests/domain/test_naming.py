from plotly_typegen.domain.naming import (
    axis_attribute_names,
    axis_ids,
    data_type_name,
    item_type_name,
    property_name,
    transform_type_name,
)
from plotly_typegen.domain.schema import ValKind


def test_type_names():
    assert data_type_name("scattergl") == "ScatterglData"
    assert transform_type_name("groupby") == "GroupbyTransform"
    assert item_type_name("annotation") == "Annotation"


def test_property_name_quotes_non_identifiers():
    assert property_name("marker") == "marker"
    assert property_name("_private$") == "_private$"
    assert property_name("line-width") == '"line-width"'
    assert property_name("3d") == '"3d"'


def test_axis_ids_first_axis_has_no_suffix():
    assert axis_ids("x", 3) == ["x", "x2", "x3"]
    assert axis_ids("y", 1) == ["y"]
    assert axis_attribute_names("y", 2) == ["yaxis", "yaxis2"]


def test_val_kind_parse():
    assert ValKind.parse("info_array") is ValKind.INFO_ARRAY
    assert ValKind.parse("subplotid") is None
    assert ValKind.parse(None) is None
