import pytest

from plotly_typegen.adapters.boilerplate.bundled import (
    BundledBoilerplateCatalog,
    bundled_boilerplate_root,
)
from plotly_typegen.adapters.errors import BoilerplateReadError


def test_bundled_boilerplate_declares_catalog_types():
    boilerplate = BundledBoilerplateCatalog().load()
    assert "export as namespace Plotly;" in boilerplate.header
    for name in ("Font", "SourcedFont", "Point", "Transition"):
        assert f"export interface {name} " in boilerplate.globals
    assert "LayoutXAxis" in boilerplate.events


def test_custom_root(tmp_path):
    for name in ("header_d.ts", "globals_d.ts", "events_d.ts"):
        (tmp_path / name).write_text(f"// {name}\n", encoding="utf-8")
    boilerplate = BundledBoilerplateCatalog(tmp_path).load()
    assert boilerplate.events == "// events_d.ts\n"


def test_missing_file_raises(tmp_path):
    (tmp_path / "header_d.ts").write_text("", encoding="utf-8")
    with pytest.raises(BoilerplateReadError) as excinfo:
        BundledBoilerplateCatalog(tmp_path).load()
    assert excinfo.value.details["path"].endswith("globals_d.ts")
    assert bundled_boilerplate_root().is_dir()
