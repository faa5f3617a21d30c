import json

from typer.testing import CliRunner

from plotly_typegen.application.settings import SETTINGS_FILE
from plotly_typegen.entrypoints.cli import app

runner = CliRunner()


def _write_schema(path, document):
    path.write_text(json.dumps(document), encoding="utf-8")


def test_generate_writes_output(tmp_path, monkeypatch, scatter_document):
    monkeypatch.chdir(tmp_path)
    _write_schema(tmp_path / "plot-schema.json", scatter_document)
    result = runner.invoke(app, ["generate", "--no-format"])
    assert result.exit_code == 0, result.output
    assert "Wrote: index.d.ts" in result.output
    text = (tmp_path / "index.d.ts").read_text(encoding="utf-8")
    assert "export interface ScatterData {" in text
    assert "export as namespace Plotly;" in text


def test_generate_json_payload(tmp_path, monkeypatch, scatter_document):
    monkeypatch.chdir(tmp_path)
    _write_schema(tmp_path / "schema.json", scatter_document)
    result = runner.invoke(
        app, ["generate", "schema.json", "-o", "out.d.ts", "--no-format", "--json"]
    )
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["command"] == "generate"
    assert payload["args"] == ["schema.json"]
    assert payload["artifacts"][0]["output"] == "out.d.ts"
    assert (tmp_path / "out.d.ts").exists()


def test_check_detects_stale_output(tmp_path, monkeypatch, scatter_document):
    monkeypatch.chdir(tmp_path)
    _write_schema(tmp_path / "plot-schema.json", scatter_document)
    assert runner.invoke(app, ["generate", "--no-format"]).exit_code == 0

    current = runner.invoke(app, ["generate", "--no-format", "--check"])
    assert current.exit_code == 0, current.output
    assert "Up to date: index.d.ts" in current.output

    (tmp_path / "index.d.ts").write_text("// edited\n", encoding="utf-8")
    stale = runner.invoke(app, ["generate", "--no-format", "--check"])
    assert stale.exit_code == 2
    assert (tmp_path / "index.d.ts").read_text(encoding="utf-8") == "// edited\n"


def test_missing_schema_is_execution_error(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["generate", "--no-format"])
    assert result.exit_code == 3
    assert not (tmp_path / "index.d.ts").exists()


def test_strict_flag_fails_on_warnings(tmp_path, monkeypatch, make_document):
    monkeypatch.chdir(tmp_path)
    _write_schema(
        tmp_path / "plot-schema.json",
        make_document(layout={"anchor": {"valType": "subplotid"}}),
    )
    assert runner.invoke(app, ["generate", "--no-format"]).exit_code == 0
    (tmp_path / "index.d.ts").unlink()

    result = runner.invoke(app, ["generate", "--no-format", "--strict"])
    assert result.exit_code == 2
    assert not (tmp_path / "index.d.ts").exists()


def test_settings_file_is_used(tmp_path, monkeypatch, scatter_document):
    monkeypatch.chdir(tmp_path)
    _write_schema(tmp_path / "plot-schema.json", scatter_document)
    (tmp_path / SETTINGS_FILE).write_text(
        '[settings]\noutput = "types/index.d.ts"\nformat = false\naxis_count = 2\n',
        encoding="utf-8",
    )
    result = runner.invoke(app, ["generate"])
    assert result.exit_code == 0, result.output
    text = (tmp_path / "types" / "index.d.ts").read_text(encoding="utf-8")
    assert 'export type AxisName = "x" | "x2" | "y" | "y2";' in text


def test_invalid_settings_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / SETTINGS_FILE).write_text("[settings]\nstrict = 1\n", encoding="utf-8")
    result = runner.invoke(app, ["generate", "--json"])
    assert result.exit_code == 2
    payload = json.loads(result.stdout)
    assert [d["code"] for d in payload["diagnostics"]] == ["CONFIG_INVALID"]


def test_missing_config_file_fails(tmp_path, monkeypatch, scatter_document):
    monkeypatch.chdir(tmp_path)
    _write_schema(tmp_path / "plot-schema.json", scatter_document)
    result = runner.invoke(
        app, ["generate", "--config", "typo.toml", "--no-format", "--json"]
    )
    assert result.exit_code == 2
    payload = json.loads(result.stdout)
    assert [d["code"] for d in payload["diagnostics"]] == ["CONFIG_NOT_FOUND"]
    assert not (tmp_path / "index.d.ts").exists()
