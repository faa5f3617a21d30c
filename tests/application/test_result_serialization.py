import json

import jsonschema

from plotly_typegen.application.result_serialization import (
    format_diagnostic,
    serialize_result,
)
from plotly_typegen.application.schema_loading import contract_path
from plotly_typegen.domain.diagnostics import (
    Diagnostic,
    FileLocation,
    SchemaLocation,
    Severity,
)
from plotly_typegen.domain.result import Result


def _result_contract():
    path = contract_path().with_name("result.schema.v1.json")
    return json.loads(path.read_text(encoding="utf-8"))


def test_serialized_result_matches_contract():
    result = Result(
        value="text",
        diagnostics=[
            Diagnostic(
                code="ENUM_MISMATCH",
                rule="typegen.enum.mismatch",
                severity=Severity.WARN,
                message="differs",
                location=SchemaLocation("traces.bar.xcalendar"),
                details={"name": "Calendar", "missing": [], "unexpected": ['"x"']},
            ),
            Diagnostic(
                code="OUTPUT_STALE",
                rule="output.check",
                severity=Severity.ERROR,
                message="stale",
                location=FileLocation("index.d.ts"),
            ),
        ],
        artifacts=[{"output": "index.d.ts", "digest": "0" * 64}],
    )
    payload = serialize_result(result, command="generate", args=["plot-schema.json"])
    jsonschema.validate(payload, _result_contract())
    assert payload["exit_code"] == 2
    assert payload["diagnostics"][0]["location"] == {
        "kind": "schema",
        "path": "traces.bar.xcalendar",
    }


def test_format_diagnostic_includes_path_and_hint():
    diag = Diagnostic(
        code="ITEMS_MULTIPLE_TYPES",
        rule="typegen.items.single_type",
        severity=Severity.ERROR,
        message="cannot generate array type",
        location=SchemaLocation("layout.shapes"),
        hint="Declare one item type.",
    )
    assert format_diagnostic(diag) == (
        "error ITEMS_MULTIPLE_TYPES layout.shapes: "
        "cannot generate array type (Declare one item type.)"
    )


def test_format_diagnostic_without_location():
    diag = Diagnostic(code="X", rule="r", severity=Severity.WARN, message="m")
    assert format_diagnostic(diag) == "warn X: m"
