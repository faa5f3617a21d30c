from __future__ import annotations

import hashlib

from plotly_typegen.adapters.errors import (
    BoilerplateReadError,
    SchemaParseError,
    SchemaReadError,
    WorkspaceCommitError,
)
from plotly_typegen.application.formatting import format_declarations
from plotly_typegen.application.generate import generate_declarations
from plotly_typegen.application.schema_loading import load_plot_schema
from plotly_typegen.application.settings import GeneratorSettings
from plotly_typegen.domain.diagnostics import (
    Diagnostic,
    FileLocation,
    Severity,
    has_errors,
)
from plotly_typegen.domain.json_types import as_json_dict
from plotly_typegen.domain.result import Result
from plotly_typegen.domain.strictness import apply_strictness
from plotly_typegen.ports.boilerplate import BoilerplateCatalogPort
from plotly_typegen.ports.formatter import FormatterPort
from plotly_typegen.ports.schema_source import SchemaSourcePort
from plotly_typegen.ports.workspace import WorkspacePort


def _digest(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def build_typings(
    settings: GeneratorSettings,
    *,
    schema_source: SchemaSourcePort,
    boilerplate_catalog: BoilerplateCatalogPort,
    workspace: WorkspacePort,
    formatter: FormatterPort | None = None,
    check: bool = False,
) -> Result[str]:
    """Generate the declaration file and write it, or compare it with the
    existing file when ``check`` is set."""
    diagnostics: list[Diagnostic] = []
    source_location = FileLocation(schema_source.describe())
    try:
        raw = schema_source.load()
    except SchemaReadError as e:
        return Result(
            diagnostics=[
                Diagnostic(
                    code="SCHEMA_READ_FAILED",
                    rule="schema.read",
                    severity=Severity.ERROR,
                    message=e.message,
                    location=source_location,
                    is_execution=True,
                )
            ]
        )
    except SchemaParseError as e:
        return Result(
            diagnostics=[
                Diagnostic(
                    code="SCHEMA_PARSE_FAILED",
                    rule="schema.parse",
                    severity=Severity.ERROR,
                    message=e.message,
                    location=source_location,
                    details=e.details,
                )
            ]
        )

    loaded = load_plot_schema(raw)
    diagnostics.extend(loaded.diagnostics)
    if loaded.value is None:
        return Result(diagnostics=diagnostics)
    schema = loaded.value

    try:
        boilerplate = boilerplate_catalog.load()
    except BoilerplateReadError as e:
        diagnostics.append(
            Diagnostic(
                code="BOILERPLATE_READ_FAILED",
                rule="boilerplate.read",
                severity=Severity.ERROR,
                message=e.message,
                details=e.details,
                is_execution=True,
            )
        )
        return Result(diagnostics=diagnostics)

    generated = generate_declarations(
        schema, boilerplate=boilerplate, axis_count=settings.axis_count
    )
    diagnostics.extend(generated.diagnostics)
    diagnostics = apply_strictness(diagnostics, settings.strict)
    if generated.value is None or has_errors(diagnostics):
        return Result(diagnostics=diagnostics)
    text = generated.value

    unformatted = False
    if formatter is not None:
        formatted = format_declarations(text, formatter)
        diagnostics.extend(formatted.diagnostics)
        if formatted.value is None:
            return Result(diagnostics=diagnostics)
        text = formatted.value
        unformatted = any(
            d.code == "FORMATTER_UNAVAILABLE" for d in formatted.diagnostics
        )

    artifacts = [
        as_json_dict(
            {
                "output": settings.output.as_posix(),
                "schema_sha1": schema.sha1,
                "digest": _digest(text),
                "traces": len(schema.traces),
                "transforms": len(schema.transforms),
            }
        )
    ]

    if check:
        existing = workspace.read_text(settings.output)
        if existing != text:
            message = "Generated declarations differ from the existing output"
            hint = "Run plotly-typegen generate without --check to update it."
            if unformatted:
                message = f"{message}; the comparison used unformatted text"
                hint = "Install the formatter, or pass --no-format if the file is unformatted."
            diagnostics.append(
                Diagnostic(
                    code="OUTPUT_STALE",
                    rule="output.check",
                    severity=Severity.ERROR,
                    message=message,
                    location=FileLocation(settings.output.as_posix()),
                    hint=hint,
                    details={"formatted": formatter is not None and not unformatted},
                )
            )
        return Result(value=text, diagnostics=diagnostics, artifacts=artifacts)

    try:
        workspace.write_text(settings.output, text)
    except WorkspaceCommitError as e:
        diagnostics.append(
            Diagnostic(
                code="OUTPUT_WRITE_FAILED",
                rule="output.write",
                severity=Severity.ERROR,
                message=e.message,
                location=FileLocation(settings.output.as_posix()),
                is_execution=True,
            )
        )
        return Result(diagnostics=diagnostics, artifacts=artifacts)
    return Result(value=text, diagnostics=diagnostics, artifacts=artifacts)
