from pathlib import Path

import typer

from plotly_typegen.adapters.boilerplate.bundled import BundledBoilerplateCatalog
from plotly_typegen.adapters.command_runner.subprocess_runner import (
    SubprocessCommandRunner,
)
from plotly_typegen.adapters.formatter.prettier import PrettierFormatter
from plotly_typegen.adapters.schema_source.file import FileSchemaSource
from plotly_typegen.adapters.workspace.filesystem import FilesystemWorkspace
from plotly_typegen.application.build_typings import build_typings
from plotly_typegen.application.result_serialization import (
    format_diagnostic,
    serialize_result,
)
from plotly_typegen.application.settings import (
    SETTINGS_FILE,
    GeneratorSettings,
    effective_settings,
    read_settings,
    write_settings,
)
from plotly_typegen.domain.result import Result

app = typer.Typer(
    add_completion=False,
    help="Generate TypeScript declarations from a plotly.js plot schema.",
)


def _report(result: Result[str], command: str, args: list[str], as_json: bool) -> None:
    if as_json:
        import json as _json

        typer.echo(_json.dumps(serialize_result(result, command=command, args=args)))
        return
    for diagnostic in result.diagnostics:
        typer.echo(format_diagnostic(diagnostic), err=True)


@app.command()
def generate(
    schema: Path | None = typer.Argument(None, help="Plot schema JSON file."),
    out: Path | None = typer.Option(None, "--out", "-o"),
    config: Path | None = typer.Option(None, "--config"),
    axis_count: int | None = typer.Option(None, "--axis-count", min=1),
    format: bool | None = typer.Option(None, "--format/--no-format"),
    strict: bool | None = typer.Option(None, "--strict/--no-strict"),
    check: bool = typer.Option(False, "--check"),
    json: bool = False,
):
    """Write the declaration file, or verify it is current with --check."""
    args = [str(schema)] if schema is not None else []
    if config is not None:
        loaded = read_settings(config, required=True)
    else:
        loaded = read_settings(Path.cwd() / SETTINGS_FILE)
    if loaded.value is None:
        _report(Result(diagnostics=loaded.diagnostics), "generate", args, json)
        raise typer.Exit(loaded.exit_code)
    settings = effective_settings(
        loaded.value,
        schema=schema,
        output=out,
        axis_count=axis_count,
        strict=strict,
        format=format,
    )
    formatter = (
        PrettierFormatter(SubprocessCommandRunner(), list(settings.formatter))
        if settings.format
        else None
    )
    result = build_typings(
        settings,
        schema_source=FileSchemaSource(settings.schema),
        boilerplate_catalog=BundledBoilerplateCatalog(settings.boilerplate_dir),
        workspace=FilesystemWorkspace(Path.cwd()),
        formatter=formatter,
        check=check,
    )
    _report(result, "generate", args, json)
    if not json and result.exit_code == 0:
        verb = "Up to date" if check else "Wrote"
        typer.echo(f"{verb}: {settings.output}")
    raise typer.Exit(result.exit_code)


@app.command()
def init(
    directory: Path = typer.Argument(Path(".")),
    force: bool = typer.Option(False, "--force"),
):
    """Write a default settings file."""
    path = directory / SETTINGS_FILE
    if path.exists() and not force:
        typer.echo(f"{path} already exists; use --force to overwrite it.", err=True)
        raise typer.Exit(1)
    directory.mkdir(parents=True, exist_ok=True)
    write_settings(path, GeneratorSettings())
    typer.echo(f"Wrote {path}")
