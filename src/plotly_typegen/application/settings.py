from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
import tomllib

import tomli_w

from plotly_typegen.domain.catalogs import DEFAULT_AXIS_COUNT
from plotly_typegen.domain.diagnostics import Diagnostic, FileLocation, Severity
from plotly_typegen.domain.json_types import JsonDict, JsonValue, as_json_dict
from plotly_typegen.domain.result import Result
from plotly_typegen.ports.formatter import DEFAULT_FORMATTER_COMMAND

SETTINGS_FILE = ".plotly-typegen.toml"


@dataclass(frozen=True)
class GeneratorSettings:
    schema: Path = Path("plot-schema.json")
    output: Path = Path("index.d.ts")
    axis_count: int = DEFAULT_AXIS_COUNT
    strict: bool = False
    format: bool = True
    formatter: tuple[str, ...] = DEFAULT_FORMATTER_COMMAND
    boilerplate_dir: Path | None = None


def _invalid(path: Path, key: str, expected: str) -> Diagnostic:
    return Diagnostic(
        code="CONFIG_INVALID",
        rule="config.settings",
        severity=Severity.ERROR,
        message=f"Setting {key!r} must be {expected}",
        location=FileLocation(str(path)),
    )


def _path_setting(base: Path, value: JsonValue) -> Path:
    candidate = Path(str(value))
    return candidate if candidate.is_absolute() else base / candidate


def parse_settings(table: JsonDict, path: Path) -> Result[GeneratorSettings]:
    """Build settings from a ``[settings]`` table; relative paths are taken
    from the directory holding the settings file."""
    base = path.parent
    diagnostics: list[Diagnostic] = []
    settings = GeneratorSettings()

    for key in ("schema", "output", "boilerplate_dir"):
        value = table.get(key)
        if value is None:
            continue
        if not isinstance(value, str) or not value:
            diagnostics.append(_invalid(path, key, "a non-empty path string"))
            continue
        settings = replace(settings, **{key: _path_setting(base, value)})

    axis_count = table.get("axis_count")
    if axis_count is not None:
        if isinstance(axis_count, bool) or not isinstance(axis_count, int) or axis_count < 1:
            diagnostics.append(_invalid(path, "axis_count", "a positive integer"))
        else:
            settings = replace(settings, axis_count=axis_count)

    for key in ("strict", "format"):
        value = table.get(key)
        if value is None:
            continue
        if not isinstance(value, bool):
            diagnostics.append(_invalid(path, key, "a boolean"))
            continue
        settings = replace(settings, **{key: value})

    formatter = table.get("formatter")
    if formatter is not None:
        if (
            not isinstance(formatter, list)
            or not formatter
            or not all(isinstance(part, str) and part for part in formatter)
        ):
            diagnostics.append(_invalid(path, "formatter", "a non-empty list of strings"))
        else:
            settings = replace(settings, formatter=tuple(str(part) for part in formatter))

    if diagnostics:
        return Result(diagnostics=diagnostics)
    return Result(value=settings)


def read_settings(path: Path, *, required: bool = False) -> Result[GeneratorSettings]:
    """Read the ``[settings]`` table; a missing file means defaults unless the
    path was named explicitly (``required``)."""
    if not path.exists():
        if not required:
            return Result(value=GeneratorSettings())
        return Result(
            diagnostics=[
                Diagnostic(
                    code="CONFIG_NOT_FOUND",
                    rule="config.read",
                    severity=Severity.ERROR,
                    message=f"Settings file not found: {path}",
                    location=FileLocation(str(path)),
                    hint="Check the --config path.",
                )
            ]
        )
    try:
        raw = as_json_dict(tomllib.loads(path.read_text(encoding="utf-8")))
    except (OSError, tomllib.TOMLDecodeError) as e:
        return Result(
            diagnostics=[
                Diagnostic(
                    code="CONFIG_PARSE_FAILED",
                    rule="config.parse",
                    severity=Severity.ERROR,
                    message=str(e),
                    location=FileLocation(str(path)),
                )
            ]
        )
    return parse_settings(as_json_dict(raw.get("settings")), path)


def settings_document(settings: GeneratorSettings) -> JsonDict:
    table: JsonDict = {
        "schema": settings.schema.as_posix(),
        "output": settings.output.as_posix(),
        "axis_count": settings.axis_count,
        "strict": settings.strict,
        "format": settings.format,
        "formatter": list(settings.formatter),
    }
    if settings.boilerplate_dir is not None:
        table["boilerplate_dir"] = settings.boilerplate_dir.as_posix()
    return {"settings": table}


def write_settings(path: Path, settings: GeneratorSettings) -> None:
    path.write_text(tomli_w.dumps(settings_document(settings)), encoding="utf-8")


def effective_settings(
    settings: GeneratorSettings,
    *,
    schema: Path | None = None,
    output: Path | None = None,
    axis_count: int | None = None,
    strict: bool | None = None,
    format: bool | None = None,
) -> GeneratorSettings:
    """Command-line values win over the settings file when given."""
    overrides = {
        "schema": schema,
        "output": output,
        "axis_count": axis_count,
        "strict": strict,
        "format": format,
    }
    return replace(
        settings, **{key: value for key, value in overrides.items() if value is not None}
    )
