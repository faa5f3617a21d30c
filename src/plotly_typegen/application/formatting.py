from __future__ import annotations

from plotly_typegen.adapters.errors import CommandFailed, CommandNotFound, CommandTimeout
from plotly_typegen.domain.diagnostics import Diagnostic, Severity
from plotly_typegen.domain.result import Result
from plotly_typegen.ports.formatter import FormatterPort


def format_declarations(text: str, formatter: FormatterPort) -> Result[str]:
    try:
        return Result(value=formatter.format(text))
    except CommandNotFound as e:
        return Result(
            value=text,
            diagnostics=[
                Diagnostic(
                    code="FORMATTER_UNAVAILABLE",
                    rule="format.command",
                    severity=Severity.WARN,
                    message=f"{e.message}; writing unformatted declarations.",
                    hint=e.hint,
                )
            ],
        )
    except (CommandFailed, CommandTimeout) as e:
        return Result(
            diagnostics=[
                Diagnostic(
                    code="FORMAT_FAILED",
                    rule="format.command",
                    severity=Severity.ERROR,
                    message=e.message,
                    details=e.details,
                    is_execution=True,
                )
            ]
        )
