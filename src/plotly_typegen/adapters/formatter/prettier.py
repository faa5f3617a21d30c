from plotly_typegen.adapters.errors import CommandFailed
from plotly_typegen.ports.command_runner import CommandRunnerPort
from plotly_typegen.ports.formatter import DEFAULT_FORMATTER_COMMAND


class PrettierFormatter:
    """Pipes declarations through prettier's stdin/stdout mode."""

    def __init__(
        self, runner: CommandRunnerPort, command: list[str] | None = None
    ) -> None:
        self.runner = runner
        self.command = list(command or DEFAULT_FORMATTER_COMMAND)

    def format(self, text: str) -> str:
        result = self.runner.run(self.command, stdin=text)
        if result.exit_code != 0:
            raise CommandFailed(
                f"Formatter exited with status {result.exit_code}",
                details={
                    "command": " ".join(self.command),
                    "stderr": result.stderr.strip(),
                },
            )
        return result.stdout
