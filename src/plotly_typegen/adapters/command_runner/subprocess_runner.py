import shutil
import subprocess

from plotly_typegen.adapters.errors import CommandNotFound, CommandTimeout
from plotly_typegen.ports.command_runner import CommandResult


class SubprocessCommandRunner:
    def __init__(self, timeout: float | None = 120.0) -> None:
        self.timeout = timeout

    def run(self, args: list[str], stdin: str | None = None) -> CommandResult:
        if not args:
            raise CommandNotFound("Empty command")
        executable = shutil.which(args[0])
        if executable is None:
            raise CommandNotFound(
                f"Command not found: {args[0]}",
                details={"command": args[0]},
                hint="Install it or disable formatting with --no-format.",
            )
        try:
            completed = subprocess.run(
                [executable, *args[1:]],
                input=stdin,
                capture_output=True,
                encoding="utf-8",
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise CommandTimeout(
                f"Command timed out after {self.timeout}s: {args[0]}",
                details={"command": args[0]},
                cause=e,
            )
        return CommandResult(
            exit_code=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )
