from typing import Protocol

DEFAULT_FORMATTER_COMMAND = ("prettier", "--parser", "typescript")


class FormatterPort(Protocol):
    def format(self, text: str) -> str: ...
