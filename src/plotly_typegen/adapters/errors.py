from dataclasses import dataclass

from plotly_typegen.domain.json_types import JsonDict


@dataclass
class AdapterError(Exception):
    message: str
    details: JsonDict | None = None
    hint: str | None = None
    cause: Exception | None = None

    def __str__(self) -> str:
        return self.message


class SchemaReadError(AdapterError):
    pass


class SchemaParseError(AdapterError):
    pass


class BoilerplateReadError(AdapterError):
    pass


class WorkspaceCommitError(AdapterError):
    pass


class CommandNotFound(AdapterError):
    pass


class CommandFailed(AdapterError):
    pass


class CommandTimeout(AdapterError):
    pass
