import json
from pathlib import Path

from plotly_typegen.adapters.errors import SchemaParseError, SchemaReadError
from plotly_typegen.domain.json_types import JsonDict, as_json_dict


def _reject_constant(name: str) -> object:
    raise ValueError(f"{name} is not valid JSON")


class FileSchemaSource:
    def __init__(self, path: Path) -> None:
        self.path = path

    def describe(self) -> str:
        return str(self.path)

    def load(self) -> JsonDict:
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise SchemaReadError(
                f"Could not read schema file: {self.path}",
                details={"path": str(self.path)},
                cause=e,
            )
        try:
            raw: object = json.loads(text, parse_constant=_reject_constant)
        except json.JSONDecodeError as e:
            raise SchemaParseError(
                f"Schema file is not valid JSON: {e.msg}",
                details={"path": str(self.path), "line": e.lineno, "col": e.colno},
                cause=e,
            )
        except ValueError as e:
            raise SchemaParseError(
                f"Schema file is not valid JSON: {e}",
                details={"path": str(self.path)},
                cause=e,
            )
        if not isinstance(raw, dict):
            raise SchemaParseError(
                "Schema document must be a JSON object",
                details={"path": str(self.path)},
            )
        return as_json_dict(raw)
