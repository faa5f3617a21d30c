from typing import Protocol

from plotly_typegen.domain.json_types import JsonDict


class SchemaSourcePort(Protocol):
    def load(self) -> JsonDict: ...

    def describe(self) -> str: ...
