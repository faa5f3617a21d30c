from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class Boilerplate:
    header: str = ""
    globals: str = ""
    events: str = ""


class BoilerplateCatalogPort(Protocol):
    def load(self) -> Boilerplate: ...
