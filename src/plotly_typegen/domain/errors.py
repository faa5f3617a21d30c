from dataclasses import dataclass


@dataclass
class GenerationAborted(Exception):
    """A schema shape the type model cannot express; the whole run stops."""

    message: str
    path: str
    code: str = "ITEMS_MULTIPLE_TYPES"

    def __str__(self) -> str:
        return f"{self.message} (at {self.path})"
