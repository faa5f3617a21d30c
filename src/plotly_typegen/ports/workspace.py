from pathlib import Path
from typing import Protocol


class WorkspacePort(Protocol):
    def read_text(self, rel_path: Path) -> str | None: ...
    def write_text(self, rel_path: Path, content: str) -> Path: ...
