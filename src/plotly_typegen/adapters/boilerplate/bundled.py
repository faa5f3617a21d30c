from pathlib import Path

from plotly_typegen.adapters.errors import BoilerplateReadError
from plotly_typegen.ports.boilerplate import Boilerplate

HEADER_FILE = "header_d.ts"
GLOBALS_FILE = "globals_d.ts"
EVENTS_FILE = "events_d.ts"


def bundled_boilerplate_root() -> Path:
    return Path(__file__).resolve().parents[2] / "boilerplate"


class BundledBoilerplateCatalog:
    def __init__(self, root: Path | None = None) -> None:
        self.root = root or bundled_boilerplate_root()

    def _read(self, name: str) -> str:
        path = self.root / name
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            raise BoilerplateReadError(
                f"Could not read boilerplate file: {path}",
                details={"path": str(path)},
                cause=e,
            )

    def load(self) -> Boilerplate:
        return Boilerplate(
            header=self._read(HEADER_FILE),
            globals=self._read(GLOBALS_FILE),
            events=self._read(EVENTS_FILE),
        )
