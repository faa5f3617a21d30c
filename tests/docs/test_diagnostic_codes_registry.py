from pathlib import Path
import re

import yaml

REPO_ROOT = Path(__file__).resolve().parents[2]
SRC_ROOT = REPO_ROOT / "src" / "plotly_typegen"
CODE_PATTERN = re.compile(r'(?:code=|context\.warn\(\s*)"([A-Z][A-Z_]+)"')


def _registered():
    data = yaml.safe_load((SRC_ROOT / "diagnostics" / "codes.yaml").read_text(encoding="utf-8"))
    return {entry["code"]: entry for entry in data["codes"]}


def _used_codes():
    used = set()
    for path in SRC_ROOT.rglob("*.py"):
        used.update(CODE_PATTERN.findall(path.read_text(encoding="utf-8")))
    return used


def test_every_emitted_code_is_registered():
    used = _used_codes()
    assert "ENUM_MISMATCH" in used
    assert "OUTPUT_STALE" in used
    assert used <= set(_registered())


def test_every_registered_code_is_emitted():
    # ITEMS_MULTIPLE_TYPES is carried by GenerationAborted rather than passed as code=.
    assert set(_registered()) - _used_codes() <= {"ITEMS_MULTIPLE_TYPES"}
