#!/usr/bin/env python3
from __future__ import annotations

import json
from pathlib import Path
from typing import TypeGuard


REPO_ROOT = Path(__file__).resolve().parents[1]
CONTRACTS_REL = Path("src") / "plotly_typegen" / "contracts"

SCHEMA_MAP = {
    "plot-schema.v1.json": "plot-schema.v1.md",
    "result.schema.v1.json": "result.schema.v1.md",
}


def _is_dict(value: object) -> TypeGuard[dict[object, object]]:
    return isinstance(value, dict)


def _is_list(value: object) -> TypeGuard[list[object]]:
    return isinstance(value, list)


def _as_dict(value: object) -> dict[str, object]:
    if not _is_dict(value):
        return {}
    return {str(k): v for k, v in value.items()}


def _as_list(value: object) -> list[object]:
    if not _is_list(value):
        return []
    return list(value)


def _load_json(path: Path) -> dict[str, object]:
    raw: object = json.loads(path.read_text(encoding="utf-8"))
    return _as_dict(raw)


def _md_escape(s: str) -> str:
    return s.replace("<", "&lt;").replace(">", "&gt;").replace("|", "\\|")


def _render_generated_notice(command: str) -> str:
    return "\n".join(
        [
            "> **Generated file. Do not edit directly.**",
            f"> Run: `{command}`",
        ]
    )


def _render_schema_overview(schema: dict[str, object]) -> str:
    title = str(schema.get("title") or "Schema")
    desc_raw = schema.get("description")
    desc = str(desc_raw).strip() if desc_raw else ""
    schema_id = str(schema.get("$id") or "")

    lines: list[str] = [f"# {_md_escape(title)}"]
    if desc:
        lines.extend(["", desc])
    if schema_id:
        lines.extend(["", f"- **$id**: `{schema_id}`"])
    return "\n".join(lines)


def _type_label(prop: dict[str, object]) -> str:
    p_type = prop.get("type")
    type_items = _as_list(p_type)
    if type_items:
        return " | ".join(str(t) for t in type_items)
    return str(p_type) if p_type is not None else "(unspecified)"


def _render_properties(schema: dict[str, object]) -> str:
    props = _as_dict(schema.get("properties"))
    required: set[str] = {str(item) for item in _as_list(schema.get("required"))}

    if not props:
        return "## Properties\n\n(No top-level properties declared.)"

    lines: list[str] = [
        "## Properties",
        "",
        "| Name | Type | Required | Description |",
        "|---|---|---:|---|",
    ]
    for name in sorted(props.keys()):
        p = _as_dict(props[name])
        desc = _md_escape(str(p.get("description") or "").strip().replace("\n", " "))
        lines.append(
            f"| `{name}` | `{_type_label(p)}` | {'yes' if name in required else 'no'} | {desc} |"
        )
    return "\n".join(lines)


def _render_raw(schema: dict[str, object]) -> str:
    pretty = json.dumps(schema, indent=2, sort_keys=True)
    return "## Raw JSON\n\n```json\n" + pretty + "\n```\n"


def generate(repo_root: Path = REPO_ROOT) -> None:
    contracts_dir = repo_root / CONTRACTS_REL
    out_dir = repo_root / "docs" / "reference"
    out_dir.mkdir(parents=True, exist_ok=True)

    for in_name, out_name in SCHEMA_MAP.items():
        in_path = contracts_dir / in_name
        if not in_path.exists():
            raise SystemExit(f"Schema file not found in {contracts_dir}: {in_name}")

        schema = _load_json(in_path)
        md = "\n\n".join(
            [
                _render_generated_notice("python scripts/generate_schema_docs.py"),
                _render_schema_overview(schema),
                _render_properties(schema),
                _render_raw(schema),
            ]
        )
        (out_dir / out_name).write_text(md + "\n", encoding="utf-8")

    print(f"Generated schema docs into {out_dir}")


if __name__ == "__main__":
    generate()
