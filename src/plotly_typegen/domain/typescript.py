"""Rendering of TypeScript type expressions and doc comments."""

from __future__ import annotations

import json
from typing import Iterable

from plotly_typegen.domain.json_types import JsonValue

ONE_OR_MANY = "OneOrMany"
NEVER = "never"


def literal(value: JsonValue) -> str:
    """Render a value as compact JSON.

    Strings, booleans, null and integers match ``JSON.stringify``; floats use
    Python's repr (``1e-07`` where JavaScript writes ``1e-7``). Non-finite
    numbers never get here: the schema source rejects them.
    """
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def union(members: Iterable[str]) -> str:
    rendered = list(members)
    if not rendered:
        return NEVER
    return " | ".join(rendered)


def unique(members: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    ordered: list[str] = []
    for member in members:
        if member not in seen:
            seen.add(member)
            ordered.append(member)
    return ordered


def literal_union(values: Iterable[JsonValue]) -> str:
    return union(literal(v) for v in values)


def one_or_many(type_expr: str) -> str:
    return f"{ONE_OR_MANY}<{type_expr}>"


def array_of(type_name: str) -> str:
    return f"{type_name}[]"


def flag_combinations(flags: list[str]) -> list[str]:
    """Every non-empty subset of ``flags`` joined with ``+``, shortest first.

    Members keep their declared order inside a combination; combinations of
    equal size keep bitmap order.
    """
    subsets = [
        [flag for index, flag in enumerate(flags) if bitmap & (1 << index)]
        for bitmap in range(1, 2 ** len(flags))
    ]
    subsets.sort(key=len)
    return ["+".join(subset) for subset in subsets]


def flag_list_union(flags: list[str], extras: Iterable[JsonValue] = ()) -> str:
    members: list[JsonValue] = [*flag_combinations(flags), *extras]
    return literal_union(members)


def _escape_comment(text: str) -> str:
    return text.replace("*/", "*\\/")


def doc_comment(content: str, default: JsonValue = None) -> str:
    if not content and default is None:
        return ""
    lines = ["/**"]
    if content:
        lines.extend(f" * {line}".rstrip() for line in _escape_comment(content).splitlines())
    if default is not None:
        lines.append(f" * @default {_escape_comment(literal(default))}")
    lines.append(" */")
    return "\n".join(lines)
