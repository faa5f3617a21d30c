from __future__ import annotations

import re

IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def first_letter_upper(name: str) -> str:
    return name[:1].upper() + name[1:]


def data_type_name(trace_name: str) -> str:
    return f"{first_letter_upper(trace_name)}Data"


def transform_type_name(transform_name: str) -> str:
    return f"{first_letter_upper(transform_name)}Transform"


def item_type_name(item_name: str) -> str:
    return first_letter_upper(item_name)


def property_name(name: str) -> str:
    if IDENTIFIER_PATTERN.match(name):
        return name
    return '"' + name.replace("\\", "\\\\").replace('"', '\\"') + '"'


def axis_ids(letter: str, axis_count: int) -> list[str]:
    """``x, x2, ..., xN``: the first axis has no index suffix."""
    return [letter, *(f"{letter}{i}" for i in range(2, axis_count + 1))]


def axis_attribute_names(letter: str, axis_count: int) -> list[str]:
    return axis_ids(f"{letter}axis", axis_count)
