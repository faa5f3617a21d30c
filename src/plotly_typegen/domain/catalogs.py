from __future__ import annotations

from dataclasses import dataclass

from plotly_typegen.domain.json_types import JsonValue

# An object whose fields are exactly one of these sets, no more and no less, is
# emitted as the named type. The names are declared in the globals boilerplate.
# Field types are not inspected; the field set alone identifies the type.
NAMED_OBJECT_TYPES: dict[str, tuple[str, ...]] = {
    "Font": ("family", "size", "color"),
    "SourcedFont": (
        "family",
        "size",
        "color",
        "familysrc",
        "sizesrc",
        "colorsrc",
    ),
    "Point": ("x", "y", "z"),
    "Transition": ("duration", "easing"),
}

# Same idea for the legal flags of a flag list.
NAMED_FLAG_LISTS: dict[str, tuple[str, ...]] = {
    "ThreeDHoverInfo": ("x", "y", "z", "text", "name"),
    "ConeHoverInfo": ("x", "y", "z", "u", "v", "w", "norm", "text", "name"),
    "StreamtubeHoverInfo": (
        "x",
        "y",
        "z",
        "u",
        "v",
        "w",
        "norm",
        "divergence",
        "text",
        "name",
    ),
    "PolarHoverInfo": ("r", "theta", "text", "name"),
}

# Enumerations are keyed by a representative member rather than spelled out.
# The first enumeration seen containing the representative defines the type.
NAMED_ENUMERATION_REPRESENTATIVES: dict[str, str] = {
    "gregorian": "Calendar",
    "circle-open-dot": "MarkerSymbol",
}

DEFAULT_AXIS_COUNT = 9

X_AXIS_PATTERN = "/^x([2-9]|[1-9][0-9]+)?$/"
Y_AXIS_PATTERN = "/^y([2-9]|[1-9][0-9]+)?$/"
AXIS_PATTERNS = frozenset({X_AXIS_PATTERN, Y_AXIS_PATTERN})

TRANSFORM_ITEM_NAME = "transform"


@dataclass
class EnumerationRecord:
    name: str
    values: list[JsonValue] | None = None


@dataclass
class ObjectTypeRecord:
    name: str
    fields: frozenset[str] | None = None
    type: str | None = None


def fresh_enumeration_registry() -> dict[str, EnumerationRecord]:
    return {
        representative: EnumerationRecord(name=name)
        for representative, name in NAMED_ENUMERATION_REPRESENTATIVES.items()
    }


def find_named_object_type(field_names: set[str] | frozenset[str]) -> str | None:
    for name, fields in NAMED_OBJECT_TYPES.items():
        if set(fields) == set(field_names):
            return name
    return None


def find_named_flag_list(flags: list[str]) -> str | None:
    for name, catalog_flags in NAMED_FLAG_LISTS.items():
        if sorted(catalog_flags) == sorted(flags):
            return name
    return None
