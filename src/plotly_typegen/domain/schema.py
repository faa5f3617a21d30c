from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TypeAlias

from plotly_typegen.domain.json_types import JsonValue


class ValKind(str, Enum):
    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    ANGLE = "angle"
    STRING = "string"
    COLOR = "color"
    COLORLIST = "colorlist"
    COLORSCALE = "colorscale"
    DATA_ARRAY = "data_array"
    ENUMERATED = "enumerated"
    FLAGLIST = "flaglist"
    INFO_ARRAY = "info_array"
    ANY = "any"

    @classmethod
    def parse(cls, raw: JsonValue) -> ValKind | None:
        if not isinstance(raw, str):
            return None
        try:
            return cls(raw)
        except ValueError:
            return None


@dataclass(frozen=True)
class Leaf:
    path: str
    kind: ValKind | None
    raw_val_type: JsonValue = None
    description: str = ""
    default: JsonValue = None
    array_ok: bool = False
    values: tuple[JsonValue, ...] | None = None
    flags: tuple[str, ...] = ()
    extras: tuple[JsonValue, ...] = ()
    tuple_items: bool = False


@dataclass(frozen=True)
class Container:
    path: str
    fields: dict[str, Node] = field(default_factory=dict)
    description: str = ""
    default: JsonValue = None
    # Non-meta keys whose value is not an attribute object; they have no
    # field but still count towards structural matching.
    extra_keys: tuple[str, ...] = ()

    @property
    def field_names(self) -> frozenset[str]:
        return frozenset(self.fields) | frozenset(self.extra_keys)


@dataclass(frozen=True)
class ItemArray:
    path: str
    items: dict[str, Node] = field(default_factory=dict)
    description: str = ""
    default: JsonValue = None


Node: TypeAlias = Leaf | Container | ItemArray


@dataclass(frozen=True)
class TraceDefinition:
    name: str
    type_name: str
    description: str
    fields: dict[str, Node]


@dataclass(frozen=True)
class TransformDefinition:
    name: str
    description: str
    fields: dict[str, Node]


@dataclass(frozen=True)
class PlotSchema:
    traces: list[TraceDefinition]
    layout: dict[str, Node]
    transforms: list[TransformDefinition]
    meta_keys: tuple[str, ...]
    sha1: str | None = None
