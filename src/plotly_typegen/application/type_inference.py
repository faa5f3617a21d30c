"""Recursive translation of schema nodes into TypeScript type expressions.

All run state lives in a ``GenerationContext``: the enumeration and item-type
registries are "first sighting wins", so a context must never be shared
between two schema documents.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from plotly_typegen.domain.catalogs import (
    AXIS_PATTERNS,
    DEFAULT_AXIS_COUNT,
    TRANSFORM_ITEM_NAME,
    EnumerationRecord,
    ObjectTypeRecord,
    find_named_flag_list,
    find_named_object_type,
    fresh_enumeration_registry,
)
from plotly_typegen.domain.diagnostics import Diagnostic, SchemaLocation, Severity
from plotly_typegen.domain.errors import GenerationAborted
from plotly_typegen.domain.json_types import JsonValue
from plotly_typegen.domain.naming import item_type_name, property_name
from plotly_typegen.domain.schema import Container, ItemArray, Leaf, Node, ValKind
from plotly_typegen.domain.typescript import (
    array_of,
    doc_comment,
    flag_list_union,
    literal,
    one_or_many,
    union,
    unique,
)

AXIS_NAME = "AxisName"
TRANSFORM_UNION = "Transform"
ANY_ARRAY = "any[]"

SIMPLE_TYPES: dict[ValKind, str] = {
    ValKind.BOOLEAN: "boolean",
    ValKind.INTEGER: "number",
    ValKind.NUMBER: "number",
    ValKind.ANGLE: "number",
    ValKind.COLOR: "string",
    ValKind.COLORLIST: "string[]",
    ValKind.COLORSCALE: "string | Array<[number, string]>",
    ValKind.DATA_ARRAY: "Datum[] | TypedArray",
    ValKind.ANY: "any",
}


def _new_diagnostics() -> list[Diagnostic]:
    return []


def _new_object_types() -> dict[str, ObjectTypeRecord]:
    return {}


@dataclass
class GenerationContext:
    axis_count: int = DEFAULT_AXIS_COUNT
    enumerations: dict[str, EnumerationRecord] = field(
        default_factory=fresh_enumeration_registry
    )
    object_types: dict[str, ObjectTypeRecord] = field(default_factory=_new_object_types)
    diagnostics: list[Diagnostic] = field(default_factory=_new_diagnostics)

    @classmethod
    def fresh(cls, axis_count: int = DEFAULT_AXIS_COUNT) -> GenerationContext:
        return cls(axis_count=axis_count)

    def warn(
        self,
        code: str,
        rule: str,
        message: str,
        path: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.diagnostics.append(
            Diagnostic(
                code=code,
                rule=rule,
                severity=Severity.WARN,
                message=message,
                location=SchemaLocation(path),
                details=details,
                upgradeable=True,
            )
        )


def same_members(a: list[JsonValue], b: list[JsonValue]) -> bool:
    return sorted(literal(v) for v in a) == sorted(literal(v) for v in b)


def _is_axis_pattern(value: JsonValue) -> bool:
    return isinstance(value, str) and value in AXIS_PATTERNS


def enumeration_union(values: list[JsonValue]) -> str:
    # AxisName stands in for both axis patterns, which appear next to
    # differing extra options and so cannot be a named enumeration.
    return union(
        unique(AXIS_NAME if _is_axis_pattern(v) else literal(v) for v in values)
    )


def resolve_enumeration(leaf: Leaf, context: GenerationContext) -> str:
    values = list(leaf.values or ())
    record = next(
        (
            context.enumerations[v]
            for v in values
            if isinstance(v, str) and v in context.enumerations
        ),
        None,
    )
    if record is not None:
        if record.values is None:
            record.values = values
            return record.name
        if same_members(record.values, values):
            return record.name
        context.warn(
            "ENUM_MISMATCH",
            "typegen.enum.mismatch",
            f"Enumeration differs from the first declaration of {record.name}; "
            "using an inline union",
            leaf.path,
            details={
                "name": record.name,
                "missing": sorted(
                    {literal(v) for v in record.values} - {literal(v) for v in values}
                ),
                "unexpected": sorted(
                    {literal(v) for v in values} - {literal(v) for v in record.values}
                ),
            },
        )
    return enumeration_union(values)


def resolve_flag_list(leaf: Leaf) -> str:
    # Some flag lists repeat a flag.
    flags = unique(leaf.flags)
    named = find_named_flag_list(flags)
    if named is None:
        return flag_list_union(flags, leaf.extras)
    return union([named, *(literal(extra) for extra in leaf.extras)])


def _resolve_leaf_type(leaf: Leaf, context: GenerationContext) -> str | None:
    kind = leaf.kind
    if kind is None:
        context.warn(
            "VALTYPE_UNRESOLVED",
            "typegen.valtype.unresolved",
            f"Could not generate a type for valType {literal(leaf.raw_val_type)}",
            leaf.path,
        )
        return None
    simple = SIMPLE_TYPES.get(kind)
    if simple is not None:
        return simple
    if kind is ValKind.STRING:
        if leaf.values is None:
            return "string"
        return union([*(literal(v) for v in leaf.values), "string"])
    if kind is ValKind.ENUMERATED:
        return resolve_enumeration(leaf, context)
    if kind is ValKind.FLAGLIST:
        return resolve_flag_list(leaf)
    if kind is ValKind.INFO_ARRAY:
        if leaf.tuple_items:
            # TODO: type tuple-form info_array items positionally instead of omitting the field.
            context.warn(
                "INFO_ARRAY_TUPLE_UNSUPPORTED",
                "typegen.valtype.info_array_tuple",
                "Tuple-form info_array items are not supported",
                leaf.path,
            )
            return None
        return ANY_ARRAY
    raise ValueError(f"unhandled value kind: {kind}")


def resolve_leaf(leaf: Leaf, context: GenerationContext) -> str | None:
    type_expr = _resolve_leaf_type(leaf, context)
    if type_expr is None:
        return None
    return one_or_many(type_expr) if leaf.array_ok else type_expr


def resolve_object(container: Container, context: GenerationContext) -> str:
    named = find_named_object_type(container.field_names)
    if named is not None:
        return named
    return object_literal(container.fields, context)


def _field_set(node: Node) -> frozenset[str]:
    if isinstance(node, Container):
        return node.field_names
    if isinstance(node, ItemArray):
        return frozenset(node.items)
    return frozenset()


def resolve_item_array(node: ItemArray, context: GenerationContext) -> str:
    if len(node.items) != 1:
        names = ", ".join(sorted(node.items)) or "none"
        raise GenerationAborted(
            f"cannot generate array type for {len(node.items)} item types ({names})",
            path=node.path,
        )
    item_name, item = next(iter(node.items.items()))
    if item_name == TRANSFORM_ITEM_NAME:
        return array_of(TRANSFORM_UNION)

    fields = _field_set(item)
    record = context.object_types.get(item_name)
    if record is None:
        record = ObjectTypeRecord(name=item_type_name(item_name), fields=fields)
        # Registered before recursing so a nested sighting refers back to it.
        context.object_types[item_name] = record
        record.type = resolve_node(item, context) or "any"
        return array_of(record.name)
    if record.fields == fields:
        return array_of(record.name)
    context.warn(
        "ITEM_TYPE_MISMATCH",
        "typegen.items.mismatch",
        f"Item type {item_name!r} differs from the first declaration of "
        f"{record.name}; using {ANY_ARRAY}",
        node.path,
        details={
            "name": record.name,
            "missing": sorted((record.fields or frozenset()) - fields),
            "unexpected": sorted(fields - (record.fields or frozenset())),
        },
    )
    return ANY_ARRAY


def resolve_node(node: Node, context: GenerationContext) -> str | None:
    if isinstance(node, ItemArray):
        return resolve_item_array(node, context)
    if isinstance(node, Container):
        return resolve_object(node, context)
    return resolve_leaf(node, context)


def render_field(name: str, node: Node, context: GenerationContext) -> str | None:
    """``name?: type;`` with its doc comment, or None when the type is unresolved."""
    type_expr = resolve_node(node, context)
    if type_expr is None:
        return None
    declaration = f"{property_name(name)}?: {type_expr};"
    doc = doc_comment(node.description, node.default)
    return f"{doc}\n{declaration}" if doc else declaration


def render_fields(
    fields: dict[str, Node],
    context: GenerationContext,
    omit: frozenset[str] = frozenset(),
) -> list[str]:
    rendered: list[str] = []
    for name, node in fields.items():
        if name in omit:
            continue
        field_text = render_field(name, node, context)
        if field_text is not None:
            rendered.append(field_text)
    return rendered


def object_literal(fields: dict[str, Node], context: GenerationContext) -> str:
    body = render_fields(fields, context)
    if not body:
        return "{}"
    return "{\n" + "\n".join(body) + "\n}"
