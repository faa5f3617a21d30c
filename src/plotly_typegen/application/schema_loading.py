from __future__ import annotations

import json
from pathlib import Path

import jsonschema

from plotly_typegen.domain.diagnostics import (
    Diagnostic,
    SchemaLocation,
    Severity,
    has_errors,
)
from plotly_typegen.domain.json_types import (
    JsonDict,
    JsonValue,
    as_json_dict,
    as_json_list,
    as_str_list,
)
from plotly_typegen.domain.result import Result
from plotly_typegen.domain.schema import (
    Container,
    ItemArray,
    Leaf,
    Node,
    PlotSchema,
    TraceDefinition,
    TransformDefinition,
    ValKind,
)

VAL_TYPE_KEY = "valType"
TYPE_KEY = "type"
OBJECT_ROLE = "object"


def contract_path() -> Path:
    return Path(__file__).resolve().parents[1] / "contracts" / "plot-schema.v1.json"


def unwrap_envelope(raw: JsonDict) -> tuple[JsonDict, str | None]:
    """Accept both a bare schema and the ``{sha1, modified, schema}`` API response."""
    inner = raw.get("schema")
    if isinstance(inner, dict):
        sha1 = raw.get("sha1")
        return as_json_dict(inner), sha1 if isinstance(sha1, str) else None
    return raw, None


def validate_document_shape(document: JsonDict) -> list[Diagnostic]:
    contract = as_json_dict(json.loads(contract_path().read_text(encoding="utf-8")))
    try:
        jsonschema.validate(document, contract)
        return []
    except jsonschema.ValidationError as e:
        path = ".".join(str(part) for part in e.absolute_path)
        return [
            Diagnostic(
                code="SCHEMA_INVALID",
                rule="schema.shape",
                severity=Severity.ERROR,
                message=e.message,
                location=SchemaLocation(path) if path else None,
            )
        ]


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


class NodeBuilder:
    def __init__(self, meta_keys: list[str]) -> None:
        self.excluded_keys = frozenset([*meta_keys, VAL_TYPE_KEY])
        self.diagnostics: list[Diagnostic] = []

    def _unexpected(self, path: str, value: JsonValue) -> None:
        self.diagnostics.append(
            Diagnostic(
                code="SCHEMA_UNEXPECTED_VALUE",
                rule="schema.node",
                severity=Severity.WARN,
                message=f"Expected an attribute object, got {type(value).__name__}",
                location=SchemaLocation(path),
            )
        )

    def build_fields(
        self, raw: JsonDict, path: str, omit: frozenset[str] = frozenset()
    ) -> dict[str, Node]:
        fields: dict[str, Node] = {}
        for key, value in raw.items():
            if key in self.excluded_keys or key in omit:
                continue
            child_path = _join(path, key)
            if not isinstance(value, dict):
                self._unexpected(child_path, value)
                continue
            fields[key] = self.build_node(as_json_dict(value), child_path)
        return fields

    def build_node(self, raw: JsonDict, path: str) -> Node:
        if raw.get("role") == OBJECT_ROLE:
            return self.build_object(raw, path)
        return self.build_leaf(raw, path)

    def build_object(self, raw: JsonDict, path: str) -> Container | ItemArray:
        description = str(raw.get("description") or "")
        default = raw.get("dflt")
        if "items" in raw:
            items: dict[str, Node] = {}
            items_path = _join(path, "items")
            for name, item in as_json_dict(raw.get("items")).items():
                item_path = _join(items_path, name)
                if not isinstance(item, dict):
                    self._unexpected(item_path, item)
                    continue
                item_raw = as_json_dict(item)
                # Item definitions are objects even when they omit the role.
                if VAL_TYPE_KEY in item_raw:
                    items[name] = self.build_node(item_raw, item_path)
                else:
                    items[name] = self.build_object(item_raw, item_path)
            return ItemArray(
                path=path, items=items, description=description, default=default
            )
        return Container(
            path=path,
            fields=self.build_fields(raw, path),
            description=description,
            default=default,
            extra_keys=tuple(
                key
                for key, value in raw.items()
                if key not in self.excluded_keys and not isinstance(value, dict)
            ),
        )

    def build_leaf(self, raw: JsonDict, path: str) -> Leaf:
        raw_values = raw.get("values")
        return Leaf(
            path=path,
            kind=ValKind.parse(raw.get(VAL_TYPE_KEY)),
            raw_val_type=raw.get(VAL_TYPE_KEY),
            description=str(raw.get("description") or ""),
            default=raw.get("dflt"),
            array_ok=bool(raw.get("arrayOk")),
            values=tuple(raw_values) if isinstance(raw_values, list) else None,
            flags=tuple(as_str_list(raw.get("flags"))),
            extras=tuple(as_json_list(raw.get("extras"))),
            tuple_items=isinstance(raw.get("items"), list),
        )


def _meta_description(definition: JsonDict) -> str:
    meta = as_json_dict(definition.get("meta"))
    return str(meta.get("description") or "")


def build_plot_schema(document: JsonDict, sha1: str | None = None) -> Result[PlotSchema]:
    defs = as_json_dict(document.get("defs"))
    meta_keys = as_str_list(defs.get("metaKeys"))
    builder = NodeBuilder(meta_keys)
    omit_type = frozenset({TYPE_KEY})

    traces: list[TraceDefinition] = []
    for name, raw_trace in as_json_dict(document.get("traces")).items():
        trace = as_json_dict(raw_trace)
        attributes = as_json_dict(trace.get("attributes"))
        declared_type = attributes.get(TYPE_KEY)
        traces.append(
            TraceDefinition(
                name=name,
                type_name=declared_type if isinstance(declared_type, str) else name,
                description=_meta_description(trace),
                fields=builder.build_fields(
                    attributes, _join("traces", name), omit=omit_type
                ),
            )
        )

    layout_raw = as_json_dict(
        as_json_dict(document.get("layout")).get("layoutAttributes")
    )
    layout = builder.build_fields(layout_raw, "layout")

    transforms: list[TransformDefinition] = []
    for name, raw_transform in as_json_dict(document.get("transforms")).items():
        transform = as_json_dict(raw_transform)
        transforms.append(
            TransformDefinition(
                name=name,
                description=_meta_description(transform),
                fields=builder.build_fields(
                    as_json_dict(transform.get("attributes")),
                    _join("transforms", name),
                    omit=omit_type,
                ),
            )
        )

    schema = PlotSchema(
        traces=traces,
        layout=layout,
        transforms=transforms,
        meta_keys=tuple(meta_keys),
        sha1=sha1,
    )
    return Result(value=schema, diagnostics=builder.diagnostics)


def load_plot_schema(raw: object) -> Result[PlotSchema]:
    document, sha1 = unwrap_envelope(as_json_dict(raw))
    diagnostics = validate_document_shape(document)
    if has_errors(diagnostics):
        return Result(diagnostics=diagnostics)
    return build_plot_schema(document, sha1)
