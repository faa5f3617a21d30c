from __future__ import annotations

from plotly_typegen.application.emitter import DeclarationWriter
from plotly_typegen.application.type_inference import (
    AXIS_NAME,
    TRANSFORM_UNION,
    GenerationContext,
    enumeration_union,
    render_fields,
)
from plotly_typegen.domain.catalogs import DEFAULT_AXIS_COUNT, NAMED_FLAG_LISTS
from plotly_typegen.domain.diagnostics import Diagnostic, SchemaLocation, Severity
from plotly_typegen.domain.errors import GenerationAborted
from plotly_typegen.domain.naming import (
    axis_attribute_names,
    axis_ids,
    data_type_name,
    transform_type_name,
)
from plotly_typegen.domain.result import Result
from plotly_typegen.domain.schema import Container, Node, PlotSchema
from plotly_typegen.domain.typescript import (
    doc_comment,
    flag_list_union,
    literal,
    literal_union,
    union,
)
from plotly_typegen.ports.boilerplate import Boilerplate

X_AXIS_TYPE = "LayoutXAxis"
Y_AXIS_TYPE = "LayoutYAxis"
LAYOUT_TYPE = "Layout"

PRIMITIVE_ALIASES = "\n".join(
    [
        "export type OneOrMany<T> = T | T[];",
        "export type Datum = string | number | Date | null;",
        "export type TypedArray =",
        "    | Int8Array",
        "    | Uint8Array",
        "    | Int16Array",
        "    | Uint16Array",
        "    | Int32Array",
        "    | Uint32Array",
        "    | Uint8ClampedArray",
        "    | Float32Array",
        "    | Float64Array;",
        "",
    ]
)


def _write_preamble(writer: DeclarationWriter, boilerplate: Boilerplate) -> None:
    writer.write_block(boilerplate.header)
    writer.write(PRIMITIVE_ALIASES)
    writer.write_block(boilerplate.globals)


def _write_traces(
    writer: DeclarationWriter, schema: PlotSchema, context: GenerationContext
) -> None:
    writer.write_alias(
        "Data",
        union(data_type_name(trace.name) for trace in schema.traces),
        exported=True,
    )
    writer.write("")
    for trace in schema.traces:
        writer.write_interface(
            data_type_name(trace.name),
            render_fields(trace.fields, context),
            doc=doc_comment(trace.description),
            discriminant=literal(trace.type_name),
        )


def _write_flag_lists(writer: DeclarationWriter) -> None:
    for name, flags in NAMED_FLAG_LISTS.items():
        writer.write_alias(name, flag_list_union(list(flags)))
    writer.write("")


def _write_axis_name(writer: DeclarationWriter, context: GenerationContext) -> None:
    writer.write_alias(
        AXIS_NAME,
        literal_union(
            [*axis_ids("x", context.axis_count), *axis_ids("y", context.axis_count)]
        ),
        exported=True,
    )
    writer.write("")


def _axis_fields(layout: dict[str, Node], key: str) -> dict[str, Node]:
    axis = layout.get(key)
    if isinstance(axis, Container):
        return axis.fields
    return {}


def _write_layout(
    writer: DeclarationWriter, schema: PlotSchema, context: GenerationContext
) -> None:
    layout = schema.layout
    writer.write_interface(
        X_AXIS_TYPE, render_fields(_axis_fields(layout, "xaxis"), context)
    )
    writer.write_interface(
        Y_AXIS_TYPE, render_fields(_axis_fields(layout, "yaxis"), context)
    )

    fields = render_fields(layout, context, omit=frozenset({"xaxis", "yaxis"}))
    for letter, axis_type in (("x", X_AXIS_TYPE), ("y", Y_AXIS_TYPE)):
        if f"{letter}axis" not in layout:
            continue
        for axis in axis_attribute_names(letter, context.axis_count):
            fields.append(f"{axis}?: {axis_type};")
    writer.write_interface(LAYOUT_TYPE, fields)


def _write_transforms(
    writer: DeclarationWriter, schema: PlotSchema, context: GenerationContext
) -> None:
    writer.write_alias(
        TRANSFORM_UNION,
        union(transform_type_name(t.name) for t in schema.transforms),
        exported=True,
    )
    writer.write("")
    for transform in schema.transforms:
        writer.write_interface(
            transform_type_name(transform.name),
            render_fields(transform.fields, context),
            doc=doc_comment(transform.description),
            discriminant=literal(transform.name),
        )


def _write_inferred_types(writer: DeclarationWriter, context: GenerationContext) -> None:
    for record in context.enumerations.values():
        if record.values is not None:
            writer.write_alias(record.name, enumeration_union(record.values))
            writer.write("")
    for object_type in context.object_types.values():
        if object_type.type is not None:
            writer.write_alias(object_type.name, object_type.type)
            writer.write("")


def generate_declarations(
    schema: PlotSchema,
    *,
    boilerplate: Boilerplate | None = None,
    axis_count: int = DEFAULT_AXIS_COUNT,
) -> Result[str]:
    """Translate a loaded plot schema into TypeScript declaration text.

    The text is unformatted and byte-identical across runs for the same
    schema. Recoverable problems are reported as warnings; an item array
    with several item types aborts the run and yields no text.
    """
    static = boilerplate or Boilerplate()
    context = GenerationContext.fresh(axis_count)
    writer = DeclarationWriter()
    try:
        _write_preamble(writer, static)
        _write_traces(writer, schema, context)
        _write_flag_lists(writer)
        _write_axis_name(writer, context)
        _write_layout(writer, schema, context)
        _write_transforms(writer, schema, context)
        _write_inferred_types(writer, context)
        writer.write_block(static.events)
    except GenerationAborted as e:
        context.diagnostics.append(
            Diagnostic(
                code=e.code,
                rule="typegen.items.single_type",
                severity=Severity.ERROR,
                message=e.message,
                location=SchemaLocation(e.path),
                hint="An items container must declare exactly one item type.",
            )
        )
        return Result(diagnostics=context.diagnostics)
    return Result(value=writer.text(), diagnostics=context.diagnostics)
