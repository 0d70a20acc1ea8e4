"""Schema report builder combining type resolution and example synthesis."""

from __future__ import annotations

import logging
from typing import Any

from schema_typing.configuration.runtime_settings import RenderingSettings
from schema_typing.example_synthesis.document_context import DocumentContext
from schema_typing.example_synthesis.value_coercion import ConversionError, coerce_example
from schema_typing.schema_documents.schema_models import SchemaNode
from schema_typing.type_resolution.type_descriptors import ObjectType
from schema_typing.type_resolution.type_resolver import RefResolver

from .property_adapter import PropertyAdapter
from .report_models import PropertyRow, SchemaReport

_LOGGER = logging.getLogger("schema_typing.property_inspection")

_COERCIBLE_TYPES = ("integer", "number", "boolean")


def describe_schema(
    node: SchemaNode,
    settings: RenderingSettings,
    ref_resolver: RefResolver,
    document_context: DocumentContext,
) -> SchemaReport:
    """Build the report of `node`, with one row per property for object schemas."""
    adapter = PropertyAdapter(node)
    descriptor = adapter.get_type(ref_resolver)
    example, example_error = _example_for(adapter, settings, document_context)

    rows: tuple[PropertyRow, ...] = ()
    if isinstance(descriptor, ObjectType) and descriptor.properties:
        required = set(node.required)
        rows = tuple(
            _property_row(
                name,
                child,
                required=name in required,
                settings=settings,
                ref_resolver=ref_resolver,
                document_context=document_context,
            )
            for name, child in descriptor.properties.items()
        )

    return SchemaReport(
        name=node.name,
        display_type=descriptor.display_schema(document_context),
        variant=type(descriptor).__name__,
        example=example,
        properties=rows,
        example_error=example_error,
    )


def _property_row(
    name: str,
    node: SchemaNode,
    *,
    required: bool,
    settings: RenderingSettings,
    ref_resolver: RefResolver,
    document_context: DocumentContext,
) -> PropertyRow:
    adapter = PropertyAdapter(node)
    descriptor = adapter.get_type(ref_resolver)
    example, example_error = _example_for(adapter, settings, document_context)
    return PropertyRow(
        name=name,
        display_type=descriptor.display_schema(document_context),
        variant=type(descriptor).__name__,
        required=required,
        read_only=adapter.get_read_only(),
        default=adapter.get_default_value(),
        constraints=_constraints(adapter),
        example=example,
        description=node.description,
        example_error=example_error,
    )


def _example_for(
    adapter: PropertyAdapter, settings: RenderingSettings, document_context: DocumentContext
) -> tuple[Any, str | None]:
    example = adapter.get_example(settings.examples.generate_missing, document_context)
    node_type = adapter.node.type
    if not (
        settings.examples.coerce_string_examples
        and isinstance(example, str)
        and node_type in _COERCIBLE_TYPES
    ):
        return example, None
    try:
        return coerce_example(example, node_type), None
    except ConversionError as exc:
        _LOGGER.warning("Skipping example of %s: %s", adapter.node.name or "schema", exc)
        return None, str(exc)


def _constraints(adapter: PropertyAdapter) -> dict[str, Any]:
    constraints: dict[str, Any] = {}
    if adapter.get_min_length() is not None:
        constraints["min_length"] = adapter.get_min_length()
    if adapter.get_max_length() is not None:
        constraints["max_length"] = adapter.get_max_length()
    if adapter.get_pattern() is not None:
        constraints["pattern"] = adapter.get_pattern()
    minimum = adapter.get_min()
    if minimum is not None:
        constraints["minimum"] = minimum
        constraints["exclusive_minimum"] = adapter.get_exclusive_min()
    maximum = adapter.get_max()
    if maximum is not None:
        constraints["maximum"] = maximum
        constraints["exclusive_maximum"] = adapter.get_exclusive_max()
    return constraints
