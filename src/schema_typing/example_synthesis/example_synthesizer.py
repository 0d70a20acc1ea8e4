"""Example lookup and placeholder example synthesis."""

from __future__ import annotations

import logging
from typing import Any

from schema_typing.schema_documents.schema_models import SchemaKind, SchemaNode
from schema_typing.type_resolution.type_resolver import compute_simple_ref

from .document_context import DocumentContext

_LOGGER = logging.getLogger("schema_typing.example_synthesis")

_MAP_EXAMPLE_KEY = "string"
_EMPTY_NODE = SchemaNode()


def select_example(
    node: SchemaNode, generate_missing: bool, document_context: DocumentContext
) -> Any:
    """Return the author-supplied example of `node`, or a generated one when allowed.

    An explicit example always wins and is returned untouched. Maps fall back to
    the example of their value schema before generating. Without
    `generate_missing` the result is `None` whenever the schema has no example.
    """
    if node.example is not None:
        return node.example

    kind = node.kind
    if kind is SchemaKind.MAP:
        value_schema = node.value_schema or _EMPTY_NODE
        if value_schema.example is not None:
            return value_schema.example
        if generate_missing:
            return {_MAP_EXAMPLE_KEY: synthesize_example(value_schema, document_context)}
        return None

    if kind is SchemaKind.ARRAY:
        if generate_missing:
            return [synthesize_example(node.items or _EMPTY_NODE, document_context)]
        return node.example

    if generate_missing:
        return synthesize_example(node, document_context)

    return node.example


def synthesize_example(node: SchemaNode, document_context: DocumentContext) -> Any:
    """Generate a canonical placeholder value for `node`; never raises."""
    if node.reference is not None:
        _LOGGER.debug("Synthesizing cross reference example for %s", node.reference)
        return document_context.cross_reference(compute_simple_ref(node.reference))

    if node.type == "integer":
        return 0
    if node.type == "number":
        return 0.0
    if node.type == "boolean":
        return True
    if node.type == "string":
        return "string"
    if node.type == "array":
        return [synthesize_example(node.items or _EMPTY_NODE, document_context)]
    return node.type
