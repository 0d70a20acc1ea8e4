"""Type resolution service classifying schema nodes into type descriptors."""

from __future__ import annotations

import logging
from collections.abc import Callable

from schema_typing.schema_documents.schema_models import SchemaKind, SchemaNode

from .type_descriptors import (
    ArrayType,
    BasicType,
    EnumType,
    MapType,
    ObjectType,
    RefType,
    TypeDescriptor,
)

RefResolver = Callable[[str], str | None]

_LOGGER = logging.getLogger("schema_typing.type_resolution")


def compute_simple_ref(reference: str) -> str:
    """Return the final path segment of a `$ref` pointer."""
    if "/" in reference:
        return reference.rsplit("/", 1)[1]
    if "#" in reference:
        return reference.rsplit("#", 1)[1] or reference
    return reference


def resolve_type(node: SchemaNode, ref_resolver: RefResolver) -> TypeDescriptor:
    """Classify `node` into exactly one type descriptor.

    References stop the recursion: the returned `RefType` only carries the
    simple name of its target and the location `ref_resolver` reports for it.
    Arrays and maps missing their item/value schema resolve to a nameless
    object placeholder instead of failing.
    """
    if node.reference is not None:
        simple_ref = compute_simple_ref(node.reference)
        return RefType(ref_resolver(simple_ref), ObjectType(simple_ref, None))

    kind = node.kind
    if kind is SchemaKind.ARRAY:
        if node.items is None:
            _LOGGER.debug("Array schema %s has no items; using object placeholder.", node.name)
            return ArrayType(node.title, ObjectType(None, None))
        return ArrayType(node.title, resolve_type(node.items, ref_resolver))

    if kind is SchemaKind.MAP:
        value_schema = node.value_schema
        if value_schema is None:
            _LOGGER.debug(
                "Map schema %s has no value schema; using object placeholder.", node.name
            )
            return MapType(node.title, ObjectType(None, None))
        return MapType(node.title, resolve_type(value_schema, ref_resolver))

    if kind is SchemaKind.STRING:
        if node.enum:
            return EnumType(node.title, tuple(str(value) for value in node.enum))
        if node.format and node.format.strip():
            return BasicType("string", node.title, node.format)
        return BasicType("string", node.title)

    if kind is SchemaKind.OBJECT:
        return ObjectType(node.title, node.properties)

    if node.format and node.format.strip():
        return BasicType(node.type, node.title, node.format)
    return BasicType(node.type, node.title)
