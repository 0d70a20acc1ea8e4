"""Type resolution exports."""

from .reference_resolution import build_definition_document_resolver, resolve_locally
from .type_descriptors import (
    ArrayType,
    BasicType,
    EnumType,
    MapType,
    ObjectType,
    RefType,
    TypeDescriptor,
)
from .type_resolver import RefResolver, compute_simple_ref, resolve_type

__all__ = [
    "ArrayType",
    "BasicType",
    "EnumType",
    "MapType",
    "ObjectType",
    "RefType",
    "TypeDescriptor",
    "RefResolver",
    "build_definition_document_resolver",
    "compute_simple_ref",
    "resolve_locally",
    "resolve_type",
]
