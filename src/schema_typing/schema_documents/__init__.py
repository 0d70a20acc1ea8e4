"""Schema document exports."""

from .schema_loading import (
    SchemaError,
    build_schema_node,
    load_schema_document,
    locate_schema,
    parse_schema_document,
)
from .schema_models import SchemaDocument, SchemaKind, SchemaNode

__all__ = [
    "SchemaDocument",
    "SchemaError",
    "SchemaKind",
    "SchemaNode",
    "build_schema_node",
    "load_schema_document",
    "locate_schema",
    "parse_schema_document",
]
