"""Adapter exposing type, example and constraint queries for one schema node."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from schema_typing.example_synthesis.document_context import DocumentContext
from schema_typing.example_synthesis.example_synthesizer import select_example
from schema_typing.schema_documents.schema_models import SchemaNode
from schema_typing.type_resolution.type_descriptors import TypeDescriptor
from schema_typing.type_resolution.type_resolver import RefResolver, resolve_type


class PropertyAdapter:
    """Read-only view over a schema property."""

    def __init__(self, node: SchemaNode | None) -> None:
        if node is None:
            raise ValueError("property must not be None")
        self._node = node

    @property
    def node(self) -> SchemaNode:
        return self._node

    def get_type(self, ref_resolver: RefResolver) -> TypeDescriptor:
        """Return the type descriptor of the property."""
        return resolve_type(self._node, ref_resolver)

    def get_example(self, generate_missing: bool, document_context: DocumentContext) -> Any:
        """Return the property example, generating one when allowed and missing."""
        return select_example(self._node, generate_missing, document_context)

    def get_default_value(self) -> Any:
        return self._node.default

    def get_min_length(self) -> int | None:
        return self._node.min_length

    def get_max_length(self) -> int | None:
        return self._node.max_length

    def get_pattern(self) -> str | None:
        return self._node.pattern

    def get_min(self) -> Decimal | None:
        return self._node.minimum

    def get_max(self) -> Decimal | None:
        return self._node.maximum

    def get_exclusive_min(self) -> bool:
        return bool(self._node.exclusive_minimum)

    def get_exclusive_max(self) -> bool:
        return bool(self._node.exclusive_maximum)

    def get_read_only(self) -> bool:
        return self._node.read_only is True
