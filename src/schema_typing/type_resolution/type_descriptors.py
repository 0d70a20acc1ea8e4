"""Type descriptor entities produced by the type resolver."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from schema_typing.example_synthesis.document_context import DocumentContext
    from schema_typing.schema_documents.schema_models import SchemaNode


@dataclass(frozen=True)
class BasicType:
    """Primitive scalar type."""

    name: str | None
    title: str | None = None
    format: str | None = None

    def display_schema(self, document_context: DocumentContext) -> str:
        name = self.name or ""
        if self.format:
            return f"{name} ({self.format})"
        return name


@dataclass(frozen=True)
class ArrayType:
    """Homogeneous sequence of `item_type`."""

    title: str | None
    item_type: TypeDescriptor

    def display_schema(self, document_context: DocumentContext) -> str:
        return f"< {self.item_type.display_schema(document_context)} > array"


@dataclass(frozen=True)
class MapType:
    """String-keyed dictionary of `value_type`."""

    title: str | None
    value_type: TypeDescriptor

    def display_schema(self, document_context: DocumentContext) -> str:
        return f"< string, {self.value_type.display_schema(document_context)} > map"


@dataclass(frozen=True)
class EnumType:
    """Closed set of string literals."""

    title: str | None
    values: tuple[str, ...]

    def display_schema(self, document_context: DocumentContext) -> str:
        return f"enum ({', '.join(self.values)})"


@dataclass(frozen=True)
class ObjectType:
    """Structured record; `properties` are raw schema nodes, not resolved types."""

    title: str | None
    properties: Mapping[str, SchemaNode] | None = None

    def display_schema(self, document_context: DocumentContext) -> str:
        return self.title or "object"


@dataclass(frozen=True)
class RefType:
    """Reference to a named schema, possibly living in another document."""

    location: str | None
    ref_type: ObjectType

    @property
    def title(self) -> str | None:
        return self.ref_type.title

    def display_schema(self, document_context: DocumentContext) -> str:
        name = self.ref_type.title or ""
        return document_context.cross_reference(name, document=self.location)


TypeDescriptor = BasicType | ArrayType | MapType | EnumType | ObjectType | RefType
