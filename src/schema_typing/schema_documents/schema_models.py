"""Schema document entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Any


class SchemaKind(str, Enum):
    """Structural kind of a schema node."""

    REFERENCE = "reference"
    ARRAY = "array"
    MAP = "map"
    STRING = "string"
    OBJECT = "object"
    PRIMITIVE = "primitive"


@dataclass(frozen=True)
class SchemaNode:  # pylint: disable=too-many-instance-attributes
    """Immutable OpenAPI/Swagger schema object."""

    reference: str | None = None
    type: str | None = None
    name: str | None = None
    title: str | None = None
    description: str | None = None
    format: str | None = None
    enum: tuple[Any, ...] | None = None
    items: SchemaNode | None = None
    additional_properties: SchemaNode | bool | None = None
    properties: Mapping[str, SchemaNode] | None = None
    required: tuple[str, ...] = ()
    minimum: Decimal | None = None
    maximum: Decimal | None = None
    exclusive_minimum: bool | None = None
    exclusive_maximum: bool | None = None
    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None
    default: Any = None
    example: Any = None
    read_only: bool | None = None

    @property
    def kind(self) -> SchemaKind:
        """Classify the node; earlier checks win when several shapes match."""
        if self.reference is not None:
            return SchemaKind.REFERENCE
        if self.type == "array":
            return SchemaKind.ARRAY
        if self.type in (None, "object") and self.is_map:
            return SchemaKind.MAP
        if self.type == "string":
            return SchemaKind.STRING
        if self.type == "object":
            return SchemaKind.OBJECT
        return SchemaKind.PRIMITIVE

    @property
    def is_map(self) -> bool:
        return self.additional_properties is not None and self.additional_properties is not False

    @property
    def value_schema(self) -> SchemaNode | None:
        """Return the additional-properties schema, or None for a bare `true`."""
        if isinstance(self.additional_properties, SchemaNode):
            return self.additional_properties
        return None


@dataclass(frozen=True)
class SchemaDocument:
    """Parsed OpenAPI or Swagger document."""

    root: Mapping[str, Any]
    source_path: Path | None = None

    @property
    def spec_version(self) -> str:
        if "openapi" in self.root:
            return str(self.root["openapi"])
        if "swagger" in self.root:
            return str(self.root["swagger"])
        return "unknown"
