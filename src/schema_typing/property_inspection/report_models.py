"""Schema report entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PropertyRow:  # pylint: disable=too-many-instance-attributes
    """One property of an object schema as a renderer would tabulate it."""

    name: str
    display_type: str
    variant: str
    required: bool
    read_only: bool
    default: Any
    constraints: Mapping[str, Any]
    example: Any
    description: str | None = None
    example_error: str | None = None


@dataclass(frozen=True)
class SchemaReport:
    """Type and example summary of one schema node."""

    name: str | None
    display_type: str
    variant: str
    example: Any
    properties: tuple[PropertyRow, ...] = ()
    example_error: str | None = None
