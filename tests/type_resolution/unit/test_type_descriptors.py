"""Type descriptor display tests."""

from __future__ import annotations

from schema_typing.example_synthesis import MarkupDocumentContext
from schema_typing.type_resolution import (
    ArrayType,
    BasicType,
    EnumType,
    MapType,
    ObjectType,
    RefType,
)

_CONTEXT = MarkupDocumentContext()


def test_basic_type_displays_format_in_parentheses() -> None:
    assert BasicType("integer", None, "int64").display_schema(_CONTEXT) == "integer (int64)"
    assert BasicType("boolean", None).display_schema(_CONTEXT) == "boolean"


def test_container_types_display_their_element_types() -> None:
    array_type = ArrayType(None, BasicType("string", None))
    map_type = MapType(None, ArrayType(None, ObjectType(None, None)))

    assert array_type.display_schema(_CONTEXT) == "< string > array"
    assert map_type.display_schema(_CONTEXT) == "< string, < object > array > map"


def test_enum_type_lists_values() -> None:
    enum_type = EnumType(None, ("available", "sold"))

    assert enum_type.display_schema(_CONTEXT) == "enum (available, sold)"


def test_ref_type_displays_cross_reference_to_its_location() -> None:
    local = RefType(None, ObjectType("Pet", None))
    remote = RefType("definitions.md", ObjectType("Pet", None))

    assert local.title == "Pet"
    assert local.display_schema(_CONTEXT) == "[Pet](#pet)"
    assert remote.display_schema(_CONTEXT) == "[Pet](definitions.md#pet)"
