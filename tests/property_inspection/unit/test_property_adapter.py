"""Property adapter tests."""

from __future__ import annotations

from decimal import Decimal

import pytest
from schema_typing.example_synthesis import MarkupDocumentContext
from schema_typing.property_inspection import PropertyAdapter
from schema_typing.schema_documents import SchemaNode, build_schema_node
from schema_typing.type_resolution import ObjectType, RefType


def test_adapter_rejects_missing_property() -> None:
    with pytest.raises(ValueError, match="must not be None"):
        PropertyAdapter(None)


def test_accessors_return_none_or_false_when_unset() -> None:
    adapter = PropertyAdapter(SchemaNode(type="string"))

    assert adapter.get_default_value() is None
    assert adapter.get_min_length() is None
    assert adapter.get_max_length() is None
    assert adapter.get_pattern() is None
    assert adapter.get_min() is None
    assert adapter.get_max() is None
    assert adapter.get_exclusive_min() is False
    assert adapter.get_exclusive_max() is False
    assert adapter.get_read_only() is False


def test_accessors_read_through_constraints() -> None:
    adapter = PropertyAdapter(
        build_schema_node(
            {
                "type": "number",
                "default": 1.5,
                "minLength": 2,
                "maxLength": 8,
                "pattern": "^[0-9.]+$",
                "minimum": 0.1,
                "exclusiveMinimum": True,
                "maximum": 100,
                "exclusiveMaximum": False,
                "readOnly": True,
            }
        )
    )

    assert adapter.get_default_value() == 1.5
    assert adapter.get_min_length() == 2
    assert adapter.get_max_length() == 8
    assert adapter.get_pattern() == "^[0-9.]+$"
    assert adapter.get_min() == Decimal("0.1")
    assert adapter.get_exclusive_min() is True
    assert adapter.get_max() == Decimal("100")
    assert adapter.get_exclusive_max() is False
    assert adapter.get_read_only() is True


def test_adapter_delegates_type_and_example_queries() -> None:
    adapter = PropertyAdapter(SchemaNode(reference="#/components/schemas/Pet"))
    context = MarkupDocumentContext()

    assert adapter.get_type(lambda name: "other-doc.md") == RefType(
        "other-doc.md", ObjectType("Pet", None)
    )
    assert adapter.get_example(True, context) == "[Pet](#pet)"
    assert adapter.get_example(False, context) is None
