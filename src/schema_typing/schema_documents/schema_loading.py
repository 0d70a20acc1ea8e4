"""Schema document loading and schema node construction."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

import yaml

from .schema_models import SchemaDocument, SchemaNode

_SCHEMA_CONTAINERS = (("components", "schemas"), ("definitions",))


class SchemaError(Exception):
    """Raised for schema document loading or lookup failures."""


def load_schema_document(document_path: Path | str) -> SchemaDocument:
    """Parse a YAML or JSON OpenAPI/Swagger document."""
    path = Path(document_path)
    if not path.exists():
        raise SchemaError(f"Schema document not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SchemaError(f"Failed to read schema document {path}: {exc}") from exc
    return parse_schema_document(text, source_path=path)


def parse_schema_document(text: str, source_path: Path | None = None) -> SchemaDocument:
    """Parse document text; JSON is accepted since it is a subset of YAML."""
    try:
        root = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SchemaError(f"Invalid schema document: {exc}") from exc

    if not isinstance(root, Mapping):
        raise SchemaError("Schema document root must be a mapping.")
    return SchemaDocument(root=root, source_path=source_path)


def locate_schema(document: SchemaDocument, pointer: str) -> SchemaNode:
    """Return the schema node addressed by a JSON pointer or a bare schema name."""
    if pointer.startswith("#"):
        segments = _split_pointer(pointer)
        target = _follow_pointer(document.root, segments, pointer)
        name = segments[-1] if segments else None
        return build_schema_node(target, name=name)

    for container_path in _SCHEMA_CONTAINERS:
        container = _follow_optional(document.root, container_path)
        if isinstance(container, Mapping) and pointer in container:
            return build_schema_node(container[pointer], name=pointer)
    raise SchemaError(f"Schema '{pointer}' not found in components/schemas or definitions.")


def build_schema_node(raw: Any, name: str | None = None) -> SchemaNode:
    """Convert a raw schema mapping into an immutable schema node."""
    return _build_node(raw, name=name, active=set(), location=name or "(root)")


def _build_node(raw: Any, *, name: str | None, active: set[int], location: str) -> SchemaNode:
    if not isinstance(raw, Mapping):
        raise SchemaError(f"Schema at {location} must be a mapping.")
    if id(raw) in active:
        raise SchemaError(f"Inline schema cycle detected at {location}.")
    active.add(id(raw))
    try:
        return _node_from_mapping(raw, name=name, active=active, location=location)
    finally:
        active.discard(id(raw))


def _node_from_mapping(
    raw: Mapping[str, Any], *, name: str | None, active: set[int], location: str
) -> SchemaNode:
    items = raw.get("items")
    items_node = (
        _build_node(items, name=None, active=active, location=f"{location}.items")
        if items is not None
        else None
    )

    additional = raw.get("additionalProperties")
    additional_node: SchemaNode | bool | None
    if isinstance(additional, bool) or additional is None:
        additional_node = additional
    else:
        additional_node = _build_node(
            additional, name=None, active=active, location=f"{location}.additionalProperties"
        )

    properties = raw.get("properties")
    properties_nodes: dict[str, SchemaNode] | None = None
    if properties is not None:
        if not isinstance(properties, Mapping):
            raise SchemaError(f"Schema properties at {location} must be a mapping.")
        properties_nodes = {
            str(key): _build_node(value, name=str(key), active=active, location=f"{location}.{key}")
            for key, value in properties.items()
        }

    minimum, exclusive_minimum = _bound(raw, "minimum", "exclusiveMinimum", location)
    maximum, exclusive_maximum = _bound(raw, "maximum", "exclusiveMaximum", location)

    return SchemaNode(
        reference=_optional_text(raw.get("$ref")),
        type=_optional_text(raw.get("type")),
        name=name,
        title=_optional_text(raw.get("title")),
        description=_optional_text(raw.get("description")),
        format=_optional_text(raw.get("format")),
        enum=_enum_values(raw.get("enum"), location),
        items=items_node,
        additional_properties=additional_node,
        properties=properties_nodes,
        required=_required_names(raw.get("required")),
        minimum=minimum,
        maximum=maximum,
        exclusive_minimum=exclusive_minimum,
        exclusive_maximum=exclusive_maximum,
        min_length=_optional_int(raw.get("minLength"), "minLength", location),
        max_length=_optional_int(raw.get("maxLength"), "maxLength", location),
        pattern=_optional_text(raw.get("pattern")),
        default=raw.get("default"),
        example=raw.get("example"),
        read_only=raw.get("readOnly") if isinstance(raw.get("readOnly"), bool) else None,
    )


def _bound(
    raw: Mapping[str, Any], bound_key: str, exclusive_key: str, location: str
) -> tuple[Decimal | None, bool | None]:
    bound = _optional_decimal(raw.get(bound_key), bound_key, location)
    exclusive = raw.get(exclusive_key)
    if exclusive is None or isinstance(exclusive, bool):
        return bound, exclusive
    # OpenAPI 3.1 carries the exclusive bound itself instead of a flag.
    return _optional_decimal(exclusive, exclusive_key, location), True


def _optional_decimal(value: Any, field_name: str, location: str) -> Decimal | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise SchemaError(f"{field_name} at {location} must be a number.")
    try:
        return Decimal(str(value))
    except InvalidOperation as exc:
        raise SchemaError(f"{field_name} at {location} must be a number.") from exc


def _optional_int(value: Any, field_name: str, location: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise SchemaError(f"{field_name} at {location} must be an integer.")
    return value


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def _enum_values(value: Any, location: str) -> tuple[Any, ...] | None:
    if value is None:
        return None
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise SchemaError(f"enum at {location} must be a list.")
    return tuple(value)


def _required_names(value: Any) -> tuple[str, ...]:
    if isinstance(value, Sequence) and not isinstance(value, str):
        return tuple(str(item) for item in value)
    return ()


def _split_pointer(pointer: str) -> list[str]:
    body = pointer[1:].lstrip("/")
    if not body:
        return []
    return [segment.replace("~1", "/").replace("~0", "~") for segment in body.split("/")]


def _follow_pointer(root: Mapping[str, Any], segments: Sequence[str], pointer: str) -> Any:
    current: Any = root
    for segment in segments:
        if isinstance(current, Mapping) and segment in current:
            current = current[segment]
        elif isinstance(current, list) and segment.isdigit() and int(segment) < len(current):
            current = current[int(segment)]
        else:
            raise SchemaError(f"Schema pointer '{pointer}' does not resolve at '{segment}'.")
    return current


def _follow_optional(root: Mapping[str, Any], path: Sequence[str]) -> Any:
    current: Any = root
    for key in path:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
    return current
