"""Coercion of textual example values into typed values."""

from __future__ import annotations

import re
from typing import Any

_INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")


class ConversionError(Exception):
    """Raised when an example string cannot be converted to its declared type."""

    def __init__(self, value: str, type_name: str) -> None:
        super().__init__(f"Value '{value}' cannot be converted to '{type_name}'")
        self.value = value
        self.type_name = type_name


def coerce_example(value: str | None, type_name: str | None) -> Any:
    """Convert `value` to the schema primitive `type_name`.

    Strings and unknown types pass through unchanged. Integers must be plain
    signed digit runs; numbers tolerate surrounding whitespace but not digit
    separators. Booleans follow the literal rule: only a case-insensitive
    ``"true"`` is truthy, padding included.

    Raises:
      ConversionError: If an integer or number literal cannot be parsed.
    """
    if value is None:
        return None

    if type_name == "integer":
        if not _INTEGER_LITERAL.fullmatch(value):
            raise ConversionError(value, type_name)
        return int(value)
    if type_name == "number":
        if "_" in value:
            raise ConversionError(value, type_name)
        try:
            return float(value)
        except ValueError as exc:
            raise ConversionError(value, type_name) from exc

    if type_name == "boolean":
        return value.lower() == "true"
    return value
