"""Serialization of schema reports for terminal output."""

from __future__ import annotations

import datetime as dt
import json
from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any

import yaml

from .report_models import PropertyRow, SchemaReport

OUTPUT_FORMATS = ("yaml", "json")


def report_to_mapping(report: SchemaReport) -> dict[str, Any]:
    """Convert a report into plain YAML/JSON-safe data."""
    payload: dict[str, Any] = {
        "name": report.name,
        "type": report.display_type,
        "variant": report.variant,
        "example": _plain(report.example),
    }
    if report.example_error:
        payload["example_error"] = report.example_error
    if report.properties:
        payload["properties"] = [_row_to_mapping(row) for row in report.properties]
    return payload


def render_report(report: SchemaReport, output_format: str = "yaml") -> str:
    """Render a report as YAML or JSON text."""
    payload = report_to_mapping(report)
    if output_format == "json":
        return json.dumps(payload, indent=2, ensure_ascii=False)
    if output_format == "yaml":
        return yaml.safe_dump(payload, sort_keys=False, allow_unicode=True)
    raise ValueError(f"Unsupported output format: {output_format}")


def _row_to_mapping(row: PropertyRow) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "name": row.name,
        "type": row.display_type,
        "variant": row.variant,
        "required": row.required,
        "read_only": row.read_only,
    }
    if row.description:
        payload["description"] = row.description
    if row.default is not None:
        payload["default"] = _plain(row.default)
    if row.constraints:
        payload["constraints"] = _plain(row.constraints)
    payload["example"] = _plain(row.example)
    if row.example_error:
        payload["example_error"] = row.example_error
    return payload


def _plain(value: Any) -> Any:
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (dt.date, dt.datetime)):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {str(key): _plain(item) for key, item in value.items()}
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return [_plain(item) for item in value]
    return value
