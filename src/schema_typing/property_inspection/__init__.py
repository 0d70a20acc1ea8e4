"""Property inspection exports."""

from .property_adapter import PropertyAdapter
from .property_report import describe_schema
from .report_models import PropertyRow, SchemaReport
from .report_rendering import OUTPUT_FORMATS, render_report, report_to_mapping

__all__ = [
    "OUTPUT_FORMATS",
    "PropertyAdapter",
    "PropertyRow",
    "SchemaReport",
    "describe_schema",
    "render_report",
    "report_to_mapping",
]
