"""Example synthesis exports."""

from .document_context import DocumentContext, MarkupDocumentContext, normalize_anchor
from .example_synthesizer import select_example, synthesize_example
from .value_coercion import ConversionError, coerce_example

__all__ = [
    "ConversionError",
    "DocumentContext",
    "MarkupDocumentContext",
    "coerce_example",
    "normalize_anchor",
    "select_example",
    "synthesize_example",
]
