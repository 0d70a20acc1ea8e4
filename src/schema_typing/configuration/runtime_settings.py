"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class MarkupLanguage(str, Enum):
    """Markup language the type display strings and cross references target."""

    MARKDOWN = "markdown"
    ASCIIDOC = "asciidoc"

    @property
    def file_extension(self) -> str:
        return ".adoc" if self is MarkupLanguage.ASCIIDOC else ".md"


@dataclass(frozen=True)
class ExampleSettings:
    """Example generation switches."""

    generate_missing: bool = True
    coerce_string_examples: bool = False


@dataclass(frozen=True)
class MarkupSettings:
    """Markup rendering settings for cross references."""

    language: MarkupLanguage = MarkupLanguage.MARKDOWN
    anchor_prefix: str = ""


@dataclass(frozen=True)
class CrossReferenceSettings:
    """Inter-document cross reference configuration."""

    inter_document: bool = False
    prefix: str = ""
    separated_definitions: bool = False
    definitions_document: str = "definitions"


@dataclass(frozen=True)
class RenderingSettings:
    """Top-level configuration aggregate."""

    examples: ExampleSettings = field(default_factory=ExampleSettings)
    markup: MarkupSettings = field(default_factory=MarkupSettings)
    cross_references: CrossReferenceSettings = field(default_factory=CrossReferenceSettings)
