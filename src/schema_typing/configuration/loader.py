"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    CrossReferenceSettings,
    ExampleSettings,
    MarkupLanguage,
    MarkupSettings,
    RenderingSettings,
)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str | None) -> RenderingSettings:
    """Load and validate the configuration file; `None` yields the defaults."""
    if config_path is None:
        return RenderingSettings()

    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return RenderingSettings(
        examples=_parse_examples_section(parsed.get("examples")),
        markup=_parse_markup_section(parsed.get("markup")),
        cross_references=_parse_cross_references_section(parsed.get("cross_references")),
    )


def _parse_examples_section(value: Any) -> ExampleSettings:
    section = _optional_mapping(value, "examples")
    return ExampleSettings(
        generate_missing=_optional_bool(
            section.get("generate_missing"), "examples.generate_missing", default=True
        ),
        coerce_string_examples=_optional_bool(
            section.get("coerce_string_examples"),
            "examples.coerce_string_examples",
            default=False,
        ),
    )


def _parse_markup_section(value: Any) -> MarkupSettings:
    section = _optional_mapping(value, "markup")
    language_raw = section.get("language", MarkupLanguage.MARKDOWN.value)
    if not isinstance(language_raw, str):
        raise ConfigurationError("markup.language must be a string.")
    try:
        language = MarkupLanguage(language_raw.strip().lower())
    except ValueError as exc:
        allowed = ", ".join(item.value for item in MarkupLanguage)
        raise ConfigurationError(
            f"markup.language '{language_raw}' is not supported (expected one of: {allowed})."
        ) from exc
    anchor_prefix = _optional_string(section.get("anchor_prefix"), "markup.anchor_prefix")
    return MarkupSettings(language=language, anchor_prefix=anchor_prefix)


def _parse_cross_references_section(value: Any) -> CrossReferenceSettings:
    section = _optional_mapping(value, "cross_references")
    definitions_document = _optional_string(
        section.get("definitions_document"), "cross_references.definitions_document"
    )
    return CrossReferenceSettings(
        inter_document=_optional_bool(
            section.get("inter_document"), "cross_references.inter_document", default=False
        ),
        prefix=_optional_string(section.get("prefix"), "cross_references.prefix"),
        separated_definitions=_optional_bool(
            section.get("separated_definitions"),
            "cross_references.separated_definitions",
            default=False,
        ),
        definitions_document=definitions_document or "definitions",
    )


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _optional_bool(value: Any, field_name: str, *, default: bool) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value


def _optional_string(value: Any, field_name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    return value.strip()
