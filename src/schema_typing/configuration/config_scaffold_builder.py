"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "schema-typing.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Rendering configuration for schema-typing.
# Every key is optional; the values below are the defaults.

examples:
  # Synthesize a placeholder example when the schema has none.
  generate_missing: true
  # Coerce string examples of integer/number/boolean properties to typed values.
  coerce_string_examples: false

markup:
  # markdown or asciidoc; controls cross reference syntax and file extensions.
  language: markdown
  # Prepended to every schema anchor.
  anchor_prefix: ""

cross_references:
  # Point references at another document instead of a local anchor.
  inter_document: false
  # Prepended to the referenced document location.
  prefix: ""
  # One document per definition (definitions/<Name>.md) instead of a single one.
  separated_definitions: false
  # Name of the single definitions document, without extension.
  definitions_document: definitions
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with defaults and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
