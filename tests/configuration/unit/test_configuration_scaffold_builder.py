"""Configuration scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from schema_typing.configuration import RenderingSettings, load_configuration
from schema_typing.configuration.config_scaffold_builder import (
    build_placeholder_configuration,
    write_placeholder_configuration,
)


def test_build_placeholder_configuration_contains_all_supported_sections() -> None:
    scaffold = build_placeholder_configuration()

    assert "Rendering configuration" in scaffold
    assert "examples:" in scaffold
    assert "markup:" in scaffold
    assert "cross_references:" in scaffold
    assert "# markdown or asciidoc" in scaffold


def test_written_scaffold_loads_as_default_settings(tmp_path: Path) -> None:
    output_path = tmp_path / "schema-typing.yaml"

    written_path = write_placeholder_configuration(output_path)

    assert written_path == output_path.resolve()
    assert load_configuration(written_path) == RenderingSettings()


def test_write_placeholder_configuration_fails_when_file_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "schema-typing.yaml"
    output_path.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_configuration(output_path)
