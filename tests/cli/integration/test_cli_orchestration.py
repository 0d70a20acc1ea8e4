"""CLI orchestration integration tests."""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from click.testing import CliRunner
from schema_typing.cli import cli


def _sample(name: str) -> Path:
    return Path(__file__).resolve().parents[3] / "samples" / name


def test_describe_command_prints_yaml_report() -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli, ["describe", "--document", str(_sample("petstore-openapi.yaml")), "--schema", "Pet"]
    )

    assert result.exit_code == 0
    report = yaml.safe_load(result.output)
    assert report["name"] == "Pet"
    assert report["variant"] == "ObjectType"
    rows = {row["name"]: row for row in report["properties"]}
    assert rows["tags"]["example"] == ["[Tag](#tag)"]
    assert rows["attributes"]["example"] == {"string": True}
    assert rows["weight"]["constraints"]["minimum"] == "0.5"


def test_describe_command_prints_json_without_generated_examples() -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli,
        [
            "describe",
            "--document",
            str(_sample("petstore-swagger.json")),
            "--schema",
            "#/definitions/Category",
            "--format",
            "json",
            "--no-generate-missing",
        ],
    )

    assert result.exit_code == 0
    report = json.loads(result.output)
    assert report["example"] is None
    assert all(row["example"] is None for row in report["properties"])
    assert [row["type"] for row in report["properties"]] == [
        "integer (int64)",
        "string",
        "[Category](#category)",
        "< object > array",
    ]


def test_describe_command_applies_configuration(tmp_path: Path) -> None:
    config_path = tmp_path / "schema-typing.yaml"
    config_path.write_text(
        """
examples:
  coerce_string_examples: true
markup:
  language: asciidoc
cross_references:
  inter_document: true
""",
        encoding="utf-8",
    )
    runner = CliRunner()

    result = runner.invoke(
        cli,
        [
            "describe",
            "--document",
            str(_sample("petstore-openapi.yaml")),
            "--schema",
            "Pet",
            "--config",
            str(config_path),
        ],
    )

    assert result.exit_code == 0
    rows = {row["name"]: row for row in yaml.safe_load(result.output)["properties"]}
    assert rows["age"]["example"] == 4
    assert rows["tags"]["type"] == "< <<definitions.adoc#_tag,Tag>> > array"


def test_describe_command_fails_for_unknown_schema() -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli,
        ["describe", "--document", str(_sample("petstore-openapi.yaml")), "--schema", "Unicorn"],
    )

    assert result.exit_code != 0
    assert "not found" in str(result.exception)


def test_generate_config_command_writes_file_with_default_name(tmp_path: Path) -> None:
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=str(tmp_path)):
        result = runner.invoke(cli, ["generate-config"])
        output_path = Path("schema-typing.yaml").resolve()

        assert result.exit_code == 0
        assert output_path.exists()
        content = output_path.read_text(encoding="utf-8")
        assert "examples:" in content
        assert "cross_references:" in content
        assert str(output_path) in result.output


def test_generate_config_command_fails_when_output_file_already_exists(tmp_path: Path) -> None:
    runner = CliRunner()
    output_path = tmp_path / "schema-typing.yaml"
    output_path.write_text("already-there", encoding="utf-8")

    result = runner.invoke(cli, ["generate-config", "--output", str(output_path)])

    assert result.exit_code != 0
    assert "already exists" in str(result.exception).lower()
    assert output_path.read_text(encoding="utf-8") == "already-there"
