"""Tests for the CLI module."""

from __future__ import annotations

import json
from pathlib import Path

from ocsf_to_proto import __version__
from ocsf_to_proto.cli import app
from typer.testing import CliRunner

runner = CliRunner()


class TestVersion:
    """Tests for version option."""

    def test_version_long(self) -> None:
        """Test --version flag."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_version_short(self) -> None:
        """Test -v flag."""
        result = runner.invoke(app, ["-v"])
        assert result.exit_code == 0
        assert __version__ in result.stdout


class TestNoArgs:
    """Tests for no arguments behavior."""

    def test_no_args_shows_help(self) -> None:
        """Test that no arguments shows help."""
        result = runner.invoke(app)
        assert "ocsf-to-proto" in result.output
        assert "generate" in result.output
        assert "validate" in result.output


class TestValidateCommand:
    """Tests for the validate command."""

    def test_validate_valid_file(self, schema_file: Path) -> None:
        result = runner.invoke(app, ["validate", str(schema_file)])
        assert result.exit_code == 0
        assert "is valid" in result.stdout

    def test_validate_quiet(self, schema_file: Path) -> None:
        result = runner.invoke(app, ["validate", "--quiet", str(schema_file)])
        assert result.exit_code == 0
        assert "is valid" not in result.stdout

    def test_validate_invalid_file(self, tmp_path: Path) -> None:
        schema_file = tmp_path / "schema.json"
        schema_file.write_text('{"classes": {"x": {"name": "x"}}}')

        result = runner.invoke(app, ["validate", str(schema_file)])
        assert result.exit_code == 1
        assert "Validation failed" in result.output

    def test_validate_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["validate", str(tmp_path / "missing.json")])
        assert result.exit_code != 0


class TestGenerateCommand:
    """Tests for the generate command."""

    def test_generate_all(self, schema_file: Path, tmp_path: Path) -> None:
        output = tmp_path / "out"
        result = runner.invoke(app, ["generate", str(schema_file), "-o", str(output)])

        assert result.exit_code == 0, result.output
        assert "Wrote 7 files" in result.stdout
        assert (output / "ocsf" / "events" / "system" / "system.proto").exists()
        assert (output / "ocsf" / "objects" / "objects.proto").exists()
        enum_map = json.loads((output / "enum-value-map.json").read_text())
        assert enum_map["PROCESS_ACTIVITY_ACTIVITY_ID_LAUNCH"] == {"name": "Launch", "value": 1}

    def test_generate_reports_warnings(self, schema_file: Path, tmp_path: Path) -> None:
        """Unresolved objects are warnings and do not fail the run."""
        result = runner.invoke(app, ["generate", str(schema_file), "-o", str(tmp_path / "out")])

        assert result.exit_code == 0
        assert "W002" in result.output

    def test_generate_selected_event(self, schema_file: Path, tmp_path: Path) -> None:
        output = tmp_path / "out"
        result = runner.invoke(
            app, ["generate", str(schema_file), "process_activity", "-o", str(output)]
        )

        assert result.exit_code == 0, result.output
        assert (output / "ocsf" / "events" / "system" / "system.proto").exists()
        assert not (output / "ocsf" / "events" / "network").exists()

    def test_generate_unknown_event(self, schema_file: Path, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["generate", str(schema_file), "dns_activity", "-o", str(tmp_path / "out")]
        )

        assert result.exit_code == 1
        assert "dns_activity" in result.output
        assert not (tmp_path / "out").exists()

    def test_generate_dry_run(self, schema_file: Path, tmp_path: Path) -> None:
        output = tmp_path / "out"
        result = runner.invoke(app, ["generate", str(schema_file), "-o", str(output), "--dry-run"])

        assert result.exit_code == 0
        assert "Would write 6 proto files" in result.stdout
        assert not output.exists()

    def test_generate_without_enum_map(self, schema_file: Path, tmp_path: Path) -> None:
        output = tmp_path / "out"
        result = runner.invoke(
            app, ["generate", str(schema_file), "-o", str(output), "--no-enum-map"]
        )

        assert result.exit_code == 0
        assert "Wrote 6 files" in result.stdout
        assert not (output / "enum-value-map.json").exists()

    def test_generate_with_config(self, schema_file: Path, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "root_package: acme\n"
            "golang_package_prefix: github.com/acme/proto/\n"
            "events: [network_activity]\n"
        )
        output = tmp_path / "out"

        result = runner.invoke(
            app, ["generate", str(schema_file), "-o", str(output), "-c", str(config_file)]
        )

        assert result.exit_code == 0, result.output
        content = (output / "acme" / "events" / "network" / "network.proto").read_text()
        assert "package acme.events.network;" in content
        assert 'option go_package = "github.com/acme/proto/acme/events/network";' in content
        assert not (output / "acme" / "events" / "system").exists()

    def test_option_overrides_config(self, schema_file: Path, tmp_path: Path) -> None:
        output = tmp_path / "out"
        result = runner.invoke(
            app,
            ["generate", str(schema_file), "-o", str(output), "--root-package", "sec"],
        )

        assert result.exit_code == 0, result.output
        assert (output / "sec" / "objects" / "objects.proto").exists()

    def test_invalid_root_package(self, schema_file: Path, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            ["generate", str(schema_file), "-o", str(tmp_path), "--root-package", "Bad-Name"],
        )

        assert result.exit_code == 1
        assert "Invalid option" in result.output

    def test_generate_table_format(self, schema_file: Path, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            ["generate", str(schema_file), "-o", str(tmp_path / "out"), "--format", "table"],
        )

        assert result.exit_code == 0
        assert "Generation Issues" in result.output

    def test_generate_invalid_schema(self, tmp_path: Path) -> None:
        schema_file = tmp_path / "schema.json"
        schema_file.write_text('{"classes": {"x": {"name": "x"}}}')

        result = runner.invoke(app, ["generate", str(schema_file), "-o", str(tmp_path / "out")])
        assert result.exit_code == 1
        assert "Invalid schema" in result.output


class TestInfoCommand:
    """Tests for the info command."""

    def test_info(self, schema_file: Path) -> None:
        result = runner.invoke(app, ["info", str(schema_file)])

        assert result.exit_code == 0
        assert "1.1.0" in result.stdout
        assert "Category: network" in result.stdout
        assert "Category: system" in result.stdout
