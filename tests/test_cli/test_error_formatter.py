"""Tests for diagnostic formatting."""

from io import StringIO

import pytest
from ocsf_to_proto.cli.error_formatter import ReportFormatter, ReportTable
from ocsf_to_proto.diagnostics import DiagnosticCodes, MappingReport
from rich.console import Console


@pytest.fixture
def string_console() -> Console:
    """Create a console that writes to a string."""
    return Console(file=StringIO(), width=120)


def _output(console: Console) -> str:
    return console.file.getvalue()  # type: ignore[attr-defined]


class TestReportFormatter:
    """Tests for ReportFormatter."""

    def test_empty_report(self, string_console: Console) -> None:
        ReportFormatter(string_console).format_report(MappingReport())
        assert "No issues" in _output(string_console)

    def test_warnings_only(self, string_console: Console) -> None:
        report = MappingReport()
        report.add_warning(
            DiagnosticCodes.W002_UNRESOLVED_OBJECT,
            "Object 'device' not found in schema",
            "network_activity.device",
        )

        ReportFormatter(string_console).format_report(report)
        output = _output(string_console)

        assert "Generation Warnings" in output
        assert "W002" in output
        assert "network_activity.device" in output

    def test_errors_shown(self, string_console: Console) -> None:
        report = MappingReport()
        report.add_error(DiagnosticCodes.E100_PROTO_WRITE_FAILED, "disk full", "ocsf/ocsf.proto")
        report.add_warning(DiagnosticCodes.W001_UNKNOWN_TYPE, "Unknown type", "e.q")

        ReportFormatter(string_console).format_report(report)
        output = _output(string_console)

        assert "Generation Failed" in output
        assert "E100" in output
        assert "W001" in output

    def test_max_issues_truncates(self, string_console: Console) -> None:
        report = MappingReport()
        for i in range(5):
            report.add_warning(DiagnosticCodes.W001_UNKNOWN_TYPE, f"Unknown type {i}", f"e.f{i}")

        ReportFormatter(string_console, max_issues=2).format_report(report)
        output = _output(string_console)

        assert "Unknown type 1" in output
        assert "Unknown type 2" not in output
        assert "and 3 more" in output


class TestReportTable:
    """Tests for ReportTable."""

    def test_table(self, string_console: Console) -> None:
        report = MappingReport()
        report.add_warning(DiagnosticCodes.W003_DUPLICATE_ENUM_LABEL, "dup label", "e.level")

        ReportTable(string_console).print_report(report)
        output = _output(string_console)

        assert "Generation Issues" in output
        assert "W003" in output
        assert "e.level" in output
