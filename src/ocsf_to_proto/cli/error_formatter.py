"""Diagnostic formatting with Rich."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from ocsf_to_proto.diagnostics import Diagnostic, MappingReport


class ReportFormatter:
    """Formats a mapping report for terminal display."""

    def __init__(self, console: Console | None = None, max_issues: int | None = None) -> None:
        """Initialize formatter.

        Args:
        ----
            console: Rich Console for output.
            max_issues: Print at most this many issues per severity.

        """
        self.console = console or Console(stderr=True)
        self.max_issues = max_issues

    def format_report(self, report: MappingReport) -> None:
        """Format and print a report."""
        if not report.issues:
            self.console.print("[green]✓ No issues[/green]")
            return

        error_count = len(report.errors)
        warning_count = len(report.warnings)

        self.console.print(self._build_summary(error_count, warning_count))
        self.console.print()

        self._print_issues(report.errors, "red")
        self._print_issues(report.warnings, "yellow")

    def _print_issues(self, issues: list[Diagnostic], color: str) -> None:
        shown = issues if self.max_issues is None else issues[: self.max_issues]
        for issue in shown:
            self._print_issue(issue, color)
        hidden = len(issues) - len(shown)
        if hidden > 0:
            self.console.print(f"  [dim]... and {hidden} more[/dim]")
            self.console.print()

    def _build_summary(self, errors: int, warnings: int) -> Panel:
        title = "Generation Failed" if errors > 0 else "Generation Warnings"
        style = "red" if errors > 0 else "yellow"

        content = Text()
        if errors > 0:
            content.append(f"Errors: {errors}", style="red bold")
        if warnings > 0:
            if errors > 0:
                content.append("  ")
            content.append(f"Warnings: {warnings}", style="yellow")

        return Panel(content, title=title, border_style=style)

    def _print_issue(self, issue: Diagnostic, color: str) -> None:
        severity = issue.severity.value.upper()
        self.console.print(
            f"[{color} bold]{severity}[/{color} bold] "
            f"[{color}]\\[{issue.code}][/{color}] "
            f"{issue.message}"
        )
        if issue.location:
            self.console.print(f"  [dim]at {issue.location}[/dim]")


class ReportTable:
    """Display diagnostics as a table."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(stderr=True)

    def print_report(self, report: MappingReport) -> None:
        """Print report as table."""
        table = Table(title="Generation Issues")

        table.add_column("Code", style="cyan", width=6)
        table.add_column("Severity", width=8)
        table.add_column("Location", style="dim")
        table.add_column("Message")

        for issue in report.issues:
            severity_style = "red" if issue.severity.value == "error" else "yellow"
            severity = f"[{severity_style}]{issue.severity.value.upper()}[/{severity_style}]"
            location = str(issue.location) if issue.location else "-"
            table.add_row(issue.code, severity, location, issue.message)

        self.console.print(table)
