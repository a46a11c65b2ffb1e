"""Diagnostics collected while mapping and writing a schema.

None of these abort a run: data-quality anomalies fall back to a documented
behaviour and output failures abandon only the affected artifact.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class DiagnosticSeverity(Enum):
    """Severity level for diagnostics."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class DiagnosticLocation:
    """Location in the schema (or output tree) an issue refers to."""

    path: str
    """Dotted path to the issue (e.g., 'process_activity.activity_id')."""

    def __str__(self) -> str:
        """Format location as string."""
        return self.path


@dataclass(frozen=True)
class Diagnostic:
    """A single diagnostic."""

    code: str
    """Unique code (e.g., 'W001', 'E100')."""

    message: str
    """Human-readable message."""

    severity: DiagnosticSeverity
    """Severity level."""

    location: DiagnosticLocation | None = None
    """Where the issue was found."""

    context: dict[str, Any] = field(default_factory=dict)
    """Additional context for debugging."""

    def __str__(self) -> str:
        """Format diagnostic as string."""
        parts = [f"[{self.code}]", self.severity.value.upper(), self.message]
        if self.location:
            parts.append(f"at {self.location}")
        return " ".join(parts)


@dataclass
class MappingReport:
    """All diagnostics of one run."""

    issues: list[Diagnostic] = field(default_factory=list)

    @property
    def errors(self) -> list[Diagnostic]:
        """Get only error-level issues."""
        return [i for i in self.issues if i.severity == DiagnosticSeverity.ERROR]

    @property
    def warnings(self) -> list[Diagnostic]:
        """Get only warning-level issues."""
        return [i for i in self.issues if i.severity == DiagnosticSeverity.WARNING]

    @property
    def is_clean(self) -> bool:
        """Check if there are no errors (warnings are OK)."""
        return len(self.errors) == 0

    def add(self, issue: Diagnostic) -> None:
        """Add an issue to the report."""
        self.issues.append(issue)

    def add_error(self, code: str, message: str, path: str, **context: Any) -> None:
        """Add an error issue."""
        self.add(
            Diagnostic(
                code=code,
                message=message,
                severity=DiagnosticSeverity.ERROR,
                location=DiagnosticLocation(path=path),
                context=context,
            )
        )

    def add_warning(self, code: str, message: str, path: str, **context: Any) -> None:
        """Add a warning issue."""
        self.add(
            Diagnostic(
                code=code,
                message=message,
                severity=DiagnosticSeverity.WARNING,
                location=DiagnosticLocation(path=path),
                context=context,
            )
        )

    def with_code(self, code: str) -> list[Diagnostic]:
        """Get issues with the given code."""
        return [i for i in self.issues if i.code == code]


class DiagnosticCodes:
    """Standard diagnostic codes."""

    # W0xx - Data-quality anomalies
    W001_UNKNOWN_TYPE = "W001"
    W002_UNRESOLVED_OBJECT = "W002"
    W003_DUPLICATE_ENUM_LABEL = "W003"
    W004_INVALID_ENUM_CODE = "W004"
    W005_EMPTY_NAME = "W005"
    W006_ENUM_NAME_COLLISION = "W006"
    W007_ENUM_WITHOUT_ZERO = "W007"

    # E1xx - Output failures
    E100_PROTO_WRITE_FAILED = "E100"
    E101_ENUM_MAP_FAILED = "E101"
