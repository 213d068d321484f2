# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Domain models for code quality report issues."""

from dataclasses import dataclass
from typing import Any, Literal

Severity = Literal["info", "minor", "major", "critical", "blocker"]

ReportEntry = dict[str, Any]

ISSUE_TYPE = "issue"
DEFAULT_CATEGORIES: tuple[str, ...] = ("Bug Risk",)
DEFAULT_SEVERITY: Severity = "major"
UNKNOWN_PATH = "unknown"


@dataclass(frozen=True)
class LineSpan:
    """Represent the source span of one issue.

    Attributes:
        begin: Start line in source (1-based, ``0`` when unknown).
        column: Start column in source (1-based, ``0`` when unknown).
        end: End line in source; equals ``begin`` for compiler diagnostics.
    """

    begin: int
    column: int
    end: int


@dataclass(frozen=True)
class IssueLocation:
    """Represent where an issue was reported."""

    path: str
    lines: LineSpan


@dataclass(frozen=True)
class Issue:
    """Represent one code quality issue parsed from compiler output.

    Attributes:
        check_name: Compiler error code, e.g. ``TS2322``.
        description: Human-readable diagnostic message.
        fingerprint: Identifier unique among all persisted issues.
        location: File path and line span of the diagnostic.
        categories: Code Climate categories.
        severity: Code Climate severity level.
        type: Code Climate entry type.
    """

    check_name: str
    description: str
    fingerprint: str
    location: IssueLocation
    categories: tuple[str, ...] = DEFAULT_CATEGORIES
    severity: Severity = DEFAULT_SEVERITY
    type: str = ISSUE_TYPE

    def to_dict(self) -> ReportEntry:
        """Render the issue in the on-disk report shape.

        Returns:
            JSON-serializable mapping.
        """
        return {
            "type": self.type,
            "categories": list(self.categories),
            "check_name": self.check_name,
            "description": self.description,
            "severity": self.severity,
            "fingerprint": self.fingerprint,
            "location": {
                "path": self.location.path,
                "lines": {
                    "begin": self.location.lines.begin,
                    "column": self.location.lines.column,
                    "end": self.location.lines.end,
                },
            },
        }
