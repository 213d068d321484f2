# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Public import surface for TypeScript code quality conversion."""

from tcq.config import Settings
from tcq.fingerprint import FingerprintRegistry, create_fingerprint
from tcq.model import Issue, IssueLocation, LineSpan
from tcq.parser import DiagnosticParser
from tcq.pipeline import ConversionResult, convert_stream
from tcq.report import (
    JsonReportStore,
    ReportError,
    ReportIOError,
    ReportParseError,
    ReportSummary,
    merge_issues,
)

__all__ = [
    "ConversionResult",
    "DiagnosticParser",
    "FingerprintRegistry",
    "Issue",
    "IssueLocation",
    "JsonReportStore",
    "LineSpan",
    "ReportError",
    "ReportIOError",
    "ReportParseError",
    "ReportSummary",
    "Settings",
    "convert_stream",
    "create_fingerprint",
    "merge_issues",
]
