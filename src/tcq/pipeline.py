# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Conversion of a compiler output stream into a code quality report."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TextIO

from tcq.fingerprint import FingerprintRegistry
from tcq.model import Issue, ReportEntry
from tcq.parser import DiagnosticParser
from tcq.report import (
    JsonReportStore,
    ReportError,
    ReportSummary,
    existing_fingerprints,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    """Represent the outcome of one conversion run.

    Attributes:
        issues: Issues parsed from the input stream, in input order.
        line_count: Number of input lines read.
        summary: Written report summary; ``None`` when nothing was written.
        error: Fatal report failure; ``None`` on success.
    """

    issues: list[Issue]
    line_count: int
    summary: ReportSummary | None = None
    error: ReportError | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


def convert_stream(
    lines: Iterable[str],
    store: JsonReportStore,
    echo: TextIO | None = None,
) -> ConversionResult:
    """Parse compiler output and merge the issues into the report.

    Fingerprints already present in the existing report are registered before
    parsing so new fingerprints never repeat them. The whole input is consumed
    even when the existing report cannot be loaded.

    Args:
        lines: Compiler output lines.
        store: Report store to merge into.
        echo: Optional stream receiving every input line unchanged.

    Returns:
        Conversion result carrying either a report summary or an error.
    """
    registry = FingerprintRegistry()
    existing: list[ReportEntry] = []
    load_error: ReportError | None = None
    try:
        existing = store.load()
    except ReportError as exc:
        load_error = exc
    else:
        seeded = registry.seed(existing_fingerprints(existing))
        logger.debug(
            f"Existing report loaded (output_path={store.output_path} "
            f"entries={len(existing)} fingerprints={seeded})"
        )

    parser = DiagnosticParser(registry=registry)
    line_count = 0
    for line in lines:
        line_count += 1
        if echo is not None:
            echo.write(line if line.endswith("\n") else f"{line}\n")
        parser.parse(line)
    issues = parser.issues
    logger.info(f"Compiler output parsed (lines={line_count} issues={len(issues)})")

    if load_error is not None:
        return ConversionResult(issues=issues, line_count=line_count, error=load_error)
    try:
        summary = store.persist(issues, existing=existing)
    except ReportError as exc:
        return ConversionResult(issues=issues, line_count=line_count, error=exc)
    return ConversionResult(issues=issues, line_count=line_count, summary=summary)
