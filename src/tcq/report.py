# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Code quality report loading, merging and persistence."""

import json
import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from tcq.model import Issue, ReportEntry

logger = logging.getLogger(__name__)


class ReportError(RuntimeError):
    """Represent a fatal report operation failure."""


class ReportParseError(ReportError):
    """Represent an existing report that is not a JSON array of objects."""


class ReportIOError(ReportError):
    """Represent a report file that cannot be read or written."""


@dataclass(frozen=True)
class ReportSummary:
    """Represent the outcome of one report write.

    Attributes:
        output_path: Report file path.
        existing_count: Entries kept from the previous report.
        new_count: Issues added by this run.
        total_count: Entries in the written report.
    """

    output_path: Path
    existing_count: int
    new_count: int
    total_count: int


def merge_issues(
    existing: Sequence[ReportEntry], new: Sequence[Issue]
) -> list[ReportEntry]:
    """Append new issues after the entries of an existing report.

    Args:
        existing: Entries loaded from the previous report, in file order.
        new: Issues parsed in this run, in input order.

    Returns:
        Combined report entries.
    """
    return [*existing, *(issue.to_dict() for issue in new)]


def existing_fingerprints(entries: Sequence[ReportEntry]) -> list[str]:
    """Collect non-empty string fingerprints from report entries."""
    return [
        entry["fingerprint"]
        for entry in entries
        if isinstance(entry.get("fingerprint"), str) and entry["fingerprint"]
    ]


class JsonReportStore:
    """Persist issues to a JSON code quality report file."""

    def __init__(self, output_path: Path) -> None:
        """Initialize store.

        Args:
            output_path: Report file path; parent directories are created on
                write.
        """
        self._output_path = output_path

    @property
    def output_path(self) -> Path:
        return self._output_path

    def load(self) -> list[ReportEntry]:
        """Load entries of the existing report.

        Returns:
            Report entries, or an empty list when no report exists yet.

        Raises:
            ReportIOError: If the file exists but cannot be read.
            ReportParseError: If the content is not a JSON array of objects.
        """
        if not self._output_path.exists():
            return []
        try:
            raw = self._output_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning(
                f"Failed to read existing report (output_path={self._output_path} error={exc})"
            )
            raise ReportIOError(
                f"Cannot read existing report {self._output_path}: {exc}"
            ) from exc
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.warning(
                f"Existing report is not valid JSON (output_path={self._output_path} error={exc})"
            )
            raise ReportParseError(
                f"Existing report {self._output_path} is not valid JSON: {exc}"
            ) from exc
        if not isinstance(payload, list):
            logger.warning(
                f"Existing report is not a JSON array "
                f"(output_path={self._output_path} type={type(payload).__name__})"
            )
            raise ReportParseError(
                f"Existing report {self._output_path} is not a JSON array."
            )
        for index, entry in enumerate(payload):
            if not isinstance(entry, dict):
                logger.warning(
                    f"Existing report entry is not an object "
                    f"(output_path={self._output_path} index={index})"
                )
                raise ReportParseError(
                    f"Existing report {self._output_path} entry {index} is not an object."
                )
        return payload

    def persist(
        self, issues: Sequence[Issue], existing: Sequence[ReportEntry] | None = None
    ) -> ReportSummary:
        """Merge issues into the report and rewrite it.

        Args:
            issues: Issues parsed in this run.
            existing: Previously loaded entries; loaded from disk when omitted.

        Returns:
            Summary of the written report.

        Raises:
            ReportIOError: If directory creation or file writing fails.
            ReportParseError: If the existing report is malformed.
        """
        if existing is None:
            existing = self.load()
        entries = merge_issues(existing, issues)
        self._write(entries)
        logger.info(
            f"Code quality report written (output_path={self._output_path} "
            f"existing={len(existing)} new={len(issues)})"
        )
        return ReportSummary(
            output_path=self._output_path,
            existing_count=len(existing),
            new_count=len(issues),
            total_count=len(entries),
        )

    def _write(self, entries: list[ReportEntry]) -> None:
        """Replace the report file with ``entries`` in one step.

        Raises:
            ReportIOError: If directory creation or file writing fails.
        """
        directory = self._output_path.parent
        temp_name: str | None = None
        try:
            directory.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=directory,
                prefix=f".{self._output_path.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                temp_name = handle.name
                json.dump(entries, handle, indent=2)
            os.replace(temp_name, self._output_path)
        except OSError as exc:
            if temp_name is not None and os.path.exists(temp_name):
                os.unlink(temp_name)
            logger.warning(
                f"Failed to write report (output_path={self._output_path} error={exc})"
            )
            raise ReportIOError(
                f"Cannot write report {self._output_path}: {exc}"
            ) from exc
