# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Parse TypeScript compiler diagnostics into code quality issues.

Only the default (non ``--pretty``) ``tsc`` output format is recognized. Lines
that match neither pattern are not diagnostics and are skipped.
"""

import logging
import re
from collections.abc import Iterable

from tcq.fingerprint import FingerprintRegistry, create_fingerprint
from tcq.model import Issue, IssueLocation, LineSpan, UNKNOWN_PATH

logger = logging.getLogger(__name__)

FILE_ERROR_PATTERN = re.compile(
    r"^(?P<file>.+?)\((?P<line>[0-9]+),(?P<col>[0-9]+)\): "
    r"error (?P<code>\S+?): (?P<message>.+)$"
)
GLOBAL_ERROR_PATTERN = re.compile(r"error (?P<code>\S+?): (?P<message>.+)$")


class DiagnosticParser:
    """Turn compiler output lines into issues for one conversion session."""

    def __init__(self, registry: FingerprintRegistry | None = None) -> None:
        """Initialize parser.

        Args:
            registry: Fingerprints already issued. A new empty registry is
                used when omitted.
        """
        self._registry = registry if registry is not None else FingerprintRegistry()
        self._issues: list[Issue] = []

    @property
    def issues(self) -> list[Issue]:
        """Issues parsed so far, in input order."""
        return list(self._issues)

    @property
    def registry(self) -> FingerprintRegistry:
        return self._registry

    def parse(self, line: str) -> Issue | None:
        """Parse one line of compiler output.

        Args:
            line: Raw input line, with or without its line terminator.

        Returns:
            Parsed issue, or ``None`` when the line is not a diagnostic.
        """
        text = line.rstrip("\r\n")
        match = FILE_ERROR_PATTERN.match(text)
        if match:
            line_no = int(match.group("line"))
            issue = self._build_issue(
                path=match.group("file"),
                lines=LineSpan(
                    begin=line_no, column=int(match.group("col")), end=line_no
                ),
                code=match.group("code"),
                message=match.group("message"),
            )
        else:
            match = GLOBAL_ERROR_PATTERN.search(text)
            if not match:
                return None
            issue = self._build_issue(
                path=UNKNOWN_PATH,
                lines=LineSpan(begin=0, column=0, end=0),
                code=match.group("code"),
                message=match.group("message"),
            )
        self._issues.append(issue)
        logger.debug(
            f"Parsed diagnostic (path={issue.location.path} "
            f"check_name={issue.check_name} line={issue.location.lines.begin})"
        )
        return issue

    def parse_lines(self, lines: Iterable[str]) -> list[Issue]:
        """Parse every line and return all issues parsed in this session."""
        for line in lines:
            self.parse(line)
        return self.issues

    def _build_issue(self, path: str, lines: LineSpan, code: str, message: str) -> Issue:
        return Issue(
            check_name=code,
            description=message,
            fingerprint=create_fingerprint(path, message, self._registry),
            location=IssueLocation(path=path, lines=lines),
        )
