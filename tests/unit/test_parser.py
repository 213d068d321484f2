# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
import hashlib

import pytest

from tcq.fingerprint import FingerprintRegistry
from tcq.parser import DiagnosticParser

TS2322_LINE = (
    "src/app.ts(12,5): error TS2322: "
    "Type 'string' is not assignable to type 'number'."
)


def test_prs_001_parser_extracts_file_anchored_diagnostic() -> None:
    parser = DiagnosticParser()

    issue = parser.parse(TS2322_LINE)

    assert issue is not None
    assert issue.check_name == "TS2322"
    assert issue.description == "Type 'string' is not assignable to type 'number'."
    assert issue.location.path == "src/app.ts"
    assert issue.location.lines.begin == 12
    assert issue.location.lines.end == 12
    assert issue.location.lines.column == 5
    assert issue.categories == ("Bug Risk",)
    assert issue.severity == "major"
    assert issue.type == "issue"
    assert issue.fingerprint == hashlib.md5(  # noqa: S324
        b"src/app.tsType 'string' is not assignable to type 'number'."
    ).hexdigest()
    assert parser.issues == [issue]


def test_prs_002_parser_renders_code_quality_shape() -> None:
    issue = DiagnosticParser().parse(TS2322_LINE)

    assert issue is not None
    assert issue.to_dict() == {
        "type": "issue",
        "categories": ["Bug Risk"],
        "check_name": "TS2322",
        "description": "Type 'string' is not assignable to type 'number'.",
        "severity": "major",
        "fingerprint": issue.fingerprint,
        "location": {
            "path": "src/app.ts",
            "lines": {"begin": 12, "column": 5, "end": 12},
        },
    }


def test_prs_003_parser_normalizes_file_less_diagnostic() -> None:
    parser = DiagnosticParser()

    issue = parser.parse("error TS5023: Unknown compiler option 'foo'.")

    assert issue is not None
    assert issue.check_name == "TS5023"
    assert issue.description == "Unknown compiler option 'foo'."
    assert issue.location.path == "unknown"
    assert (
        issue.location.lines.begin,
        issue.location.lines.column,
        issue.location.lines.end,
    ) == (0, 0, 0)
    assert issue.fingerprint


def test_prs_004_file_less_pattern_matches_anywhere_in_line() -> None:
    issue = DiagnosticParser().parse(
        "tsconfig.json: error TS18003: No inputs were found in config file."
    )

    assert issue is not None
    assert issue.location.path == "unknown"
    assert issue.check_name == "TS18003"
    assert issue.description == "No inputs were found in config file."


@pytest.mark.parametrize(
    "line",
    [
        "",
        "   ",
        "Version 5.4.5",
        "Found 3 errors in 2 files.",
        "src/app.ts(12,5): warning TS6133: 'x' is declared but never read.",
        "error TS2322:no space after colon",
    ],
)
def test_prs_005_non_diagnostic_lines_leave_state_untouched(line: str) -> None:
    registry = FingerprintRegistry()
    parser = DiagnosticParser(registry=registry)

    assert parser.parse(line) is None
    assert parser.issues == []
    assert len(registry) == 0


def test_prs_006_file_path_is_shortest_prefix_before_position() -> None:
    issue = DiagnosticParser().parse(
        "src/util (copy)(3,7).ts(4,9): error TS1005: ';' expected."
    )

    assert issue is not None
    assert issue.location.path == "src/util (copy)(3,7).ts"
    assert issue.location.lines.begin == 4
    assert issue.location.lines.column == 9


def test_prs_007_parser_strips_line_terminators() -> None:
    issue = DiagnosticParser().parse(TS2322_LINE + "\r\n")

    assert issue is not None
    assert issue.description == "Type 'string' is not assignable to type 'number'."


def test_prs_008_duplicate_lines_get_distinct_fingerprints_in_order() -> None:
    parser = DiagnosticParser()

    issues = parser.parse_lines(
        [
            TS2322_LINE,
            "Found 2 errors.",
            TS2322_LINE,
            "src/other.ts(1,1): error TS2304: Cannot find name 'foo'.",
        ]
    )

    assert [issue.location.path for issue in issues] == [
        "src/app.ts",
        "src/app.ts",
        "src/other.ts",
    ]
    assert issues[0].fingerprint != issues[1].fingerprint
    assert len({issue.fingerprint for issue in issues}) == 3
    assert len(parser.registry) == 3


def test_prs_009_position_less_file_error_falls_back_to_unknown_path() -> None:
    issue = DiagnosticParser().parse("src/app.ts(12): error TS2322: missing column")

    assert issue is not None
    assert issue.location.path == "unknown"
    assert issue.check_name == "TS2322"
    assert issue.description == "missing column"


def test_prs_010_non_ascii_digits_do_not_form_a_position() -> None:
    issue = DiagnosticParser().parse("a.ts(١٢,5): error TS1: m")

    assert issue is not None
    assert issue.location.path == "unknown"
    assert issue.location.lines.begin == 0
    assert issue.check_name == "TS1"
    assert issue.description == "m"
