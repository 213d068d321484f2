# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""CLI converting piped TypeScript compiler output into a code quality report."""

import argparse
import io
import logging
import sys
from pathlib import Path
from typing import BinaryIO, TextIO

from rich.console import Console
from rich.logging import RichHandler
from rich.style import Style
from rich.table import Table
from rich.text import Text

from tcq.config import Settings
from tcq.model import Issue
from tcq.pipeline import ConversionResult, convert_stream
from tcq.report import JsonReportStore

logger = logging.getLogger(__name__)

EXIT_CLEAN = 0
EXIT_ISSUES_FOUND = 1
EXIT_FATAL = 2

TABLE_COLUMN_RATIOS: dict[str, int] = {
    "path": 3,
    "line": 1,
    "column": 1,
    "check_name": 2,
    "description": 5,
    "fingerprint": 4,
}


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application logging with Rich handler on stderr.

    Args:
        level: Logging severity threshold.
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=Console(stderr=True), rich_tracebacks=True, show_path=False
            )
        ],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(
        prog="tsc-codequality",
        description="Read tsc output from stdin and merge errors into a code quality report.",
    )
    parser.add_argument(
        "--output",
        required=False,
        help="Report file path. Overrides TYPESCRIPT_CODE_QUALITY_REPORT.",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Do not echo compiler output to stdout.",
    )
    parser.add_argument(
        "--table",
        action="store_true",
        help="Print a table of the issues found in this run.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def run(
    argv: list[str],
    stdin: TextIO,
    stdout: TextIO,
    stderr: TextIO,
    settings: Settings | None = None,
) -> int:
    """Run CLI command.

    Args:
        argv: CLI arguments.
        stdin: Piped compiler output.
        stdout: Standard output stream.
        stderr: Standard error stream.
        settings: Runtime settings; read from the environment when omitted.

    Returns:
        Exit code: ``0`` when no issues were found, ``1`` when issues were
        found, ``2`` on fatal errors.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit:
        logger.warning(f"Argument parsing failed (argv={argv})")
        return EXIT_FATAL
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if stdin.isatty():
        logger.warning("Refusing to read compiler output from an interactive terminal")
        stderr.write("ERROR: expected input to be piped in\n")
        return EXIT_FATAL

    if settings is None:
        settings = Settings.from_env()
    output_path = Path(args.output) if args.output else settings.report_path
    logger.info(
        f"Converting compiler output (output_path={output_path} job={settings.job_name} "
        f"commit={settings.commit_sha} gitlab_ci={settings.gitlab_ci} "
        f"project_dir={settings.project_dir} project_url={settings.project_url} "
        f"ci_config_path={settings.ci_config_path})"
    )

    result = convert_stream(
        lines=stdin,
        store=JsonReportStore(output_path=output_path),
        echo=None if args.quiet else stdout,
    )
    if result.error is not None:
        stderr.write(f"ERROR: {result.error}\n")
        return EXIT_FATAL
    if args.table:
        _write_table(issues=result.issues, stdout=stdout)
    return exit_code_for(result)


def exit_code_for(result: ConversionResult) -> int:
    """Map a conversion result to a process exit code.

    Args:
        result: Conversion outcome.

    Returns:
        Exit code.
    """
    if not result.succeeded:
        return EXIT_FATAL
    return EXIT_ISSUES_FOUND if result.issues else EXIT_CLEAN


def _write_table(issues: list[Issue], stdout: TextIO) -> None:
    """Write parsed issues as a table grouped by file.

    Args:
        issues: Issues parsed in this run.
        stdout: Standard output stream.
    """
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    if not issues:
        console.print("No compiler errors found.", markup=False, highlight=False)
        return

    issues_by_path: dict[str, list[Issue]] = {}
    for issue in issues:
        issues_by_path.setdefault(issue.location.path, []).append(issue)

    for path in sorted(issues_by_path):
        console.rule(Text(path), style=Style(color="cyan"), characters="-")
        table = Table(show_header=True, show_lines=True, expand=True)
        for column, ratio in TABLE_COLUMN_RATIOS.items():
            table.add_column(
                column,
                ratio=ratio,
                justify="right" if column in {"line", "column"} else "left",
                overflow="fold",
            )
        for issue in issues_by_path[path]:
            table.add_row(
                Text(issue.location.path),
                str(issue.location.lines.begin),
                str(issue.location.lines.column),
                issue.check_name,
                Text(issue.description),
                issue.fingerprint,
            )
        console.print(table)


def open_input(stream: BinaryIO) -> TextIO:
    """Decode piped compiler output as UTF-8.

    Undecodable bytes become U+FFFD so every line stays valid text.

    Args:
        stream: Raw input byte stream.

    Returns:
        Text stream with universal newlines.
    """
    return io.TextIOWrapper(stream, encoding="utf-8", errors="replace")


def main() -> None:
    """Run the CLI application and exit."""
    configure_logging()
    sys.stdout.reconfigure(errors="replace")  # type: ignore[union-attr]
    exit_code = run(
        sys.argv[1:],
        stdin=open_input(sys.stdin.buffer),
        stdout=sys.stdout,
        stderr=sys.stderr,
    )
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
