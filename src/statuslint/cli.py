"""CLI entrypoint: render a JSON file of validation results as lint output."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from statuslint import __version__
from statuslint.errors import StatusLintError
from statuslint.lint.pipeline import LintPipeline
from statuslint.models.status import ValidationResult
from statuslint.settings import Settings

logger = logging.getLogger("statuslint.cli")

_DETAILS_ADAPTER = TypeAdapter(dict[str, list[ValidationResult]])


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="statuslint",
        description=(
            "Convert validation results into '%f:%l:%c: %m' lint lines "
            "pointing at the offending YAML fields."
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "results",
        type=Path,
        help="JSON file mapping document paths to lists of validation results",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write the report to this file instead of stdout",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint. Returns 0 when clean, 1 when diagnostics were emitted, 2 on error."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper(), format="%(levelname)s %(message)s")

    try:
        details = _DETAILS_ADAPTER.validate_json(args.results.read_bytes())
        report = LintPipeline(settings).run(details)
    except ValidationError as exc:
        print(f"Invalid results file {args.results}: {exc}", file=sys.stderr)
        return 2
    except (StatusLintError, OSError) as exc:
        print(f"Lint error: {exc}", file=sys.stderr)
        return 2

    output = report.to_bytes()
    if output:
        output += b"\n"
    if args.output is not None:
        args.output.write_bytes(output)
        logger.info("wrote %d diagnostic(s) to %s", len(report.errors), args.output)
    else:
        sys.stdout.write(output.decode("utf-8"))
    return 1 if report.errors else 0


if __name__ == "__main__":
    sys.exit(main())
