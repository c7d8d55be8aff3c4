"""Orchestrates lint output: results → causes → positions → formatted lines."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from statuslint.lint.formatter import ReportFormatter
from statuslint.lint.grouper import CauseGrouper
from statuslint.models.lint import LintError
from statuslint.models.status import ValidationResult
from statuslint.parser.loader import DocumentLoader
from statuslint.parser.resolver import PositionResolver
from statuslint.settings import Settings

logger = logging.getLogger("statuslint.lint")


@dataclass
class LintReport:
    """All lint errors of one run, in output order."""

    errors: list[LintError] = field(default_factory=list)

    @property
    def lines(self) -> list[str]:
        return [str(error) for error in self.errors]

    def to_bytes(self) -> bytes:
        return "\n".join(self.lines).encode("utf-8")


class LintPipeline:
    """Builds a lint report from ``{file: [ValidationResult]}``.

    Files are processed in sorted order. Each file is read and parsed at
    most once per run, and only when it has a cause that can be positioned.
    Any read, parse or path error aborts the whole run.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        if settings is None:
            settings = Settings()
        self._loader = DocumentLoader(
            max_document_size=settings.max_document_size,
            max_depth=settings.max_depth,
        )
        self._grouper = CauseGrouper(PositionResolver(self._loader))
        self._formatter = ReportFormatter()

    def run(self, details: Mapping[str, Sequence[ValidationResult]]) -> LintReport:
        report = LintReport()
        parsed = 0
        for file in sorted(details):
            causes = self._grouper.collect(details[file])
            if not causes:
                logger.debug("%s: no addressable causes, skipping", file)
                continue
            document = self._loader.load(file)
            parsed += 1
            grouped = self._grouper.group_causes(causes, document)
            report.errors.extend(self._formatter.errors(file, grouped))
        logger.info(
            "linted %d file(s): %d diagnostic(s) in %d file(s)",
            len(details), len(report.errors), parsed,
        )
        return report

    def lint(self, details: Mapping[str, Sequence[ValidationResult]]) -> bytes:
        return self.run(details).to_bytes()


def lint(
    details: Mapping[str, Sequence[ValidationResult]], settings: Settings | None = None
) -> bytes:
    """Render ``details`` as newline-separated ``file:line:column: message`` lines."""
    return LintPipeline(settings).lint(details)
