"""Cause grouping, report formatting and the lint pipeline."""

from statuslint.lint.formatter import ReportFormatter
from statuslint.lint.grouper import CauseGrouper, GroupedCauses
from statuslint.lint.pipeline import LintPipeline, LintReport, lint

__all__ = [
    "CauseGrouper",
    "GroupedCauses",
    "LintPipeline",
    "LintReport",
    "ReportFormatter",
    "lint",
]
