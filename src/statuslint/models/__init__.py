"""Pydantic domain models for statuslint."""

from statuslint.models.lint import LintError, Position
from statuslint.models.status import (
    NIL_FIELD,
    StatusCause,
    StatusDetails,
    StatusPhase,
    ValidationResult,
)

__all__ = [
    "NIL_FIELD",
    "LintError",
    "Position",
    "StatusCause",
    "StatusDetails",
    "StatusPhase",
    "ValidationResult",
]
