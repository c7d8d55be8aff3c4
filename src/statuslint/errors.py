"""Exception hierarchy for statuslint."""

from __future__ import annotations


class StatusLintError(Exception):
    """Base class for every error raised while building a lint report."""


class DocumentParseError(StatusLintError):
    """Raised when document bytes are not valid YAML."""

    def __init__(self, filename: str, reason: str) -> None:
        self.filename = filename
        self.reason = reason
        super().__init__(f"{filename}: cannot parse document: {reason}")


class FieldPathError(StatusLintError):
    """Raised when a field path is malformed or addresses no node in the document."""

    def __init__(self, field: str, reason: str, filename: str | None = None) -> None:
        self.field = field
        self.reason = reason
        self.filename = filename
        location = f"{filename}: " if filename else ""
        super().__init__(f"{location}field {field!r}: {reason}")
