"""Render grouped causes as ``file:line:column: message`` lines."""

from __future__ import annotations

from statuslint.lint.grouper import GroupedCauses
from statuslint.models.lint import LintError, Position
from statuslint.models.status import StatusCause

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


def quote(value: str) -> str:
    """Double-quote ``value`` the way Go's ``strconv.Quote`` does.

    Non-printable characters become ``\\xNN`` below 0x80, ``\\uNNNN`` in the
    basic plane and ``\\UNNNNNNNN`` above it.
    """
    parts: list[str] = []
    for char in value:
        if char in _ESCAPES:
            parts.append(_ESCAPES[char])
        elif char.isprintable():
            parts.append(char)
        elif ord(char) < 0x80:
            parts.append(f"\\x{ord(char):02x}")
        elif ord(char) < 0x10000:
            parts.append(f"\\u{ord(char):04x}")
        else:
            parts.append(f"\\U{ord(char):08x}")
    return '"' + "".join(parts) + '"'


def sorted_positions(grouped: GroupedCauses) -> list[Position]:
    return sorted(grouped, key=lambda p: p.sort_key)


class ReportFormatter:
    """Builds one lint line per position.

    Within a line, field groups are ordered by field name; causes within a
    field keep their input order.
    """

    def errors(self, file: str, grouped: GroupedCauses) -> list[LintError]:
        return [
            LintError(
                file=file,
                line=position.line,
                column=position.column,
                message=self.message(grouped[position]),
            )
            for position in sorted_positions(grouped)
        ]

    def render(self, file: str, grouped: GroupedCauses) -> list[str]:
        return [str(error) for error in self.errors(file, grouped)]

    def message(self, causes: list[StatusCause]) -> str:
        by_field: dict[str, list[str]] = {}
        for cause in causes:
            by_field.setdefault(cause.field or "", []).append(
                f"(reason: {quote(cause.kind)}; {cause.message})"
            )
        return ", ".join(
            f"field {quote(name)}: {', '.join(by_field[name])}" for name in sorted(by_field)
        )
