"""Report-side value types: source positions and rendered lint errors."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Position(BaseModel):
    """1-based line/column of a node in the source text. Used as a grouping key."""

    model_config = ConfigDict(frozen=True)

    line: int
    column: int

    @property
    def sort_key(self) -> tuple[int, int]:
        return (self.line, self.column)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.sort_key < other.sort_key


class LintError(BaseModel):
    """One output line: every cause that landed on one position of one file."""

    model_config = ConfigDict(frozen=True)

    file: str
    line: int
    column: int
    message: str

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}: {self.message}"
