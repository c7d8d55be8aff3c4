"""Field path parsing: ``spec.containers[0].image`` into key/index segments."""

from __future__ import annotations

import re
from dataclasses import dataclass

from statuslint.errors import FieldPathError

_QUOTES = ("'", '"')
_INDEX_RE = re.compile(r"-?[0-9]+")


@dataclass(frozen=True)
class PathSegment:
    """One step of a field path.

    ``index`` is set for bracketed integers (``[0]``). Bare all-digit names
    (``containers.0``) keep ``index=None`` and are interpreted against the
    node they are applied to.
    """

    name: str
    index: int | None = None

    @property
    def numeric(self) -> bool:
        return self.index is not None or (self.name.isascii() and self.name.isdigit())

    @property
    def position(self) -> int:
        return self.index if self.index is not None else int(self.name)

    def __str__(self) -> str:
        return f"[{self.index}]" if self.index is not None else self.name


@dataclass(frozen=True)
class FieldPath:
    text: str
    segments: tuple[PathSegment, ...]

    def __str__(self) -> str:
        return self.text


def parse_field_path(text: str) -> FieldPath:
    """Parse a dot/bracket field path, rejecting anything that cannot address a node."""
    source = text.strip()
    if source.startswith("$"):
        source = source[1:]
        if source.startswith("."):
            source = source[1:]
    if not source:
        raise FieldPathError(text, "empty field path")

    segments: list[PathSegment] = []
    pos = 0
    expect_name = True
    while pos < len(source):
        char = source[pos]
        if char == ".":
            if expect_name:
                raise FieldPathError(text, f"empty segment at offset {pos}")
            expect_name = True
            pos += 1
        elif char == "[":
            end = source.find("]", pos + 1)
            if end == -1:
                raise FieldPathError(text, "unterminated '['")
            segments.append(_bracket_segment(text, source[pos + 1 : end]))
            expect_name = False
            pos = end + 1
        elif char in _QUOTES:
            end = source.find(char, pos + 1)
            if end == -1:
                raise FieldPathError(text, f"unterminated {char}")
            if not expect_name:
                raise FieldPathError(text, f"missing '.' before offset {pos}")
            segments.append(PathSegment(name=source[pos + 1 : end]))
            expect_name = False
            pos = end + 1
        elif char == "]":
            raise FieldPathError(text, f"unexpected ']' at offset {pos}")
        else:
            if not expect_name:
                raise FieldPathError(text, f"missing '.' before offset {pos}")
            end = pos
            while end < len(source) and source[end] not in ".[]'\"":
                end += 1
            segments.append(PathSegment(name=source[pos:end]))
            expect_name = False
            pos = end
    if expect_name:
        raise FieldPathError(text, "path ends with '.'")
    return FieldPath(text=text, segments=tuple(segments))


def _bracket_segment(text: str, inner: str) -> PathSegment:
    body = inner.strip()
    if not body:
        raise FieldPathError(text, "empty '[]'")
    if len(body) >= 2 and body[0] in _QUOTES and body[-1] == body[0]:
        return PathSegment(name=body[1:-1])
    if _INDEX_RE.fullmatch(body):
        index = int(body)
        if index < 0:
            raise FieldPathError(text, f"negative index [{index}]")
        return PathSegment(name=body, index=index)
    # Kubernetes field.Path renders map keys as ``labels[app.kubernetes.io/name]``
    return PathSegment(name=inner)
