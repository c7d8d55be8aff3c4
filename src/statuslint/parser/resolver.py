"""Resolve a logical field path to the line/column of the node it addresses."""

from __future__ import annotations

from typing import Any

from ruamel.yaml.comments import CommentedMap, CommentedSeq

from statuslint.errors import FieldPathError
from statuslint.models.lint import Position
from statuslint.parser.loader import DocumentLoader, ParsedDocument
from statuslint.parser.path import FieldPath, PathSegment, parse_field_path

_MISSING = object()


class PositionResolver:
    """Locates field paths in position-tracking YAML trees.

    Mapping members resolve to their key token, sequence items to the
    item's first token. Positions are 1-based.
    """

    def __init__(self, loader: DocumentLoader | None = None) -> None:
        self._loader = loader or DocumentLoader()

    def resolve(self, field: str, source: bytes, filename: str = "<bytes>") -> Position:
        """Parse ``source`` and return the position of ``field``."""
        return self.locate(field, self._loader.parse(source, filename))

    def locate(self, field: str | FieldPath, document: ParsedDocument) -> Position:
        """Return the position of ``field`` in an already parsed document.

        Documents of a multi-document stream are searched in order; the
        first one containing the path wins.
        """
        try:
            path = field if isinstance(field, FieldPath) else parse_field_path(field)
        except FieldPathError as exc:
            raise FieldPathError(exc.field, exc.reason, document.filename) from exc

        failures: list[str] = []
        for root in document.roots:
            try:
                return _walk(root, path)
            except _Unresolved as exc:
                failures.append(str(exc))
        reason = failures[0] if len(failures) == 1 else "no such node"
        if not failures:
            reason = "document is empty"
        raise FieldPathError(path.text, reason, document.filename)


class _Unresolved(Exception):
    pass


def _walk(root: Any, path: FieldPath) -> Position:
    node = root
    position: Position | None = None
    for depth, segment in enumerate(path.segments):
        if isinstance(node, CommentedMap):
            key = _lookup_key(node, segment)
            if key is _MISSING:
                raise _Unresolved(f"no key {segment.name!r} at {_prefix(path, depth)}")
            position = _key_position(node, key)
            node = node[key]
        elif isinstance(node, CommentedSeq):
            if not segment.numeric:
                raise _Unresolved(f"{_prefix(path, depth)} is a sequence, not a mapping")
            index = segment.position
            if index >= len(node):
                raise _Unresolved(
                    f"index {index} out of range at {_prefix(path, depth)} (length {len(node)})"
                )
            position = _item_position(node, index)
            node = node[index]
        else:
            raise _Unresolved(f"{_prefix(path, depth)} is not a mapping or sequence")
    assert position is not None
    return position


def _lookup_key(mapping: CommentedMap, segment: PathSegment) -> Any:
    if segment.index is None and segment.name in mapping:
        return segment.name
    for key in mapping:
        if _yaml_spelling(key) == segment.name:
            return key
    return _MISSING


def _yaml_spelling(key: Any) -> str:
    """Render a constructed key the way YAML 1.2 writes it (``true``, not ``True``)."""
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    return str(key)


def _key_position(mapping: CommentedMap, key: Any) -> Position:
    try:
        line, col = mapping.lc.key(key)
    except (KeyError, TypeError):
        # no per-key record (e.g. merged keys); fall back to the mapping itself
        line, col = mapping.lc.line, mapping.lc.col
    return Position(line=line + 1, column=col + 1)


def _item_position(sequence: CommentedSeq, index: int) -> Position:
    try:
        line, col = sequence.lc.item(index)
    except (KeyError, TypeError):
        line, col = sequence.lc.line, sequence.lc.col
    return Position(line=line + 1, column=col + 1)


def _prefix(path: FieldPath, depth: int) -> str:
    if depth == 0:
        return "document root"
    return "".join(
        str(seg) if seg.index is not None or i == 0 else f".{seg}"
        for i, seg in enumerate(path.segments[:depth])
    )
