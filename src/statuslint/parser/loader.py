"""YAML loader that keeps source positions for every parsed node."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from statuslint.errors import DocumentParseError

logger = logging.getLogger("statuslint.parser")

# ---------------------------------------------------------------------------
# Safety limits
# ---------------------------------------------------------------------------

DEFAULT_MAX_DOCUMENT_SIZE = 5_000_000  # bytes
DEFAULT_MAX_DEPTH = 64


class YAMLSafetyError(DocumentParseError):
    """Raised when a document is too large or too deeply nested to be positioned."""


@dataclass
class ParsedDocument:
    """All documents of one YAML stream, as ruamel round-trip nodes.

    Every ``CommentedMap``/``CommentedSeq`` carries an ``lc`` attribute with
    the 0-based line/column of its keys and items.
    """

    filename: str
    roots: list[Any] = field(default_factory=list)

    @property
    def empty(self) -> bool:
        return all(root is None for root in self.roots)


class DocumentLoader:
    """Parses YAML bytes into position-tracking trees.

    Uses ruamel.yaml's round-trip loader, which records line/column info on
    every collection node.
    """

    def __init__(
        self,
        max_document_size: int = DEFAULT_MAX_DOCUMENT_SIZE,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        self._max_document_size = max_document_size
        self._max_depth = max_depth

    # -- safety checks -------------------------------------------------------

    def _check_size(self, content: bytes, filename: str) -> None:
        if len(content) > self._max_document_size:
            raise YAMLSafetyError(
                filename,
                f"document exceeds maximum size "
                f"({len(content):,} bytes > {self._max_document_size:,} limit)",
            )

    def _check_depth(self, data: Any, filename: str) -> None:
        """Post-parse walk: reject documents nested deeper than the limit."""
        stack: list[tuple[Any, int]] = [(data, 1)]
        seen: set[int] = set()
        while stack:
            node, depth = stack.pop()
            if not isinstance(node, (dict, list)) or id(node) in seen:
                continue
            # aliases point at the same object; visit each collection once
            seen.add(id(node))
            if depth > self._max_depth:
                raise YAMLSafetyError(
                    filename, f"document exceeds maximum nesting depth ({self._max_depth})"
                )
            children = node.values() if isinstance(node, dict) else node
            stack.extend((child, depth + 1) for child in children)

    # -- public loading API --------------------------------------------------

    def parse(self, content: bytes, filename: str = "<bytes>") -> ParsedDocument:
        """Parse raw bytes (possibly a multi-document stream)."""
        self._check_size(content, filename)
        try:
            text = content.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DocumentParseError(filename, f"not valid UTF-8: {exc}") from exc

        yaml = YAML()
        try:
            roots = list(yaml.load_all(text))
        except YAMLError as exc:
            raise DocumentParseError(filename, str(exc)) from exc

        for root in roots:
            self._check_depth(root, filename)
        logger.debug("parsed %s (%d document(s))", filename, len(roots))
        return ParsedDocument(filename=filename, roots=roots)

    def load(self, path: Path | str) -> ParsedDocument:
        """Read a file from disk and parse it. ``OSError`` propagates unchanged."""
        path = Path(path)
        content = path.read_bytes()
        return self.parse(content, str(path))
