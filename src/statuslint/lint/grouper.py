"""Extract addressable causes from validation results and group them by position."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from statuslint.models.lint import Position
from statuslint.models.status import StatusCause, ValidationResult
from statuslint.parser.loader import ParsedDocument
from statuslint.parser.resolver import PositionResolver

logger = logging.getLogger("statuslint.lint")

GroupedCauses = dict[Position, list[StatusCause]]


class CauseGrouper:
    """Turns one file's validation results into causes keyed by source position."""

    def __init__(self, resolver: PositionResolver | None = None) -> None:
        self._resolver = resolver or PositionResolver()

    def collect(self, results: Sequence[ValidationResult]) -> list[StatusCause]:
        """Return the addressable causes of a file, in input order.

        A single successful result marks the whole file as passing, so
        nothing is collected for it even if other attempts failed.
        """
        if any(result.succeeded for result in results):
            return []
        causes: list[StatusCause] = []
        for result in results:
            for cause in result.causes:
                if not cause.addressable:
                    continue  # nothing to point at
                causes.append(cause)
        return causes

    def group(
        self, results: Sequence[ValidationResult], document: ParsedDocument
    ) -> GroupedCauses:
        return self.group_causes(self.collect(results), document)

    def group_causes(
        self, causes: Sequence[StatusCause], document: ParsedDocument
    ) -> GroupedCauses:
        """Resolve every cause against ``document``. Resolution errors propagate."""
        grouped: GroupedCauses = {}
        for cause in causes:
            assert cause.field is not None
            position = self._resolver.locate(cause.field, document)
            logger.debug(
                "%s: field %s -> %d:%d", document.filename, cause.field, position.line, position.column
            )
            grouped.setdefault(position, []).append(cause)
        return grouped
