"""Shared test fixtures for statuslint."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from statuslint.lint.formatter import ReportFormatter
from statuslint.lint.grouper import CauseGrouper
from statuslint.models.status import StatusCause, StatusDetails, StatusPhase, ValidationResult
from statuslint.parser.loader import DocumentLoader
from statuslint.parser.resolver import PositionResolver

POD_YAML = """\
apiVersion: v1
kind: Pod
metadata:
  name: web
  labels:
    app.kubernetes.io/name: web
spec:
  containers:
    - name: app
      image: ""
      ports:
        - containerPort: 80
    - name: sidecar
      image: busybox
"""

MULTI_DOC_YAML = """\
kind: ConfigMap
data:
  a: "1"
---
kind: Secret
stringData:
  b: "2"
"""


@pytest.fixture
def loader() -> DocumentLoader:
    return DocumentLoader()


@pytest.fixture
def resolver(loader: DocumentLoader) -> PositionResolver:
    return PositionResolver(loader)


@pytest.fixture
def grouper(resolver: PositionResolver) -> CauseGrouper:
    return CauseGrouper(resolver)


@pytest.fixture
def formatter() -> ReportFormatter:
    return ReportFormatter()


@pytest.fixture
def pod_yaml() -> bytes:
    return POD_YAML.encode("utf-8")


@pytest.fixture
def multi_doc_yaml() -> bytes:
    return MULTI_DOC_YAML.encode("utf-8")


@pytest.fixture
def cause() -> Callable[..., StatusCause]:
    """Factory: ``cause("spec.image", "FieldValueInvalid", "bad")``."""

    def _make(
        field: str | None, kind: str = "FieldValueInvalid", message: str = "invalid"
    ) -> StatusCause:
        return StatusCause(field=field, reason=kind, message=message)

    return _make


@pytest.fixture
def failure() -> Callable[..., ValidationResult]:
    """Factory for a failed result carrying the given causes."""

    def _make(*causes: StatusCause) -> ValidationResult:
        return ValidationResult(
            status=StatusPhase.FAILURE,
            details=StatusDetails(causes=list(causes)),
        )

    return _make


@pytest.fixture
def success() -> ValidationResult:
    return ValidationResult(status=StatusPhase.SUCCESS)
