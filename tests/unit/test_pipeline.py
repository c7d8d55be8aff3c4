"""End-to-end tests for the lint pipeline over on-disk documents."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from statuslint.errors import DocumentParseError, FieldPathError
from statuslint.lint.pipeline import LintPipeline, lint
from statuslint.models.status import StatusCause, StatusDetails, StatusPhase, ValidationResult
from statuslint.parser.loader import DocumentLoader, YAMLSafetyError
from statuslint.settings import Settings


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, pod_yaml: bytes) -> Path:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "pod.yaml").write_bytes(pod_yaml)
    (tmp_path / "a.yaml").write_bytes(b'spec:\n  image: ""')
    return tmp_path


class TestLint:
    def test_single_cause_example(self, workdir: Path) -> None:
        details = {
            "a.yaml": [
                ValidationResult(
                    status=StatusPhase.FAILURE,
                    details=StatusDetails(
                        causes=[
                            StatusCause(
                                field="spec.image",
                                reason="FieldValueInvalid",
                                message="must not be empty",
                            )
                        ]
                    ),
                )
            ]
        }
        assert lint(details) == (
            b'a.yaml:2:3: field "spec.image": (reason: "FieldValueInvalid"; must not be empty)'
        )

    def test_all_success_produces_nothing(self, workdir: Path, success) -> None:
        assert lint({"pod.yaml": [success, success]}) == b""

    def test_mixed_success_and_failure_produces_nothing(
        self, workdir: Path, cause, failure, success
    ) -> None:
        assert lint({"pod.yaml": [failure(cause("kind")), success]}) == b""

    def test_lines_sorted_within_file(self, workdir: Path, cause, failure) -> None:
        output = lint(
            {
                "pod.yaml": [
                    failure(
                        cause("spec.containers[1].image", "FieldValueInvalid", "c"),
                        cause("metadata.name", "FieldValueInvalid", "b"),
                        cause("spec.containers[1].name", "FieldValueInvalid", "d"),
                        cause("kind", "FieldValueInvalid", "a"),
                    )
                ]
            }
        )
        prefixes = [line.split(": ", 1)[0] for line in output.decode().split("\n")]
        assert prefixes == ["pod.yaml:2:1", "pod.yaml:4:3", "pod.yaml:13:7", "pod.yaml:14:7"]

    def test_same_position_merged(self, workdir: Path, cause, failure) -> None:
        output = lint(
            {
                "pod.yaml": [
                    failure(cause("spec.containers.0.name", "FieldValueInvalid", "bad")),
                    failure(cause("spec.containers[0]", "FieldValueRequired", "missing")),
                ]
            }
        )
        assert output == (
            b'pod.yaml:9:7: field "spec.containers.0.name": (reason: "FieldValueInvalid"; bad), '
            b'field "spec.containers[0]": (reason: "FieldValueRequired"; missing)'
        )

    def test_files_sorted(self, workdir: Path, cause, failure) -> None:
        output = lint(
            {
                "pod.yaml": [failure(cause("kind"))],
                "a.yaml": [failure(cause("spec"))],
            }
        )
        lines = output.decode().split("\n")
        assert [line.split(":", 1)[0] for line in lines] == ["a.yaml", "pod.yaml"]

    def test_deterministic_regardless_of_input_order(self, workdir: Path, cause, failure) -> None:
        forward = {
            "a.yaml": [failure(cause("spec.image"), cause("spec"))],
            "pod.yaml": [failure(cause("kind"), cause("metadata.labels"))],
        }
        backward = dict(reversed(list(forward.items())))
        assert lint(forward) == lint(backward) == lint(forward)

    def test_nil_field_never_resolved(self, workdir: Path, cause, failure) -> None:
        # "<nil>" would fail resolution if it were looked up
        output = lint({"pod.yaml": [failure(cause("<nil>", "InternalError", "x"), cause("kind"))]})
        assert output == b'pod.yaml:2:1: field "kind": (reason: "FieldValueInvalid"; invalid)'

    def test_file_without_addressable_causes_is_not_read(
        self, workdir: Path, cause, failure, success
    ) -> None:
        details = {
            "missing-success.yaml": [success],
            "missing-nil.yaml": [failure(cause("<nil>"))],
        }
        assert lint(details) == b""


class TestLintErrors:
    def test_missing_file(self, workdir: Path, cause, failure) -> None:
        with pytest.raises(FileNotFoundError):
            lint({"missing.yaml": [failure(cause("kind"))]})

    def test_parse_error_aborts_run(self, workdir: Path, cause, failure) -> None:
        (workdir / "broken.yaml").write_bytes(b"spec: [unclosed\n")
        with pytest.raises(DocumentParseError, match="broken.yaml"):
            lint(
                {
                    "a.yaml": [failure(cause("spec.image"))],
                    "broken.yaml": [failure(cause("spec"))],
                }
            )

    def test_path_error_aborts_run(self, workdir: Path, cause, failure) -> None:
        with pytest.raises(FieldPathError, match="spec.replicas"):
            lint({"pod.yaml": [failure(cause("kind"), cause("spec.replicas"))]})

    def test_settings_limits_applied(self, workdir: Path, cause, failure) -> None:
        settings = Settings(max_document_size=8)
        with pytest.raises(YAMLSafetyError):
            lint({"pod.yaml": [failure(cause("kind"))]}, settings)


class TestLintPipeline:
    def test_document_parsed_once_per_file(
        self, workdir: Path, monkeypatch: pytest.MonkeyPatch, cause, failure
    ) -> None:
        loaded: list[str] = []
        original = DocumentLoader.load

        def counting_load(self: DocumentLoader, path):  # type: ignore[no-untyped-def]
            loaded.append(str(path))
            return original(self, path)

        monkeypatch.setattr(DocumentLoader, "load", counting_load)
        report = LintPipeline().run(
            {
                "pod.yaml": [
                    failure(cause("kind"), cause("metadata.name")),
                    failure(cause("spec.containers[0].image")),
                ]
            }
        )
        assert loaded == ["pod.yaml"]
        assert len(report.errors) == 3

    def test_report_lines(self, workdir: Path, cause, failure) -> None:
        report = LintPipeline().run({"a.yaml": [failure(cause("spec.image", "FieldValueRequired", "x"))]})
        assert report.lines == ['a.yaml:2:3: field "spec.image": (reason: "FieldValueRequired"; x)']
        assert report.errors[0].line == 2

    def test_summary_counts_parsed_files(
        self, workdir: Path, caplog: pytest.LogCaptureFixture, cause, failure, success
    ) -> None:
        with caplog.at_level(logging.INFO, logger="statuslint.lint"):
            LintPipeline().run(
                {
                    "a.yaml": [failure(cause("spec.image"))],
                    "pod.yaml": [failure(cause("kind"), cause("metadata.name"))],
                    "skipped.yaml": [success],
                }
            )
        assert "linted 3 file(s): 3 diagnostic(s) in 2 file(s)" in caplog.text
