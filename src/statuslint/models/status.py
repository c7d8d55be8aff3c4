"""Validation results supplied by the external validator (``metav1.Status`` JSON shape)."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

NIL_FIELD = "<nil>"


class StatusPhase(StrEnum):
    SUCCESS = "Success"
    FAILURE = "Failure"


class StatusCause(BaseModel):
    """A single reason a document failed validation.

    ``field`` is ``None`` when the cause addresses no specific field. The
    validator spells that as the literal ``<nil>``; it is converted here so
    that no downstream code compares against the sentinel text.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    field: str | None = None
    kind: str = Field(default="", alias="reason")
    message: str = ""

    @field_validator("field", mode="before")
    @classmethod
    def _nil_to_none(cls, value: object) -> object:
        if value is None or value == "" or value == NIL_FIELD:
            return None
        return value

    @property
    def addressable(self) -> bool:
        return self.field is not None


class StatusDetails(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    kind: str = ""
    causes: list[StatusCause] = []


class ValidationResult(BaseModel):
    """Outcome of one validation attempt of one document."""

    model_config = ConfigDict(populate_by_name=True)

    status: StatusPhase = StatusPhase.FAILURE
    message: str = ""
    reason: str = ""
    details: StatusDetails | None = None

    @property
    def succeeded(self) -> bool:
        return self.status == StatusPhase.SUCCESS

    @property
    def causes(self) -> list[StatusCause]:
        if self.details is None:
            return []
        return self.details.causes
