"""
Validation outcome schema.

Defines the canonical result of validating one ALICA message. An outcome
is either valid (no payload) or invalid, in which case it carries exactly
one failure: the first one encountered in schema order.

Failures are:
- immutable
- tagged (missing field vs. invalid format)
- passed through unchanged by enclosing validators
"""

from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


class MissingField(BaseModel):
    """A required field is absent from the document."""

    kind: Literal["missing_field"] = "missing_field"

    field: str = Field(
        ...,
        description="Name of the required field that was absent",
    )

    @property
    def message(self) -> str:
        return f"Required field missing: {self.field}"

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )


class InvalidFormat(BaseModel):
    """
    A value is present but malformed.

    Covers wrong scalar types, wrong container types, undecodable bytes,
    malformed JSON text and non-object roots.
    """

    kind: Literal["invalid_format"] = "invalid_format"

    description: str = Field(
        ...,
        description="Human-readable description of the format violation",
    )

    @property
    def message(self) -> str:
        return self.description

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )


ValidationFailure = Annotated[
    Union[MissingField, InvalidFormat],
    Field(discriminator="kind"),
]


# ---------------------------------------------------------------------------
# Outcome
# ---------------------------------------------------------------------------


class ValidationOutcome(BaseModel):
    """
    Result of a single validate() call.

    Carries at most one failure. Truthiness reflects validity so callers
    can write ``if validator.validate(data): ...``.
    """

    failure: Optional[ValidationFailure] = Field(
        None,
        description="The first failure encountered, or None if valid",
    )

    @classmethod
    def valid(cls) -> "ValidationOutcome":
        return cls()

    @classmethod
    def invalid(cls, failure: ValidationFailure) -> "ValidationOutcome":
        return cls(failure=failure)

    @property
    def is_valid(self) -> bool:
        return self.failure is None

    @property
    def message(self) -> Optional[str]:
        """Diagnostic string for collaborators, None when valid."""
        if self.failure is None:
            return None
        return self.failure.message

    def __bool__(self) -> bool:
        return self.is_valid

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )
