"""
Validator capability and schema execution.

``MessageValidator`` is the only contract collaborators depend on:

    validate(message: bytes) -> ValidationOutcome

Schema validators, the reference validator and any injected element
validator satisfy it. Composition always happens at this byte-buffer
boundary, so a nested validator can be replaced without the enclosing
schema knowing its internals.

``SchemaValidator`` runs a fixed, ordered list of field rules. The first
failing rule terminates evaluation and becomes the outcome; later rules
are never evaluated.
"""

from __future__ import annotations

import logging
from typing import Callable, List, NamedTuple, Optional, Protocol, Tuple

from alica_tp.app.messages.checks import Document
from alica_tp.app.messages.document import DocumentError, parse_object
from alica_tp.app.messages.outcome import ValidationFailure, ValidationOutcome

logger = logging.getLogger(__name__)


class MessageValidator(Protocol):
    """
    Interface for anything able to validate a raw message.

    Implementations must:
    - accept raw bytes only, never a parsed document
    - return exactly one ValidationOutcome
    - hold no state between calls
    """

    def validate(self, message: bytes) -> ValidationOutcome:
        ...


# Field check contract, with any nested validator already bound
FieldCheck = Callable[[Document, str], Optional[ValidationFailure]]


class FieldRule(NamedTuple):
    """One (field name, check) entry of a schema."""

    field: str
    check: FieldCheck


class SchemaValidator:
    """
    Base class for fixed-schema message validators.

    Subclasses declare their schema in ``_build_schema``. The schema is
    built once at construction and frozen; validation is stateless and
    safe to call concurrently.
    """

    def __init__(self) -> None:
        self._rules: Tuple[FieldRule, ...] = tuple(self._build_schema())

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def fields(self) -> List[str]:
        """Field names in evaluation order."""
        return [rule.field for rule in self._rules]

    def validate(self, message: bytes) -> ValidationOutcome:
        try:
            document = parse_object(message)
        except DocumentError as exc:
            return self._reject(exc.failure)

        for rule in self._rules:
            failure = rule.check(document, rule.field)
            if failure is not None:
                return self._reject(failure)

        return ValidationOutcome.valid()

    # ------------------------------------------------------------------
    # Schema declaration
    # ------------------------------------------------------------------

    def _build_schema(self) -> List[FieldRule]:
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement _build_schema()."
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _reject(self, failure: ValidationFailure) -> ValidationOutcome:
        logger.debug(
            "%s rejected message: %s",
            self.__class__.__name__,
            failure.message,
        )
        return ValidationOutcome.invalid(failure)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(fields={self.fields!r})"
