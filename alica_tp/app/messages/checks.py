"""
Field-level checks for ALICA message schemas.

Every check shares one contract:

    check(document, field, ...) -> Optional[ValidationFailure]

``None`` means the field conforms. A returned failure is terminal for the
enclosing validator. Checks only assert shape; they never return, coerce
or mutate the value they inspect.

Checks that descend into nested documents (references and object lists)
do not parse those documents themselves. They re-serialize the located
element and hand the bytes to an injected MessageValidator, returning its
failure unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

from alica_tp.app.messages.document import INT64_MAX, INT64_MIN, dump_element
from alica_tp.app.messages.outcome import (
    InvalidFormat,
    MissingField,
    ValidationFailure,
)

if TYPE_CHECKING:
    from alica_tp.app.messages.validator import MessageValidator


Document = Dict[str, Any]

# Sentinel distinguishing "absent" from an explicit JSON null
_ABSENT = object()


# ---------------------------------------------------------------------------
# Scalar predicates
# ---------------------------------------------------------------------------


def is_integer(value: Any) -> bool:
    """
    True for integral JSON numbers that fit a signed 64-bit integer.

    bool is a subclass of int in Python and must not pass. Floats are
    rejected even when integral (no implicit truncation).
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return INT64_MIN <= value <= INT64_MAX


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


# ---------------------------------------------------------------------------
# Scalar field checks
# ---------------------------------------------------------------------------


def check_string_field(
    document: Document, field: str
) -> Optional[ValidationFailure]:
    value = document.get(field, _ABSENT)
    if value is _ABSENT:
        return MissingField(field=field)
    if not is_string(value):
        return InvalidFormat(description=f"{field} is no string")
    return None


def check_integer_field(
    document: Document, field: str
) -> Optional[ValidationFailure]:
    value = document.get(field, _ABSENT)
    if value is _ABSENT:
        return MissingField(field=field)
    if not is_integer(value):
        return InvalidFormat(description=f"{field} is no integer")
    return None


def check_boolean_field(
    document: Document, field: str
) -> Optional[ValidationFailure]:
    value = document.get(field, _ABSENT)
    if value is _ABSENT:
        return MissingField(field=field)
    if not is_boolean(value):
        return InvalidFormat(description=f"{field} is no boolean")
    return None


# ---------------------------------------------------------------------------
# Nested document checks
# ---------------------------------------------------------------------------


def check_reference_field(
    document: Document,
    field: str,
    *,
    validator: "MessageValidator",
) -> Optional[ValidationFailure]:
    """
    Check an embedded identifier reference ({kind, value}).

    The located value is re-serialized and validated by ``validator``
    (normally a ReferenceValidator). Its failure is returned as-is.
    """
    value = document.get(field, _ABSENT)
    if value is _ABSENT:
        return MissingField(field=field)
    return validator.validate(dump_element(value)).failure


# ---------------------------------------------------------------------------
# Collection checks
# ---------------------------------------------------------------------------


def check_integer_list_field(
    document: Document, field: str
) -> Optional[ValidationFailure]:
    """
    Check a homogeneous list of integers.

    Elements are inspected front to back; the first non-integer entry ends
    the check. The number of bad entries is never reported.
    """
    value = document.get(field, _ABSENT)
    if value is _ABSENT:
        return MissingField(field=field)
    if not isinstance(value, list):
        return InvalidFormat(description=f"{field} is no array")

    for entry in value:
        if not is_integer(entry):
            return InvalidFormat(
                description=f"{field} contains a non integer entry"
            )
    return None


def check_object_list_field(
    document: Document,
    field: str,
    *,
    validator: "MessageValidator",
) -> Optional[ValidationFailure]:
    """
    Check a list whose entries are nested documents.

    Each entry is re-serialized and handed to ``validator``. The first
    failing entry ends the check and its failure is returned unchanged;
    later entries are not validated.
    """
    value = document.get(field, _ABSENT)
    if value is _ABSENT:
        return MissingField(field=field)
    if not isinstance(value, list):
        return InvalidFormat(description=f"{field} is no array")

    for entry in value:
        outcome = validator.validate(dump_element(entry))
        if not outcome.is_valid:
            return outcome.failure
    return None
