import json

from alica_tp.app.messages.checks import (
    check_integer_list_field,
    check_object_list_field,
    check_reference_field,
)
from alica_tp.app.messages.outcome import (
    InvalidFormat,
    MissingField,
    ValidationOutcome,
)
from alica_tp.app.messages.schemas import ReferenceValidator


class RecordingValidator:
    """
    Structurally valid MessageValidator used to observe delegation.

    Rejects any element whose JSON contains ``"bad": true``.
    """

    def __init__(self) -> None:
        self.received: list[bytes] = []

    def validate(self, message: bytes) -> ValidationOutcome:
        self.received.append(message)
        document = json.loads(message)
        if isinstance(document, dict) and document.get("bad") is True:
            return ValidationOutcome.invalid(
                InvalidFormat(description=f"bad element {document['n']}")
            )
        return ValidationOutcome.valid()


# ------------------------------------------------------------------
# Integer lists
# ------------------------------------------------------------------

def test_integer_list_accepts_integers_and_empty_lists():
    assert check_integer_list_field({"ids": [1, -2, 3]}, "ids") is None
    assert check_integer_list_field({"ids": []}, "ids") is None


def test_integer_list_reports_missing_field():
    assert check_integer_list_field({}, "ids") == MissingField(field="ids")


def test_integer_list_rejects_non_arrays():
    for value in ("1,2", 1, {"0": 1}, None):
        failure = check_integer_list_field({"ids": value}, "ids")

        assert failure == InvalidFormat(description="ids is no array")


def test_integer_list_rejects_non_integer_entries():
    for entries in ([1, "2"], [1.0], [True], [[1]], [None]):
        failure = check_integer_list_field({"ids": entries}, "ids")

        assert failure == InvalidFormat(
            description="ids contains a non integer entry"
        )


# ------------------------------------------------------------------
# Object lists
# ------------------------------------------------------------------

def test_object_list_delegates_each_entry_as_bytes_in_order():
    validator = RecordingValidator()
    document = {"items": [{"n": 1}, {"n": 2}, {"n": 3}]}

    assert check_object_list_field(document, "items", validator=validator) is None
    assert [json.loads(m)["n"] for m in validator.received] == [1, 2, 3]
    assert all(isinstance(m, bytes) for m in validator.received)


def test_object_list_reports_missing_field_without_delegating():
    validator = RecordingValidator()

    failure = check_object_list_field({}, "items", validator=validator)

    assert failure == MissingField(field="items")
    assert validator.received == []


def test_object_list_rejects_non_arrays():
    validator = RecordingValidator()

    failure = check_object_list_field(
        {"items": {"n": 1}}, "items", validator=validator
    )

    assert failure == InvalidFormat(description="items is no array")
    assert validator.received == []


def test_object_list_stops_at_first_failing_entry():
    validator = RecordingValidator()
    document = {
        "items": [
            {"n": 1},
            {"n": 2, "bad": True},
            {"n": 3, "bad": True},
            {"n": 4},
        ]
    }

    failure = check_object_list_field(document, "items", validator=validator)

    assert failure == InvalidFormat(description="bad element 2")
    assert len(validator.received) == 2


def test_object_list_passes_entry_failure_through_unchanged():
    failure = check_object_list_field(
        {"robots": [{"kind": 1}]},
        "robots",
        validator=ReferenceValidator(),
    )

    assert failure == MissingField(field="value")


def test_object_list_entries_that_are_not_objects_fail_in_the_element_validator():
    failure = check_object_list_field(
        {"robots": [1]},
        "robots",
        validator=ReferenceValidator(),
    )

    assert failure == InvalidFormat(description="Root of message is not an object")


# ------------------------------------------------------------------
# References
# ------------------------------------------------------------------

def test_reference_field_delegates_located_value():
    validator = RecordingValidator()

    failure = check_reference_field(
        {"senderId": {"n": 9}}, "senderId", validator=validator
    )

    assert failure is None
    assert json.loads(validator.received[0]) == {"n": 9}


def test_reference_field_reports_missing_field():
    failure = check_reference_field(
        {}, "senderId", validator=ReferenceValidator()
    )

    assert failure == MissingField(field="senderId")


def test_reference_field_reports_innermost_failure():
    failure = check_reference_field(
        {"senderId": {"kind": "zero", "value": "id"}},
        "senderId",
        validator=ReferenceValidator(),
    )

    assert failure == InvalidFormat(description="kind is no integer")
