"""
ALICA message schemas.

One validator per message kind. Each schema is a fixed, ordered list of
field rules; the order below is the evaluation order and is part of the
contract (the first failing field is the one reported).

Nested validators are injected through the constructor and default to the
sibling validator that describes the nested document. Injected validators
only need to satisfy MessageValidator.

Which schema applies to an incoming message is decided by the caller.
"""

from __future__ import annotations

from functools import partial
from typing import List, Optional

from alica_tp.app.messages.checks import (
    check_boolean_field,
    check_integer_field,
    check_integer_list_field,
    check_object_list_field,
    check_reference_field,
    check_string_field,
)
from alica_tp.app.messages.validator import (
    FieldCheck,
    FieldRule,
    MessageValidator,
    SchemaValidator,
)


# ---------------------------------------------------------------------------
# Identifier reference
# ---------------------------------------------------------------------------


class ReferenceValidator(SchemaValidator):
    """
    Agent / entity identifier: ``{"kind": <int>, "value": <str>}``.

    Used on its own and as the element validator of every reference field
    and reference list.
    """

    def _build_schema(self) -> List[FieldRule]:
        return [
            FieldRule("kind", check_integer_field),
            FieldRule("value", check_string_field),
        ]


class _ReferencingValidator(SchemaValidator):
    """Schema base for messages that embed identifier references."""

    def __init__(
        self, *, reference_validator: Optional[MessageValidator] = None
    ) -> None:
        self._reference_validator = reference_validator or ReferenceValidator()
        super().__init__()

    def _reference(self) -> FieldCheck:
        return partial(
            check_reference_field,
            validator=self._reference_validator,
        )

    def _reference_list(self) -> FieldCheck:
        return partial(
            check_object_list_field,
            validator=self._reference_validator,
        )


# ---------------------------------------------------------------------------
# Engine status
# ---------------------------------------------------------------------------


class EngineInfoValidator(_ReferencingValidator):
    """Periodic engine status report of a single agent."""

    def _build_schema(self) -> List[FieldRule]:
        return [
            FieldRule("senderId", self._reference()),
            FieldRule("masterPlan", check_string_field),
            FieldRule("currentPlan", check_string_field),
            FieldRule("currentState", check_string_field),
            FieldRule("currentRole", check_string_field),
            FieldRule("currentTask", check_string_field),
            FieldRule("agentIdsWithMe", self._reference_list()),
        ]


# ---------------------------------------------------------------------------
# Task allocation
# ---------------------------------------------------------------------------


class EntryPointRobotValidator(_ReferencingValidator):
    """Binding of an entry point to the robots allocated to it."""

    def _build_schema(self) -> List[FieldRule]:
        return [
            FieldRule("entrypoint", check_integer_field),
            FieldRule("robots", self._reference_list()),
        ]


class AllocationAuthorityInfoValidator(_ReferencingValidator):
    """Announcement of the agent holding allocation authority for a plan."""

    def __init__(
        self,
        *,
        reference_validator: Optional[MessageValidator] = None,
        entrypoint_robot_validator: Optional[MessageValidator] = None,
    ) -> None:
        self._entrypoint_robot_validator = (
            entrypoint_robot_validator
            or EntryPointRobotValidator(reference_validator=reference_validator)
        )
        super().__init__(reference_validator=reference_validator)

    def _build_schema(self) -> List[FieldRule]:
        return [
            FieldRule("senderId", self._reference()),
            FieldRule("planId", check_integer_field),
            FieldRule("parentState", check_integer_field),
            FieldRule("planType", check_integer_field),
            FieldRule("authority", self._reference()),
            FieldRule(
                "entrypointRobots",
                partial(
                    check_object_list_field,
                    validator=self._entrypoint_robot_validator,
                ),
            ),
        ]


class PlanTreeInfoValidator(_ReferencingValidator):
    """Active states and succeeded entry points of an agent's plan tree."""

    def _build_schema(self) -> List[FieldRule]:
        return [
            FieldRule("senderId", self._reference()),
            FieldRule("stateIds", check_integer_list_field),
            FieldRule("succeededEps", check_integer_list_field),
        ]


class RoleSwitchValidator(_ReferencingValidator):
    def _build_schema(self) -> List[FieldRule]:
        return [
            FieldRule("senderId", self._reference()),
            FieldRule("roleId", check_integer_field),
        ]


# ---------------------------------------------------------------------------
# Solver
# ---------------------------------------------------------------------------


class SolverVarValidator(SchemaValidator):
    """A single solver variable: id plus its raw value bytes as integers."""

    def _build_schema(self) -> List[FieldRule]:
        return [
            FieldRule("id", check_integer_field),
            FieldRule("value", check_integer_list_field),
        ]


class SolverResultValidator(_ReferencingValidator):
    def __init__(
        self,
        *,
        reference_validator: Optional[MessageValidator] = None,
        solver_var_validator: Optional[MessageValidator] = None,
    ) -> None:
        self._solver_var_validator = solver_var_validator or SolverVarValidator()
        super().__init__(reference_validator=reference_validator)

    def _build_schema(self) -> List[FieldRule]:
        return [
            FieldRule("senderId", self._reference()),
            FieldRule(
                "vars",
                partial(
                    check_object_list_field,
                    validator=self._solver_var_validator,
                ),
            ),
        ]


# ---------------------------------------------------------------------------
# Synchronisation
# ---------------------------------------------------------------------------


class SyncReadyValidator(_ReferencingValidator):
    def _build_schema(self) -> List[FieldRule]:
        return [
            FieldRule("senderId", self._reference()),
            FieldRule("synchronisationId", check_integer_field),
        ]


class SyncDataValidator(_ReferencingValidator):
    """One robot's view of a synchronised transition."""

    def _build_schema(self) -> List[FieldRule]:
        return [
            FieldRule("robotId", self._reference()),
            FieldRule("transitionId", check_integer_field),
            FieldRule("transitionHolds", check_boolean_field),
            FieldRule("ack", check_boolean_field),
        ]


class SyncTalkValidator(_ReferencingValidator):
    def __init__(
        self,
        *,
        reference_validator: Optional[MessageValidator] = None,
        sync_data_validator: Optional[MessageValidator] = None,
    ) -> None:
        self._sync_data_validator = sync_data_validator or SyncDataValidator(
            reference_validator=reference_validator
        )
        super().__init__(reference_validator=reference_validator)

    def _build_schema(self) -> List[FieldRule]:
        return [
            FieldRule("senderId", self._reference()),
            FieldRule(
                "syncData",
                partial(
                    check_object_list_field,
                    validator=self._sync_data_validator,
                ),
            ),
        ]
