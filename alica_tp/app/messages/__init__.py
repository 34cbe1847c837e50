from .outcome import (
    InvalidFormat,
    MissingField,
    ValidationFailure,
    ValidationOutcome,
)
from .validator import FieldRule, MessageValidator, SchemaValidator
from .schemas import (
    AllocationAuthorityInfoValidator,
    EngineInfoValidator,
    EntryPointRobotValidator,
    PlanTreeInfoValidator,
    ReferenceValidator,
    RoleSwitchValidator,
    SolverResultValidator,
    SolverVarValidator,
    SyncDataValidator,
    SyncReadyValidator,
    SyncTalkValidator,
)

__all__ = [
    "InvalidFormat",
    "MissingField",
    "ValidationFailure",
    "ValidationOutcome",
    "FieldRule",
    "MessageValidator",
    "SchemaValidator",
    "AllocationAuthorityInfoValidator",
    "EngineInfoValidator",
    "EntryPointRobotValidator",
    "PlanTreeInfoValidator",
    "ReferenceValidator",
    "RoleSwitchValidator",
    "SolverResultValidator",
    "SolverVarValidator",
    "SyncDataValidator",
    "SyncReadyValidator",
    "SyncTalkValidator",
]
