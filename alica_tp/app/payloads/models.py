"""
Transaction payload envelope.

A payload wraps one ALICA message (as opaque bytes) together with the
sending agent, the message type and a timestamp. The envelope does not
know or check the message schema; that is the job of the message
validators.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


UINT64_MAX = 2 ** 64 - 1


class PayloadError(ValueError):
    """Base class for payload encoding and decoding failures."""


class InvalidPayloadError(PayloadError):
    """The payload is structurally malformed."""


class InvalidTimestampError(PayloadError):
    """The payload's timestamp is not an unsigned 64-bit integer."""

    def __init__(self, message: str = "Payload contains invalid timestamp") -> None:
        super().__init__(message)


class TransactionPayload(BaseModel):
    """
    Envelope carried by a transaction.

    ``message_bytes`` is opaque to the envelope.
    """

    agent_id: str = Field(
        "",
        description="Identifier of the sending agent",
    )

    message_type: str = Field(
        "",
        description="Message kind, used by the host to pick a validator",
    )

    message_bytes: bytes = Field(
        b"",
        description="Raw message document",
    )

    timestamp: int = Field(
        0,
        ge=0,
        le=UINT64_MAX,
        description="Sender timestamp (unsigned 64-bit)",
    )

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        strict=True,
    )
