"""
Pipe-separated payload format.

Wire layout (UTF-8):

    <agent_id>|<message_type>|<message>|<timestamp>

The timestamp is an unsigned 64-bit decimal integer. Fields after the
fourth are ignored on decode. The format has no escaping, so a message
containing ``|`` does not survive a round trip.
"""

from __future__ import annotations

import logging

from alica_tp.app.payloads.models import (
    UINT64_MAX,
    InvalidPayloadError,
    InvalidTimestampError,
    TransactionPayload,
)

logger = logging.getLogger(__name__)

SEPARATOR = "|"

_PARTS = ("agent id", "message type", "message", "timestamp")


def _parse_timestamp(raw: str) -> int:
    # int() alone would accept signs, whitespace and underscores
    if not raw or not raw.isascii() or not raw.isdigit():
        raise InvalidTimestampError()

    timestamp = int(raw)
    if timestamp > UINT64_MAX:
        raise InvalidTimestampError()
    return timestamp


class PipeSeparatedFormat:
    """Stateless pipe-separated encoder/decoder for TransactionPayload."""

    def serialize(self, payload: TransactionPayload) -> bytes:
        try:
            message = payload.message_bytes.decode("utf-8")
        except UnicodeDecodeError:
            raise InvalidPayloadError("Message is not a UTF-8 string") from None

        return SEPARATOR.join(
            [
                payload.agent_id,
                payload.message_type,
                message,
                str(payload.timestamp),
            ]
        ).encode("utf-8")

    def deserialize(self, data: bytes) -> TransactionPayload:
        try:
            text = bytes(data).decode("utf-8")
        except UnicodeDecodeError:
            logger.debug("Rejected payload: not UTF-8")
            raise InvalidPayloadError("Payload is not a UTF-8 string") from None

        parts = text.split(SEPARATOR)
        if len(parts) < len(_PARTS):
            missing = _PARTS[len(parts)]
            logger.debug("Rejected payload: no %s", missing)
            raise InvalidPayloadError(f"Payload contains no {missing}")

        agent_id, message_type, message, raw_timestamp = parts[: len(_PARTS)]

        return TransactionPayload(
            agent_id=agent_id,
            message_type=message_type,
            message_bytes=message.encode("utf-8"),
            timestamp=_parse_timestamp(raw_timestamp),
        )
