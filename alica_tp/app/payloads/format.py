from __future__ import annotations

from typing import Protocol

from alica_tp.app.payloads.models import TransactionPayload


class PayloadFormat(Protocol):
    """
    Interface for encoding transaction payloads to and from bytes.

    Implementations must:
    - raise PayloadError subclasses for malformed input
    - be stateless
    - round-trip every payload they can serialize
    """

    def serialize(self, payload: TransactionPayload) -> bytes:
        ...

    def deserialize(self, data: bytes) -> TransactionPayload:
        ...
