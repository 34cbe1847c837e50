"""
Transaction family identity and state addressing.

The namespace is the first 6 hex characters of the family name's
checksum. A state address is the namespace followed by the first 64 hex
characters of the checksum over (agent id, message type, timestamp), for
70 characters in total.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from alica_tp.app.config import TransactionFamilyConfig
from alica_tp.app.payloads.models import TransactionPayload
from alica_tp.app.utils.hashing import calculate_checksum


NAMESPACE_LENGTH = 6
PAYLOAD_ADDRESS_LENGTH = 64


class TransactionFamily(BaseModel):
    name: str = Field(
        "",
        description="Transaction family name",
    )

    versions: List[str] = Field(
        default_factory=list,
        description="Supported versions, oldest first",
    )

    @classmethod
    def from_config(cls, config: TransactionFamilyConfig) -> "TransactionFamily":
        return cls(
            name=config.FAMILY_NAME,
            versions=list(config.FAMILY_VERSIONS),
        )

    def calculate_namespace(self) -> str:
        return calculate_checksum(self.name)[:NAMESPACE_LENGTH]

    def calculate_state_address_for(self, payload: TransactionPayload) -> str:
        payload_part = calculate_checksum(
            f"{payload.agent_id}{payload.message_type}{payload.timestamp}"
        )
        return self.calculate_namespace() + payload_part[:PAYLOAD_ADDRESS_LENGTH]

    def latest_version(self) -> str:
        if not self.versions:
            raise ValueError(
                f"There are no versions for transaction family "
                f"'{self.name}' configured"
            )
        return self.versions[-1]

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )
