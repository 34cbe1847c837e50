"""
Runtime configuration for the ALICA message transaction family.

Centralizes the environment-driven settings that identify the transaction
family (name and supported versions). Message validation itself is not
configurable: schemas are fixed in code.

Configuration is read-only at runtime.
"""

from __future__ import annotations

import os
from typing import List

from pydantic import BaseModel, Field, field_validator


DEFAULT_FAMILY_NAME = "alica_messages"
DEFAULT_FAMILY_VERSIONS = ["0.1.0"]


class TransactionFamilyConfig(BaseModel):
    """
    Identity of the transaction family.

    Versions are ordered oldest first; the last entry is the latest.
    """

    FAMILY_NAME: str = Field(
        DEFAULT_FAMILY_NAME,
        description="Transaction family name; its checksum yields the namespace",
    )

    FAMILY_VERSIONS: List[str] = Field(
        default_factory=lambda: list(DEFAULT_FAMILY_VERSIONS),
        description="Supported family versions, oldest first",
    )

    # ------------------------------------------------------------------
    # Validators (Pydantic v2)
    # ------------------------------------------------------------------

    @field_validator("FAMILY_NAME")
    @classmethod
    def family_name_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("FAMILY_NAME must not be empty.")
        return v

    @field_validator("FAMILY_VERSIONS")
    @classmethod
    def versions_not_empty(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("FAMILY_VERSIONS must list at least one version.")
        if any(not version.strip() for version in v):
            raise ValueError("FAMILY_VERSIONS must not contain empty entries.")
        return v

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "TransactionFamilyConfig":
        """
        Load configuration from environment variables.

        ALICA_TP_FAMILY_VERSIONS is a comma separated list.
        """
        raw_versions = os.getenv("ALICA_TP_FAMILY_VERSIONS")
        versions = (
            [part.strip() for part in raw_versions.split(",")]
            if raw_versions is not None
            else list(DEFAULT_FAMILY_VERSIONS)
        )

        return cls(
            FAMILY_NAME=os.getenv(
                "ALICA_TP_FAMILY_NAME", DEFAULT_FAMILY_NAME
            ),
            FAMILY_VERSIONS=versions,
        )

    model_config = {
        "frozen": True,
    }
