import pytest
from pydantic import ValidationError

from alica_tp.app.config import TransactionFamilyConfig


def test_defaults(monkeypatch):
    monkeypatch.delenv("ALICA_TP_FAMILY_NAME", raising=False)
    monkeypatch.delenv("ALICA_TP_FAMILY_VERSIONS", raising=False)

    config = TransactionFamilyConfig.from_env()

    assert config.FAMILY_NAME == "alica_messages"
    assert config.FAMILY_VERSIONS == ["0.1.0"]


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("ALICA_TP_FAMILY_NAME", "robots")
    monkeypatch.setenv("ALICA_TP_FAMILY_VERSIONS", "0.1.0, 0.2.0 ,1.0.0")

    config = TransactionFamilyConfig.from_env()

    assert config.FAMILY_NAME == "robots"
    assert config.FAMILY_VERSIONS == ["0.1.0", "0.2.0", "1.0.0"]


def test_empty_family_name_is_rejected(monkeypatch):
    monkeypatch.setenv("ALICA_TP_FAMILY_NAME", "  ")

    with pytest.raises(ValidationError, match="FAMILY_NAME"):
        TransactionFamilyConfig.from_env()


def test_empty_version_entries_are_rejected(monkeypatch):
    monkeypatch.setenv("ALICA_TP_FAMILY_VERSIONS", "0.1.0,,0.2.0")

    with pytest.raises(ValidationError, match="empty entries"):
        TransactionFamilyConfig.from_env()


def test_an_empty_version_list_is_rejected():
    with pytest.raises(ValidationError, match="at least one version"):
        TransactionFamilyConfig(FAMILY_VERSIONS=[])


def test_configuration_is_frozen():
    config = TransactionFamilyConfig()

    with pytest.raises(ValidationError):
        config.FAMILY_NAME = "changed"
