from __future__ import annotations

import pytest

from fod_dashboard.api.auth import SecretVerifier
from fod_dashboard.core.config import Settings
from fod_dashboard.core.errors import Unauthorized


def test_current_and_previous_secrets_match() -> None:
    verifier = SecretVerifier.from_secrets(["new", "old"])

    assert verifier.matches("new")
    assert verifier.matches("old")
    assert not verifier.matches("NEW")
    assert not verifier.matches("")
    assert not verifier.matches(None)


def test_verify_rejects_wrong_secret() -> None:
    verifier = SecretVerifier.from_secrets(["new"])

    verifier.verify("new")
    with pytest.raises(Unauthorized):
        verifier.verify("fod-migrate-2026")


def test_no_configured_secret_rejects_everything() -> None:
    verifier = SecretVerifier.from_secrets([None, ""])

    assert verifier.secrets == ()
    with pytest.raises(Unauthorized):
        verifier.verify("")
    with pytest.raises(Unauthorized):
        verifier.verify("anything")


def test_from_settings_reads_current_and_previous() -> None:
    cfg = Settings(bridge_secret="new", bridge_previous_secrets=["old"])

    verifier = SecretVerifier.from_settings(cfg)

    assert verifier.secrets == ("new", "old")


def test_settings_repr_hides_secrets() -> None:
    cfg = Settings(bridge_secret="do-not-print")

    assert "do-not-print" not in repr(cfg)


def test_previous_secrets_read_from_comma_separated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BRIDGE_PREVIOUS_SECRETS", "a, b,")
    monkeypatch.setenv("CORS_ORIGINS", "https://fod.example")

    cfg = Settings()

    assert cfg.bridge_previous_secrets == ["a", "b"]
    assert cfg.cors_origins == ["https://fod.example"]


def test_single_previous_secret_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BRIDGE_SECRET", "new-secret")
    monkeypatch.setenv("BRIDGE_PREVIOUS_SECRETS", "old-secret")

    verifier = SecretVerifier.from_settings(Settings())

    assert verifier.secrets == ("new-secret", "old-secret")
