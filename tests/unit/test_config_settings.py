import logging

import pytest

from issuer_override.config import settings


def test_defaults():
    cfg = settings.load_settings()
    assert cfg.on_missing == "fail"
    assert cfg.log_level == "INFO"
    assert cfg.keycloak_url == "http://keycloak:8080"
    assert cfg.keycloak_realm == "demo"
    assert cfg.realm_issuer_url == ""


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("ISSUER_OVERRIDE_ON_MISSING", " Passthrough ")
    monkeypatch.setenv("KEYCLOAK_URL", "https://kc.internal/")
    monkeypatch.setenv("KEYCLOAK_REALM", "acme")
    monkeypatch.setenv("REALM_ISSUER_URL", "https://auth.acme.example")
    cfg = settings.load_settings()
    assert cfg.on_missing == "passthrough"
    assert cfg.keycloak_url == "https://kc.internal"
    assert cfg.keycloak_realm == "acme"
    assert cfg.realm_issuer_url == "https://auth.acme.example"


def test_invalid_policy_rejected(monkeypatch):
    monkeypatch.setenv("ISSUER_OVERRIDE_ON_MISSING", "ignore")
    with pytest.raises(RuntimeError, match="ISSUER_OVERRIDE_ON_MISSING"):
        settings.load_settings()


def test_issuer_url_prefers_run_secrets(monkeypatch, tmp_path):
    # conftest points /run/secrets at tmp_path
    (tmp_path / "realm_issuer_url").write_text("https://from-secret.example\n")
    monkeypatch.setenv("REALM_ISSUER_URL", "https://from-env.example")
    assert settings.load_settings().realm_issuer_url == "https://from-secret.example"


def test_empty_secret_file_falls_back_to_env(monkeypatch, tmp_path):
    (tmp_path / "realm_issuer_url").write_text("  ")
    monkeypatch.setenv("REALM_ISSUER_URL", "https://from-env.example")
    assert settings.load_settings().realm_issuer_url == "https://from-env.example"


def test_get_settings_caches_until_reset(monkeypatch):
    first = settings.get_settings()
    monkeypatch.setenv("KEYCLOAK_REALM", "other")
    assert settings.get_settings() is first
    settings.reset_settings()
    assert settings.get_settings().keycloak_realm == "other"


def test_configure_logging_sets_package_level():
    logger = logging.getLogger("issuer_override")
    original = logger.level
    try:
        settings.configure_logging("debug")
        assert logger.level == logging.DEBUG
    finally:
        logger.setLevel(original)


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(RuntimeError, match="LOG_LEVEL"):
        settings.configure_logging("chatty")
