"""Pytest shared fixtures."""
import pathlib
import sys

import pytest

# Add project root to Python path
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from issuer_override.config import settings as settings_module


SETTINGS_ENV_VARS = (
    "ISSUER_OVERRIDE_ON_MISSING",
    "LOG_LEVEL",
    "KEYCLOAK_URL",
    "KEYCLOAK_REALM",
    "REALM_ISSUER_URL",
)


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch, tmp_path):
    """Every test starts from default settings and an empty /run/secrets."""
    for var in SETTINGS_ENV_VARS:
        monkeypatch.delenv(var, raising=False)

    real_path = settings_module.Path

    def fake_path(target):
        if str(target) == "/run/secrets":
            return tmp_path
        return real_path(target)

    monkeypatch.setattr(settings_module, "Path", fake_path)
    settings_module.reset_settings()
    yield
    settings_module.reset_settings()


@pytest.fixture()
def internal_token():
    return {
        "iss": "https://kc.internal/realms/acme",
        "sub": "user1",
        "aud": "flask-app",
        "realm_access": {"roles": ["analyst"]},
    }
