"""Settings loader with environment variable and Docker secrets integration."""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from issuer_override.core.issuance import ON_MISSING_FAIL, ON_MISSING_POLICIES

logger = logging.getLogger(__name__)


def _load_secret_from_file(secret_name: str, env_var: str | None = None) -> str | None:
    """
    Load a value from /run/secrets (Docker secrets pattern).

    Priority:
    1. /run/secrets/{secret_name} (Docker secrets mount)
    2. Environment variable (fallback)

    Args:
        secret_name: Name of the secret file in /run/secrets
        env_var: Optional environment variable name to check as fallback

    Returns:
        Value or None if not found
    """
    secret_file = Path("/run/secrets") / secret_name

    if secret_file.exists() and secret_file.is_file():
        try:
            secret_value = secret_file.read_text().strip()
            if secret_value:
                logger.info("[settings] Loaded %s from /run/secrets", secret_name)
                return secret_value
        except OSError as e:
            logger.warning("[settings] Failed to read /run/secrets/%s: %s", secret_name, e)

    if env_var:
        secret_value = os.getenv(env_var)
        if secret_value:
            return secret_value

    return None


@dataclass
class MapperSettings:
    """Runtime configuration for the mapper and its deployment helper."""
    # Issuance policy when a mapper has no issuer URL configured
    on_missing: str = ON_MISSING_FAIL
    log_level: str = "INFO"

    # Keycloak Admin API (deployment helper)
    keycloak_url: str = "http://keycloak:8080"
    keycloak_realm: str = "demo"
    realm_issuer_url: str = ""


def configure_logging(level: Optional[str] = None) -> None:
    """Apply LOG_LEVEL to the package logger."""
    level_name = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    numeric = logging.getLevelName(level_name)
    if not isinstance(numeric, int):
        raise RuntimeError(f"Invalid LOG_LEVEL '{level_name}'")
    logging.getLogger("issuer_override").setLevel(numeric)


def load_settings() -> MapperSettings:
    """Load settings from environment and /run/secrets."""
    on_missing = os.environ.get("ISSUER_OVERRIDE_ON_MISSING", ON_MISSING_FAIL).strip().lower()
    if on_missing not in ON_MISSING_POLICIES:
        raise RuntimeError(
            f"ISSUER_OVERRIDE_ON_MISSING must be one of {', '.join(ON_MISSING_POLICIES)} (got '{on_missing}')"
        )

    log_level = os.environ.get("LOG_LEVEL", "INFO").strip().upper()

    keycloak_url = os.environ.get("KEYCLOAK_URL", "http://keycloak:8080").rstrip("/")
    keycloak_realm = os.environ.get("KEYCLOAK_REALM", "demo")
    realm_issuer_url = _load_secret_from_file("realm_issuer_url", "REALM_ISSUER_URL") or ""

    if on_missing != ON_MISSING_FAIL:
        logger.warning(
            "[settings] ISSUER_OVERRIDE_ON_MISSING=%s: misconfigured mappers will issue tokens with the realm issuer",
            on_missing,
        )
    logger.debug("[settings] on_missing=%s; realm=%s", on_missing, keycloak_realm)

    return MapperSettings(
        on_missing=on_missing,
        log_level=log_level,
        keycloak_url=keycloak_url,
        keycloak_realm=keycloak_realm,
        realm_issuer_url=realm_issuer_url,
    )


_settings: Optional[MapperSettings] = None


def get_settings() -> MapperSettings:
    """Return the settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
        configure_logging(_settings.log_level)
    return _settings


def reset_settings() -> None:
    """Drop cached settings so the next get_settings() reloads the environment."""
    global _settings
    _settings = None
