"""Realm issuer override protocol mapper.

Overrides the ``iss`` (issuer) claim of OIDC tokens with the URL configured
on the mapper instance, so tokens advertise a public issuer instead of the
realm's internal one.

Usage:
    # Plain transform
    token = apply_issuer_override(claims, {"realmIssuerUrl": "https://auth.example"})

    # Typed result, caller decides what a failure means
    result = try_apply_issuer_override(claims, config)
    if not result.ok:
        ...

    # Host hook
    mapper = RealmIssuerOverrideMapper()
    mapper.transform_access_token(claims, mapper_model)
"""
from __future__ import annotations
import logging
from typing import Any, Dict, Mapping, Optional, Tuple

from .exceptions import ConfigurationMissingError, MapperError
from .models import (
    ISSUER_CLAIM,
    MapperResult,
    ProtocolMapperModel,
    ProviderConfigProperty,
    TokenKind,
    TokenRepresentation,
)

logger = logging.getLogger(__name__)

PROVIDER_ID = "realm-issuer-override-protocol-mapper"
REALM_URL_PROPERTY = "realmIssuerUrl"

CONFIG_PROPERTIES: Tuple[ProviderConfigProperty, ...] = (
    ProviderConfigProperty(
        name=REALM_URL_PROPERTY,
        label="Realm Issuer URL",
        help_text="URL to use as the 'iss' (issuer) field in the token.",
        required=True,
    ),
)


def get_realm_issuer(config: Mapping[str, str]) -> str:
    """Read the configured issuer URL.

    Args:
        config: Mapper configuration mapping

    Returns:
        Non-empty issuer URL

    Raises:
        ConfigurationMissingError: If the key is absent or the value is empty
    """
    issuer = config.get(REALM_URL_PROPERTY)
    if not issuer:
        raise ConfigurationMissingError(REALM_URL_PROPERTY, PROVIDER_ID)
    return issuer


def apply_issuer_override(token: TokenRepresentation, config: Mapping[str, str]) -> TokenRepresentation:
    """Set the token's ``iss`` claim to the configured realm issuer URL.

    The token is mutated in place and returned. When the configuration is
    missing the token is left untouched.

    Raises:
        ConfigurationMissingError: If ``realmIssuerUrl`` is absent or empty
    """
    try:
        issuer = get_realm_issuer(config)
    except ConfigurationMissingError:
        logger.debug("Issuer override skipped: '%s' is not configured", REALM_URL_PROPERTY)
        raise

    logger.debug("Overriding token issuer with %s", issuer)
    token[ISSUER_CLAIM] = issuer
    return token


def try_apply_issuer_override(token: TokenRepresentation, config: Mapping[str, str]) -> MapperResult:
    """Same as apply_issuer_override, but failures come back inside the result."""
    try:
        return MapperResult(token=apply_issuer_override(token, config))
    except MapperError as exc:
        return MapperResult(error=exc)


class RealmIssuerOverrideMapper:
    """Protocol mapper hook replacing the token issuer with a configured URL.

    Applies to access tokens, ID tokens and user-info responses. Stateless:
    one instance can serve concurrent token-issuance calls.
    """

    PROVIDER_ID = PROVIDER_ID
    REALM_URL_PROPERTY = REALM_URL_PROPERTY
    CONFIG_PROPERTIES = CONFIG_PROPERTIES
    DISPLAY_CATEGORY = "Token Mapper"
    DISPLAY_TYPE = "Realm Issuer URL"
    HELP_TEXT = "Maps a custom Realm Issuer URL to the Access tokens"
    PRIORITY = 0
    TOKEN_KINDS = frozenset({TokenKind.ACCESS, TokenKind.ID, TokenKind.USERINFO})

    def get_config_properties(self) -> Tuple[ProviderConfigProperty, ...]:
        return self.CONFIG_PROPERTIES

    def describe(self) -> Dict[str, Any]:
        """Metadata in the shape of a server-info ``protocolMapperTypes`` entry."""
        return {
            "id": self.PROVIDER_ID,
            "name": self.DISPLAY_TYPE,
            "category": self.DISPLAY_CATEGORY,
            "helpText": self.HELP_TEXT,
            "priority": self.PRIORITY,
            "properties": [prop.to_representation() for prop in self.CONFIG_PROPERTIES],
        }

    def transform(
        self,
        kind: TokenKind,
        token: TokenRepresentation,
        mapper_model: ProtocolMapperModel,
        session: Optional[Any] = None,
        user_session: Optional[Any] = None,
        client_session_ctx: Optional[Any] = None,
    ) -> TokenRepresentation:
        """Apply the override for the given token type.

        Session arguments belong to the host and are not read.

        Raises:
            ConfigurationMissingError: If the model has no issuer URL configured
        """
        kind = TokenKind(kind)
        if not mapper_model.includes(kind):
            return token
        return apply_issuer_override(token, mapper_model.config)

    def transform_access_token(self, token, mapper_model, session=None, user_session=None, client_session_ctx=None):
        return self.transform(TokenKind.ACCESS, token, mapper_model, session, user_session, client_session_ctx)

    def transform_id_token(self, token, mapper_model, session=None, user_session=None, client_session_ctx=None):
        return self.transform(TokenKind.ID, token, mapper_model, session, user_session, client_session_ctx)

    def transform_userinfo_token(self, token, mapper_model, session=None, user_session=None, client_session_ctx=None):
        return self.transform(TokenKind.USERINFO, token, mapper_model, session, user_session, client_session_ctx)
