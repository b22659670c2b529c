"""Host-side helper running configured protocol mappers over a token.

The mapper itself never decides what a missing issuer URL means for token
issuance. This helper makes that decision explicit through ``on_missing``:

    - "fail": re-raise ConfigurationMissingError, issuance stops
    - "passthrough": log the failure and keep the token as that mapper left it
"""
from __future__ import annotations
import logging
from typing import Iterable, Optional

from .exceptions import ConfigurationMissingError
from .models import ProtocolMapperModel, TokenKind, TokenRepresentation
from .registry import get_mapper

logger = logging.getLogger(__name__)

ON_MISSING_FAIL = "fail"
ON_MISSING_PASSTHROUGH = "passthrough"
ON_MISSING_POLICIES = (ON_MISSING_FAIL, ON_MISSING_PASSTHROUGH)


def apply_protocol_mappers(
    token: TokenRepresentation,
    mapper_models: Iterable[ProtocolMapperModel],
    kind: TokenKind,
    *,
    on_missing: Optional[str] = None,
) -> TokenRepresentation:
    """Apply each mapper model to the token, in order.

    Args:
        token: Claim mapping being issued
        mapper_models: Configured mapper instances for the client
        kind: Token type being issued
        on_missing: Policy for ConfigurationMissingError (defaults to settings)

    Returns:
        The same token object

    Raises:
        MapperNotFoundError: If a model references an unregistered mapper
        ConfigurationMissingError: If a mapper is misconfigured and the policy is "fail"
        ValueError: If on_missing is not a known policy
    """
    if on_missing is None:
        from issuer_override.config import get_settings
        on_missing = get_settings().on_missing
    if on_missing not in ON_MISSING_POLICIES:
        raise ValueError(f"Unknown on_missing policy '{on_missing}' (expected one of {ON_MISSING_POLICIES})")

    kind = TokenKind(kind)
    for model in mapper_models:
        mapper = get_mapper(model.protocol_mapper)
        try:
            token = mapper.transform(kind, token, model)
        except ConfigurationMissingError as exc:
            if on_missing == ON_MISSING_FAIL:
                logger.error(
                    "Mapper '%s' (%s) misconfigured, %s token issuance stopped: %s",
                    model.name,
                    model.protocol_mapper,
                    kind.value,
                    exc,
                )
                raise
            logger.error(
                "Mapper '%s' (%s) misconfigured, %s token issued without it: %s",
                model.name,
                model.protocol_mapper,
                kind.value,
                exc,
            )
    return token
