"""Core mapper logic, independent of Keycloak's HTTP API.

Module Structure:
    - mapper.py     : issuer override transform and host hook object
    - models.py     : mapper model, config property and result types
    - registry.py   : provider identifier -> mapper lookup table
    - issuance.py   : applies configured mappers with an on-missing policy
    - exceptions.py : typed mapper errors
"""
from .exceptions import MapperError, ConfigurationMissingError, MapperNotFoundError
from .mapper import (
    PROVIDER_ID,
    REALM_URL_PROPERTY,
    CONFIG_PROPERTIES,
    RealmIssuerOverrideMapper,
    apply_issuer_override,
    try_apply_issuer_override,
)
from .models import MapperResult, ProtocolMapperModel, ProviderConfigProperty, TokenKind
from .registry import available_mappers, get_mapper, register_mapper
from .issuance import apply_protocol_mappers

__all__ = [
    "MapperError",
    "ConfigurationMissingError",
    "MapperNotFoundError",
    "PROVIDER_ID",
    "REALM_URL_PROPERTY",
    "CONFIG_PROPERTIES",
    "RealmIssuerOverrideMapper",
    "apply_issuer_override",
    "try_apply_issuer_override",
    "MapperResult",
    "ProtocolMapperModel",
    "ProviderConfigProperty",
    "TokenKind",
    "available_mappers",
    "get_mapper",
    "register_mapper",
    "apply_protocol_mappers",
]
