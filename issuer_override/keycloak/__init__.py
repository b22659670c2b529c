"""Keycloak Admin API helpers for deploying the issuer override mapper.

Usage:
    from issuer_override.keycloak import KeycloakClient, ProtocolMapperService

    client = KeycloakClient("http://keycloak:8080")
    client.authenticate_service_account("demo", "automation-cli", secret)

    service = ProtocolMapperService(client)
    service.ensure_issuer_override_mapper("demo", "flask-app", "https://auth.example.com")
"""
from .client import KeycloakClient, REQUEST_TIMEOUT
from .exceptions import KeycloakError, KeycloakAPIError, ClientNotFoundError, MapperConflictError
from .mappers import ProtocolMapperService, DEFAULT_MAPPER_NAME, ensure_mapper_from_settings

__all__ = [
    "KeycloakClient",
    "REQUEST_TIMEOUT",
    "KeycloakError",
    "KeycloakAPIError",
    "ClientNotFoundError",
    "MapperConflictError",
    "ProtocolMapperService",
    "DEFAULT_MAPPER_NAME",
    "ensure_mapper_from_settings",
]
