"""Realm issuer override protocol mapper.

Replaces the ``iss`` claim of OIDC tokens with an administrator-configured
URL instead of the realm's default issuer.

To apply the transform directly:
    from issuer_override.core.mapper import apply_issuer_override

To look up the mapper the way a host does:
    from issuer_override.core.registry import get_mapper

To attach the mapper to a Keycloak client:
    from issuer_override.keycloak import KeycloakClient, ProtocolMapperService
"""
# Note: the keycloak package is not imported here so the core transform
# stays usable without the requests dependency.
