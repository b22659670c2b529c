"""Attach the issuer override mapper to Keycloak OIDC clients."""
from __future__ import annotations
import logging
from typing import List, Optional

from issuer_override.core.exceptions import ConfigurationMissingError
from issuer_override.core.mapper import PROVIDER_ID, REALM_URL_PROPERTY
from issuer_override.core.models import ProtocolMapperModel, TokenKind

from .client import KeycloakClient
from .exceptions import ClientNotFoundError, MapperConflictError

logger = logging.getLogger(__name__)

DEFAULT_MAPPER_NAME = "realm-issuer-override"


class ProtocolMapperService:
    """Service for managing protocol mapper models on Keycloak clients."""

    def __init__(self, client: KeycloakClient):
        """Initialize protocol mapper service.

        Args:
            client: Authenticated Keycloak client
        """
        self.client = client

    def get_client_uuid(self, realm: str, client_id: str) -> str:
        """Resolve a clientId to the client's internal UUID.

        Raises:
            ClientNotFoundError: If no client has that clientId
        """
        resp = self.client.get(f"/admin/realms/{realm}/clients", params={"clientId": client_id})
        clients = resp.json() or []
        if not clients:
            raise ClientNotFoundError(realm, client_id)
        return clients[0]["id"]

    def _models_path(self, realm: str, client_uuid: str) -> str:
        return f"/admin/realms/{realm}/clients/{client_uuid}/protocol-mappers/models"

    def list_protocol_mappers(self, realm: str, client_id: str) -> List[ProtocolMapperModel]:
        client_uuid = self.get_client_uuid(realm, client_id)
        resp = self.client.get(self._models_path(realm, client_uuid))
        return [ProtocolMapperModel.from_representation(rep) for rep in resp.json() or []]

    def _find(self, realm: str, client_uuid: str, client_id: str, name: str) -> Optional[ProtocolMapperModel]:
        """Return the issuer override model called name, if any.

        Raises:
            MapperConflictError: If a model of another mapper type holds the name
        """
        resp = self.client.get(self._models_path(realm, client_uuid))
        for rep in resp.json() or []:
            if rep.get("name") != name:
                continue
            if rep.get("protocolMapper") != PROVIDER_ID:
                raise MapperConflictError(name, client_id, rep.get("protocolMapper", ""))
            return ProtocolMapperModel.from_representation(rep)
        return None

    def ensure_issuer_override_mapper(
        self,
        realm: str,
        client_id: str,
        issuer_url: str,
        name: str = DEFAULT_MAPPER_NAME,
    ) -> str:
        """Create or update the issuer override mapper on a client.

        Args:
            realm: Realm name
            client_id: Client ID (not UUID)
            issuer_url: URL tokens should carry as ``iss``
            name: Mapper model name

        Returns:
            "created", "updated" or "unchanged"

        The mapper is enabled for access tokens, ID tokens and user-info;
        an existing model with any of those flags off is switched back on.

        Raises:
            ConfigurationMissingError: If issuer_url is empty
            ClientNotFoundError: If the client does not exist
            MapperConflictError: If another mapper type already uses name
        """
        if not issuer_url:
            raise ConfigurationMissingError(REALM_URL_PROPERTY, PROVIDER_ID)

        client_uuid = self.get_client_uuid(realm, client_id)
        existing = self._find(realm, client_uuid, client_id, name)
        desired = {REALM_URL_PROPERTY: issuer_url, **{kind.include_flag: "true" for kind in TokenKind}}

        if existing is None:
            model = ProtocolMapperModel(name=name, protocol_mapper=PROVIDER_ID, config=desired)
            self.client.post(self._models_path(realm, client_uuid), json=model.to_representation())
            logger.info("[mappers] Created '%s' on client '%s' (realm %s)", name, client_id, realm)
            return "created"

        if existing.config.get(REALM_URL_PROPERTY) == issuer_url and all(existing.includes(kind) for kind in TokenKind):
            logger.info("[mappers] '%s' on client '%s' already up to date", name, client_id)
            return "unchanged"

        existing.config.update(desired)
        self.client.put(
            f"{self._models_path(realm, client_uuid)}/{existing.id}",
            json=existing.to_representation(),
        )
        logger.info("[mappers] Updated '%s' on client '%s' (realm %s)", name, client_id, realm)
        return "updated"

    def remove_issuer_override_mapper(self, realm: str, client_id: str, name: str = DEFAULT_MAPPER_NAME) -> bool:
        """Delete the mapper model from a client.

        Returns:
            True if a mapper was deleted, False if none was present

        Raises:
            MapperConflictError: If name belongs to another mapper type
        """
        client_uuid = self.get_client_uuid(realm, client_id)
        existing = self._find(realm, client_uuid, client_id, name)
        if existing is None:
            return False
        self.client.delete(f"{self._models_path(realm, client_uuid)}/{existing.id}")
        logger.info("[mappers] Removed '%s' from client '%s' (realm %s)", name, client_id, realm)
        return True


def ensure_mapper_from_settings(client: KeycloakClient, client_id: str) -> str:
    """Install the mapper using KEYCLOAK_REALM and REALM_ISSUER_URL from settings."""
    from issuer_override.config import get_settings

    settings = get_settings()
    service = ProtocolMapperService(client)
    return service.ensure_issuer_override_mapper(settings.keycloak_realm, client_id, settings.realm_issuer_url)
