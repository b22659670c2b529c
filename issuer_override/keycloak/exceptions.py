"""Keycloak Admin API exceptions."""


class KeycloakError(Exception):
    """Base exception for all Keycloak operations."""
    pass


class KeycloakAPIError(KeycloakError):
    """HTTP error from Keycloak Admin API.

    Attributes:
        status_code: HTTP status code
        message: Error message from response
        endpoint: API endpoint that failed
    """

    def __init__(self, status_code: int, message: str, endpoint: str):
        self.status_code = status_code
        self.message = message
        self.endpoint = endpoint
        super().__init__(f"[{status_code}] {endpoint}: {message}")


class ClientNotFoundError(KeycloakError):
    """No client with the given clientId exists in the realm."""

    def __init__(self, realm: str, client_id: str):
        self.realm = realm
        self.client_id = client_id
        super().__init__(f"Client '{client_id}' not found in realm '{realm}'")


class MapperConflictError(KeycloakError):
    """A mapper model with the wanted name exists but is of another mapper type.

    Attributes:
        name: Mapper model name
        client_id: Client the model belongs to
        protocol_mapper: Provider identifier of the existing model
    """

    def __init__(self, name: str, client_id: str, protocol_mapper: str):
        self.name = name
        self.client_id = client_id
        self.protocol_mapper = protocol_mapper
        super().__init__(
            f"Mapper '{name}' on client '{client_id}' is a '{protocol_mapper}' mapper, not an issuer override"
        )
