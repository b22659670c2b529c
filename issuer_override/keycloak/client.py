"""HTTP client for the Keycloak Admin API.

Handles authentication, token refresh and error mapping.
"""
from __future__ import annotations
from datetime import datetime, timedelta
from typing import Any, Dict, Optional

import requests

from .exceptions import KeycloakAPIError

REQUEST_TIMEOUT = 5
TOKEN_LIFETIME = timedelta(seconds=60)
REFRESH_MARGIN = timedelta(seconds=10)


class KeycloakClient:
    """HTTP client for Keycloak Admin API with automatic token management.

    Usage:
        client = KeycloakClient("http://keycloak:8080")
        client.authenticate_service_account("demo", "automation-cli", secret)
        client.get("/admin/realms/demo/clients", params={"clientId": "flask-app"})
    """

    def __init__(self, base_url: Optional[str] = None):
        """Initialize Keycloak client.

        Args:
            base_url: Keycloak base URL (defaults to KEYCLOAK_URL from settings)
        """
        if base_url is None:
            from issuer_override.config import get_settings
            base_url = get_settings().keycloak_url
        self.base_url = base_url.rstrip("/")
        self._token: Optional[str] = None
        self._token_expires_at: Optional[datetime] = None
        self._token_request: Dict[str, Any] = {}

    def authenticate_admin(self, username: str, password: str, realm: str = "master") -> str:
        """Authenticate as admin user via direct access grant.

        Args:
            username: Admin username
            password: Admin password
            realm: Authentication realm (default: master)

        Returns:
            Access token
        """
        return self._authenticate(realm, {
            "grant_type": "password",
            "client_id": "admin-cli",
            "username": username,
            "password": password,
        })

    def authenticate_service_account(self, auth_realm: str, client_id: str, client_secret: str) -> str:
        """Authenticate as service account using client credentials flow.

        Args:
            auth_realm: Realm where service account client exists
            client_id: Service account client ID
            client_secret: Service account client secret

        Returns:
            Access token
        """
        return self._authenticate(auth_realm, {
            "grant_type": "client_credentials",
            "client_id": client_id,
            "client_secret": client_secret,
        })

    def _authenticate(self, realm: str, data: Dict[str, str]) -> str:
        self._token_request = {"realm": realm, "data": data}
        return self._refresh_token()

    def _refresh_token(self) -> str:
        realm = self._token_request["realm"]
        url = f"{self.base_url}/realms/{realm}/protocol/openid-connect/token"
        resp = requests.post(url, data=self._token_request["data"], timeout=REQUEST_TIMEOUT)
        if resp.status_code != 200:
            raise KeycloakAPIError(resp.status_code, resp.text, url)
        self._token = resp.json()["access_token"]
        # Conservative expiry
        self._token_expires_at = datetime.now() + TOKEN_LIFETIME
        return self._token

    def _ensure_authenticated(self) -> None:
        """Ensure we have a valid token, refreshing if necessary."""
        if not self._token or not self._token_expires_at:
            raise KeycloakAPIError(401, "Not authenticated - call authenticate_admin or authenticate_service_account first", "")
        if datetime.now() >= self._token_expires_at - REFRESH_MARGIN:
            self._refresh_token()

    def request(self, method: str, path: str, **kwargs) -> requests.Response:
        """Execute an authenticated request against the Admin API.

        Raises:
            KeycloakAPIError: On HTTP error
        """
        self._ensure_authenticated()
        headers = kwargs.pop("headers", {})
        headers["Authorization"] = f"Bearer {self._token}"
        resp = requests.request(
            method, f"{self.base_url}{path}", headers=headers, timeout=REQUEST_TIMEOUT, **kwargs
        )
        if resp.status_code >= 400:
            raise KeycloakAPIError(resp.status_code, resp.text, resp.url)
        return resp

    def get(self, path: str, params: Optional[Dict] = None, **kwargs) -> requests.Response:
        return self.request("GET", path, params=params, **kwargs)

    def post(self, path: str, json: Optional[Dict] = None, **kwargs) -> requests.Response:
        return self.request("POST", path, json=json, **kwargs)

    def put(self, path: str, json: Optional[Dict] = None, **kwargs) -> requests.Response:
        return self.request("PUT", path, json=json, **kwargs)

    def delete(self, path: str, **kwargs) -> requests.Response:
        return self.request("DELETE", path, **kwargs)
