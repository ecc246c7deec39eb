"""
Auth API Client

Thin HTTP client for login and registration.
"""

from typing import Any, Dict

from storefront.clients.base_client import BaseClient
from storefront.errors import UpstreamError


class AuthClient(BaseClient):
    """HTTP client for /auth endpoints."""

    def _post_credentials(self, path: str, username: str, password: str) -> Dict[str, Any]:
        body = self._request("POST", path, json={"username": username, "password": password})
        if not isinstance(body, dict):
            raise UpstreamError(f"API returned an invalid response for {path}")
        return body

    def login(self, username: str, password: str) -> Dict[str, Any]:
        """
        Log in with username and password.

        POST /auth/login

        Returns:
            {"success": true, "token": ..., "username": ..., "balance": ...}
        """
        return self._post_credentials("/auth/login", username, password)

    def register(self, username: str, password: str) -> Dict[str, Any]:
        """
        Register a new account.

        POST /auth/register

        Returns:
            {"success": true}
        """
        return self._post_credentials("/auth/register", username, password)
