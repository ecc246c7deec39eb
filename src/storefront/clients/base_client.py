"""
Base HTTP Client

Shared base class for the thin HTTP clients that talk to the storefront API.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from storefront.config import config
from storefront.errors import ApiError, UpstreamError

logger = logging.getLogger(__name__)


class BaseClient:
    """Base HTTP client with common error handling."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize base client.

        Args:
            base_url: API base URL (overrides API_BASE_URL)
            timeout: Request timeout in seconds (overrides HTTP_TIMEOUT_SECONDS)
            transport: Optional httpx transport, used by tests to fake the API
        """
        self.base_url = (base_url or config.API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else config.HTTP_TIMEOUT_SECONDS
        # Create a single httpx client instance for reuse
        self._client = httpx.Client(timeout=self.timeout, transport=transport)

    @staticmethod
    def _auth_headers(token: Optional[str]) -> Optional[Dict[str, str]]:
        if not token:
            return None
        return {"Authorization": f"Bearer {token}"}

    @staticmethod
    def _error_message(response: httpx.Response) -> tuple[str, Dict[str, Any]]:
        """Pull the server's ``message`` out of an error body, if it sent one."""
        try:
            body = response.json()
        except ValueError:
            text = response.text[:200] if response.text else ""
            return text or f"API returned error {response.status_code}", {}
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"]), body
        return f"API returned error {response.status_code}", body if isinstance(body, dict) else {}

    def _send(
        self,
        method: str,
        path: str,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        token: Optional[str] = None,
    ) -> httpx.Response:
        url = f"{self.base_url}{path}"
        logger.debug("%s %s params=%s", method, url, params)
        try:
            return self._client.request(
                method=method,
                url=url,
                json=json,
                params=params,
                headers=self._auth_headers(token),
            )
        except httpx.RequestError as e:
            raise UpstreamError(f"API request failed: {str(e)}") from e

    def _decode(self, response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(
                f"API returned invalid JSON ({response.status_code})"
            ) from e

    def _request(
        self,
        method: str,
        path: str,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        token: Optional[str] = None,
    ) -> Any:
        """
        Make HTTP request and return parsed JSON.

        Args:
            method: HTTP method (GET, POST, etc.)
            path: API path (will be appended to base_url)
            json: JSON payload for POST requests
            params: Query parameters for GET requests
            token: Session token, sent as a Bearer Authorization header

        Returns:
            Parsed JSON response (None for an empty body)

        Raises:
            ApiError: When the API answers with an error status
            UpstreamError: On network failures or invalid JSON
        """
        response = self._send(method, path, json=json, params=params, token=token)
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            message, payload = self._error_message(e.response)
            raise ApiError(e.response.status_code, message, payload) from e
        return self._decode(response)

    def _request_allow_404(
        self,
        method: str,
        path: str,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        token: Optional[str] = None,
    ) -> Any:
        """
        Make HTTP request and return parsed JSON, or None on 404.

        Raises:
            ApiError: On HTTP errors other than 404
            UpstreamError: On network failures or invalid JSON
        """
        response = self._send(method, path, json=json, params=params, token=token)
        if response.status_code == 404:
            return None
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            message, payload = self._error_message(e.response)
            raise ApiError(e.response.status_code, message, payload) from e
        return self._decode(response)

    def close(self) -> None:
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def __del__(self):
        """Close httpx client on cleanup."""
        if hasattr(self, "_client"):
            try:
                self._client.close()
            except Exception:
                pass
