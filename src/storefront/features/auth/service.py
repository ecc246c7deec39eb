"""
Auth service: login, registration and logout.
"""

import logging
from typing import Any, Dict, Optional

from storefront.clients.auth_client import AuthClient
from storefront.errors import ApiError, UpstreamError, ValidationFailed
from storefront.features.auth.validators import validate_login, validate_register
from storefront.models import Session
from storefront.session.session_manager import SessionContext

logger = logging.getLogger(__name__)


class AuthService:
    """Service class for account operations; owns the session lifecycle."""

    def __init__(self, session: SessionContext, client: Optional[AuthClient] = None):
        self.session = session
        self.client = client or AuthClient()

    def login(self, form: Dict[str, Any]) -> Session:
        """
        Validate the form, log in and persist the session.

        Raises:
            ValidationFailed: The form failed validation (no network call made)
            ApiError: The API rejected the credentials
            UpstreamError: The API could not be reached
        """
        result = validate_login(form)
        if not result.ok:
            raise ValidationFailed(result.message)

        body = self.client.login(form["username"], form["password"])
        if not body.get("success"):
            raise ApiError(400, body.get("message") or "Login failed", body)
        token = body.get("token")
        if not token:
            raise UpstreamError("Login response did not include a token")

        balance = body.get("balance")
        try:
            balance = float(balance) if balance is not None else None
        except (TypeError, ValueError) as e:
            raise UpstreamError(f"API returned an invalid login response: balance {balance!r}") from e

        session = self.session.persist(
            token=token,
            username=body.get("username") or form["username"],
            balance=balance,
        )
        logger.info("Logged in as %s", session.username)
        return session

    def register(self, form: Dict[str, Any]) -> bool:
        """
        Validate the form and create the account. The confirm field never
        leaves the client.
        """
        result = validate_register(form)
        if not result.ok:
            raise ValidationFailed(result.message)

        body = self.client.register(form["username"], form["password"])
        if not body.get("success"):
            raise ApiError(400, body.get("message") or "Registration failed", body)
        logger.info("Registered %s", form["username"])
        return True

    def logout(self) -> None:
        self.session.clear()
