"""
Storefront Error Classes

Custom exceptions for storefront operations.

- ValidationFailed / LoginRequired / AlreadyInCart: detected locally, no
  network call is made; shown as warnings
- UpstreamError: transport failures (no usable response)
- ApiError: the API answered with an error status and a structured message
"""

from typing import Optional


class StorefrontError(Exception):
    """Base class for failures that end a single user action."""

    variant = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationFailed(StorefrontError):
    """Raised when form input fails a local validation rule."""

    variant = "warning"


class LoginRequired(StorefrontError):
    """Raised when a cart action is attempted without a session token."""

    variant = "warning"

    def __init__(self, message: str = "Login to add an item to the Cart"):
        super().__init__(message)


class AlreadyInCart(StorefrontError):
    """Raised when the catalog tries to add a product the cart already holds."""

    variant = "warning"

    def __init__(
        self,
        message: str = "Item already in cart. Use the cart sidebar to update quantity or remove item.",
    ):
        super().__init__(message)


class UpstreamError(StorefrontError):
    """Raised when the storefront API cannot be reached or returns garbage."""
    pass


class ApiError(UpstreamError):
    """Raised when the storefront API rejects a request."""

    def __init__(self, status_code: int, message: str, payload: Optional[dict] = None):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload or {}
