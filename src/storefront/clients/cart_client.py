"""
Cart API Client

Authenticated client for the server-held cart.
"""

from typing import Any, List

from pydantic import ValidationError

from storefront.clients.base_client import BaseClient
from storefront.errors import UpstreamError
from storefront.models import CartEntry


def parse_cart(payload: Any) -> List[CartEntry]:
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise UpstreamError("API returned an invalid cart: expected a list")
    try:
        return [CartEntry.model_validate(item) for item in payload]
    except ValidationError as e:
        raise UpstreamError(f"API returned an invalid cart: {e}") from e


class CartClient(BaseClient):
    """HTTP client for GET/POST /cart."""

    def get_cart(self, token: str) -> List[CartEntry]:
        """
        Fetch the cart for the session behind ``token``.

        GET /cart
        """
        return parse_cart(self._request("GET", "/cart", token=token))

    def upsert(self, token: str, product_id: str, qty: int) -> List[CartEntry]:
        """
        Set the quantity of one product; a qty of 0 removes it.

        POST /cart {productId, qty}

        Returns:
            The full updated cart as sent back by the server
        """
        entry = CartEntry(product_id=product_id, qty=qty)
        return parse_cart(self._request("POST", "/cart", json=entry.to_payload(), token=token))
