"""
Catalog API Client

Read-only client for the product catalog and product search.
"""

from typing import Any, List

from pydantic import ValidationError

from storefront.clients.base_client import BaseClient
from storefront.errors import UpstreamError
from storefront.models import Product


def parse_products(payload: Any) -> List[Product]:
    """Decode a product list body. Any shape other than a list is an upstream fault."""
    if not isinstance(payload, list):
        raise UpstreamError("API returned an invalid product list: expected a list")
    try:
        return [Product.model_validate(item) for item in payload]
    except ValidationError as e:
        raise UpstreamError(f"API returned an invalid product list: {e}") from e


class CatalogClient(BaseClient):
    """HTTP client for catalog discovery (read-only)."""

    def fetch_all(self) -> List[Product]:
        """
        Fetch the full product list.

        GET /products
        """
        return parse_products(self._request("GET", "/products"))

    def search(self, query: str) -> List[Product]:
        """
        Fetch the products matching ``query``.

        GET /products/search?value=<query>

        The query is lower-cased before it is sent. A 404 or an empty body
        means "no products found" and yields an empty list.
        """
        payload = self._request_allow_404(
            "GET", "/products/search", params={"value": (query or "").lower()}
        )
        if payload is None:
            return []
        return parse_products(payload)
