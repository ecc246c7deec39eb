"""
Cart service layer for business logic operations.
"""

import logging
from typing import Iterable, List, Optional

from storefront.clients.cart_client import CartClient
from storefront.errors import AlreadyInCart, LoginRequired, ValidationFailed
from storefront.features.cart.reconciler import generate_line_items
from storefront.features.cart.store import CartStore
from storefront.models import CartEntry, CartLineItem, Product

logger = logging.getLogger(__name__)


def is_item_in_cart(entries: Iterable[CartEntry], product_id: str) -> bool:
    return any(entry.product_id == product_id for entry in entries)


class CartService:
    """Service class for cart-related business operations."""

    def __init__(self, client: Optional[CartClient] = None, store: Optional[CartStore] = None):
        self.client = client or CartClient()
        self.store = store or CartStore()

    def fetch_cart(self, token: Optional[str]) -> List[CartEntry]:
        """Load the cart from the server. Without a token there is nothing to load."""
        if not token:
            return []
        entries = self.client.get_cart(token)
        self.store.replace(entries)
        return entries

    def update_cart(
        self,
        token: Optional[str],
        current_entries: Iterable[CartEntry],
        product_id: str,
        qty: int,
        add_from_catalog: bool = False,
    ) -> List[CartEntry]:
        """
        Set the quantity of ``product_id`` on the server.

        Args:
            token: Session token; required
            current_entries: Cart as currently displayed
            product_id: Product to change
            qty: New quantity; 0 removes the product
            add_from_catalog: True for the catalog's "add to cart" button,
                which must not add a product twice

        Returns:
            The full cart returned by the server, also stored in the CartStore

        Raises:
            LoginRequired: No token (no network call made)
            AlreadyInCart: Duplicate add from the catalog (no network call made)
            ValidationFailed: Negative quantity (no network call made)
            ApiError / UpstreamError: The request failed
        """
        if not token:
            raise LoginRequired()
        if add_from_catalog and is_item_in_cart(current_entries, product_id):
            raise AlreadyInCart()
        if qty < 0:
            raise ValidationFailed("Quantity cannot be negative")

        logger.debug("Setting cart qty product_id=%s qty=%s", product_id, qty)
        entries = self.client.upsert(token, product_id, qty)
        self.store.replace(entries)
        return entries

    def add_from_catalog(self, token: Optional[str], product_id: str) -> List[CartEntry]:
        return self.update_cart(token, self.store.entries, product_id, 1, add_from_catalog=True)

    def set_quantity(self, token: Optional[str], product_id: str, qty: int) -> List[CartEntry]:
        return self.update_cart(token, self.store.entries, product_id, qty)

    def increment(self, token: Optional[str], product_id: str) -> List[CartEntry]:
        entry = self.store.get(product_id)
        current = entry.qty if entry else 0
        return self.set_quantity(token, product_id, current + 1)

    def decrement(self, token: Optional[str], product_id: str) -> List[CartEntry]:
        entry = self.store.get(product_id)
        current = entry.qty if entry else 0
        return self.set_quantity(token, product_id, max(current - 1, 0))

    def is_item_in_cart(self, product_id: str) -> bool:
        return self.store.contains(product_id)

    def line_items(self, products: Iterable[Product]) -> List[CartLineItem]:
        return generate_line_items(self.store.entries, products)

    def reset(self) -> None:
        self.store.clear()
