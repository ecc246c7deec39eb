"""
Catalog service layer: in-memory catalog state fed by the catalog client.
"""

import itertools
import logging
import threading
from typing import Iterable, Optional, Tuple

from storefront.clients.catalog_client import CatalogClient
from storefront.models import Product

logger = logging.getLogger(__name__)


class CatalogState:
    """
    The product list the client currently shows.

    Updates are tagged with a request sequence number; an update older than
    the last applied one is discarded, so a slow response to an earlier
    search cannot overwrite a newer result.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._products: Tuple[Product, ...] = ()
        self._last_applied_seq = 0

    @property
    def products(self) -> Tuple[Product, ...]:
        with self._lock:
            return self._products

    @property
    def last_applied_seq(self) -> int:
        with self._lock:
            return self._last_applied_seq

    def apply(self, seq: int, products: Iterable[Product]) -> bool:
        new_products = tuple(products)
        with self._lock:
            if seq <= self._last_applied_seq:
                return False
            self._products = new_products
            self._last_applied_seq = seq
            return True


class CatalogService:
    """Service class for catalog fetch and search."""

    def __init__(self, client: Optional[CatalogClient] = None, state: Optional[CatalogState] = None):
        self.client = client or CatalogClient()
        self.state = state or CatalogState()
        self._seq = itertools.count(1)
        self._seq_lock = threading.Lock()

    def next_sequence(self) -> int:
        with self._seq_lock:
            return next(self._seq)

    @property
    def products(self) -> Tuple[Product, ...]:
        return self.state.products

    def get_product(self, product_id: str) -> Optional[Product]:
        for product in self.state.products:
            if product.id == product_id:
                return product
        return None

    def _apply(self, seq: int, products: Iterable[Product], what: str) -> Tuple[Product, ...]:
        if not self.state.apply(seq, products):
            logger.debug("Discarding stale %s response seq=%s (last applied %s)",
                         what, seq, self.state.last_applied_seq)
        return self.state.products

    def fetch_all(self) -> Tuple[Product, ...]:
        """Load the whole catalog and make it current."""
        seq = self.next_sequence()
        products = self.client.fetch_all()
        logger.info("Fetched %d products", len(products))
        return self._apply(seq, products, "catalog")

    def search(self, query: str) -> Tuple[Product, ...]:
        """Replace the catalog with the products matching ``query``."""
        seq = self.next_sequence()
        products = self.client.search(query)
        logger.debug("Search %r seq=%s returned %d products", query, seq, len(products))
        return self._apply(seq, products, "search")
