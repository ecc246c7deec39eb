"""
Cart store: the last cart list the server sent back.
"""

import threading
from typing import Iterable, Optional, Tuple

from storefront.models import CartEntry


class CartStore:
    """Holds the authoritative (productId, qty) list; replaced wholesale, never patched."""

    def __init__(self, entries: Iterable[CartEntry] = ()):
        self._lock = threading.Lock()
        self._entries: Tuple[CartEntry, ...] = tuple(entries)

    @property
    def entries(self) -> Tuple[CartEntry, ...]:
        with self._lock:
            return self._entries

    def replace(self, entries: Iterable[CartEntry]) -> None:
        new_entries = tuple(entries)
        with self._lock:
            self._entries = new_entries

    def clear(self) -> None:
        self.replace(())

    def get(self, product_id: str) -> Optional[CartEntry]:
        for entry in self.entries:
            if entry.product_id == product_id:
                return entry
        return None

    def contains(self, product_id: str) -> bool:
        return self.get(product_id) is not None

    def __len__(self) -> int:
        return len(self.entries)
