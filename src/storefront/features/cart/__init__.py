"""
Cart package for handling cart-related operations.
"""

from .service import CartService, is_item_in_cart
from .store import CartStore
from .presenter import CartPresenter
from .reconciler import (
    generate_line_items,
    total_quantity,
    total_value,
)

__all__ = [
    'CartService',
    'CartStore',
    'CartPresenter',
    'is_item_in_cart',
    'generate_line_items',
    'total_quantity',
    'total_value',
]
