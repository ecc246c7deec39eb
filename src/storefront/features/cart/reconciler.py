"""
Cart reconciliation: join server cart entries against the product catalog.
"""

from typing import Dict, Iterable, List

from storefront.models import CartEntry, CartLineItem, Product


def index_entries(entries: Iterable[CartEntry]) -> Dict[str, CartEntry]:
    """Map product id -> entry. The first entry for a product id wins."""
    index: Dict[str, CartEntry] = {}
    for entry in entries:
        index.setdefault(entry.product_id, entry)
    return index


def generate_line_items(entries: Iterable[CartEntry], products: Iterable[Product]) -> List[CartLineItem]:
    """
    Build one line item per product that has a cart entry.

    Output follows catalog order, not cart order. Entries whose product id is
    not in ``products`` produce nothing.
    """
    by_product = index_entries(entries)
    items = []
    for product in products:
        entry = by_product.get(product.id)
        if entry is not None:
            items.append(CartLineItem.from_product(product, entry.qty))
    return items


def total_value(items: Iterable[CartLineItem]) -> float:
    return sum((item.qty * item.cost for item in items), 0)


def total_quantity(items: Iterable[CartLineItem]) -> int:
    return sum((item.qty for item in items), 0)
