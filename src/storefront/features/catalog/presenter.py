"""
Catalog presenter layer for product cards.
"""

from typing import Iterable

from storefront.features.cart.presenter import format_money
from storefront.models import Product

NO_PRODUCTS_TEXT = "No products found"


def format_rating(rating: int) -> str:
    return "★" * rating + "☆" * (5 - rating)


class CatalogPresenter:

    def format_product(self, product: Product) -> str:
        return f"[{product.id}] {product.name} ({product.category}) {format_money(product.cost)} {format_rating(product.rating)}"

    def render(self, products: Iterable[Product]) -> str:
        lines = [self.format_product(product) for product in products]
        if not lines:
            return NO_PRODUCTS_TEXT
        return "\n".join(lines)
