"""
Cart presenter layer for presentation logic and data formatting.
"""

from typing import Any, Dict, List

from storefront.features.cart.reconciler import total_quantity, total_value
from storefront.models import CartLineItem

EMPTY_CART_TEXT = "Cart is empty. Add more items to the cart to checkout."


def format_money(value: float) -> str:
    if float(value).is_integer():
        return f"${int(value)}"
    return f"${value:.2f}"


class CartPresenter:
    """Presenter class for cart data formatting and presentation."""

    def format_line_item(self, item: CartLineItem) -> str:
        return f"• {item.name}: {item.qty} @ {format_money(item.cost)} = {format_money(item.line_total)}"

    def format_cart_summary(self, items: List[CartLineItem]) -> Dict[str, Any]:
        """Format a cart summary for presentation."""
        return {
            "total_items": len(items),
            "total_quantity": total_quantity(items),
            "total_value": total_value(items),
            "items": [item.model_dump() for item in items],
        }

    def render(self, items: List[CartLineItem], read_only: bool = False) -> str:
        """
        Render the cart as text.

        The read-only form is the checkout summary and adds the order details
        block (product count, subtotal, shipping and total).
        """
        if not items:
            return EMPTY_CART_TEXT

        value = total_value(items)
        lines = [self.format_line_item(item) for item in items]
        lines.append(f"Order total: {format_money(value)}")

        if read_only:
            lines.extend([
                "",
                "Order Details",
                f"Products: {total_quantity(items)}",
                f"Subtotal: {format_money(value)}",
                "Shipping Charges: $0",
                f"Total: {format_money(value)}",
            ])
        return "\n".join(lines)
