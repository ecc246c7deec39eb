"""
Wire and view models for the storefront API.

Product and CartEntry mirror the JSON the API sends (``_id``, ``image``,
``productId``); CartLineItem is derived locally and never sent back.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(alias="_id")
    name: str
    category: str = ""
    cost: float = Field(ge=0)
    rating: int = Field(default=0, ge=0, le=5)
    image_url: str = Field(default="", alias="image")


class CartEntry(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    product_id: str = Field(alias="productId")
    qty: int = Field(ge=0)

    def to_payload(self) -> dict:
        return {"productId": self.product_id, "qty": self.qty}


class CartLineItem(BaseModel):
    """A cart entry enriched with the catalog's display fields."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    category: str
    cost: float
    rating: int
    image_url: str
    qty: int

    @property
    def line_total(self) -> float:
        return self.qty * self.cost

    @classmethod
    def from_product(cls, product: Product, qty: int) -> "CartLineItem":
        return cls(
            id=product.id,
            name=product.name,
            category=product.category,
            cost=product.cost,
            rating=product.rating,
            image_url=product.image_url,
            qty=qty,
        )


class Session(BaseModel):
    model_config = ConfigDict(frozen=True)

    token: str
    username: str
    balance: Optional[float] = None
