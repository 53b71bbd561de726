"""
Pydantic models for product data.

``ProductBase`` holds the fields a client may write.  ``ProductCreate``
and ``ProductUpdate`` are the request bodies for POST and PUT, and
``ProductRead`` is the response, ``id`` first.  The schemas check
types and storage limits; business rules such as non‑negative
quantities are enforced by ``ProductService``.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer

# Quantities are 32-bit integers.  Prices are money values with at most
# 15 significant digits, which a JSON number carries without rounding.
QUANTITY_MIN = -(2**31)
QUANTITY_MAX = 2**31 - 1
PRICE_MAX_DIGITS = 15
PRICE_DECIMAL_PLACES = 2


class ProductBase(BaseModel):
    name: str = Field(..., examples=["Widget"])
    quantity: int = Field(..., ge=QUANTITY_MIN, le=QUANTITY_MAX, examples=[10])
    price: Decimal = Field(
        ...,
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
        examples=[2.50],
    )
    description: Optional[str] = Field(None, examples=["Blue, 10 cm"])


class ProductCreate(ProductBase):
    """Schema for creating a product."""

    model_config = ConfigDict(extra="ignore")


class ProductUpdate(ProductBase):
    """Schema for replacing a product.

    All fields are overwritten together; there are no partial updates.
    """

    model_config = ConfigDict(extra="ignore")


class ProductRead(BaseModel):
    """Schema for reading a product from the API."""

    id: int
    name: str
    quantity: int
    price: Decimal
    description: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("price", when_used="json")
    def serialize_price(self, price: Decimal) -> float:
        # Clients expect a JSON number, not pydantic's decimal string.
        return float(price)
