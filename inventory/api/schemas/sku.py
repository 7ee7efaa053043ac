"""
Schemas for SKUs.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from inventory.api.schemas.base import InventoryForm, rule_error, text, to_decimal, to_int
from inventory.api.schemas.shoe import ShoeResponse

SIZE_MIN = 1
SIZE_MAX = 99
COLOR_MIN_LENGTH = 3
COLOR_MAX_LENGTH = 50
# Numeric(10, 2) and a 32-bit INTEGER column
PRICE_LIMIT = Decimal("100000000")
QTY_MAX = 2**31 - 1


class SKUForm(InventoryForm):
    """
    SKU create/update submission.

    Attributes:
        shoe: Shoe reference ID (sanitized only, resolved by the workflow)
        color: Color name (3 to 50 characters)
        size: Integer size between 1 and 99
        price: Non-negative decimal below 100000000, rounded to cents
        qty: Non-negative integer up to 2147483647, 0 when omitted
    """

    escaped_fields = ("shoe", "color")
    converters = {"size": to_int, "price": to_decimal, "qty": to_int}

    shoe: str = ""
    color: str = ""
    size: int = None
    price: Decimal = None
    qty: int = None

    @field_validator("shoe", mode="before")
    @classmethod
    def clean_shoe(cls, value):
        return text(value)

    @field_validator("color", mode="before")
    @classmethod
    def check_color(cls, value):
        value = text(value)
        if len(value) < COLOR_MIN_LENGTH:
            raise rule_error("color", f"Color must have {COLOR_MIN_LENGTH} characters or more")
        if len(value) > COLOR_MAX_LENGTH:
            raise rule_error("color", f"Color must not exceed {COLOR_MAX_LENGTH} characters")
        return value

    @field_validator("size", mode="before")
    @classmethod
    def check_size(cls, value):
        size = to_int(value)
        if size is None or not SIZE_MIN <= size <= SIZE_MAX:
            raise rule_error("size", f"Size must be an integer between {SIZE_MIN} and {SIZE_MAX}")
        return size

    @field_validator("price", mode="before")
    @classmethod
    def check_price(cls, value):
        price = to_decimal(value)
        if price is None or price < 0:
            raise rule_error("price", "Price must be a non-negative number")
        if price >= PRICE_LIMIT:
            raise rule_error("price", f"Price must be less than {PRICE_LIMIT}")
        return price

    @field_validator("qty", mode="before")
    @classmethod
    def check_qty(cls, value):
        if value is None or text(value) == "":
            return 0
        qty = to_int(value)
        if qty is None or qty < 0:
            raise rule_error("qty", "Quantity must be a non-negative integer")
        if qty > QTY_MAX:
            raise rule_error("qty", f"Quantity must not exceed {QTY_MAX}")
        return qty


class SKUResponse(BaseModel):
    """Schema for SKU response."""

    id: str = Field(..., description="SKU ID")
    shoe_id: str = Field(..., description="Shoe ID")
    color: str = Field(..., description="Color name")
    size: int = Field(..., ge=SIZE_MIN, le=SIZE_MAX, description="Shoe size")
    price: Decimal = Field(..., ge=0, description="Unit price")
    qty: int = Field(..., ge=0, description="Units in stock")
    url: str = Field(..., description="Canonical path of the SKU")
    shoe: Optional[ShoeResponse] = None

    model_config = ConfigDict(from_attributes=True)
