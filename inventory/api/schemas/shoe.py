"""
Schemas for shoes.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from inventory.api.schemas.base import InventoryForm, optional_text, rule_error, text
from inventory.api.schemas.brand import BrandResponse
from inventory.api.schemas.category import CategoryResponse

NAME_MAX_LENGTH = 100


class ShoeForm(InventoryForm):
    """
    Shoe create/update submission.

    ``brand`` and ``category`` are reference IDs; they are only sanitized
    here. Whether they resolve is checked against the store by the workflow.
    """

    escaped_fields = ("name", "brand", "category", "desc")

    name: str = ""
    brand: str = ""
    category: str = ""
    desc: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def check_name(cls, value):
        value = text(value)
        if not value:
            raise rule_error("name", "Name must not be empty.")
        if len(value) > NAME_MAX_LENGTH:
            raise rule_error("name", f"Name must not exceed {NAME_MAX_LENGTH} characters.")
        return value

    @field_validator("brand", "category", mode="before")
    @classmethod
    def clean_reference(cls, value):
        return text(value)

    @field_validator("desc", mode="before")
    @classmethod
    def clean_desc(cls, value):
        return optional_text(value)


class ShoeResponse(BaseModel):
    """
    Schema for shoe response.

    ``brand`` and ``category`` are only present when they were loaded
    with the shoe.
    """

    id: str = Field(..., description="Shoe ID")
    name: str = Field(..., description="Shoe name")
    desc: Optional[str] = Field(None, description="Shoe description")
    brand_id: str = Field(..., description="Brand ID")
    category_id: str = Field(..., description="Category ID")
    url: str = Field(..., description="Canonical path of the shoe")
    brand: Optional[BrandResponse] = None
    category: Optional[CategoryResponse] = None

    model_config = ConfigDict(from_attributes=True)
