"""
Schemas for brands.

Reference: https://fastapi.tiangolo.com/tutorial/body/
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from inventory.api.schemas.base import InventoryForm, optional_text, rule_error, text

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 100


class BrandForm(InventoryForm):
    """
    Brand create/update submission.

    Attributes:
        name: Brand name (required, 3 to 100 characters)
        desc: Optional description
    """

    escaped_fields = ("name", "desc")

    name: str = ""
    desc: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def check_name(cls, value):
        value = text(value)
        if len(value) < NAME_MIN_LENGTH:
            raise rule_error("name", f"Brand name must contain at least {NAME_MIN_LENGTH} characters")
        if len(value) > NAME_MAX_LENGTH:
            raise rule_error("name", f"Brand name must not exceed {NAME_MAX_LENGTH} characters")
        return value

    @field_validator("desc", mode="before")
    @classmethod
    def clean_desc(cls, value):
        return optional_text(value)


class BrandResponse(BaseModel):
    """Schema for brand response."""

    id: str = Field(..., description="Brand ID")
    name: str = Field(..., description="Brand name")
    desc: Optional[str] = Field(None, description="Brand description")
    url: str = Field(..., description="Canonical path of the brand")

    model_config = ConfigDict(from_attributes=True)
