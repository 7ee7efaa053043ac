"""
Schemas for categories.
"""

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from inventory.api.schemas.base import InventoryForm, rule_error, text
from inventory.models.category import Gender

GENDER_VALUES = tuple(gender.value for gender in Gender)
STYLE_MAX_LENGTH = 100


class CategoryForm(InventoryForm):
    """
    Category create/update submission.

    ``gender`` defaults to unisex when omitted. Whether an unknown gender is
    rejected here or left for the storage enum to reject is controlled by the
    ``strict_gender`` validation context flag (on unless set otherwise).
    """

    escaped_fields = ("gender", "style")

    gender: str = ""
    style: str = ""

    @field_validator("gender", mode="before")
    @classmethod
    def check_gender(cls, value, info: ValidationInfo):
        value = text(value) or Gender.UNISEX.value
        strict = (info.context or {}).get("strict_gender", True)
        if strict and value not in GENDER_VALUES:
            raise rule_error("gender", f"Gender must be one of: {', '.join(GENDER_VALUES)}")
        return value

    @field_validator("style", mode="before")
    @classmethod
    def check_style(cls, value):
        value = text(value)
        if not value:
            raise rule_error("style", "Style must be specified")
        if len(value) > STYLE_MAX_LENGTH:
            raise rule_error("style", f"Style must not exceed {STYLE_MAX_LENGTH} characters")
        return value


class CategoryResponse(BaseModel):
    """Schema for category response."""

    id: str = Field(..., description="Category ID")
    gender: Gender = Field(..., description="Category gender")
    style: str = Field(..., description="Shoe style")
    url: str = Field(..., description="Canonical path of the category")

    model_config = ConfigDict(from_attributes=True)
