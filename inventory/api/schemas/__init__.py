"""
Pydantic schemas: form validation and response models
"""

from inventory.api.schemas.base import FieldError
from inventory.api.schemas.brand import BrandForm, BrandResponse
from inventory.api.schemas.category import CategoryForm, CategoryResponse
from inventory.api.schemas.shoe import ShoeForm, ShoeResponse
from inventory.api.schemas.sku import SKUForm, SKUResponse

__all__ = [
    "BrandForm",
    "BrandResponse",
    "CategoryForm",
    "CategoryResponse",
    "FieldError",
    "SKUForm",
    "SKUResponse",
    "ShoeForm",
    "ShoeResponse",
]
