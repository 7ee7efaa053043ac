"""
Database models
All SQLAlchemy models are imported here so metadata and Alembic see them
"""

from inventory.core.database import Base
from inventory.models.brand import Brand
from inventory.models.category import Category, Gender
from inventory.models.shoe import Shoe
from inventory.models.sku import SKU

__all__ = [
    "Base",
    "Brand",
    "Category",
    "Gender",
    "Shoe",
    "SKU",
]
