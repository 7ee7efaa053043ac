"""
Shoe database model
Reference: https://docs.sqlalchemy.org/en/20/orm/basic_relationships.html#many-to-one
"""
import uuid
from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, Index, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inventory.core.config import settings
from inventory.core.database import Base

if TYPE_CHECKING:
    from inventory.models.brand import Brand
    from inventory.models.category import Category
    from inventory.models.sku import SKU


class Shoe(Base):
    """
    Shoe model: a named product of one brand in one category

    Attributes:
        id: Opaque UUID primary key, assigned on insert
        name: Shoe name (max 100 characters before escaping)
        brand_id: Foreign key to brands (RESTRICT on delete)
        category_id: Foreign key to categories (RESTRICT on delete)
        desc: Optional description

    The natural key is (name, brand_id).
    """

    __tablename__ = "shoes"
    __table_args__ = (
        UniqueConstraint("name", "brand_id", name="uq_shoes_name_brand"),
        Index("ix_shoes_brand_id", "brand_id"),  # Delete-guard lookups
        Index("ix_shoes_category_id", "category_id"),
    )
    __natural_key__ = ("name", "brand_id")

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    # Stored HTML-escaped: up to 100 characters, each at most 6 once escaped
    name: Mapped[str] = mapped_column(String(600), nullable=False)

    brand_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("brands.id", ondelete="RESTRICT"),
        nullable=False,
    )
    category_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=False,
    )
    desc: Mapped[Optional[str]] = mapped_column("description", Text, nullable=True)

    # Many-to-one references
    brand: Mapped["Brand"] = relationship("Brand", back_populates="shoes")
    category: Mapped["Category"] = relationship("Category", back_populates="shoes")

    # One-to-many: one shoe has many SKUs
    skus: Mapped[list["SKU"]] = relationship(
        "SKU", back_populates="shoe", passive_deletes="all"
    )

    @property
    def url(self) -> str:
        return f"{settings.INVENTORY_PREFIX}/shoe/{self.id}"

    def __repr__(self) -> str:
        """String representation of Shoe"""
        return f"<Shoe(id={self.id}, name='{self.name}', brand_id={self.brand_id})>"
