"""
SKU database model
A sellable size/color/price variant of a shoe
"""
import uuid
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, Numeric, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inventory.core.config import settings
from inventory.core.database import Base

if TYPE_CHECKING:
    from inventory.models.shoe import Shoe


class SKU(Base):
    """
    SKU model

    Attributes:
        id: Opaque UUID primary key, assigned on insert
        shoe_id: Foreign key to shoes (RESTRICT on delete)
        color: Color name (3 to 50 characters before escaping)
        size: Integer size, 1-99
        price: Non-negative decimal price
        qty: Units in stock (default: 0)

    The natural key is (shoe_id, color, size).
    """

    __tablename__ = "skus"
    __table_args__ = (
        UniqueConstraint("shoe_id", "color", "size", name="uq_skus_shoe_color_size"),
        CheckConstraint("size BETWEEN 1 AND 99", name="ck_skus_size_range"),
        CheckConstraint("price >= 0", name="ck_skus_price_non_negative"),
        CheckConstraint("qty >= 0", name="ck_skus_qty_non_negative"),
        Index("ix_skus_shoe_id", "shoe_id"),  # Delete-guard lookups
    )
    __natural_key__ = ("shoe_id", "color", "size")

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    shoe_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("shoes.id", ondelete="RESTRICT"),
        nullable=False,
    )
    # Stored HTML-escaped: up to 50 characters, each at most 6 once escaped
    color: Mapped[str] = mapped_column(String(300), nullable=False)
    size: Mapped[int] = mapped_column(Integer, nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    qty: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Many-to-one: SKU belongs to a shoe
    shoe: Mapped["Shoe"] = relationship("Shoe", back_populates="skus")

    @property
    def url(self) -> str:
        return f"{settings.INVENTORY_PREFIX}/sku/{self.id}"

    def __repr__(self) -> str:
        """String representation of SKU"""
        return (
            f"<SKU(id={self.id}, shoe_id={self.shoe_id}, color='{self.color}', "
            f"size={self.size}, qty={self.qty})>"
        )
