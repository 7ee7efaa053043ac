"""
Brand database model
Reference: https://docs.sqlalchemy.org/en/20/orm/basic_relationships.html
"""
import uuid
from typing import TYPE_CHECKING, Optional

from sqlalchemy import String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inventory.core.config import settings
from inventory.core.database import Base

if TYPE_CHECKING:
    from inventory.models.shoe import Shoe


class Brand(Base):
    """
    Brand model representing a shoe manufacturer

    Attributes:
        id: Opaque UUID primary key, assigned on insert
        name: Brand name, unique (natural key)
        desc: Optional free-text description
    """

    __tablename__ = "brands"
    __table_args__ = (
        UniqueConstraint("name", name="uq_brands_name"),
    )
    __natural_key__ = ("name",)

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    # Stored HTML-escaped: up to 100 characters, each at most 6 once escaped
    name: Mapped[str] = mapped_column(String(600), nullable=False)
    desc: Mapped[Optional[str]] = mapped_column("description", Text, nullable=True)

    # One-to-many: one brand has many shoes
    shoes: Mapped[list["Shoe"]] = relationship(
        "Shoe", back_populates="brand", passive_deletes="all"
    )

    @property
    def url(self) -> str:
        return f"{settings.INVENTORY_PREFIX}/brand/{self.id}"

    def __repr__(self) -> str:
        """String representation of Brand"""
        return f"<Brand(id={self.id}, name='{self.name}')>"
