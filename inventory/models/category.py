"""
Category database model
Reference: https://docs.sqlalchemy.org/en/20/core/type_basics.html#sqlalchemy.types.Enum
"""
import uuid
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import Enum as SAEnum
from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inventory.core.config import settings
from inventory.core.database import Base

if TYPE_CHECKING:
    from inventory.models.shoe import Shoe


class Gender(str, Enum):
    """Category gender enumeration."""

    MENS = "mens"
    WOMENS = "womens"
    KIDS = "kids"
    UNISEX = "unisex"


class Category(Base):
    """
    Category model: a (gender, style) pair such as ("mens", "Sneakers")

    Attributes:
        id: Opaque UUID primary key, assigned on insert
        gender: One of mens, womens, kids, unisex (default: unisex)
        style: Shoe style name
    """

    __tablename__ = "categories"
    __table_args__ = (
        UniqueConstraint("gender", "style", name="uq_categories_gender_style"),
    )
    __natural_key__ = ("gender", "style")

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )

    # Stored as VARCHAR + CHECK constraint so the database rejects unknown values;
    # validate_strings makes SQLAlchemy reject them before the statement is sent
    gender: Mapped[Gender] = mapped_column(
        SAEnum(
            Gender,
            name="category_gender",
            native_enum=False,
            create_constraint=True,
            validate_strings=True,
            length=10,
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
        default=Gender.UNISEX,
    )
    # Stored HTML-escaped: up to 100 characters, each at most 6 once escaped
    style: Mapped[str] = mapped_column(String(600), nullable=False)

    # One-to-many: one category has many shoes
    shoes: Mapped[list["Shoe"]] = relationship(
        "Shoe", back_populates="category", passive_deletes="all"
    )

    @property
    def url(self) -> str:
        return f"{settings.INVENTORY_PREFIX}/category/{self.id}"

    def __repr__(self) -> str:
        """String representation of Category"""
        return f"<Category(id={self.id}, gender='{self.gender}', style='{self.style}')>"
