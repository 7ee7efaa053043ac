"""
Shoe workflow: list, detail, create, update and delete shoes,
plus the inventory home page counts.
"""

import asyncio
import logging
from typing import Any, Mapping

from inventory.api.schemas.base import FieldError
from inventory.api.schemas.shoe import ShoeForm
from inventory.core.exceptions import DuplicateEntityError, NotFoundError
from inventory.models import SKU
from inventory.services.base import InventoryService, Reference
from inventory.services.results import DependencyConflict, Ok, Redirect, Result, ValidationFailed

logger = logging.getLogger(__name__)


def shoe_values(values: Mapping[str, Any]) -> dict[str, Any]:
    """Map accepted form values onto Shoe columns."""
    return {
        "name": values["name"],
        "brand_id": values["brand"],
        "category_id": values["category"],
        "desc": values["desc"],
    }


class ShoeService(InventoryService):
    """Service for managing shoes"""

    def references(self) -> list[Reference]:
        return [
            Reference("brand", self.brands, "Brand not found"),
            Reference("category", self.categories, "Category not found"),
        ]

    async def _form(self, title: str, shoe, errors: list[FieldError]) -> dict[str, Any]:
        brands, categories = await asyncio.gather(
            self.brands.find_many(sort=("name",)),
            self.categories.find_many(sort=("gender", "style")),
        )
        return {
            "title": title,
            "brand_list": brands,
            "category_list": categories,
            "shoe": shoe,
            "errors": errors,
        }

    async def index(self) -> Ok:
        """Counts of everything in the inventory, fetched concurrently."""
        shoe_count, sku_count, sku_in_stock_count, brand_count, category_count = await asyncio.gather(
            self.shoes.count(),
            self.skus.count(),
            self.skus.count(SKU.qty > 0),
            self.brands.count(),
            self.categories.count(),
        )
        return Ok(
            "index",
            {
                "title": "Home",
                "shoe_count": shoe_count,
                "sku_count": sku_count,
                "sku_in_stock_count": sku_in_stock_count,
                "brand_count": brand_count,
                "category_count": category_count,
            },
        )

    async def list_all(self) -> Ok:
        """All shoes sorted by name, with brand and category."""
        shoes = await self.shoes.find_many(sort=("name",), populate=("brand", "category"))
        return Ok("shoe_list", {"title": "Shoe List", "shoe_list": shoes})

    async def detail(self, shoe_id: str) -> Ok:
        """
        Get a shoe with its SKUs and the distinct colors, sizes and prices
        they come in.

        Raises:
            NotFoundError: If the shoe does not exist
        """
        shoe, skus = await asyncio.gather(
            self.shoes.find_by_id(shoe_id, populate=("brand", "category")),
            self.skus.find_many(shoe_id=shoe_id),
        )
        if shoe is None:
            raise NotFoundError("Shoe not found")
        return Ok(
            "shoe_detail",
            {
                "title": shoe.name,
                "shoe": shoe,
                "skus": skus,
                "colors": list(dict.fromkeys(sku.color for sku in skus)),
                "sizes": list(dict.fromkeys(sku.size for sku in skus)),
                "prices": list(dict.fromkeys(sku.price for sku in skus)),
            },
        )

    async def create_get(self) -> Ok:
        return Ok("shoe_form", await self._form("Create Shoe", None, []))

    async def create_post(self, fields: Mapping[str, Any]) -> Result:
        """
        Create a shoe, or redirect to the existing shoe with the same name
        and brand.
        """
        values, errors, _ = await self.validate(ShoeForm, fields, self.references())
        if errors:
            logger.info(f"Shoe create rejected: {len(errors)} field error(s)")
            return ValidationFailed(
                "shoe_form",
                await self._form("Create Shoe", values, errors),
                errors=errors,
            )
        return await self.create_unique(self.shoes, shoe_values(values))

    async def update_get(self, shoe_id: str) -> Ok:
        shoe, form = await asyncio.gather(
            self.shoes.find_by_id(shoe_id, populate=("brand", "category")),
            self._form("Update Shoe", None, []),
        )
        if shoe is None:
            raise NotFoundError("Shoe not found")
        form["shoe"] = shoe
        return Ok("shoe_form", form)

    async def update_post(self, shoe_id: str, fields: Mapping[str, Any]) -> Result:
        """
        Replace a shoe's name, brand, category and description.

        Raises:
            NotFoundError: If the submission is valid but the shoe does not exist
        """
        values, errors, _ = await self.validate(ShoeForm, fields, self.references())
        if not errors:
            try:
                shoe = await self.shoes.update_by_id(shoe_id, shoe_values(values))
            except DuplicateEntityError:
                errors = [FieldError(field="name", message="This brand already has a shoe with this name")]
            else:
                if shoe is None:
                    raise NotFoundError("Shoe not found")
                logger.info(f"Updated shoe {shoe_id}")
                return Redirect(shoe.url)

        return ValidationFailed(
            "shoe_form",
            await self._form("Update Shoe", {"id": shoe_id, **values}, errors),
            errors=errors,
        )

    async def delete_get(self, shoe_id: str) -> Result:
        shoe, skus = await asyncio.gather(
            self.shoes.find_by_id(shoe_id, populate=("brand",)),
            self.skus.find_many(shoe_id=shoe_id),
        )
        if shoe is None:
            return Redirect(self.list_path("shoes"))
        return Ok("shoe_delete", {"title": "Delete Shoe", "shoe": shoe, "skus": skus})

    async def delete_post(self, shoe_id: str) -> Result:
        """Delete a shoe without SKUs; otherwise return the blocking SKUs."""
        shoe, skus = await asyncio.gather(
            self.shoes.find_by_id(shoe_id, populate=("brand",)),
            self.skus.find_many(shoe_id=shoe_id),
        )
        if skus:
            logger.warning(f"Refusing to delete shoe {shoe_id}: referenced by {len(skus)} SKU(s)")
            return DependencyConflict(
                "shoe_delete",
                {"title": "Delete Shoe", "shoe": shoe, "skus": skus},
                dependents=skus,
            )
        if await self.shoes.delete_by_id(shoe_id):
            logger.info(f"Deleted shoe {shoe_id}")
        return Redirect(self.list_path("shoes"))
