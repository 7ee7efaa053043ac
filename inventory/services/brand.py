"""
Brand workflow: list, detail, create, update and delete brands.
"""

import asyncio
import logging
from typing import Any, Mapping

from inventory.api.schemas.base import FieldError
from inventory.api.schemas.brand import BrandForm
from inventory.core.exceptions import DuplicateEntityError, NotFoundError
from inventory.services.base import InventoryService
from inventory.services.results import DependencyConflict, Ok, Redirect, Result, ValidationFailed

logger = logging.getLogger(__name__)


class BrandService(InventoryService):
    """Service for managing brands"""

    async def list_all(self) -> Ok:
        """All brands, sorted by name."""
        brands = await self.brands.find_many(sort=("name",))
        return Ok("brand_list", {"title": "Brand List", "brand_list": brands})

    async def detail(self, brand_id: str) -> Ok:
        """
        Get a brand and its shoes.

        Raises:
            NotFoundError: If the brand does not exist
        """
        brand, shoes = await asyncio.gather(
            self.brands.find_by_id(brand_id),
            self.shoes.find_many(brand_id=brand_id, sort=("name",), populate=("category",)),
        )
        if brand is None:
            raise NotFoundError("Brand not found")
        return Ok("brand_detail", {"title": f"Brand: {brand.name}", "brand": brand, "shoes": shoes})

    async def create_get(self) -> Ok:
        return Ok("brand_form", {"title": "Create Brand", "brand": None, "errors": []})

    async def create_post(self, fields: Mapping[str, Any]) -> Result:
        """
        Create a brand.

        A brand whose name is already taken is not inserted again; the
        result redirects to the existing brand instead.
        """
        values, errors, _ = await self.validate(BrandForm, fields)
        if errors:
            logger.info(f"Brand create rejected: {len(errors)} field error(s)")
            return ValidationFailed(
                "brand_form",
                {"title": "Create Brand", "brand": values, "errors": errors},
                errors=errors,
            )
        return await self.create_unique(self.brands, values)

    async def update_get(self, brand_id: str) -> Ok:
        brand = await self.brands.find_by_id(brand_id)
        if brand is None:
            raise NotFoundError("Brand not found")
        return Ok("brand_form", {"title": "Update Brand", "brand": brand, "errors": []})

    async def update_post(self, brand_id: str, fields: Mapping[str, Any]) -> Result:
        """
        Replace a brand's name and description.

        Raises:
            NotFoundError: If the submission is valid but the brand does not exist
        """
        values, errors, _ = await self.validate(BrandForm, fields)
        if not errors:
            try:
                brand = await self.brands.update_by_id(brand_id, values)
            except DuplicateEntityError:
                errors = [FieldError(field="name", message="Another brand already uses this name")]
            else:
                if brand is None:
                    raise NotFoundError("Brand not found")
                logger.info(f"Updated brand {brand_id}")
                return Redirect(brand.url)

        return ValidationFailed(
            "brand_form",
            {"title": "Update Brand", "brand": {"id": brand_id, **values}, "errors": errors},
            errors=errors,
        )

    async def delete_get(self, brand_id: str) -> Result:
        """Delete confirmation: the brand and the shoes that would block deletion."""
        brand, shoes = await asyncio.gather(
            self.brands.find_by_id(brand_id),
            self.shoes.find_many(brand_id=brand_id, populate=("category",)),
        )
        if brand is None:
            return Redirect(self.list_path("brands"))
        return Ok("brand_delete", {"title": "Delete Brand", "brand": brand, "brand_shoes": shoes})

    async def delete_post(self, brand_id: str) -> Result:
        """
        Delete a brand that no shoe references.

        If shoes still reference it, nothing is deleted and the blocking
        shoes are returned. Deleting a brand that is already gone succeeds.
        """
        brand, shoes = await asyncio.gather(
            self.brands.find_by_id(brand_id),
            self.shoes.find_many(brand_id=brand_id, populate=("category",)),
        )
        if shoes:
            logger.warning(f"Refusing to delete brand {brand_id}: referenced by {len(shoes)} shoe(s)")
            return DependencyConflict(
                "brand_delete",
                {"title": "Delete Brand", "brand": brand, "brand_shoes": shoes},
                dependents=shoes,
            )
        if await self.brands.delete_by_id(brand_id):
            logger.info(f"Deleted brand {brand_id}")
        return Redirect(self.list_path("brands"))
