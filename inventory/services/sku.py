"""
SKU workflow: list, detail, create, update and delete SKUs.
"""

import logging
from typing import Any, Mapping

from inventory.api.schemas.base import FieldError
from inventory.api.schemas.sku import SKUForm
from inventory.core.exceptions import DuplicateEntityError, NotFoundError
from inventory.services.base import InventoryService, Reference
from inventory.services.results import Ok, Redirect, Result, ValidationFailed

logger = logging.getLogger(__name__)

SHOE_POPULATE = ("brand", "category")


def sku_values(values: Mapping[str, Any]) -> dict[str, Any]:
    """Map accepted form values onto SKU columns."""
    return {
        "shoe_id": values["shoe"],
        "color": values["color"],
        "size": values["size"],
        "price": values["price"],
        "qty": values["qty"],
    }


class SKUService(InventoryService):
    """Service for managing SKUs"""

    def references(self) -> list[Reference]:
        return [Reference("shoe", self.shoes, "Shoe not found", SHOE_POPULATE)]

    async def shoe_choices(self) -> list:
        """All shoes, ordered case-insensitively by brand name then shoe name."""
        shoes = await self.shoes.find_many(populate=SHOE_POPULATE)
        return sorted(shoes, key=lambda shoe: (shoe.brand.name.upper(), shoe.name.upper()))

    async def list_all(self) -> Ok:
        """All SKUs in insertion order, with their shoe."""
        skus = await self.skus.find_many(populate=("shoe",))
        return Ok("sku_list", {"title": "SKU List", "sku_list": skus})

    async def detail(self, sku_id: str) -> Ok:
        """
        Raises:
            NotFoundError: If the SKU does not exist
        """
        sku = await self.skus.find_by_id(sku_id, populate=("shoe",))
        if sku is None:
            raise NotFoundError("SKU not found")
        return Ok("sku_detail", {"title": "SKU", "sku": sku})

    async def create_get(self) -> Ok:
        return Ok(
            "sku_form",
            {
                "title": "Create SKU",
                "shoe_list": await self.shoe_choices(),
                "selected_shoe": None,
                "sku": None,
                "errors": [],
            },
        )

    async def create_post(self, fields: Mapping[str, Any]) -> Result:
        """
        Create a SKU, or redirect to the existing SKU of the same shoe,
        color and size.
        """
        values, errors, _ = await self.validate(SKUForm, fields, self.references())
        if errors:
            logger.info(f"SKU create rejected: {len(errors)} field error(s)")
            return ValidationFailed(
                "sku_form",
                {
                    "title": "Create SKU",
                    "shoe_list": await self.shoe_choices(),
                    "selected_shoe": values.get("shoe") or None,
                    "sku": values,
                    "errors": errors,
                },
                errors=errors,
            )
        return await self.create_unique(self.skus, sku_values(values))

    async def update_get(self, sku_id: str) -> Ok:
        """The update form only offers the SKU's own shoe."""
        sku = await self.skus.find_by_id(sku_id, populate=("shoe.brand", "shoe.category"))
        if sku is None:
            raise NotFoundError("SKU not found")
        return Ok(
            "sku_form",
            {
                "title": "Update SKU",
                "shoe_list": [sku.shoe],
                "selected_shoe": sku.shoe_id,
                "sku": sku,
                "errors": [],
            },
        )

    async def update_post(self, sku_id: str, fields: Mapping[str, Any]) -> Result:
        """
        Replace a SKU's shoe, color, size, price and quantity.

        Raises:
            NotFoundError: If the submission is valid but the SKU does not exist
        """
        values, errors, resolved = await self.validate(SKUForm, fields, self.references())
        if not errors:
            try:
                sku = await self.skus.update_by_id(sku_id, sku_values(values))
            except DuplicateEntityError:
                errors = [FieldError(field="color", message="This shoe already has a SKU with this color and size")]
            else:
                if sku is None:
                    raise NotFoundError("SKU not found")
                logger.info(f"Updated SKU {sku_id}")
                return Redirect(sku.url)

        shoe = resolved.get("shoe")
        return ValidationFailed(
            "sku_form",
            {
                "title": "Update SKU",
                "shoe_list": [shoe] if shoe is not None else [],
                "selected_shoe": shoe.id if shoe is not None else None,
                "sku": {"id": sku_id, **values},
                "errors": errors,
            },
            errors=errors,
        )

    async def delete_get(self, sku_id: str) -> Result:
        sku = await self.skus.find_by_id(sku_id, populate=("shoe",))
        if sku is None:
            return Redirect(self.list_path("skus"))
        return Ok("sku_delete", {"title": "Delete SKU", "sku": sku})

    async def delete_post(self, sku_id: str) -> Redirect:
        """Nothing references a SKU, so deletion is unconditional."""
        if await self.skus.delete_by_id(sku_id):
            logger.info(f"Deleted SKU {sku_id}")
        return Redirect(self.list_path("skus"))
