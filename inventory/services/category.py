"""
Category workflow: list, detail, create, update and delete categories.
"""

import asyncio
import logging
from typing import Any, Mapping

from inventory.api.schemas.base import FieldError
from inventory.api.schemas.category import GENDER_VALUES, CategoryForm
from inventory.core.config import settings
from inventory.core.exceptions import DuplicateEntityError, NotFoundError
from inventory.models.category import Gender
from inventory.services.base import InventoryService
from inventory.services.results import DependencyConflict, Ok, Redirect, Result, ValidationFailed

logger = logging.getLogger(__name__)


class CategoryService(InventoryService):
    """Service for managing categories"""

    async def gender_list(self) -> list[str]:
        """Distinct genders currently used by categories, sorted."""
        genders = await self.categories.distinct_values("gender")
        return sorted(Gender(gender).value for gender in genders)

    def form_context(self) -> dict[str, Any]:
        return {"strict_gender": settings.STRICT_GENDER_VALIDATION}

    async def _form(self, title: str, category, errors: list[FieldError], gender_list=None) -> dict[str, Any]:
        if gender_list is None:
            gender_list = await self.gender_list()
        return {
            "title": title,
            "gender_list": gender_list,
            "gender_choices": list(GENDER_VALUES),
            "category": category,
            "errors": errors,
        }

    async def list_all(self) -> Ok:
        """All categories, sorted by gender then style."""
        categories = await self.categories.find_many(sort=("gender", "style"))
        return Ok("category_list", {"title": "Category List", "category_list": categories})

    async def detail(self, category_id: str) -> Ok:
        """
        Get a category and its shoes.

        Raises:
            NotFoundError: If the category does not exist
        """
        category, shoes = await asyncio.gather(
            self.categories.find_by_id(category_id),
            self.shoes.find_many(category_id=category_id, sort=("name",), populate=("brand",)),
        )
        if category is None:
            raise NotFoundError("Category not found")
        return Ok("category_detail", {"title": "Category Detail", "category": category, "shoes": shoes})

    async def create_get(self) -> Ok:
        return Ok("category_form", await self._form("Create Category", None, []))

    async def create_post(self, fields: Mapping[str, Any]) -> Result:
        """
        Create a category, or redirect to the existing one with the same
        gender and style.
        """
        values, errors, _ = await self.validate(CategoryForm, fields, context=self.form_context())
        if errors:
            logger.info(f"Category create rejected: {len(errors)} field error(s)")
            return ValidationFailed(
                "category_form",
                await self._form("Create Category", values, errors),
                errors=errors,
            )
        return await self.create_unique(self.categories, values)

    async def update_get(self, category_id: str) -> Ok:
        category, gender_list = await asyncio.gather(
            self.categories.find_by_id(category_id),
            self.gender_list(),
        )
        if category is None:
            raise NotFoundError("Category not found")
        return Ok("category_form", await self._form("Update Category", category, [], gender_list))

    async def update_post(self, category_id: str, fields: Mapping[str, Any]) -> Result:
        """
        Replace a category's gender and style.

        Raises:
            NotFoundError: If the submission is valid but the category does not exist
        """
        values, errors, _ = await self.validate(CategoryForm, fields, context=self.form_context())
        if not errors:
            try:
                category = await self.categories.update_by_id(category_id, values)
            except DuplicateEntityError:
                errors = [FieldError(field="style", message="A category with this gender and style already exists")]
            else:
                if category is None:
                    raise NotFoundError("Category not found")
                logger.info(f"Updated category {category_id}")
                return Redirect(category.url)

        return ValidationFailed(
            "category_form",
            await self._form("Update Category", {"id": category_id, **values}, errors),
            errors=errors,
        )

    async def delete_get(self, category_id: str) -> Result:
        category, shoes = await asyncio.gather(
            self.categories.find_by_id(category_id),
            self.shoes.find_many(category_id=category_id, populate=("brand",)),
        )
        if category is None:
            return Redirect(self.list_path("categories"))
        return Ok("category_delete", {"title": "Delete Category", "category": category, "category_shoes": shoes})

    async def delete_post(self, category_id: str) -> Result:
        """Delete a category no shoe references; otherwise return the blocking shoes."""
        category, shoes = await asyncio.gather(
            self.categories.find_by_id(category_id),
            self.shoes.find_many(category_id=category_id, populate=("brand",)),
        )
        if shoes:
            logger.warning(f"Refusing to delete category {category_id}: referenced by {len(shoes)} shoe(s)")
            return DependencyConflict(
                "category_delete",
                {"title": "Delete Category", "category": category, "category_shoes": shoes},
                dependents=shoes,
            )
        if await self.categories.delete_by_id(category_id):
            logger.info(f"Deleted category {category_id}")
        return Redirect(self.list_path("categories"))
