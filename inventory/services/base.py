"""
Base class for the inventory workflows (brand, category, shoe, SKU).

Holds one entity store per kind and the create/reference-check steps the
four workflows have in common.
"""

import asyncio
import logging
from typing import Any, Mapping, NamedTuple, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from inventory.api.schemas.base import FieldError, InventoryForm
from inventory.core.config import settings
from inventory.core.exceptions import DuplicateEntityError
from inventory.models import SKU, Brand, Category, Shoe
from inventory.services.results import Redirect
from inventory.services.store import EntityStore

logger = logging.getLogger(__name__)


class Reference(NamedTuple):
    """A form field holding the ID of another entity."""

    field: str
    store: EntityStore
    message: str
    populate: Sequence[str] = ()


class InventoryService:
    """Shared state and steps for the entity workflows"""

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]):
        self.brands = EntityStore(session_maker, Brand)
        self.categories = EntityStore(session_maker, Category)
        self.shoes = EntityStore(session_maker, Shoe)
        self.skus = EntityStore(session_maker, SKU)

    @staticmethod
    def list_path(kind: str) -> str:
        """Path of the list page for an entity kind, e.g. /inventory/brands."""
        return f"{settings.INVENTORY_PREFIX}/{kind}"

    async def validate(
        self,
        form: type[InventoryForm],
        fields: Mapping[str, Any],
        references: Sequence[Reference] = (),
        context: Optional[dict[str, Any]] = None,
    ) -> tuple[dict[str, Any], list[FieldError], dict[str, Any]]:
        """
        Check a submission against its form rules and resolve its references.

        References are looked up concurrently. An unresolvable reference is
        reported as an error on its field, ordered with the rule errors by
        the form's field order.

        Returns:
            (values, errors, resolved): sanitized values, ordered errors and
            the referenced entities that were found, keyed by field
        """
        values, errors = form.check(fields, context=context)
        found = await asyncio.gather(
            *(
                reference.store.find_by_id(values[reference.field], populate=reference.populate)
                if values.get(reference.field)
                else asyncio.sleep(0, result=None)
                for reference in references
            )
        )
        resolved = {}
        for reference, entity in zip(references, found):
            if entity is None:
                errors.append(FieldError(field=reference.field, message=reference.message))
            else:
                resolved[reference.field] = entity

        order = list(form.model_fields)
        errors.sort(key=lambda error: order.index(error.field) if error.field in order else len(order))
        return values, errors, resolved

    async def create_unique(self, store: EntityStore, values: Mapping[str, Any]) -> Redirect:
        """
        Insert an entity unless one with the same natural key exists.

        Either way the result redirects to the entity holding the key, so a
        repeated create resolves to the first entity's identity.
        """
        kind = store.model.__name__
        existing = await store.find_one(**store.natural_key(values))
        if existing is not None:
            logger.info(f"{kind} with natural key {store.natural_key(values)} already exists (ID: {existing.id})")
            return Redirect(existing.url)
        try:
            entity = await store.insert(values)
        except DuplicateEntityError as e:
            # Lost a race with a concurrent create of the same key
            logger.info(f"{kind} created concurrently, using existing ID: {e.existing.id}")
            return Redirect(e.existing.url)
        logger.info(f"Created {kind} (ID: {entity.id})")
        return Redirect(entity.url)
