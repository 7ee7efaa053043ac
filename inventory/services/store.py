"""
Entity store: persistence operations shared by all inventory entity kinds.

Each call runs in its own short-lived session, so reads issued together with
asyncio.gather do not share a connection. There is no transaction spanning
calls; uniqueness of natural keys is guaranteed by the database constraints
and surfaced here as DuplicateEntityError.

Reference: https://docs.sqlalchemy.org/en/20/orm/queryguide/
"""

import logging
from typing import Any, Generic, Iterable, Mapping, Optional, Sequence, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from inventory.core.exceptions import DuplicateEntityError
from inventory.models import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class EntityStore(Generic[ModelT]):
    """
    Store for one entity kind.

    Filters are equality matches given as keyword arguments; extra SQL
    criteria (e.g. ``SKU.qty > 0``) may be passed positionally. ``populate``
    names relationships to load with the result, dotted for nested ones
    (``"shoe.brand"``).
    """

    def __init__(self, session_maker: async_sessionmaker[AsyncSession], model: type[ModelT]):
        self.session_maker = session_maker
        self.model = model

    def _load_options(self, populate: Iterable[str]) -> list:
        options = []
        for path in populate:
            owner = self.model
            loader = None
            for name in path.split("."):
                attribute = getattr(owner, name)
                loader = selectinload(attribute) if loader is None else loader.selectinload(attribute)
                owner = attribute.property.mapper.class_
            options.append(loader)
        return options

    def natural_key(self, values: Mapping[str, Any]) -> dict[str, Any]:
        """Pick the natural-key fields of this kind out of a value mapping."""
        return {field: values.get(field) for field in self.model.__natural_key__}

    async def find_by_id(
        self, entity_id: str, populate: Sequence[str] = ()
    ) -> Optional[ModelT]:
        """
        Get an entity by ID.

        Returns:
            Entity if found, None otherwise
        """
        query = (
            select(self.model)
            .where(self.model.id == entity_id)
            .options(*self._load_options(populate))
        )
        async with self.session_maker() as session:
            result = await session.execute(query)
            return result.scalar_one_or_none()

    async def find_one(
        self, *criteria, populate: Sequence[str] = (), **filters
    ) -> Optional[ModelT]:
        """Get the first entity matching the filter, or None."""
        query = (
            select(self.model)
            .where(*criteria)
            .filter_by(**filters)
            .options(*self._load_options(populate))
            .limit(1)
        )
        async with self.session_maker() as session:
            result = await session.execute(query)
            return result.scalars().first()

    async def find_many(
        self,
        *criteria,
        sort: Sequence[str] = (),
        populate: Sequence[str] = (),
        **filters,
    ) -> list[ModelT]:
        """
        Get all entities matching the filter.

        Args:
            sort: Field names to order by, ascending, in priority order.
                Without it rows come back in insertion order.
        """
        query = (
            select(self.model)
            .where(*criteria)
            .filter_by(**filters)
            .options(*self._load_options(populate))
        )
        if sort:
            query = query.order_by(*(getattr(self.model, field).asc() for field in sort))
        async with self.session_maker() as session:
            result = await session.execute(query)
            return list(result.scalars().all())

    async def distinct_values(self, field: str) -> list[Any]:
        """Get the distinct stored values of one column."""
        column = getattr(self.model, field)
        async with self.session_maker() as session:
            result = await session.execute(select(column).distinct())
            return list(result.scalars().all())

    async def count(self, *criteria, **filters) -> int:
        query = (
            select(func.count())
            .select_from(self.model)
            .where(*criteria)
            .filter_by(**filters)
        )
        async with self.session_maker() as session:
            result = await session.execute(query)
            return result.scalar_one()

    async def insert(self, values: Mapping[str, Any]) -> ModelT:
        """
        Insert a new entity; the ID is assigned here.

        Raises:
            DuplicateEntityError: If another entity already holds the natural key
        """
        entity = self.model(**values)
        async with self.session_maker() as session:
            session.add(entity)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                existing = await self.find_one(**self.natural_key(values))
                if existing is None:
                    raise
                logger.info(
                    f"Insert of {self.model.__name__} rejected: natural key held by {existing.id}"
                )
                raise DuplicateEntityError(existing) from e
        logger.debug(f"Inserted {self.model.__name__} {entity.id}")
        return entity

    async def update_by_id(
        self, entity_id: str, values: Mapping[str, Any]
    ) -> Optional[ModelT]:
        """
        Replace the given fields of an entity. The ID is never changed.

        Returns:
            Updated entity if found, None otherwise

        Raises:
            DuplicateEntityError: If the new values collide with another entity's natural key
        """
        async with self.session_maker() as session:
            entity = await session.get(self.model, entity_id)
            if entity is None:
                return None
            for field, value in values.items():
                if field != "id":
                    setattr(entity, field, value)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                existing = await self.find_one(
                    self.model.id != entity_id, **self.natural_key(values)
                )
                if existing is None:
                    raise
                raise DuplicateEntityError(existing) from e
            return entity

    async def delete_by_id(self, entity_id: str) -> bool:
        """
        Delete an entity.

        Returns:
            True if deleted, False if not found
        """
        async with self.session_maker() as session:
            entity = await session.get(self.model, entity_id)
            if entity is None:
                return False
            await session.delete(entity)
            await session.commit()
        logger.debug(f"Deleted {self.model.__name__} {entity_id}")
        return True
