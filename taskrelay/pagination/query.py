from typing import Any, List, Optional, Protocol, Sequence, Type

from sqlalchemy import select
from sqlalchemy.orm import configure_mappers
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from taskrelay.pagination.order import Direction, OrderSpec


class CollectionQuery(Protocol):
    """What the slicer needs from a backing store."""

    def column(self, name: str) -> Any:
        """Column expression for an ordering field, used to build seek predicates."""

    async def fetch(
        self, spec: OrderSpec, predicates: Sequence[ColumnElement], limit: int
    ) -> List[Any]:
        """Rows matching every predicate, ordered by ``spec``, at most ``limit`` of them."""


class RelationQuery:
    """A collection of ``model`` rows read through an ``AsyncSession``.

    ``criteria`` scopes the collection, typically to one parent's foreign key.
    """

    def __init__(self, session: AsyncSession, model: Type[Any], criteria: Optional[Sequence[ColumnElement]] = None):
        self.session = session
        self.model = model
        self.criteria = list(criteria or [])

    @classmethod
    def for_association(cls, relationship, parent: Any, session: AsyncSession) -> "RelationQuery":
        """Collection behind a one-to-many relationship of ``parent``, e.g. ``User.tasks``."""
        configure_mappers()
        prop = relationship.property
        if prop.secondary is not None:
            raise ValueError(f"{relationship} goes through a secondary table; only one-to-many is supported")

        criteria = []
        for local, remote in prop.local_remote_pairs:
            key = prop.parent.get_property_by_column(local).key
            criteria.append(remote == getattr(parent, key))
        return cls(session, prop.mapper.class_, criteria)

    def column(self, name: str):
        return getattr(self.model, name)

    async def fetch(self, spec: OrderSpec, predicates: Sequence[ColumnElement], limit: int) -> List[Any]:
        query = select(self.model)

        conditions = [*self.criteria, *predicates]
        if conditions:
            query = query.where(*conditions)

        order_by = []
        for field in spec.fields:
            column = self.column(field.name)
            order_by.append(column.asc() if field.direction is Direction.ASC else column.desc())
        query = query.order_by(*order_by).limit(limit)

        result = await self.session.execute(query)
        return list(result.scalars().all())
