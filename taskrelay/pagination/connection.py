import logging
from typing import Any, Callable, Generic, Optional, Tuple, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from taskrelay.api.graphql.common.connection import Connection
from taskrelay.pagination.assembler import assemble
from taskrelay.pagination.order import OrderingSelector
from taskrelay.pagination.query import RelationQuery
from taskrelay.pagination.slicer import PaginationArgs, slice_rows

logger = logging.getLogger(__name__)

T = TypeVar('T')  # Type for the node in the connection


def _value_type(column_attr) -> Tuple[Optional[type], bool]:
    column = column_attr.columns[0]
    try:
        python_type = column.type.python_type
    except NotImplementedError:
        python_type = None
    return python_type, bool(column.nullable)


class SQLAlchemyConnection(Generic[T]):
    """A paginated one-to-many association, e.g. the tasks of a user.

    ``target`` is the relationship attribute (``User.tasks``), ``order_by``
    the orderings callers may pick from, and ``node_factory`` turns a row into
    the node exposed on each edge.
    """

    def __init__(
        self,
        name: str,
        target: Any,
        order_by: OrderingSelector,
        node_factory: Optional[Callable[[Any], T]] = None,
    ):
        self.name = name
        self.target = target
        self.order_by = order_by
        self.node_factory = node_factory

        model = target.property.mapper.class_
        columns = model.__mapper__.column_attrs
        for spec in order_by.specs():
            for field_name in spec.field_names:
                if field_name not in columns:
                    raise ValueError(
                        f"{name} ordering {spec.selector!r} uses {field_name!r}, "
                        f"which is not a column of {model.__name__}"
                    )

        # Resolved orderings bound to their column types so cursor values are type checked
        self._specs = {
            spec.selector: spec.with_value_types(
                {field_name: _value_type(columns[field_name]) for field_name in spec.field_names}
            )
            for spec in order_by.specs()
        }

    @property
    def order_enum(self):
        """GraphQL enum for the ``orderBy`` argument."""
        return self.order_by.enum

    async def resolve(self, parent: Any, args: PaginationArgs, session: AsyncSession) -> Connection[T]:
        """Resolve one page of ``parent``'s collection."""
        spec = self._specs[self.order_by.resolve(args.order_by).selector]
        collection = RelationQuery.for_association(self.target, parent, session)

        page = await slice_rows(collection, spec, args)
        logger.debug(f"{self.name} connection returned {len(page.rows)} rows ordered by {spec.selector}")

        return assemble(page, spec, self.node_factory)
