from typing import TypeVar, Generic, Optional, Type
from sqlalchemy.ext.asyncio import AsyncSession
from strawberry.relay import GlobalID
from strawberry.scalars import ID
from strawberry.types import Info

from taskrelay.pagination import PaginationArgs

T = TypeVar('T')  # Type for the database model
G = TypeVar('G')  # Type for the GraphQL type

class BaseResolver(Generic[T, G]):
    """Base resolver class to standardize resolver patterns across all domain modules."""

    model_class: Type[T] = None
    graphql_type_class: Type[G] = None

    @classmethod
    async def get_by_id(cls, id: int, db: AsyncSession) -> Optional[T]:
        """Get a model instance by ID."""
        return await db.get(cls.model_class, id)

    @classmethod
    async def get_by_global_id(cls, global_id: str, db: AsyncSession) -> Optional[T]:
        """Get a model instance by Relay global ID.

        IDs of another node type resolve to None; malformed IDs raise ValueError.
        """
        decoded = GlobalID.from_id(global_id)
        if decoded.type_name != cls.graphql_type_class.__name__:
            return None
        try:
            pk = int(decoded.node_id)
        except ValueError:
            raise ValueError(f"Invalid {decoded.type_name} ID: {global_id!r}") from None
        return await cls.get_by_id(pk, db)

    @classmethod
    def to_global_id(cls, model: T) -> ID:
        """Opaque Relay ID, base64 of ``"<Type>:<pk>"``."""
        return ID(str(GlobalID(cls.graphql_type_class.__name__, str(model.id))))

    @classmethod
    def to_graphql_type(cls, model: T) -> G:
        """Convert a database model to a GraphQL type."""
        raise NotImplementedError("Subclasses must implement to_graphql_type method")

    @classmethod
    def get_db_from_info(cls, info: Info) -> AsyncSession:
        """Extract database session from GraphQL info context."""
        context = info.context
        return context.get("db")

    @staticmethod
    def pagination_args(first, after, last, before, order_by) -> PaginationArgs:
        """Collect connection field arguments."""
        return PaginationArgs(first=first, after=after, last=last, before=before, order_by=order_by)
