from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Iterable, Optional, Sequence, Tuple, Union

import strawberry

from taskrelay.pagination.errors import InvalidOrder


class Direction(str, Enum):
    ASC = "ASC"
    DESC = "DESC"

    def flipped(self) -> "Direction":
        return Direction.DESC if self is Direction.ASC else Direction.ASC


@dataclass(frozen=True)
class OrderField:
    name: str
    direction: Direction
    # Expected Python type of the column values; cursor values are checked
    # against it when set. NULL is accepted only for nullable columns.
    python_type: Optional[type] = field(default=None, compare=False)
    nullable: bool = field(default=False, compare=False)


@dataclass(frozen=True)
class OrderSpec:
    """A total ordering over a collection.

    ``selector`` names the ordering this was resolved from; cursors are
    tagged with it. The last field is always the unique tie-breaker.
    """
    selector: str
    fields: Tuple[OrderField, ...]

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(field.name for field in self.fields)

    def reversed(self) -> "OrderSpec":
        """Same fields with every direction flipped, for fetching from the tail."""
        return OrderSpec(
            selector=self.selector,
            fields=tuple(replace(f, direction=f.direction.flipped()) for f in self.fields),
        )

    def with_value_types(self, value_types: Dict[str, Tuple[type, bool]]) -> "OrderSpec":
        """Same ordering with each field bound to its column's ``(python_type, nullable)``."""
        fields = []
        for f in self.fields:
            if f.name in value_types:
                python_type, nullable = value_types[f.name]
                f = replace(f, python_type=python_type, nullable=nullable)
            fields.append(f)
        return OrderSpec(selector=self.selector, fields=tuple(fields))


OrderingDeclaration = Sequence[Tuple[str, Union[str, Direction]]]


class OrderingSelector:
    """Named orderings a connection can be sorted by.

    Example::

        TaskOrdering = OrderingSelector(
            "Task",
            {
                "ID": [("id", "ASC")],
                "LATEST": [("created_at", "DESC")],
            },
        )
        spec = TaskOrdering.resolve("LATEST")
        # created_at DESC, id ASC
    """

    def __init__(
        self,
        name: str,
        orderings: Dict[str, OrderingDeclaration],
        primary_key: str = "id",
        default: Optional[str] = None,
    ):
        if not orderings:
            raise ValueError(f"{name} ordering needs at least one selector")
        if default is not None and default not in orderings:
            raise ValueError(f"Default ordering {default!r} is not declared for {name}")

        self.name = name
        self.primary_key = primary_key
        self.default = default or next(iter(orderings))
        self._specs: Dict[str, OrderSpec] = {
            selector: self._build_spec(selector, declared)
            for selector, declared in orderings.items()
        }
        self.enum = self._build_enum()

    def _build_spec(self, selector: str, declared: OrderingDeclaration) -> OrderSpec:
        if not declared:
            raise ValueError(f"Ordering {selector!r} of {self.name} declares no fields")

        fields = []
        for field_name, direction in declared:
            try:
                fields.append(OrderField(field_name, Direction(direction)))
            except ValueError:
                raise ValueError(
                    f"Ordering {selector!r} of {self.name} has invalid direction {direction!r}"
                ) from None

        # Tie-breaker so no two rows compare equal
        if self.primary_key not in {f.name for f in fields}:
            fields.append(OrderField(self.primary_key, Direction.ASC))

        return OrderSpec(selector=selector, fields=tuple(fields))

    def _build_enum(self):
        enum_class = Enum(
            f"{self.name}ConnectionOrder",
            {selector: selector for selector in self._specs},
        )
        return strawberry.enum(enum_class, description=f"Orderings available for {self.name} connections")

    @property
    def selectors(self) -> Tuple[str, ...]:
        return tuple(self._specs)

    def specs(self) -> Iterable[OrderSpec]:
        return self._specs.values()

    def resolve(self, token=None) -> OrderSpec:
        """Resolve an enum member or selector name into an OrderSpec."""
        if token is None:
            token = self.default
        elif isinstance(token, Enum):
            token = token.value

        try:
            return self._specs[token]
        except (KeyError, TypeError):
            raise InvalidOrder(token, self.selectors) from None
