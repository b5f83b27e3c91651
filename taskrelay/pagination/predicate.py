from enum import Enum
from typing import Any, Callable, Optional, Sequence

from sqlalchemy import and_, or_
from sqlalchemy.sql.elements import ColumnElement

from taskrelay.pagination.errors import InvalidCursor
from taskrelay.pagination.order import Direction, OrderSpec


class SeekDirection(str, Enum):
    AFTER = "AFTER"
    BEFORE = "BEFORE"


def _strict_comparison(column, value, direction: Direction, seek: SeekDirection):
    # Rows after the anchor are greater on ASC fields and smaller on DESC fields
    greater = (direction is Direction.ASC) == (seek is SeekDirection.AFTER)
    return column > value if greater else column < value


def build_seek_predicate(
    spec: OrderSpec,
    anchor: Optional[Sequence[Any]],
    seek: SeekDirection,
    column_for: Callable[[str], Any],
) -> Optional[ColumnElement]:
    """Build the filter for rows strictly after/before ``anchor`` under ``spec``.

    The composite ordering is compared lexicographically::

        (a > x) OR (a = x AND b > y) OR (a = x AND b = y AND id > z)

    with each operator flipped for DESC fields. Returns ``None`` when there is
    no anchor. The anchor need not match an existing row.
    """
    if anchor is None:
        return None
    if len(anchor) != len(spec.fields):
        raise InvalidCursor(str(tuple(anchor)), "ordering field count does not match")

    columns = [column_for(field.name) for field in spec.fields]
    branches = []
    for i, field in enumerate(spec.fields):
        equal_prefix = [columns[j] == anchor[j] for j in range(i)]
        step = _strict_comparison(columns[i], anchor[i], field.direction, seek)
        branches.append(and_(*equal_prefix, step) if equal_prefix else step)

    return or_(*branches) if len(branches) > 1 else branches[0]
