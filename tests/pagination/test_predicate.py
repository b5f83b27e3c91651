from datetime import timedelta

import pytest
from sqlalchemy import delete

from taskrelay.db.models import Task, User
from taskrelay.pagination import (
    InvalidCursor, OrderingSelector, OrderSpec, OrderField, Direction, RelationQuery, SeekDirection,
    build_seek_predicate
)
from tests.conftest import NOW

ORDERING = OrderingSelector(
    "Task",
    {
        "ID": [("id", "ASC")],
        "LATEST": [("created_at", "DESC")],
        "NAME": [("name", "ASC")],
        "NAME_LATEST": [("name", "DESC"), ("created_at", "DESC")],
    },
)


def column_for(name):
    return getattr(Task, name)


def render(predicate) -> str:
    return str(predicate.compile(compile_kwargs={"literal_binds": True}))


def sort_key(spec: OrderSpec):
    """Python equivalent of the ORDER BY for Task rows"""
    def key(task):
        parts = []
        for field in spec.fields:
            value = getattr(task, field.name)
            if field.name == "created_at":
                value = value.timestamp()
            if field.direction is Direction.DESC:
                # Only numbers and single-char names are reversed in these tests
                value = -value if not isinstance(value, str) else -ord(value)
            parts.append(value)
        return tuple(parts)
    return key


def test_no_anchor_is_identity():
    spec = ORDERING.resolve("LATEST")

    assert build_seek_predicate(spec, None, SeekDirection.AFTER, column_for) is None
    assert build_seek_predicate(spec, None, SeekDirection.BEFORE, column_for) is None


@pytest.mark.parametrize("direction, seek, expected", [
    (Direction.ASC, SeekDirection.AFTER, "tasks.id > 3"),
    (Direction.ASC, SeekDirection.BEFORE, "tasks.id < 3"),
    (Direction.DESC, SeekDirection.AFTER, "tasks.id < 3"),
    (Direction.DESC, SeekDirection.BEFORE, "tasks.id > 3"),
])
def test_single_field_comparison(direction, seek, expected):
    spec = OrderSpec("ID", (OrderField("id", direction),))

    predicate = build_seek_predicate(spec, (3,), seek, column_for)

    assert render(predicate) == expected


def test_composite_comparison_is_lexicographic():
    spec = ORDERING.resolve("NAME")

    predicate = build_seek_predicate(spec, ("b", 3), SeekDirection.AFTER, column_for)

    assert render(predicate) == "tasks.name > 'b' OR tasks.name = 'b' AND tasks.id > 3"


def test_anchor_length_must_match_spec():
    spec = ORDERING.resolve("NAME")

    with pytest.raises(InvalidCursor):
        build_seek_predicate(spec, ("b",), SeekDirection.AFTER, column_for)


@pytest.mark.asyncio
@pytest.mark.parametrize("selector", ["ID", "LATEST", "NAME", "NAME_LATEST"])
@pytest.mark.parametrize("seek", [SeekDirection.AFTER, SeekDirection.BEFORE])
async def test_predicate_matches_python_ordering(db, user_with_ties, selector, seek):
    """For every anchor row, the predicate selects exactly the rows strictly after/before it"""
    spec = ORDERING.resolve(selector)
    collection = RelationQuery.for_association(User.tasks, user_with_ties, db)
    tasks = sorted(await collection.fetch(spec, [], 100), key=sort_key(spec))

    for position, anchor_task in enumerate(tasks):
        anchor = tuple(getattr(anchor_task, name) for name in spec.field_names)
        predicate = build_seek_predicate(spec, anchor, seek, collection.column)

        rows = await collection.fetch(spec, [predicate], 100)

        expected = tasks[position + 1:] if seek is SeekDirection.AFTER else tasks[:position]
        assert [row.id for row in rows] == [task.id for task in expected]


@pytest.mark.asyncio
async def test_total_order_has_no_ties(db, user_with_ties):
    """Distinct rows never share the full ordering tuple"""
    for spec in ORDERING.specs():
        collection = RelationQuery.for_association(User.tasks, user_with_ties, db)
        rows = await collection.fetch(spec, [], 100)
        tuples = [tuple(getattr(row, name) for name in spec.field_names) for row in rows]

        assert len(set(tuples)) == len(rows)


@pytest.mark.asyncio
async def test_anchor_of_deleted_row_still_seeks(db, user_a):
    spec = ORDERING.resolve("LATEST")
    collection = RelationQuery.for_association(User.tasks, user_a, db)
    # Task 5's position, after task 5 itself is gone
    anchor = (NOW - timedelta(seconds=25), 5)
    await db.execute(delete(Task).where(Task.id == 5))
    await db.commit()

    after = build_seek_predicate(spec, anchor, SeekDirection.AFTER, collection.column)
    before = build_seek_predicate(spec, anchor, SeekDirection.BEFORE, collection.column)

    assert [row.id for row in await collection.fetch(spec, [after], 100)] == [4, 3, 2, 1]
    assert [row.id for row in await collection.fetch(spec, [before], 100)] == [9, 8, 7, 6]
