import os

# Must be set before taskrelay.core.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from datetime import datetime, timedelta

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from taskrelay.db.base import Base
from taskrelay.db.models import Project, Task, User

NOW = datetime(2015, 11, 17, 3, 24, 0)


@pytest_asyncio.fixture
async def engine():
    """Fresh in-memory SQLite database per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        future=True
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db(engine):
    session_factory = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def user_a(db):
    """A user with nine tasks, ids 1..9 from oldest to newest, 5 seconds apart."""
    user = User(id=1, name="user a", created_at=NOW)
    user.tasks = [
        Task(id=task_id, name=f"task {task_id}", created_at=NOW - timedelta(seconds=50 - 5 * task_id))
        for task_id in range(1, 10)
    ]
    db.add(user)

    # Tasks of another user must never leak into user a's connection
    other = User(id=2, name="user b", created_at=NOW)
    other.tasks = [
        Task(id=task_id, name=f"task {task_id}", created_at=NOW - timedelta(seconds=task_id))
        for task_id in range(10, 13)
    ]
    db.add(other)

    await db.commit()
    return user


@pytest_asyncio.fixture
async def user_with_ties(db):
    """A user whose tasks share timestamps and names, so only the id breaks ties."""
    timestamps = [NOW, NOW, NOW, NOW + timedelta(minutes=1), NOW + timedelta(minutes=1),
                  NOW + timedelta(minutes=2), NOW + timedelta(minutes=2), NOW + timedelta(minutes=2)]
    names = ["b", "a", "b", "c", "a", "b", "c", "a"]

    user = User(id=3, name="user c", created_at=NOW)
    user.tasks = [
        Task(id=20 + i, name=name, created_at=created_at)
        for i, (name, created_at) in enumerate(zip(names, timestamps))
    ]
    db.add(user)
    await db.commit()
    return user


@pytest_asyncio.fixture
async def project_with_tasks(db, user_a):
    """Project owned by user a holding tasks 2, 4 and 6."""
    project = Project(id=1, user_id=user_a.id, name="project x", created_at=NOW)
    db.add(project)
    await db.flush()

    for task in user_a.tasks:
        if task.id in (2, 4, 6):
            task.project_id = project.id
    await db.commit()
    return project
