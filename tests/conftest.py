"""
Pytest fixtures for ListShare tests.

The database is an in-memory SQLite shared through a StaticPool, so every
session in a test sees the same data.
"""

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import AsyncGenerator

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from listshare.kernel.models import Base, Friendship, ItemList, ListItem, User


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


def make_id(n: int) -> uuid.UUID:
    """Deterministic, ordered ids so store order is predictable in assertions."""
    return uuid.UUID(int=n)


@pytest_asyncio.fixture(scope="function")
async def db_engine():
    """Create a test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def session_maker(db_engine):
    return async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture(scope="function")
async def db_session(session_maker) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async with session_maker() as session:
        yield session
        await session.rollback()


def make_user(n: int, first_name: str, last_name: str = "Tester") -> User:
    return User(
        id=make_id(n),
        first_name=first_name,
        last_name=last_name,
        password="not-a-real-hash",
        favorite_users=[],
    )


@dataclass
class SocialGraph:
    """
    Viewer V owns lists A and B and has friendships to F1 and F2.
    F1 owns list C, F2 owns nothing. A stranger owns list D.
    List A has three items, one of them removed.
    """

    viewer: User
    friend_one: User
    friend_two: User
    stranger: User
    list_a: ItemList
    list_b: ItemList
    list_c: ItemList
    list_d: ItemList
    items_a: list


@pytest_asyncio.fixture
async def social_graph(db_session: AsyncSession) -> SocialGraph:
    viewer = make_user(1, "Vera", "Viewer")
    friend_one = make_user(2, "Fred", "One")
    friend_two = make_user(3, "Fiona", "Two")
    stranger = make_user(4, "Sam", "Stranger")
    db_session.add_all([viewer, friend_one, friend_two, stranger])

    db_session.add_all([
        Friendship(id=make_id(10), user_id=viewer.id, friend_id=friend_one.id),
        Friendship(id=make_id(11), user_id=viewer.id, friend_id=friend_two.id),
        # Reverse edge belongs to F1, not the viewer
        Friendship(id=make_id(12), user_id=friend_one.id, friend_id=viewer.id),
    ])

    list_a = ItemList(id=make_id(20), user_id=viewer.id, name="List A", color="#ff0000")
    list_b = ItemList(id=make_id(21), user_id=viewer.id, name="List B", color="#00ff00")
    list_c = ItemList(id=make_id(22), user_id=friend_one.id, name="List C", color="#0000ff")
    list_d = ItemList(id=make_id(23), user_id=stranger.id, name="List D", color="#000000")
    db_session.add_all([list_a, list_b, list_c, list_d])

    items_a = [
        ListItem(id=make_id(30), list_id=list_a.id, name="Kettle", link="https://example.com/kettle"),
        ListItem(id=make_id(31), list_id=list_a.id, name="Scarf", claimer_string="Grandma"),
        ListItem(
            id=make_id(32),
            list_id=list_a.id,
            name="Old idea",
            removed_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        ),
    ]
    db_session.add_all(items_a)
    db_session.add(ListItem(id=make_id(33), list_id=list_c.id, name="Telescope"))

    await db_session.commit()

    return SocialGraph(
        viewer=viewer,
        friend_one=friend_one,
        friend_two=friend_two,
        stranger=stranger,
        list_a=list_a,
        list_b=list_b,
        list_c=list_c,
        list_d=list_d,
        items_a=items_a,
    )
