"""Shared pytest fixtures: an in-memory database per test and a wired TestClient."""

import asyncio
import os
from datetime import datetime, timezone

# Default to SQLite for tests
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
from fastapi import Depends, HTTPException
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.future import select
from sqlalchemy.pool import StaticPool

from menuboard.auth.routes import get_current_user
from menuboard.core.constants import UserRole
from menuboard.db import get_db
from menuboard.main import app
from menuboard.models import Base, Category, Menu, User


@pytest.fixture
def session_factory():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async def _create():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    asyncio.run(_create())
    yield async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)
    asyncio.run(engine.dispose())


@pytest.fixture
def db_run(session_factory):
    """Run ``fn(session)`` to completion on a fresh session and return its result."""

    def _run(fn):
        async def _inner():
            async with session_factory() as session:
                return await fn(session)

        return asyncio.run(_inner())

    return _run


@pytest.fixture
def current_user():
    # Tests set ["id"] to act as a given user; None means anonymous
    return {"id": None}


def _override_db(session_factory):
    async def _get_db():
        async with session_factory() as session:
            yield session

    return _get_db


@pytest.fixture
def client(session_factory, current_user):
    async def _get_current_user(db: AsyncSession = Depends(get_db)):
        if current_user["id"] is None:
            raise HTTPException(status_code=401, detail="Unauthorized")
        result = await db.execute(select(User).where(User.id == current_user["id"]))
        return result.scalar_one()

    app.dependency_overrides[get_db] = _override_db(session_factory)
    app.dependency_overrides[get_current_user] = _get_current_user
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def anonymous_client(session_factory):
    """Client that goes through the real bearer-token authentication."""
    app.dependency_overrides[get_db] = _override_db(session_factory)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_run):
    counter = {"n": 0}

    def _make(role=UserRole.OWNER, nickname="owner"):
        counter["n"] += 1
        n = counter["n"]

        async def _add(session):
            user = User(
                email=f"user{n}@example.com",
                hashed_password="not-a-real-hash",
                nickname=nickname,
                role=role.value,
            )
            session.add(user)
            await session.commit()
            return user.id

        return db_run(_add)

    return _make


@pytest.fixture
def make_category(db_run):
    def _make(category_id=None, name="Main Dishes", deleted=False):
        async def _add(session):
            category = Category(name=name)
            if category_id is not None:
                category.id = category_id
            if deleted:
                category.deleted_at = datetime.now(timezone.utc)
            session.add(category)
            await session.commit()
            return category.id

        return db_run(_add)

    return _make


@pytest.fixture
def make_menu(db_run):
    def _make(category_id, user_id, order, menu_id=None, name=None, deleted=False, author="owner"):
        async def _add(session):
            menu = Menu(
                category_id=category_id,
                user_id=user_id,
                name=name or f"Menu {order}",
                description="Tasty",
                image="https://img.example.com/menu.png",
                price=9000,
                order=order,
                author=author,
            )
            if menu_id is not None:
                menu.id = menu_id
            if deleted:
                menu.deleted_at = datetime.now(timezone.utc)
            session.add(menu)
            await session.commit()
            return menu.id

        return db_run(_add)

    return _make


@pytest.fixture
def fetch_menu(db_run):
    def _fetch(menu_id):
        async def _get(session):
            result = await session.execute(select(Menu).where(Menu.id == menu_id))
            return result.scalar_one()

        return db_run(_get)

    return _fetch


@pytest.fixture
def fetch_menus(db_run):
    def _fetch():
        async def _get(session):
            result = await session.execute(select(Menu).order_by(Menu.id))
            return result.scalars().all()

        return db_run(_get)

    return _fetch
