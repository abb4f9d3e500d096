from __future__ import annotations

import asyncio
import os
from collections.abc import Awaitable, Callable
from typing import Any

os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from pictures.db.base import Base
from pictures.db.session import make_engine, make_session_factory
from pictures.models import *  # noqa: F401,F403
from tests.owners import OwnerBase

TEST_DATABASE_URL = "sqlite+aiosqlite://"


def _run_with_db(scenario: Callable[[async_sessionmaker[AsyncSession]], Awaitable[Any]]) -> Any:
    # Engine, schema and scenario share one event loop.
    async def _main() -> Any:
        engine = make_engine(TEST_DATABASE_URL)
        try:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
                await conn.run_sync(OwnerBase.metadata.create_all)
            return await scenario(make_session_factory(engine))
        finally:
            await engine.dispose()

    return asyncio.run(_main())


@pytest.fixture()
def run_db() -> Callable[[Callable[[async_sessionmaker[AsyncSession]], Awaitable[Any]]], Any]:
    return _run_with_db
