from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from repokit.db.init_db import init_db
from repokit.db.session import create_engine, create_sessionmaker
from repokit.repositories.entity import EntityRepository
from repokit.settings import Settings
from tests.models import Employee


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(env="test", database_url=f"sqlite+aiosqlite:///{tmp_path / 'repokit.db'}")


@pytest_asyncio.fixture
async def engine(settings: Settings) -> AsyncIterator[AsyncEngine]:
    engine = create_engine(settings)
    await init_db(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest_asyncio.fixture
async def session(engine: AsyncEngine) -> AsyncIterator[AsyncSession]:
    async with create_sessionmaker(engine)() as session:
        yield session


@pytest.fixture
def employees(session: AsyncSession, settings: Settings) -> EntityRepository[Employee]:
    return EntityRepository(session, model=Employee, settings=settings)
