"""
tests.test_smoke

End-to-end wiring: settings -> engine -> init_db -> session scope -> repository.
"""

from __future__ import annotations

import pytest
import structlog

from repokit import EntityRepository, __version__
from repokit.db.session import create_sessionmaker, session_scope
from repokit.observability.logging import bind_repository_context, configure_logging
from tests.models import Employee


@pytest.mark.asyncio
async def test_session_scope_commits(engine, settings) -> None:
    configure_logging(service_name=settings.service_name, level=settings.log_level)
    factory = create_sessionmaker(engine)

    async with session_scope(factory) as session:
        repo = EntityRepository(session, model=Employee, settings=settings)
        await repo.create({"name": "Ann"})

    async with factory() as session:
        repo = EntityRepository(session, model=Employee, settings=settings)
        emp = await repo.find_by_id(1)
        assert emp is not None and emp.name == "Ann"


@pytest.mark.asyncio
async def test_session_scope_rolls_back_on_error(engine, settings) -> None:
    factory = create_sessionmaker(engine)

    with pytest.raises(RuntimeError):
        async with session_scope(factory) as session:
            repo = EntityRepository(session, model=Employee, settings=settings)
            await repo.create({"name": "Ann"})
            raise RuntimeError("boom")

    async with factory() as session:
        repo = EntityRepository(session, model=Employee, settings=settings)
        assert await repo.count() == 0


def test_repository_context_binding() -> None:
    structlog.contextvars.clear_contextvars()
    with bind_repository_context(Employee, request_id="r-1"):
        assert structlog.contextvars.get_contextvars() == {
            "model": "Employee",
            "request_id": "r-1",
        }
    assert "model" not in structlog.contextvars.get_contextvars()


def test_version() -> None:
    assert __version__ == "0.1.0"
