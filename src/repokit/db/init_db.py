"""
repokit.db.init_db

DB initialization helpers (dev/test convenience).

Responsibilities:
- Create tables for local development and tests.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from repokit.db.base import Base


async def init_db(engine: AsyncEngine) -> None:
    """
    Dev/test bootstrap: create tables for every model registered on `Base`.
    Schema management in production is out of scope for this package.
    """

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
