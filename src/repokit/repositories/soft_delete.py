"""
repokit.repositories.soft_delete

Soft-delete trait for repositories whose model maps `Settings.soft_delete_column`.

Responsibilities:
- List and fetch trashed rows.
- Restore trashed rows or remove them permanently.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from repokit.errors import UnsupportedOperationError
from repokit.observability.logging import get_logger
from repokit.repositories import query
from repokit.repositories.interface import ModelT, SoftDeleteRepositoryInterface

log = get_logger(__name__)


class SoftDeletesMixin(SoftDeleteRepositoryInterface[ModelT]):
    # Mixed into `Repository`; relies on its statement/execution helpers.

    def _require_soft_deletes(self) -> None:
        if not self.supports_soft_deletes:
            raise UnsupportedOperationError(self.model, "soft deletes")

    async def all_trashed(
        self,
        columns: Sequence[str] | None = None,
        relations: Sequence[str] | None = None,
    ) -> list[ModelT]:
        self._require_soft_deletes()
        return await self._many(self._select(columns, relations, trashed="only"))

    async def find_trashed_by_id(
        self,
        record_id: Any,
        columns: Sequence[str] | None = None,
        relations: Sequence[str] | None = None,
        appends: Sequence[str] | None = None,
    ) -> ModelT | None:
        self._require_soft_deletes()
        appended = query.check_appends(self.model, appends)
        stmt = self._select(columns, relations, trashed="include").where(self._pk == record_id)
        return await self._one(stmt, appended)

    async def restore_by_id(self, record_id: Any) -> bool:
        instance = await self.find_trashed_by_id(record_id)
        if instance is None:
            return False
        setattr(instance, self._settings.soft_delete_column, None)
        await self._session.flush()
        log.info("restored", model=self.model.__name__, id=record_id)
        return True

    async def permanently_delete_by_id(self, record_id: Any) -> bool:
        instance = await self.find_trashed_by_id(record_id)
        if instance is None:
            return False
        await self._session.delete(instance)
        await self._session.flush()
        log.info("purged", model=self.model.__name__, id=record_id)
        return True
