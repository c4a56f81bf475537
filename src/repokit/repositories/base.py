"""
repokit.repositories.base

Default SQLAlchemy implementation of `RepositoryInterface`.

Responsibilities:
- Build scoped `select()` statements for the bound model (soft-deleted rows
  hidden unless asked for).
- Translate single-row "not found" into None at this boundary.
- Normalize payloads and flush (never commit) mutations.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, Literal

from sqlalchemy import Select, func, inspect as sa_inspect, select
from sqlalchemy.exc import NoResultFound
from sqlalchemy.ext.asyncio import AsyncSession

from repokit.db.mixins import AttributesMixin, utcnow
from repokit.errors import InvalidArgumentError, InvalidPayloadError, UnsupportedOperationError
from repokit.observability.logging import bind_repository_context, get_logger
from repokit.repositories import query
from repokit.repositories.interface import ModelT, RepositoryInterface
from repokit.repositories.payload import Payload, normalize_payload
from repokit.settings import Settings, get_settings

log = get_logger(__name__)

TrashedScope = Literal["exclude", "include", "only"]


class Repository(RepositoryInterface[ModelT]):
    """
    Bind either by subclassing:

        class EmployeeRepo(EntityRepository[Employee]):
            model = Employee

    or per instance: `Repository(session, model=Employee)`.
    """

    model: type[ModelT]

    def __init__(
        self,
        session: AsyncSession,
        model: type[ModelT] | None = None,
        *,
        settings: Settings | None = None,
    ) -> None:
        if model is not None:
            self.model = model
        if getattr(self, "model", None) is None:
            raise InvalidArgumentError(f"{type(self).__name__} is not bound to a model class")

        self._session = session
        self._settings = settings or get_settings()
        self._mapper = sa_inspect(self.model)

        primary_key = self._mapper.primary_key
        if len(primary_key) != 1:
            raise InvalidArgumentError(
                f"{self.model.__name__} must have a single-column primary key"
            )
        self._pk = getattr(self.model, self._mapper.get_property_by_column(primary_key[0]).key)

    @property
    def supports_soft_deletes(self) -> bool:
        return self._settings.soft_delete_column in self._mapper.column_attrs

    # --- statement building ---------------------------------------------------

    def _scope(self, stmt: Select, trashed: TrashedScope = "exclude") -> Select:
        if not self.supports_soft_deletes:
            if trashed == "only":
                raise UnsupportedOperationError(self.model, "soft deletes")
            return stmt
        marker = getattr(self.model, self._settings.soft_delete_column)
        if trashed == "exclude":
            return stmt.where(marker.is_(None))
        if trashed == "only":
            return stmt.where(marker.is_not(None))
        return stmt

    def _select(
        self,
        columns: Sequence[str] | None = None,
        relations: Sequence[str] | None = None,
        *,
        trashed: TrashedScope = "exclude",
    ) -> Select:
        if columns is None:
            columns = self._settings.default_columns
        stmt = select(self.model)
        projected = query.projection(self.model, columns)
        options = [*projected, *query.eager_loads(self.model, relations)]
        if options:
            stmt = stmt.options(*options)
        if projected:
            # Rows already in the identity map would otherwise keep every column loaded.
            stmt = stmt.execution_options(populate_existing=True)
        return self._scope(stmt, trashed)

    def _where(self, stmt: Select, criteria: query.Criteria | None) -> Select:
        clauses = query.build_criteria(self.model, criteria)
        return stmt.where(*clauses) if clauses else stmt

    # --- execution --------------------------------------------------------------

    async def _many(self, stmt: Select, appends: tuple[str, ...] = ()) -> list[ModelT]:
        rows = list((await self._session.execute(stmt)).scalars().all())
        for row in rows:
            self._set_appends(row, appends)
        return rows

    async def _one(self, stmt: Select, appends: tuple[str, ...] = ()) -> ModelT | None:
        try:
            row = (await self._session.execute(stmt)).scalar_one()
        except NoResultFound:
            return None
        self._set_appends(row, appends)
        return row

    @staticmethod
    def _set_appends(row: Any, appends: tuple[str, ...]) -> None:
        if isinstance(row, AttributesMixin):
            row.set_appends(appends)

    async def _first_by(
        self, column: str, value: Any, columns: Sequence[str] | None = None
    ) -> ModelT | None:
        stmt = self._select(columns).where(query.column_for(self.model, column) == value).limit(1)
        row = (await self._session.execute(stmt)).scalars().first()
        if row is not None:
            self._set_appends(row, ())
        return row

    def _payload(self, payload: Payload) -> dict[str, Any]:
        data = normalize_payload(payload)
        unknown = sorted(key for key in data if key not in self._mapper.column_attrs)
        if unknown:
            raise InvalidPayloadError(f"{self.model.__name__} has no column(s) {unknown!r}")
        return data

    def _identity(self, instance: ModelT) -> Any:
        return getattr(instance, self._pk.key)

    # --- reads ------------------------------------------------------------------

    async def all(
        self,
        columns: Sequence[str] | None = None,
        relations: Sequence[str] | None = None,
    ) -> list[ModelT]:
        return await self._many(self._select(columns, relations))

    async def exists_by_id(self, record_id: Any) -> bool:
        inner = self._scope(select(self._pk).where(self._pk == record_id))
        return bool((await self._session.execute(select(inner.exists()))).scalar())

    async def find_by_id(
        self,
        record_id: Any,
        columns: Sequence[str] | None = None,
        relations: Sequence[str] | None = None,
        appends: Sequence[str] | None = None,
    ) -> ModelT | None:
        appended = query.check_appends(self.model, appends)
        stmt = self._select(columns, relations).where(self._pk == record_id)
        return await self._one(stmt, appended)

    async def find_all_by_id(
        self,
        record_ids: Iterable[Any],
        columns: Sequence[str] | None = None,
        relations: Sequence[str] | None = None,
        appends: Sequence[str] | None = None,
    ) -> list[ModelT]:
        ids = list(record_ids)
        appended = query.check_appends(self.model, appends)
        if not ids:
            return []
        stmt = self._select(columns, relations).where(self._pk.in_(ids))
        return await self._many(stmt, appended)

    async def count(self, criteria: query.Criteria | None = None) -> int:
        stmt = self._where(self._scope(select(func.count()).select_from(self.model)), criteria)
        return int((await self._session.execute(stmt)).scalar_one())

    async def find(
        self,
        criteria: query.Criteria | None = None,
        columns: Sequence[str] | None = None,
        relations: Sequence[str] | None = None,
        appends: Sequence[str] | None = None,
    ) -> list[ModelT]:
        appended = query.check_appends(self.model, appends)
        stmt = self._where(self._select(columns, relations), criteria)
        return await self._many(stmt, appended)

    async def find_limited(
        self,
        criteria: query.Criteria | None = None,
        limit: int | None = None,
        columns: Sequence[str] | None = None,
        relations: Sequence[str] | None = None,
        appends: Sequence[str] | None = None,
    ) -> list[ModelT]:
        limit = query.check_limit(self._settings.default_limit if limit is None else limit)
        appended = query.check_appends(self.model, appends)
        stmt = self._where(self._select(columns, relations), criteria).limit(limit)
        return await self._many(stmt, appended)

    async def find_ordered_limited(
        self,
        criteria: query.Criteria | None = None,
        order_by: query.OrderBy | None = None,
        limit: int | None = None,
        columns: Sequence[str] | None = None,
        relations: Sequence[str] | None = None,
        appends: Sequence[str] | None = None,
    ) -> list[ModelT]:
        ordering = query.build_ordering(self.model, order_by)
        limit = query.check_limit(self._settings.default_limit if limit is None else limit)
        appended = query.check_appends(self.model, appends)
        stmt = (
            self._where(self._select(columns, relations), criteria)
            .order_by(ordering)
            .limit(limit)
        )
        return await self._many(stmt, appended)

    # --- writes -----------------------------------------------------------------

    async def create(self, payload: Payload) -> ModelT | None:
        try:
            data = self._payload(payload)
        except InvalidPayloadError as exc:
            log.warning("payload_rejected", model=self.model.__name__, op="create", error=str(exc))
            return None

        instance = self.model(**data)
        self._session.add(instance)
        await self._session.flush()
        # Reload so server defaults and generated values replace what the caller sent.
        await self._session.refresh(instance)
        log.info("created", model=self.model.__name__, id=self._identity(instance))
        return instance

    async def save(self, payload: Payload) -> ModelT | None:
        return await self.create(payload)

    async def save_all(self, payloads: Iterable[Payload]) -> list[ModelT] | None:
        items = list(payloads)
        with bind_repository_context(self.model, batch_size=len(items)):
            try:
                rows = [self._payload(item) for item in items]
            except InvalidPayloadError as exc:
                log.warning("payload_rejected", op="save_all", error=str(exc))
                return None

            instances = [self.model(**data) for data in rows]
            self._session.add_all(instances)
            await self._session.flush()
            for instance in instances:
                await self._session.refresh(instance)
            log.info("created_batch", ids=[self._identity(i) for i in instances])
        return instances

    async def update(self, record_id: Any, payload: Payload) -> bool:
        try:
            data = self._payload(payload)
        except InvalidPayloadError as exc:
            log.warning("payload_rejected", model=self.model.__name__, op="update", error=str(exc))
            return False

        instance = await self.find_by_id(record_id)
        if instance is None:
            return False
        for key, value in data.items():
            setattr(instance, key, value)
        await self._session.flush()
        log.info("updated", model=self.model.__name__, id=record_id, fields=sorted(data))
        return True

    async def archive(self, record_id: Any) -> bool:
        # TODO: define an archive flag column and set it here once its semantics
        # (distinct from soft delete) are agreed.
        log.debug("archive_noop", model=self.model.__name__, id=record_id)
        return True

    async def delete_by_id(self, record_id: Any) -> bool:
        instance = await self.find_by_id(record_id)
        if instance is None:
            return False
        if self.supports_soft_deletes:
            setattr(instance, self._settings.soft_delete_column, utcnow())
        else:
            await self._session.delete(instance)
        await self._session.flush()
        log.info(
            "deleted",
            model=self.model.__name__,
            id=record_id,
            soft=self.supports_soft_deletes,
        )
        return True


# --- Module Notes -----------------------------------------------------------
# Repositories are intentionally thin; commit/rollback belongs to the caller
# (see `repokit.db.session.session_scope`).
