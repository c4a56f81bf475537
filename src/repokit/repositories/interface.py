"""
repokit.repositories.interface

Repository contracts.

Responsibilities:
- Define the core CRUD/query contract every repository implements.
- Define optional capability traits (soft deletes, code lookup, slug lookup)
  that concrete repositories opt into.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from typing import Any, Generic, TypeVar

from repokit.repositories.payload import Payload
from repokit.repositories.query import Criteria, OrderBy

ModelT = TypeVar("ModelT")


class RepositoryInterface(ABC, Generic[ModelT]):
    """
    Uniform data-access facade bound to one model class.

    Optional arguments shared by the read operations:
    - columns: column projection; `None` means `Settings.default_columns` ("*" = all)
      (a projection reloads rows already in the session, leaving the other columns unloaded)
    - relations: relationship names to eager load
    - appends: computed attribute names carried into `to_dict()`; each fetch replaces
      the previous ones
    """

    @abstractmethod
    async def all(
        self,
        columns: Sequence[str] | None = None,
        relations: Sequence[str] | None = None,
    ) -> list[ModelT]:
        """All live rows of the table. Empty list when there are none."""

    @abstractmethod
    async def exists_by_id(self, record_id: Any) -> bool:
        """True if a live row with this primary key exists."""

    @abstractmethod
    async def find_by_id(
        self,
        record_id: Any,
        columns: Sequence[str] | None = None,
        relations: Sequence[str] | None = None,
        appends: Sequence[str] | None = None,
    ) -> ModelT | None:
        """
        Row by primary key, or None when no live row matches.
        Never raises for a missing row.
        """

    @abstractmethod
    async def find_all_by_id(
        self,
        record_ids: Iterable[Any],
        columns: Sequence[str] | None = None,
        relations: Sequence[str] | None = None,
        appends: Sequence[str] | None = None,
    ) -> list[ModelT]:
        """Live rows whose primary key is in `record_ids`."""

    @abstractmethod
    async def count(self, criteria: Criteria | None = None) -> int:
        """Number of live rows matching `criteria`."""

    @abstractmethod
    async def create(self, payload: Payload) -> ModelT | None:
        """
        Insert a row from `payload` and return it refreshed from storage, so
        generated keys and server defaults are visible.
        Returns None, without touching storage, when the payload cannot be normalized.
        """

    @abstractmethod
    async def save(self, payload: Payload) -> ModelT | None:
        """Same as `create`."""

    @abstractmethod
    async def save_all(self, payloads: Iterable[Payload]) -> list[ModelT] | None:
        """
        Insert one row per payload. Returns None, inserting nothing, if any
        payload cannot be normalized.
        """

    @abstractmethod
    async def update(self, record_id: Any, payload: Payload) -> bool:
        """Apply `payload` to the live row. False when the row is absent or the payload invalid."""

    @abstractmethod
    async def archive(self, record_id: Any) -> bool:
        """Reserved: flag a record inactive without deleting it. Currently a no-op."""

    @abstractmethod
    async def delete_by_id(self, record_id: Any) -> bool:
        """
        Delete the live row: soft delete when the model maps the soft-delete
        column, hard delete otherwise. False when the row is absent.
        """

    @abstractmethod
    async def find(
        self,
        criteria: Criteria | None = None,
        columns: Sequence[str] | None = None,
        relations: Sequence[str] | None = None,
        appends: Sequence[str] | None = None,
    ) -> list[ModelT]:
        """
        Live rows matching every criterion.

        find({"department": "sales", "age": (">=", 30)})
        find([("created_at", "<", cutoff)], columns=["name", "email"])
        """

    @abstractmethod
    async def find_limited(
        self,
        criteria: Criteria | None = None,
        limit: int | None = None,
        columns: Sequence[str] | None = None,
        relations: Sequence[str] | None = None,
        appends: Sequence[str] | None = None,
    ) -> list[ModelT]:
        """`find` capped at `limit` rows (default `Settings.default_limit`)."""

    @abstractmethod
    async def find_ordered_limited(
        self,
        criteria: Criteria | None = None,
        order_by: OrderBy | None = None,
        limit: int | None = None,
        columns: Sequence[str] | None = None,
        relations: Sequence[str] | None = None,
        appends: Sequence[str] | None = None,
    ) -> list[ModelT]:
        """
        `find_limited` ordered by `order_by = (column, "asc" | "desc")`.

        find_ordered_limited({"method": "bank"}, ("full_name", "desc"), 15, ["full_name", "email"])

        Raises InvalidArgumentError when no ordering column is given.
        """


class SoftDeleteRepositoryInterface(ABC, Generic[ModelT]):
    """Trashed-row operations for models that map a soft-delete column."""

    @abstractmethod
    async def restore_by_id(self, record_id: Any) -> bool:
        """Clear the soft-delete marker. False when no row (trashed or not) matches."""

    @abstractmethod
    async def permanently_delete_by_id(self, record_id: Any) -> bool:
        """Remove the row for good. False when no row (trashed or not) matches."""

    @abstractmethod
    async def all_trashed(
        self,
        columns: Sequence[str] | None = None,
        relations: Sequence[str] | None = None,
    ) -> list[ModelT]:
        """Soft-deleted rows only."""

    @abstractmethod
    async def find_trashed_by_id(
        self,
        record_id: Any,
        columns: Sequence[str] | None = None,
        relations: Sequence[str] | None = None,
        appends: Sequence[str] | None = None,
    ) -> ModelT | None:
        """Row by primary key, searched including soft-deleted rows. None when absent."""


class CodeLookupInterface(ABC, Generic[ModelT]):
    @abstractmethod
    async def find_by_code(self, code: Any, columns: Sequence[str] | None = None) -> ModelT | None:
        """First live row by the short, unique code column (`Settings.code_column`)."""


class SlugLookupInterface(ABC, Generic[ModelT]):
    @abstractmethod
    async def get(self, slug_code: Any, columns: Sequence[str] | None = None) -> ModelT | None:
        """First live row by slug or short code (`Settings.slug_column`)."""


# --- Module Notes -----------------------------------------------------------
# Traits are separate ABCs so a repository only advertises capabilities its model has.
