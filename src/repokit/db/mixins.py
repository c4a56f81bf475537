"""
repokit.db.mixins

Reusable model mixins.

Responsibilities:
- AttributesMixin: expose mapped column values as a plain mapping and carry
  computed attributes ("appends") into serialization.
- TimestampMixin: storage-assigned created/updated timestamps.
- SoftDeleteMixin: nullable `deleted_at` marker used by soft-delete repositories.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import func, inspect as sa_inspect
from sqlalchemy.orm import Mapped, mapped_column


def utcnow() -> datetime:
    # Naive UTC, matching what SQLite's CURRENT_TIMESTAMP stores.
    return datetime.utcnow()


class AttributesMixin:
    _appends = ()

    def attributes_to_dict(self) -> dict[str, Any]:
        """
        Column key -> value for every column attribute currently loaded on the instance.
        Unloaded columns (deferred, or excluded by a projection) are left out.
        """

        state = sa_inspect(self)
        loaded = state.dict
        return {
            attr.key: loaded[attr.key]
            for attr in state.mapper.column_attrs
            if attr.key in loaded
        }

    def append(self, *names: str):
        # Adds to the current appends; returns self for chaining.
        self._appends = tuple(dict.fromkeys((*self._appends, *names)))
        return self

    def set_appends(self, names: tuple[str, ...]) -> None:
        # Repositories replace appends on every fetch; rows are shared via the identity map.
        self._appends = tuple(names)

    def to_dict(self) -> dict[str, Any]:
        """
        `attributes_to_dict()` plus every appended attribute. Appended properties
        see unloaded attributes as None, so a projected row never lazy loads here.
        """

        data = self.attributes_to_dict()
        unloaded = sa_inspect(self).unloaded
        source = _LoadedView(self, unloaded) if unloaded else self
        for name in self._appends:
            data[name] = getattr(source, name)
        return data


class _LoadedView:
    def __init__(self, instance: Any, unloaded: frozenset[str] | set[str]) -> None:
        self._instance = instance
        self._unloaded = unloaded

    def __getattr__(self, name: str) -> Any:
        if name in self._unloaded:
            return None
        attr = getattr(type(self._instance), name, None)
        if isinstance(attr, property) and attr.fget is not None:
            return attr.fget(self)
        return getattr(self._instance, name)


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(nullable=False, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        nullable=False, server_default=func.now(), onupdate=utcnow
    )


class SoftDeleteMixin:
    deleted_at: Mapped[datetime | None] = mapped_column(nullable=True, default=None, index=True)

    @property
    def trashed(self) -> bool:
        return self.deleted_at is not None


# --- Module Notes -----------------------------------------------------------
# Repositories detect soft-delete support by column name (`Settings.soft_delete_column`),
# so models may map their own column instead of using SoftDeleteMixin.
