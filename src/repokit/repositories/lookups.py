"""
repokit.repositories.lookups

Single-column lookup traits (code, slug).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from repokit.repositories.interface import CodeLookupInterface, ModelT, SlugLookupInterface


class CodeLookupMixin(CodeLookupInterface[ModelT]):
    async def find_by_code(self, code: Any, columns: Sequence[str] | None = None) -> ModelT | None:
        return await self._first_by(self._settings.code_column, code, columns)


class SlugLookupMixin(SlugLookupInterface[ModelT]):
    async def get(self, slug_code: Any, columns: Sequence[str] | None = None) -> ModelT | None:
        return await self._first_by(self._settings.slug_column, slug_code, columns)
