"""
repokit.repositories.entity

Full-featured default repository: core CRUD + soft deletes + code lookup.
"""

from __future__ import annotations

from repokit.repositories.base import Repository
from repokit.repositories.interface import ModelT
from repokit.repositories.lookups import CodeLookupMixin
from repokit.repositories.soft_delete import SoftDeletesMixin


class EntityRepository(SoftDeletesMixin[ModelT], CodeLookupMixin[ModelT], Repository[ModelT]):
    pass
