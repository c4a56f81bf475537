"""
repokit.db.base

SQLAlchemy declarative base.

Responsibilities:
- Provide a shared DeclarativeBase whose models can be serialized to mappings.
"""

from __future__ import annotations

from sqlalchemy.orm import DeclarativeBase

from repokit.db.mixins import AttributesMixin


class Base(AttributesMixin, DeclarativeBase):
    pass


# --- Module Notes -----------------------------------------------------------
# All models used with `init_db` should inherit from `Base` so metadata discovery works.
