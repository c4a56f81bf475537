"""
tests.models

Mapped models used by the test suite.
"""

from __future__ import annotations

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from repokit.db.base import Base
from repokit.db.mixins import SoftDeleteMixin, TimestampMixin


class Department(Base):
    __tablename__ = "departments"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(64), nullable=False)

    employees: Mapped[list[Employee]] = relationship(back_populates="department")


class Employee(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(primary_key=True)
    code: Mapped[str | None] = mapped_column(String(32), unique=True, nullable=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    email: Mapped[str | None] = mapped_column(String(256), nullable=True)
    age: Mapped[int | None] = mapped_column(nullable=True)
    # Server-side default: only visible on the instance after a reload.
    status: Mapped[str] = mapped_column(String(16), nullable=False, server_default="active")
    department_id: Mapped[int | None] = mapped_column(ForeignKey("departments.id"), nullable=True)

    department: Mapped[Department | None] = relationship(back_populates="employees")

    @property
    def display_name(self) -> str:
        return f"{self.name} <{self.email}>" if self.email else self.name


class Tag(Base):
    # No soft-delete column: deletes are physical.
    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(primary_key=True)
    label: Mapped[str] = mapped_column(String(64), nullable=False)


class PaymentGateway(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "payment_gateways"

    id: Mapped[int] = mapped_column(primary_key=True)
    slug: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    code: Mapped[str | None] = mapped_column(String(16), nullable=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
