"""
repokit.errors

Exception types raised at the repository boundary.

Responsibilities:
- Distinguish caller mistakes (bad criteria, ordering, payloads) from
  persistence failures, which propagate as SQLAlchemy exceptions.
"""

from __future__ import annotations


class RepositoryError(Exception):
    """Base class for errors raised by repokit itself."""


class InvalidArgumentError(RepositoryError, ValueError):
    """Malformed criteria, ordering, limit, column or relation name."""


class InvalidPayloadError(RepositoryError, TypeError):
    """Payload cannot be normalized into a column -> value mapping."""


class UnsupportedOperationError(RepositoryError, NotImplementedError):
    """The bound model lacks the capability an operation needs (e.g. soft deletes)."""

    def __init__(self, model: type, capability: str) -> None:
        super().__init__(f"{model.__name__} does not support {capability}")
        self.model = model
        self.capability = capability
