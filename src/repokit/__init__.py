"""
repokit

Generic async repository layer over SQLAlchemy ORM models.

Responsibilities:
- Expose package version metadata.
- Re-export the repository classes most callers need.
"""

from repokit.repositories.base import Repository
from repokit.repositories.entity import EntityRepository
from repokit.repositories.payment_gateway import PaymentGatewayRepository

__all__ = [
    "EntityRepository",
    "PaymentGatewayRepository",
    "Repository",
    "__version__",
]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# Keep this file minimal to avoid import-time side effects across the codebase.
