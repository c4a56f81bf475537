"""
repokit.repositories

Repository package.

Responsibilities:
- Group the repository contract, its SQLAlchemy implementation and the
  optional capability traits.
"""

# Package marker; repositories are imported directly from submodules.


# --- Module Notes -----------------------------------------------------------
# Repositories are intentionally thin; business orchestration logic belongs to callers.
