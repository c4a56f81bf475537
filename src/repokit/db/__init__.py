"""
repokit.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide the declarative base, model mixins and engine/session setup that
  repositories are written against.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Applications may bring their own DeclarativeBase; repositories only need a mapped
# class. `Base` here adds `attributes_to_dict()` so models can be used as payloads.
