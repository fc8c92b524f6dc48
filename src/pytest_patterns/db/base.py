"""
pytest_patterns.db.base

SQLAlchemy declarative base.

Responsibilities:
- Provide the shared DeclarativeBase that `db.models` registers tables on.
"""

from __future__ import annotations

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


# --- Module Notes -----------------------------------------------------------
# `db.init_db` imports `db.models` before create_all so the metadata is populated.
