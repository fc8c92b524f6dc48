"""
pytest_patterns.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for settings and DB sessions.
- Encapsulate app.state access patterns (sessionmaker).
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from pytest_patterns.db.session import session_scope


def sessionmaker_from_app(request: Request) -> async_sessionmaker[AsyncSession]:
    # Created by the lifespan in `pytest_patterns.api.app.create_app`.
    return request.app.state.sessionmaker  # type: ignore[attr-defined]


async def db_session(
    session_factory: async_sessionmaker[AsyncSession] = Depends(sessionmaker_from_app),
) -> AsyncIterator[AsyncSession]:
    # Request-scoped unit of work: commit after the handler returns, roll back if it raises.
    async with session_scope(session_factory) as session:
        yield session


# --- Module Notes -----------------------------------------------------------
# Commit happens when the dependency exits, before the response is returned by
# the ASGI transport used in tests.
