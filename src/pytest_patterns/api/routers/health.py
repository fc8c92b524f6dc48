"""
pytest_patterns.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide a liveness probe (`/healthz`).
- Provide a readiness probe (`/readyz`) that round-trips the database.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from pytest_patterns.api.deps import db_session

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(session: AsyncSession = Depends(db_session)) -> dict[str, str]:
    # Readiness: the database answers a trivial query.
    await session.execute(text("SELECT 1"))
    return {"status": "ready"}


# --- Module Notes -----------------------------------------------------------
# The tutorial's app fixture hits /healthz to show lifespan-managed teardown.
