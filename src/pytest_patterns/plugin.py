"""
pytest_patterns.plugin

pytest plugin carrying the shared fixtures and markers used by the tutorial.

Responsibilities:
- Register the `slow`, `integration` and `requires_env` markers.
- Skip `slow` tests unless `--run-slow` is given.
- Skip tests marked `@pytest.mark.requires_env("NAME", ...)` when a variable is unset.
- Provide fixtures for the catalog, item factory, scratch directories and the
  async database.

Loaded from the root `conftest.py` via `pytest_plugins`, or explicitly with
`pytest -p pytest_patterns.plugin`.
"""

from __future__ import annotations

import itertools
import shutil
from collections.abc import AsyncIterator, Callable
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from pytest_patterns.db.init_db import init_db
from pytest_patterns.db.session import create_engine, create_sessionmaker
from pytest_patterns.errors import ConfigurationError
from pytest_patterns.inventory import Catalog, StockItem
from pytest_patterns.markers import env_skip_reason, missing_env
from pytest_patterns.settings import Settings, get_settings

SLOW_SKIP_REASON = "need --run-slow option to run"


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("pytest-patterns")
    group.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run tests marked as slow",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "slow: test is slow; skipped unless --run-slow is given")
    config.addinivalue_line("markers", "integration: test touches a real resource (database, HTTP app)")
    config.addinivalue_line(
        "markers", "requires_env(name, ...): skip unless every named environment variable is set"
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    # Skips are attached as markers so `-rs` reports the test's own location.
    run_slow = config.getoption("--run-slow")
    skip_slow = pytest.mark.skip(reason=SLOW_SKIP_REASON)
    for item in items:
        if not run_slow and item.get_closest_marker("slow") is not None:
            item.add_marker(skip_slow)
        names = [name for mark in item.iter_markers(name="requires_env") for name in mark.args]
        missing = missing_env(*names)
        if missing:
            item.add_marker(pytest.mark.skip(reason=env_skip_reason(missing)))


def pytest_report_header(config: pytest.Config) -> str:
    try:
        env = get_settings().env
    except ConfigurationError:
        return "pytest-patterns: invalid settings (see PATTERNS_* environment variables)"
    return f"pytest-patterns: env={env}"


# --- fixtures ---------------------------------------------------------------


@pytest.fixture
def patterns_settings(tmp_path: Path) -> Settings:
    return Settings(env="test", database_url=f"sqlite+aiosqlite:///{tmp_path / 'patterns.db'}")


@pytest.fixture
def catalog() -> Catalog:
    return Catalog(
        [
            StockItem("APL-1", "Apple", quantity=10, price=0.5),
            StockItem("BAN-2", "Banana", quantity=0, price=0.25),
            StockItem("CHR-3", "Cherry", quantity=200, price=0.1),
        ]
    )


@pytest.fixture
def make_item() -> Callable[..., StockItem]:
    """Factory fixture: each call builds a new item with a unique SKU."""
    counter = itertools.count(1)

    def _make(**overrides: Any) -> StockItem:
        n = next(counter)
        fields: dict[str, Any] = {"sku": f"SKU-{n}", "name": f"Item {n}", "quantity": 1, "price": 1.0}
        fields.update(overrides)
        return StockItem(**fields)

    return _make


@pytest.fixture
def scratch_dir(request: pytest.FixtureRequest, tmp_path_factory: pytest.TempPathFactory) -> Path:
    path = tmp_path_factory.mktemp("scratch")
    # Finalizers run even when the test fails.
    request.addfinalizer(lambda: shutil.rmtree(path, ignore_errors=True))
    return path


@pytest_asyncio.fixture
async def db_engine(patterns_settings: Settings) -> AsyncIterator[AsyncEngine]:
    engine = create_engine(patterns_settings)
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine: AsyncEngine) -> AsyncIterator[AsyncSession]:
    factory = create_sessionmaker(db_engine)
    async with factory() as session:
        yield session
        # Nothing a test flushed survives into the next one.
        await session.rollback()


# --- Module Notes -----------------------------------------------------------
# Environment checks run at collection time, so a variable exported by another
# fixture during the session is not seen. Export it before invoking pytest.
