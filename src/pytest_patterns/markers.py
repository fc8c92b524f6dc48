"""
pytest_patterns.markers

Reusable marker factories for skipping and expected failures.

A marker built here is applied like any pytest marker:

    @requires_env("DATABASE_URL")
    def test_against_real_db(): ...
"""

from __future__ import annotations

import importlib.util
import os
import sys

import pytest

slow = pytest.mark.slow


def missing_env(*names: str) -> list[str]:
    return [n for n in names if not os.environ.get(n)]


def env_skip_reason(names: list[str]) -> str:
    return "requires environment variable(s): " + ", ".join(names)


def requires_env(*names: str) -> pytest.MarkDecorator:
    if not names:
        raise ValueError("requires_env needs at least one variable name")
    missing = missing_env(*names)
    return pytest.mark.skipif(bool(missing), reason=env_skip_reason(missing or list(names)))


def requires_module(name: str) -> pytest.MarkDecorator:
    return pytest.mark.skipif(
        importlib.util.find_spec(name) is None, reason=f"requires module: {name}"
    )


def only_on(*platforms: str) -> pytest.MarkDecorator:
    return pytest.mark.skipif(
        sys.platform not in platforms, reason=f"only runs on: {', '.join(platforms)}"
    )


def known_bug(reason: str, raises: type[BaseException] | tuple[type[BaseException], ...] | None = None) -> pytest.MarkDecorator:
    # strict: a fixed bug shows up as a failing XPASS instead of passing silently.
    return pytest.mark.xfail(reason=reason, raises=raises, strict=True)


# --- Module Notes -----------------------------------------------------------
# Factories evaluate their condition at import time; the plugin's
# `requires_env` marker evaluates at collection time.
