"""
pytest_patterns.decorators

Plain function decorators shown in the "Function decorators" tutorial section.

Responsibilities:
- `logged`: emit structured call/return/raise events.
- `retry`: re-invoke on selected exceptions.
- `count_calls`: expose how many times a function ran.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

from pytest_patterns.observability.logging import get_logger

F = TypeVar("F", bound=Callable[..., Any])


def logged(func: F) -> F:
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        # Fresh logger per call so structlog test capture sees every event.
        log = get_logger(func.__module__)
        log.info("call", function=func.__qualname__)
        try:
            result = func(*args, **kwargs)
        except Exception as exc:
            log.warning("raise", function=func.__qualname__, error=type(exc).__name__)
            raise
        log.info("return", function=func.__qualname__)
        return result

    return wrapper  # type: ignore[return-value]


def retry(
    times: int = 3, exceptions: tuple[type[BaseException], ...] = (Exception,)
) -> Callable[[F], F]:
    if times < 1:
        raise ValueError(f"times must be >= 1, got {times}")

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            for attempt in range(1, times + 1):
                try:
                    return func(*args, **kwargs)
                except exceptions:
                    if attempt == times:
                        raise
                    get_logger(func.__module__).info(
                        "retry", function=func.__qualname__, attempt=attempt
                    )
            raise AssertionError("unreachable")

        return wrapper  # type: ignore[return-value]

    return decorator


def count_calls(func: F) -> F:
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        wrapper.calls += 1  # type: ignore[attr-defined]
        return func(*args, **kwargs)

    wrapper.calls = 0  # type: ignore[attr-defined]
    return wrapper  # type: ignore[return-value]


# --- Module Notes -----------------------------------------------------------
# Tests assert on these events with `structlog.testing.capture_logs`.
