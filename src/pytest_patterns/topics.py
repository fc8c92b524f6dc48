"""
pytest_patterns.topics

Registry of tutorial topics and the example module that backs each one.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pytest_patterns.errors import ConfigurationError

TUTORIAL_DIR = Path(__file__).resolve().parent / "tutorial"


@dataclass(frozen=True)
class Topic:
    key: str
    title: str
    module: str

    @property
    def path(self) -> Path:
        return TUTORIAL_DIR / self.module


TOPICS: tuple[Topic, ...] = (
    Topic("raises", "Asserting exceptions", "test_raises.py"),
    Topic("decorators", "Function decorators", "test_decorators.py"),
    Topic("skipping", "Skipping tests", "test_skipping.py"),
    Topic("xfail", "Expected failures", "test_xfail.py"),
    Topic("fixtures", "Fixtures and teardown", "test_fixtures.py"),
)


def get_topic(key: str) -> Topic:
    for topic in TOPICS:
        if topic.key == key:
            return topic
    raise ConfigurationError(f"unknown topic: {key}")
