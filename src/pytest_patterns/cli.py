"""
pytest_patterns.cli

Command line entrypoint: `pytest-patterns` / `python -m pytest_patterns`.

Responsibilities:
- List tutorial topics.
- Run the example modules for selected topics through `pytest.main`.
- Serve the example inventory API.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

import pytest

from pytest_patterns.errors import ConfigurationError
from pytest_patterns.observability.logging import configure_logging, get_logger
from pytest_patterns.settings import get_settings
from pytest_patterns.topics import TOPICS, Topic, get_topic

log = get_logger(__name__)

PLUGIN = "pytest_patterns.plugin"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pytest-patterns",
        description="Run the pytest patterns tutorial examples.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("topics", help="list tutorial topics")

    run = sub.add_parser("run", help="run the examples for one or more topics")
    run.add_argument("topics", nargs="*", metavar="TOPIC", help="topic keys (default: all)")

    sub.add_parser("serve", help="serve the example inventory API")
    return parser


def pytest_args(topics: Sequence[Topic], extra: Sequence[str] = ()) -> list[str]:
    return ["-p", PLUGIN, "-rsx", *(str(t.path) for t in topics), *extra]


def cmd_topics() -> int:
    width = max(len(t.key) for t in TOPICS)
    for topic in TOPICS:
        print(f"{topic.key.ljust(width)}  {topic.title}  ({topic.path})")
    return 0


def cmd_run(keys: Sequence[str], extra: Sequence[str]) -> int:
    topics = [get_topic(k) for k in keys] if keys else list(TOPICS)
    args = pytest_args(topics, extra)
    log.info("run", topics=[t.key for t in topics])
    return int(pytest.main(args))


def cmd_serve() -> int:
    import uvicorn

    from pytest_patterns.api.app import create_app

    settings = get_settings()
    uvicorn.run(
        create_app(settings=settings),
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # structlog
    )
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    # Everything after `--` is handed to pytest untouched.
    extra: list[str] = []
    if "--" in argv:
        idx = argv.index("--")
        argv, extra = argv[:idx], argv[idx + 1 :]

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
        configure_logging(
            service_name=settings.service_name, level=settings.log_level, json=settings.log_json
        )

        if args.command == "topics":
            return cmd_topics()
        if args.command == "run":
            return cmd_run(args.topics, extra)
        return cmd_serve()
    except ConfigurationError as exc:
        parser.error(str(exc))


# --- Module Notes -----------------------------------------------------------
# parser.error exits with status 2, matching argparse usage errors.
