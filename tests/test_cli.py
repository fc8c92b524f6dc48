"""
tests.test_cli

The `pytest-patterns` command line.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from pytest_patterns import cli
from pytest_patterns.errors import ConfigurationError
from pytest_patterns.settings import get_settings
from pytest_patterns.topics import TOPICS, TUTORIAL_DIR, get_topic


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_every_topic_has_an_example_module() -> None:
    assert [t.key for t in TOPICS] == ["raises", "decorators", "skipping", "xfail", "fixtures"]
    for topic in TOPICS:
        assert topic.path.parent == TUTORIAL_DIR
        assert topic.path.is_file(), topic.path


def test_get_topic_unknown() -> None:
    with pytest.raises(ConfigurationError, match="unknown topic: nope"):
        get_topic("nope")


def test_topics_command(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["topics"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == len(TOPICS)
    assert lines[0].startswith("raises")
    assert "Asserting exceptions" in lines[0]
    assert lines[-1].rstrip().endswith("test_fixtures.py)")


def test_run_passes_topics_and_extra_args(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[list[str]] = []

    def fake_main(args: list[str]) -> int:
        seen.append(args)
        return 0

    monkeypatch.setattr(cli.pytest, "main", fake_main)

    assert cli.main(["run", "xfail", "raises", "--", "-k", "banana"]) == 0

    assert seen == [
        [
            "-p",
            "pytest_patterns.plugin",
            "-rsx",
            str(get_topic("xfail").path),
            str(get_topic("raises").path),
            "-k",
            "banana",
        ]
    ]


def test_run_defaults_to_all_topics_and_returns_exit_code(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[list[str]] = []

    def fake_main(args: list[str]) -> int:
        seen.append(args)
        return 1

    monkeypatch.setattr(cli.pytest, "main", fake_main)

    assert cli.main(["run"]) == 1
    assert seen[0][3:] == [str(t.path) for t in TOPICS]


def test_run_unknown_topic_exits_2(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["run", "nope"])

    assert excinfo.value.code == 2
    assert "unknown topic: nope" in capsys.readouterr().err


def test_command_is_required() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])
    assert excinfo.value.code == 2


@pytest.mark.parametrize("argv", [["topics"], ["run", "raises"]])
def test_invalid_settings_exit_2(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], argv: list[str]
) -> None:
    monkeypatch.setenv("PATTERNS_ENV", "staging")

    with pytest.raises(SystemExit) as excinfo:
        cli.main(argv)

    assert excinfo.value.code == 2
    err = capsys.readouterr().err
    assert "invalid settings" in err
    assert "Traceback" not in err
