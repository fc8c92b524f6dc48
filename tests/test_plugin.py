"""
tests.test_plugin

Behaviour of the pytest plugin, exercised through throwaway test files run
with the `pytester` fixture.
"""

from __future__ import annotations

import pytest

from pytest_patterns.settings import get_settings

PLUGIN_CONFTEST = 'pytest_plugins = ["pytest_patterns.plugin"]'


@pytest.fixture
def patterns_pytester(pytester: pytest.Pytester, monkeypatch: pytest.MonkeyPatch) -> pytest.Pytester:
    monkeypatch.delenv("PATTERNS_EXAMPLE_TOKEN", raising=False)
    pytester.makeconftest(PLUGIN_CONFTEST)
    pytester.makeini("[pytest]\nasyncio_default_fixture_loop_scope = function\n")
    return pytester


def test_slow_tests_skipped_by_default(patterns_pytester: pytest.Pytester) -> None:
    patterns_pytester.makepyfile(
        """
        import pytest

        @pytest.mark.slow
        def test_slow():
            pass

        def test_fast():
            pass
        """
    )

    result = patterns_pytester.runpytest("-rs", "--strict-markers")

    result.assert_outcomes(passed=1, skipped=1)
    result.stdout.fnmatch_lines(["*need --run-slow option to run*"])


def test_run_slow_option_runs_slow_tests(patterns_pytester: pytest.Pytester) -> None:
    patterns_pytester.makepyfile(
        """
        import pytest

        @pytest.mark.slow
        def test_slow():
            pass
        """
    )

    result = patterns_pytester.runpytest("--run-slow")

    result.assert_outcomes(passed=1)


def test_requires_env_marker(patterns_pytester: pytest.Pytester, monkeypatch: pytest.MonkeyPatch) -> None:
    patterns_pytester.makepyfile(
        """
        import pytest

        @pytest.mark.requires_env("PATTERNS_EXAMPLE_TOKEN")
        def test_token():
            pass
        """
    )

    result = patterns_pytester.runpytest("-rs", "--strict-markers")
    result.assert_outcomes(skipped=1)
    result.stdout.fnmatch_lines(["*requires environment variable(s): PATTERNS_EXAMPLE_TOKEN*"])

    monkeypatch.setenv("PATTERNS_EXAMPLE_TOKEN", "secret")
    patterns_pytester.runpytest().assert_outcomes(passed=1)


def test_markers_are_registered(patterns_pytester: pytest.Pytester) -> None:
    result = patterns_pytester.runpytest("--markers")

    result.stdout.fnmatch_lines(
        [
            "@pytest.mark.slow:*",
            "@pytest.mark.integration:*",
            "@pytest.mark.requires_env(name, ...):*",
        ]
    )


def test_report_header(patterns_pytester: pytest.Pytester) -> None:
    patterns_pytester.makepyfile("def test_ok(): pass")

    result = patterns_pytester.runpytest()

    result.stdout.fnmatch_lines(["pytest-patterns: env=*"])


def test_catalog_and_factory_fixtures(patterns_pytester: pytest.Pytester) -> None:
    patterns_pytester.makepyfile(
        """
        def test_catalog(catalog):
            assert catalog.skus() == ["APL-1", "BAN-2", "CHR-3"]
            catalog.remove("APL-1")

        def test_catalog_is_fresh_per_test(catalog):
            assert "APL-1" in catalog

        def test_make_item(make_item):
            skus = {make_item().sku for _ in range(3)}
            assert len(skus) == 3
            assert make_item(name="Plum").name == "Plum"
        """
    )

    patterns_pytester.runpytest().assert_outcomes(passed=3)


def test_scratch_dir_removed_by_finalizer(patterns_pytester: pytest.Pytester) -> None:
    patterns_pytester.makepyfile(
        """
        import pytest

        seen = []

        def test_uses_dir(scratch_dir):
            (scratch_dir / "stock.csv").write_text("APL-1,10\\n")
            seen.append(scratch_dir)

        def test_dir_was_removed():
            assert seen and not seen[0].exists()
        """
    )

    patterns_pytester.runpytest().assert_outcomes(passed=2)


def test_async_db_fixtures(patterns_pytester: pytest.Pytester) -> None:
    patterns_pytester.makepyfile(
        """
        import pytest
        from sqlalchemy import text

        @pytest.mark.asyncio
        async def test_tables_exist(db_session):
            rows = await db_session.execute(text("SELECT count(*) FROM items"))
            assert rows.scalar_one() == 0

        @pytest.mark.asyncio
        async def test_engine_points_at_tmp_file(db_engine, tmp_path):
            assert str(tmp_path) in str(db_engine.url)
        """
    )

    result = patterns_pytester.runpytest()

    result.assert_outcomes(passed=2)
    result.stdout.no_fnmatch_line("*asyncio_default_fixture_loop_scope*")


def test_scratch_dir_already_removed_by_test(patterns_pytester: pytest.Pytester) -> None:
    patterns_pytester.makepyfile(
        """
        import shutil

        def test_cleans_up_itself(scratch_dir):
            shutil.rmtree(scratch_dir)
        """
    )

    patterns_pytester.runpytest().assert_outcomes(passed=1, errors=0)


def test_requires_env_skip_reports_test_location(patterns_pytester: pytest.Pytester) -> None:
    patterns_pytester.makepyfile(
        test_token="""
        import pytest

        @pytest.mark.requires_env("PATTERNS_EXAMPLE_TOKEN")
        def test_token():
            pass
        """
    )

    result = patterns_pytester.runpytest("-rs")

    result.assert_outcomes(skipped=1)
    result.stdout.fnmatch_lines(["SKIPPED [[]1[]] test_token.py:3: requires environment variable(s)*"])
    result.stdout.no_fnmatch_line("*plugin.py*")


def test_report_header_with_invalid_settings(
    patterns_pytester: pytest.Pytester, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("PATTERNS_ENV", "staging")
    get_settings.cache_clear()
    patterns_pytester.makepyfile("def test_ok(): pass")

    try:
        result = patterns_pytester.runpytest()
    finally:
        get_settings.cache_clear()

    result.assert_outcomes(passed=1)
    result.stdout.fnmatch_lines(["pytest-patterns: invalid settings*"])
