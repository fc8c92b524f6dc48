"""
Root conftest.py for pytest-patterns.

Loads the project plugin (shared fixtures and markers) and `pytester`, which
the plugin's own tests use to run throwaway test files.
"""

pytest_plugins = ("pytester", "pytest_patterns.plugin")
