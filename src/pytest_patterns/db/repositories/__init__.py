"""
pytest_patterns.db.repositories

Repository package.
"""

# Package marker; repositories are imported directly from submodules.
