"""
pytest_patterns.db

Persistence package (async SQLAlchemy over aiosqlite).
"""
