"""
pytest_patterns.observability

Observability package.

Responsibilities:
- Host structured logging configuration.
"""
