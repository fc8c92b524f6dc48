"""
pytest_patterns.api

HTTP surface over the item repository.
"""
