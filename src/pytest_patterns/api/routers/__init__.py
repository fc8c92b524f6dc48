"""
pytest_patterns.api.routers

Router package.
"""
