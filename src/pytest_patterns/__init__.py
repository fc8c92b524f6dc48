"""
pytest_patterns

Runnable companion package for the pytest patterns tutorial.

Responsibilities:
- Expose package version metadata.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# Keep this file minimal: the pytest plugin imports this package at collection time.
