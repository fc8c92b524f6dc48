"""
pytest_patterns.__main__

Entrypoint for `python -m pytest_patterns`.
"""

from __future__ import annotations

import sys

from pytest_patterns.cli import main

if __name__ == "__main__":
    sys.exit(main())
