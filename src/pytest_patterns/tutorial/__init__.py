"""
pytest_patterns.tutorial

Runnable example modules, one per tutorial section. `docs/TUTORIAL.md` quotes
them; `pytest-patterns run <topic>` executes them.
"""
