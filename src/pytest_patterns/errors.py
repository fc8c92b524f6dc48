"""
pytest_patterns.errors

Exception types raised by the inventory, persistence and CLI layers.

Each error also derives from the builtin it stands for, so
`pytest.raises(KeyError)` matches an `UnknownItemError` the same way it
matches a failed dict lookup.
"""

from __future__ import annotations


class PatternsError(Exception):
    """Base class for all errors raised by this package."""


class UnknownItemError(PatternsError, KeyError):
    def __init__(self, sku: str) -> None:
        super().__init__(sku)
        self.sku = sku

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the key.
        return f"unknown item: {self.sku}"


class OutOfStockError(PatternsError, ValueError):
    def __init__(self, sku: str, *, requested: int, available: int) -> None:
        super().__init__(f"out of stock: {sku} (requested {requested}, available {available})")
        self.sku = sku
        self.requested = requested
        self.available = available


class ConfigurationError(PatternsError, RuntimeError):
    pass


# --- Module Notes -----------------------------------------------------------
# The API maps these to HTTP statuses in `api.app`; the CLI maps
# ConfigurationError to a usage error.
