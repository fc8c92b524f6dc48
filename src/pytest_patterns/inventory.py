"""
pytest_patterns.inventory

In-memory stock catalog used as the subject of the tutorial examples.

Responsibilities:
- Model stock items and an insertion-ordered catalog of them.
- Raise the builtin-compatible errors the exception examples assert on.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace

from pytest_patterns.errors import OutOfStockError, UnknownItemError


@dataclass(frozen=True)
class StockItem:
    sku: str
    name: str
    quantity: int = 0
    price: float = 0.0

    def __post_init__(self) -> None:
        if not self.sku:
            raise ValueError("sku must not be empty")
        if self.quantity < 0:
            raise ValueError(f"quantity must be >= 0, got {self.quantity}")
        if self.price < 0:
            raise ValueError(f"price must be >= 0, got {self.price}")

    @property
    def in_stock(self) -> bool:
        return self.quantity > 0


def parse_quantity(text: str) -> int:
    stripped = text.strip()
    if not stripped.isdecimal():
        raise ValueError(f"invalid quantity: {text!r}")
    return int(stripped)


class Catalog:
    """Insertion-ordered mapping of SKU to `StockItem`."""

    def __init__(self, items: list[StockItem] | None = None) -> None:
        self._items: dict[str, StockItem] = {}
        for item in items or []:
            self.add(item)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[StockItem]:
        return iter(list(self._items.values()))

    def __contains__(self, sku: object) -> bool:
        return sku in self._items

    def skus(self) -> list[str]:
        return list(self._items)

    def add(self, item: StockItem) -> None:
        # Replacing keeps the original position (dict semantics).
        self._items[item.sku] = item

    def get(self, sku: str) -> StockItem:
        try:
            return self._items[sku]
        except KeyError:
            raise UnknownItemError(sku) from None

    def nth(self, index: int) -> StockItem:
        return list(self._items.values())[index]

    def remove(self, sku: str) -> StockItem:
        item = self.get(sku)
        del self._items[sku]
        return item

    def reserve(self, sku: str, qty: int) -> StockItem:
        if qty <= 0:
            raise ValueError(f"quantity must be positive, got {qty}")
        item = self.get(sku)
        if qty > item.quantity:
            raise OutOfStockError(sku, requested=qty, available=item.quantity)
        updated = replace(item, quantity=item.quantity - qty)
        self._items[sku] = updated
        return updated

    def restock(self, sku: str, qty: int) -> StockItem:
        if qty <= 0:
            raise ValueError(f"quantity must be positive, got {qty}")
        item = self.get(sku)
        updated = replace(item, quantity=item.quantity + qty)
        self._items[sku] = updated
        return updated

    def total_value(self) -> float:
        return round(sum(i.quantity * i.price for i in self._items.values()), 2)


# --- Module Notes -----------------------------------------------------------
# `db.repositories.items.ItemRepo.reserve` applies the same rules against SQL.
