"""
pytest_patterns.db.repositories.items

Repository for `Item` rows.

Responsibilities:
- Upsert, read, list and delete items.
- Apply the same reservation rules as `inventory.Catalog.reserve`.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pytest_patterns.db.models import Item
from pytest_patterns.errors import OutOfStockError, UnknownItemError
from pytest_patterns.inventory import StockItem


class ItemRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def upsert(self, item: StockItem) -> Item:
        row = await self._session.get(Item, item.sku)
        if row is None:
            row = Item(sku=item.sku, name=item.name, quantity=item.quantity, price=item.price)
            self._session.add(row)
        else:
            row.name = item.name
            row.quantity = item.quantity
            row.price = item.price
        await self._session.flush()
        return row

    async def get(self, sku: str) -> Item:
        row = await self._session.get(Item, sku)
        if row is None:
            raise UnknownItemError(sku)
        return row

    async def list_all(self, *, limit: int = 200) -> list[Item]:
        stmt = select(Item).order_by(Item.sku).limit(limit)
        return list((await self._session.execute(stmt)).scalars().all())

    async def reserve(self, sku: str, qty: int) -> Item:
        if qty <= 0:
            raise ValueError(f"quantity must be positive, got {qty}")
        row = await self._session.get(Item, sku, with_for_update=True)
        if row is None:
            raise UnknownItemError(sku)
        if qty > row.quantity:
            raise OutOfStockError(sku, requested=qty, available=row.quantity)
        row.quantity -= qty
        await self._session.flush()
        return row

    async def delete(self, sku: str) -> None:
        row = await self.get(sku)
        await self._session.delete(row)
        await self._session.flush()


# --- Module Notes -----------------------------------------------------------
# Repositories flush but never commit; the caller owns the transaction.
