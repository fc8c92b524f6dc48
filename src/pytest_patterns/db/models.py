"""
pytest_patterns.db.models

Persistence schema for stock items.

Responsibilities:
- Define the `Item` ORM model mirroring `inventory.StockItem`.
- Convert rows to the in-memory domain type.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, Float, String
from sqlalchemy.orm import Mapped, mapped_column

from pytest_patterns.db.base import Base
from pytest_patterns.inventory import StockItem


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Item(Base):
    __tablename__ = "items"

    sku: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    quantity: Mapped[int] = mapped_column(nullable=False, default=0)
    price: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow, onupdate=_utcnow)

    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_items_quantity_non_negative"),
        CheckConstraint("price >= 0", name="ck_items_price_non_negative"),
    )

    def to_stock_item(self) -> StockItem:
        return StockItem(sku=self.sku, name=self.name, quantity=self.quantity, price=self.price)


# --- Module Notes -----------------------------------------------------------
# Check constraints mirror `StockItem.__post_init__` so direct SQL writes obey
# the same rules as the domain type.
