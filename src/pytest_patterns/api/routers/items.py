"""
pytest_patterns.api.routers.items

Item endpoints.

Responsibilities:
- Upsert, read and list stock items.
- Reserve stock; domain errors are mapped to HTTP statuses in `api.app`.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from pytest_patterns.api.deps import db_session
from pytest_patterns.db.models import Item
from pytest_patterns.db.repositories.items import ItemRepo
from pytest_patterns.inventory import StockItem

router = APIRouter(prefix="/v1/items", tags=["items"])


class ItemBody(BaseModel):
    name: str = Field(min_length=1, max_length=256)
    quantity: int = Field(default=0, ge=0)
    price: float = Field(default=0.0, ge=0)


class ItemResponse(BaseModel):
    sku: str
    name: str
    quantity: int
    price: float

    @classmethod
    def from_row(cls, row: Item) -> ItemResponse:
        return cls(sku=row.sku, name=row.name, quantity=row.quantity, price=row.price)


class ReserveBody(BaseModel):
    # Range is checked by the repository so the error path matches Catalog.reserve.
    quantity: int


@router.get("", response_model=list[ItemResponse])
async def list_items(session: AsyncSession = Depends(db_session)) -> list[ItemResponse]:
    return [ItemResponse.from_row(row) for row in await ItemRepo(session).list_all()]


@router.put("/{sku}", response_model=ItemResponse)
async def upsert_item(
    sku: str, body: ItemBody, session: AsyncSession = Depends(db_session)
) -> ItemResponse:
    item = StockItem(sku=sku, name=body.name, quantity=body.quantity, price=body.price)
    return ItemResponse.from_row(await ItemRepo(session).upsert(item))


@router.get("/{sku}", response_model=ItemResponse)
async def get_item(sku: str, session: AsyncSession = Depends(db_session)) -> ItemResponse:
    return ItemResponse.from_row(await ItemRepo(session).get(sku))


@router.post("/{sku}/reserve", response_model=ItemResponse)
async def reserve_item(
    sku: str, body: ReserveBody, session: AsyncSession = Depends(db_session)
) -> ItemResponse:
    return ItemResponse.from_row(await ItemRepo(session).reserve(sku, body.quantity))


# --- Module Notes -----------------------------------------------------------
# Handlers stay thin: validation lives in `StockItem` and `ItemRepo`, and error
# translation lives in the app factory.
