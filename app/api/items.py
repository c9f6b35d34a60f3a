"""상품 API 라우터 - 상품 등록, 목록, 상세, 수정 엔드포인트.

Item API Router, registration and maintenance of items.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.item import Item
from app.schemas.item import ItemCreate, ItemResponse, ItemUpdate
from app.services.item_service import item_service

router: APIRouter = APIRouter()


@router.post("", response_model=ItemResponse, status_code=201)
async def create_item(
    data: ItemCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ItemResponse:
    """상품 등록 (Register a book, album or movie)."""
    item: Item = await item_service.save_item(db, data)
    await db.commit()
    return item_service.to_response(item)


@router.get("", response_model=list[ItemResponse])
async def list_items(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[ItemResponse]:
    """상품 목록 조회 (List items)."""
    items: list[Item] = await item_service.find_items(db)
    return [item_service.to_response(item) for item in items]


@router.get("/{item_id}", response_model=ItemResponse)
async def get_item(
    item_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ItemResponse:
    """상품 상세 조회 (Retrieve one item)."""
    item: Item = await item_service.find_one(db, item_id)
    return item_service.to_response(item)


@router.put("/{item_id}", response_model=ItemResponse)
async def update_item(
    item_id: int,
    data: ItemUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ItemResponse:
    """상품 수정 - 이름, 가격, 재고만 변경 (Update name, price and stock)."""
    item: Item = await item_service.update_item(db, item_id, data)
    await db.commit()
    return item_service.to_response(item)
