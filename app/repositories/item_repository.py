"""상품 레포지토리 - 상품 저장 및 조회 쿼리.

Item Repository, persistence and lookup queries for items.
Queries against Item are polymorphic: Book/Album/Movie rows come back as
their concrete classes.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.item import Item
from app.repositories.base import BaseRepository


class ItemRepository(BaseRepository[Item]):
    """상품 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Item)

    async def find_all(self, db: AsyncSession) -> list[Item]:
        """모든 상품을 ID 순으로 조회합니다 (All items ordered by id)."""
        query: Select = select(Item).order_by(Item.id)
        result = await db.execute(query)
        return list(result.scalars().all())


# 싱글턴 인스턴스 - Singleton instance
item_repository: ItemRepository = ItemRepository()
