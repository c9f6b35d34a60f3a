"""상품 서비스 - 상품 등록, 수정, 조회 비즈니스 로직.

Item Service, business logic for registering, updating and listing items.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.item import Album, Book, Item, Movie
from app.repositories.item_repository import item_repository
from app.schemas.item import ItemCreate, ItemResponse, ItemUpdate
from app.utils.exceptions import NotFoundError


class ItemService:
    """상품 관련 비즈니스 로직을 처리하는 서비스."""

    def to_response(self, item: Item) -> ItemResponse:
        """상품 모델을 응답 스키마로 변환합니다.

        Convert an Item (any kind) into an ItemResponse; fields that do not
        exist on the concrete kind are left null.
        """
        return ItemResponse(
            id=item.id,
            dtype=item.dtype,
            name=item.name,
            price=item.price,
            stock_quantity=item.stock_quantity,
            author=getattr(item, "author", None),
            isbn=getattr(item, "isbn", None),
            artist=getattr(item, "artist", None),
            etc=getattr(item, "etc", None),
            director=getattr(item, "director", None),
            actor=getattr(item, "actor", None),
        )

    async def save_item(self, db: AsyncSession, data: ItemCreate) -> Item:
        """상품 등록 - dtype 에 맞는 구현체를 생성해 저장합니다.

        Create the concrete item kind selected by dtype and persist it.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 상품 등록 데이터 (Item creation data)

        Returns:
            Item: 저장된 상품 (Persisted item)
        """
        common: dict = {
            "name": data.name,
            "price": data.price,
            "stock_quantity": data.stock_quantity,
        }
        item: Item
        if data.dtype == "A":
            item = Album(artist=data.artist, etc=data.etc, **common)
        elif data.dtype == "M":
            item = Movie(director=data.director, actor=data.actor, **common)
        else:
            item = Book(author=data.author, isbn=data.isbn, **common)
        return await item_repository.create(db, item)

    async def update_item(self, db: AsyncSession, item_id: int, data: ItemUpdate) -> Item:
        """상품 수정 - 영속 엔티티의 필드만 바꾸고 변경 감지로 반영합니다.

        Update name, price and stock of a managed item. Only these fields
        change; nothing else on the entity is overwritten.

        Raises:
            NotFoundError: 상품이 없을 때 (Item not found)
        """
        item: Item = await self.find_one(db, item_id)
        item.name = data.name
        item.price = data.price
        item.stock_quantity = data.stock_quantity
        await db.flush()
        return item

    async def find_items(self, db: AsyncSession) -> list[Item]:
        """전체 상품 조회 (All items)."""
        return await item_repository.find_all(db)

    async def find_one(self, db: AsyncSession, item_id: int) -> Item:
        """상품 단건 조회.

        Raises:
            NotFoundError: 상품이 없을 때 (Item not found)
        """
        item: Item | None = await item_repository.get_by_id(db, item_id)
        if item is None:
            raise NotFoundError("Item not found")
        return item


# 싱글턴 인스턴스 - Singleton instance
item_service: ItemService = ItemService()
