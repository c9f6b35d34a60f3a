"""주문 조회 전용 레포지토리 - 컬렉션을 포함한 DTO 직접 조회.

Order query repository. Builds OrderQueryDto trees from SQL projections:

    - find_order_query_dtos: 루트 1번 + 주문마다 주문상품 1번 (1 + N)
    - find_all_by_dto_optimization: 루트 1번 + IN 절로 주문상품 한 번에 (1 + 1)
    - find_all_by_dto_flat: 모든 테이블을 조인한 평탄화 쿼리 1번 (1)
"""

from collections import defaultdict
from typing import Sequence

from sqlalchemy import Row, Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.models.item import Item
from app.models.member import Member
from app.models.order import Delivery, Order, OrderItem
from app.schemas.order_query import OrderFlatDto, OrderItemQueryDto, OrderQueryDto


class OrderQueryRepository:
    """API 응답 모양에 맞춘 주문 조회 쿼리."""

    async def find_order_query_dtos(self, db: AsyncSession) -> list[OrderQueryDto]:
        """주문을 조회한 뒤 주문마다 주문상품을 따로 조회합니다 (N+1).

        Query the orders once, then query the lines of each order separately.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)

        Returns:
            list[OrderQueryDto]: 주문상품이 채워진 주문 목록
        """
        result: list[OrderQueryDto] = await self._find_orders(db)
        for order in result:
            order.order_items = await self._find_order_items(db, order.order_id)
        return result

    async def find_all_by_dto_optimization(self, db: AsyncSession) -> list[OrderQueryDto]:
        """주문상품을 IN 절 한 번으로 조회해 메모리에서 매칭합니다.

        Query the orders once, then fetch every line in one IN query keyed by
        the order ids and attach them in memory. Id lists longer than
        DEFAULT_BATCH_FETCH_SIZE are split into several IN queries.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)

        Returns:
            list[OrderQueryDto]: 주문상품이 채워진 주문 목록
        """
        result: list[OrderQueryDto] = await self._find_orders(db)
        order_ids: list[int] = [order.order_id for order in result]
        order_item_map: dict[int, list[OrderItemQueryDto]] = await self._find_order_item_map(db, order_ids)
        for order in result:
            order.order_items = order_item_map.get(order.order_id, [])
        return result

    async def find_all_by_dto_flat(self, db: AsyncSession) -> list[OrderFlatDto]:
        """주문, 회원, 배송, 주문상품, 상품을 한 번에 조인해 평탄화된 행으로 조회합니다.

        Single query joining every table; one row per order line with the
        order columns repeated. Rows are ordered by order id, then line id.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)

        Returns:
            list[OrderFlatDto]: 주문상품 단위의 평탄화된 행
        """
        query: Select = (
            select(
                Order.id,
                Member.name,
                Order.order_date,
                Delivery.address,
                Order.status,
                Item.name,
                OrderItem.order_price,
                OrderItem.count,
            )
            .join(Order.member)
            .join(Order.delivery)
            .join(Order.order_items)
            .join(OrderItem.item)
            .order_by(Order.id, OrderItem.id)
        )
        result = await db.execute(query)
        return [
            OrderFlatDto(
                order_id=order_id,
                name=name,
                order_date=order_date,
                address=address,
                order_status=status,
                item_name=item_name,
                order_price=order_price,
                count=count,
            )
            for order_id, name, order_date, address, status, item_name, order_price, count in result.all()
        ]

    async def _find_orders(self, db: AsyncSession) -> list[OrderQueryDto]:
        """xToOne 을 조인해 주문 DTO 를 조회 (Orders with to-one columns)."""
        query: Select = (
            select(Order.id, Member.name, Order.order_date, Order.status, Delivery.address)
            .join(Order.member)
            .join(Order.delivery)
            .order_by(Order.id)
        )
        result = await db.execute(query)
        return [
            OrderQueryDto(
                order_id=order_id,
                name=name,
                order_date=order_date,
                order_status=status,
                address=address,
            )
            for order_id, name, order_date, status, address in result.all()
        ]

    def _order_items_query(self) -> Select:
        """주문상품 DTO 컬럼 조회 기본 쿼리 (Base projection for order lines)."""
        return (
            select(OrderItem.order_id, Item.name, OrderItem.order_price, OrderItem.count)
            .join(OrderItem.item)
            .order_by(OrderItem.order_id, OrderItem.id)
        )

    async def _find_order_items(self, db: AsyncSession, order_id: int) -> list[OrderItemQueryDto]:
        """단일 주문의 주문상품 조회 (Lines of one order)."""
        result = await db.execute(self._order_items_query().where(OrderItem.order_id == order_id))
        return [_to_order_item_dto(row) for row in result.all()]

    async def _find_order_item_map(
        self,
        db: AsyncSession,
        order_ids: Sequence[int],
    ) -> dict[int, list[OrderItemQueryDto]]:
        """주문 ID 목록의 주문상품을 IN 절로 조회해 주문 ID 별로 묶습니다.

        Fetch the lines of many orders with IN queries of at most
        DEFAULT_BATCH_FETCH_SIZE ids each, grouped by order id.
        """
        order_item_map: dict[int, list[OrderItemQueryDto]] = defaultdict(list)
        batch_size: int = max(settings.DEFAULT_BATCH_FETCH_SIZE, 1)
        for start in range(0, len(order_ids), batch_size):
            chunk: Sequence[int] = order_ids[start:start + batch_size]
            result = await db.execute(self._order_items_query().where(OrderItem.order_id.in_(chunk)))
            for row in result.all():
                dto: OrderItemQueryDto = _to_order_item_dto(row)
                order_item_map[dto.order_id].append(dto)
        return order_item_map


def _to_order_item_dto(row: Row) -> OrderItemQueryDto:
    """(order_id, item_name, order_price, count) 행을 DTO 로 변환 (Row to line DTO)."""
    order_id, item_name, order_price, count = row
    return OrderItemQueryDto(
        order_id=order_id,
        item_name=item_name,
        order_price=order_price,
        count=count,
    )


# 싱글턴 인스턴스 - Singleton instance
order_query_repository: OrderQueryRepository = OrderQueryRepository()
