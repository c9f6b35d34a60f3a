"""주문 조회 서비스 - 같은 조회 API 의 단계별 최적화 전략 (V1~V6).

Order read service. Every method answers the same question ("list the
orders") with a different data-access strategy, from exposing entities
with per-row lazy loading up to a single flat query.

xToOne (member, delivery):
    - V1 엔티티 직접 노출 + 지연 로딩 강제 초기화 (entities, forced lazy init)
    - V2 엔티티 -> DTO, 지연 로딩 (DTOs, 1 + N + N queries)
    - V3 엔티티 -> DTO, 페치 조인 (DTOs, 1 query)
    - V4 DTO 직접 조회 (projection, 1 query)

xToMany (order_items):
    - V1 엔티티 직접 노출 (entities, forced lazy init)
    - V2 엔티티 -> DTO, 지연 로딩 (DTOs, N+1 at every level)
    - V3 컬렉션 페치 조인 + 중복 제거, 페이징 불가 (1 query, no paging)
    - V3.1 xToOne 페치 조인 + 페이징 + 컬렉션 IN 배치 로딩 (1 + 1 + 1 queries)
    - V4 DTO 직접 조회, 주문마다 컬렉션 조회 (1 + N)
    - V5 DTO 직접 조회, 컬렉션 IN 한 번 (1 + 1)
    - V6 평탄화 조회 후 메모리에서 그룹핑 (1)
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.order import Order
from app.repositories.order_query_repository import order_query_repository
from app.repositories.order_repository import order_repository
from app.repositories.order_simple_query_repository import order_simple_query_repository
from app.schemas.order import OrderDto, OrderSearch, SimpleOrderDto
from app.schemas.order_query import (
    OrderFlatDto,
    OrderItemQueryDto,
    OrderQueryDto,
    OrderSimpleQueryDto,
)
from app.utils.serialization import entity_to_dict


class OrderReadService:
    """주문 조회 전략을 모아둔 서비스."""

    # ------------------------------------------------------------------
    # 지연 로딩 강제 초기화 - Explicit lazy initialization
    # ------------------------------------------------------------------
    async def _init_member_delivery(self, orders: list[Order]) -> None:
        """주문마다 member, delivery 를 지연 로딩 (one load per association)."""
        for order in orders:
            await order.awaitable_attrs.member
            await order.awaitable_attrs.delivery

    async def _init_order_items(self, orders: list[Order]) -> None:
        """주문마다 order_items, 주문상품마다 item 을 지연 로딩."""
        for order in orders:
            order_items = await order.awaitable_attrs.order_items
            for order_item in order_items:
                await order_item.awaitable_attrs.item

    # ------------------------------------------------------------------
    # xToOne 최적화 - simple orders
    # ------------------------------------------------------------------
    async def simple_orders_v1(self, db: AsyncSession) -> list[dict[str, Any]]:
        """V1. 엔티티 직접 노출 - 초기화하지 않은 연관관계는 null.

        Expose entities directly; member and delivery are initialized,
        order_items is not and therefore serializes as null.
        """
        orders: list[Order] = await order_repository.find_all_by_search(db, OrderSearch())
        await self._init_member_delivery(orders)
        return [entity_to_dict(order) for order in orders]

    async def simple_orders_v2(self, db: AsyncSession) -> list[SimpleOrderDto]:
        """V2. 엔티티 -> DTO 변환, 페치 조인 없음.

        N + 1 문제: 주문 1번 조회 후 회원 N번, 배송 N번 추가 쿼리
        (one query for orders, then up to N for members and N for deliveries).
        """
        orders: list[Order] = await order_repository.find_all_by_search(db, OrderSearch())
        await self._init_member_delivery(orders)
        return [SimpleOrderDto.from_order(order) for order in orders]

    async def simple_orders_v3(self, db: AsyncSession) -> list[SimpleOrderDto]:
        """V3. 엔티티 -> DTO 변환, 페치 조인으로 쿼리 1번 (single query)."""
        orders: list[Order] = await order_repository.find_all_with_member_delivery(db)
        return [SimpleOrderDto.from_order(order) for order in orders]

    async def simple_orders_v4(self, db: AsyncSession) -> list[OrderSimpleQueryDto]:
        """V4. DTO 로 바로 조회 - select 절에서 필요한 컬럼만 (projection)."""
        return await order_simple_query_repository.find_order_dtos(db)

    # ------------------------------------------------------------------
    # 컬렉션 최적화 - orders with order items
    # ------------------------------------------------------------------
    async def orders_v1(self, db: AsyncSession) -> list[dict[str, Any]]:
        """V1. 엔티티 직접 노출 - 회원, 배송, 주문상품, 상품 모두 강제 초기화."""
        orders: list[Order] = await order_repository.find_all_by_search(db, OrderSearch())
        await self._init_member_delivery(orders)
        await self._init_order_items(orders)
        return [entity_to_dict(order) for order in orders]

    async def orders_v2(self, db: AsyncSession) -> list[OrderDto]:
        """V2. 엔티티 -> DTO 변환 - 모든 단계에서 지연 로딩 (N+1 everywhere)."""
        orders: list[Order] = await order_repository.find_all_by_search(db, OrderSearch())
        await self._init_member_delivery(orders)
        await self._init_order_items(orders)
        return [OrderDto.from_order(order) for order in orders]

    async def orders_v3(self, db: AsyncSession) -> list[OrderDto]:
        """V3. 컬렉션까지 페치 조인, 중복 제거 후 DTO 변환 (1 query, no paging)."""
        orders: list[Order] = await order_repository.find_all_with_item(db)
        return [OrderDto.from_order(order) for order in orders]

    async def orders_v3_page(self, db: AsyncSession, offset: int, limit: int) -> list[OrderDto]:
        """V3.1. xToOne 페치 조인 + 페이징, 컬렉션은 IN 배치 로딩.

        Page over orders; member/delivery are fetch-joined and order_items
        plus their items are loaded with one IN query per level.
        """
        orders: list[Order] = await order_repository.find_all_with_member_delivery_batch(
            db, offset=offset, limit=limit
        )
        return [OrderDto.from_order(order) for order in orders]

    async def orders_v4(self, db: AsyncSession) -> list[OrderQueryDto]:
        """V4. DTO 직접 조회 - 주문마다 주문상품 조회 (1 + N)."""
        return await order_query_repository.find_order_query_dtos(db)

    async def orders_v5(self, db: AsyncSession) -> list[OrderQueryDto]:
        """V5. DTO 직접 조회 - 주문상품을 IN 절로 한 번에 (1 + 1)."""
        return await order_query_repository.find_all_by_dto_optimization(db)

    async def orders_v6(self, db: AsyncSession) -> list[OrderQueryDto]:
        """V6. 평탄화 조회 1번 후 메모리에서 주문 단위로 묶기.

        One flat query, regrouped in memory into OrderQueryDto trees ordered
        by order id. Orders without lines do not appear (inner join).
        """
        flats: list[OrderFlatDto] = await order_query_repository.find_all_by_dto_flat(db)
        return group_flat_orders(flats)

    async def to_order_dtos(self, db: AsyncSession, orders: list[Order]) -> list[OrderDto]:
        """검색 결과 주문을 DTO 로 변환 - 연관관계는 ID 기준 배치 조회로 로딩.

        Convert search results to DTOs, loading their associations with a
        fixed number of queries keyed by the matched order ids.
        """
        loaded: list[Order] = await order_repository.find_all_by_ids(db, [o.id for o in orders])
        return [OrderDto.from_order(order) for order in loaded]


def group_flat_orders(flats: list[OrderFlatDto]) -> list[OrderQueryDto]:
    """평탄화된 행을 주문 ID 기준으로 묶어 주문 DTO 트리로 변환합니다.

    Group flat rows by order id into OrderQueryDto trees, keeping line
    order as it appears in the rows, sorted by order id.
    """
    grouped: dict[int, OrderQueryDto] = {}
    for flat in flats:
        order: OrderQueryDto | None = grouped.get(flat.order_id)
        if order is None:
            order = OrderQueryDto(
                order_id=flat.order_id,
                name=flat.name,
                order_date=flat.order_date,
                order_status=flat.order_status,
                address=flat.address,
            )
            grouped[flat.order_id] = order
        order.order_items.append(
            OrderItemQueryDto(
                order_id=flat.order_id,
                item_name=flat.item_name,
                order_price=flat.order_price,
                count=flat.count,
            )
        )
    return sorted(grouped.values(), key=lambda o: o.order_id)


# 싱글턴 인스턴스 - Singleton instance
order_read_service: OrderReadService = OrderReadService()
