"""주문 레포지토리 - 엔티티를 반환하는 주문 조회 쿼리.

Order Repository, entity-returning order queries.
Each method differs only in how associations are loaded, which decides how
many SQL statements a read path issues:

    - find_all_by_search: 연관관계 전부 지연 로딩 (everything lazy, N+1 prone)
    - find_all_with_member_delivery: xToOne 페치 조인 (to-one fetch join, pageable)
    - find_all_with_item: 컬렉션까지 페치 조인 (collection fetch join, not pageable)
    - find_all_with_member_delivery_batch: xToOne 페치 조인 + 컬렉션 IN 배치 로딩
      (to-one fetch join with paging, collections batched through IN queries)
"""

from collections import defaultdict
from collections.abc import Iterator, Sequence

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import contains_eager
from sqlalchemy.orm.attributes import set_committed_value

from app.config import settings
from app.models.item import Item
from app.models.member import Member
from app.models.order import Order, OrderItem
from app.repositories.base import BaseRepository
from app.schemas.order import OrderSearch


class OrderRepository(BaseRepository[Order]):
    """주문 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the orders table.
    """

    def __init__(self) -> None:
        super().__init__(Order)

    async def find_all_by_search(
        self,
        db: AsyncSession,
        search: OrderSearch,
    ) -> list[Order]:
        """검색 조건으로 주문을 조회합니다 (동적 쿼리).

        Search orders by member name (LIKE) and order status.
        Member is joined only for filtering; every association stays lazy.
        Results are capped at ORDER_SEARCH_LIMIT rows.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            search: 검색 조건 (Member name / order status filter)

        Returns:
            list[Order]: 주문 목록 (Orders, associations not loaded)
        """
        query: Select = select(Order).join(Order.member)

        # 주문 상태 검색 - Status filter
        if search.order_status is not None:
            query = query.where(Order.status == search.order_status)

        # 회원 이름 검색 - Member name filter
        if search.member_name:
            query = query.where(Member.name.like(f"%{search.member_name}%"))

        query = query.order_by(Order.id).limit(settings.ORDER_SEARCH_LIMIT)
        result = await db.execute(query)
        return list(result.scalars().all())

    def _with_member_delivery(self) -> Select:
        """회원/배송을 페치 조인하는 기본 쿼리 (Base to-one fetch join query)."""
        return (
            select(Order)
            .join(Order.member)
            .join(Order.delivery)
            .options(contains_eager(Order.member), contains_eager(Order.delivery))
        )

    async def find_all_with_member_delivery(
        self,
        db: AsyncSession,
        offset: int = 0,
        limit: int | None = None,
    ) -> list[Order]:
        """회원과 배송을 페치 조인으로 한 번에 조회합니다.

        Fetch orders with member and delivery in a single joined query.
        To-one joins never multiply rows, so offset/limit stay correct.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            offset: 건너뛸 주문 수 (Rows to skip)
            limit: 최대 주문 수, None이면 전체 (Max rows, None for all)

        Returns:
            list[Order]: member/delivery가 로딩된 주문 목록
        """
        query: Select = self._with_member_delivery().order_by(Order.id).offset(offset)
        if limit is not None:
            query = query.limit(limit)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_all_with_item(self, db: AsyncSession) -> list[Order]:
        """주문상품과 상품까지 모두 페치 조인합니다.

        Fetch orders with member, delivery, order items and items in one query.
        The collection join multiplies order rows, so results are
        de-duplicated by identity (the JPQL `distinct` equivalent). Paging
        this query would page over order lines rather than orders, so it
        takes no offset/limit.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)

        Returns:
            list[Order]: 연관관계가 모두 로딩된 중복 없는 주문 목록
        """
        query: Select = (
            select(Order)
            .join(Order.member)
            .join(Order.delivery)
            .join(Order.order_items)
            .join(OrderItem.item)
            .options(
                contains_eager(Order.member),
                contains_eager(Order.delivery),
                contains_eager(Order.order_items).contains_eager(OrderItem.item),
            )
            .order_by(Order.id, OrderItem.id)
        )
        result = await db.execute(query)
        return list(result.unique().scalars().all())

    async def find_all_with_member_delivery_batch(
        self,
        db: AsyncSession,
        offset: int = 0,
        limit: int = 100,
    ) -> list[Order]:
        """xToOne 페치 조인 + 페이징, 컬렉션은 IN 쿼리로 배치 로딩합니다.

        Page over orders with member/delivery fetch-joined, then load
        order_items and their items through IN queries of at most
        DEFAULT_BATCH_FETCH_SIZE ids each (1 + 1 + 1 statements while the
        page fits in one batch).

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            offset: 건너뛸 주문 수 (Rows to skip)
            limit: 페이지 크기 (Page size)

        Returns:
            list[Order]: 연관관계가 모두 로딩된 주문 목록
        """
        query: Select = (
            self._with_member_delivery()
            .order_by(Order.id)
            .offset(offset)
            .limit(limit)
        )
        result = await db.execute(query)
        orders: list[Order] = list(result.scalars().all())
        await self._batch_load_order_items(db, orders)
        return orders

    async def find_all_by_ids(
        self,
        db: AsyncSession,
        order_ids: list[int],
    ) -> list[Order]:
        """주문 ID 목록으로 연관관계를 모두 로딩해 조회합니다.

        Load the given orders with member/delivery fetch-joined and lines
        batched, refreshing instances already present in the session.
        """
        if not order_ids:
            return []
        query: Select = (
            self._with_member_delivery()
            .where(Order.id.in_(order_ids))
            .order_by(Order.id)
            .execution_options(populate_existing=True)
        )
        result = await db.execute(query)
        orders: list[Order] = list(result.scalars().all())
        await self._batch_load_order_items(db, orders, refresh=True)
        return orders

    async def _batch_load_order_items(
        self,
        db: AsyncSession,
        orders: list[Order],
        refresh: bool = False,
    ) -> None:
        """주문들의 order_items 와 item 을 배치 크기 단위 IN 쿼리로 채웁니다.

        Fill Order.order_items, then OrderItem.item, with one IN query per
        DEFAULT_BATCH_FETCH_SIZE ids at each level. Loaded values are set as
        committed state, so no lazy load is left behind.
        """
        batch_size: int = max(settings.DEFAULT_BATCH_FETCH_SIZE, 1)

        # 주문상품 - Lines keyed by order id
        order_items_map: dict[int, list[OrderItem]] = defaultdict(list)
        order_ids: list[int] = [order.id for order in orders]
        for chunk in _chunks(order_ids, batch_size):
            query: Select = (
                select(OrderItem)
                .where(OrderItem.order_id.in_(chunk))
                .order_by(OrderItem.order_id, OrderItem.id)
                .execution_options(populate_existing=refresh)
            )
            result = await db.execute(query)
            for order_item in result.scalars().all():
                order_items_map[order_item.order_id].append(order_item)
        for order in orders:
            set_committed_value(order, "order_items", order_items_map.get(order.id, []))

        # 상품 - Items keyed by item id
        order_items: list[OrderItem] = [oi for order in orders for oi in order_items_map.get(order.id, [])]
        item_ids: list[int] = sorted({oi.item_id for oi in order_items})
        items: dict[int, Item] = {}
        for chunk in _chunks(item_ids, batch_size):
            query = (
                select(Item)
                .where(Item.id.in_(chunk))
                .execution_options(populate_existing=refresh)
            )
            result = await db.execute(query)
            items.update((item.id, item) for item in result.scalars().all())
        for order_item in order_items:
            set_committed_value(order_item, "item", items.get(order_item.item_id))


def _chunks(ids: Sequence[int], size: int) -> Iterator[Sequence[int]]:
    """식별자 목록을 size 개씩 나눕니다 (Split ids into IN-clause sized chunks)."""
    for start in range(0, len(ids), size):
        yield ids[start:start + size]


# 싱글턴 인스턴스 - Singleton instance
order_repository: OrderRepository = OrderRepository()
