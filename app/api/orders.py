"""주문 API 라우터 - 컬렉션(OneToMany) 조회 최적화와 주문 명령.

Order API Router.

Read strategies (/vN/orders) return the same order tree, including the
order_items collection, loaded in progressively cheaper ways.
Commands (/orders) place, search and cancel orders.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.order import Order, OrderStatus
from app.schemas.order import OrderCreate, OrderCreateResponse, OrderDto, OrderSearch
from app.schemas.order_query import OrderQueryDto
from app.services.order_read_service import order_read_service
from app.services.order_service import order_service

router: APIRouter = APIRouter()


# ---------------------------------------------------------------------------
# 조회 전략 - Read strategies
# ---------------------------------------------------------------------------
@router.get("/v1/orders")
async def orders_v1(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[dict[str, Any]]:
    """V1. 엔티티 직접 노출 (Entities with every association forced to load)."""
    return await order_read_service.orders_v1(db)


@router.get("/v2/orders", response_model=list[OrderDto])
async def orders_v2(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[OrderDto]:
    """V2. 엔티티를 DTO 로 변환 - 지연 로딩으로 너무 많은 SQL 실행."""
    return await order_read_service.orders_v2(db)


@router.get("/v3/orders", response_model=list[OrderDto])
async def orders_v3(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[OrderDto]:
    """V3. 컬렉션 페치 조인 - 쿼리 1번, 단 페이징 불가."""
    return await order_read_service.orders_v3(db)


@router.get("/v3.1/orders", response_model=list[OrderDto])
async def orders_v3_page(
    db: Annotated[AsyncSession, Depends(get_db)],
    offset: Annotated[int, Query(ge=0)] = 0,
    limit: Annotated[int, Query(ge=1)] = 100,
) -> list[OrderDto]:
    """V3.1. xToOne 페치 조인 + 페이징, 컬렉션은 IN 배치 로딩 (1 + 1 + 1)."""
    return await order_read_service.orders_v3_page(db, offset=offset, limit=limit)


@router.get("/v4/orders", response_model=list[OrderQueryDto])
async def orders_v4(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[OrderQueryDto]:
    """V4. JPA 에서 DTO 직접 조회 - 루트 1번, 컬렉션 N번."""
    return await order_read_service.orders_v4(db)


@router.get("/v5/orders", response_model=list[OrderQueryDto])
async def orders_v5(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[OrderQueryDto]:
    """V5. DTO 직접 조회, 컬렉션 조회 최적화 - 루트 1번, 컬렉션 1번."""
    return await order_read_service.orders_v5(db)


@router.get("/v6/orders", response_model=list[OrderQueryDto])
async def orders_v6(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[OrderQueryDto]:
    """V6. 플랫 데이터 최적화 - 쿼리 1번, 애플리케이션에서 그룹핑."""
    return await order_read_service.orders_v6(db)


# ---------------------------------------------------------------------------
# 주문 명령 - Order commands
# ---------------------------------------------------------------------------
@router.post("/orders", response_model=OrderCreateResponse, status_code=201)
async def create_order(
    data: OrderCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> OrderCreateResponse:
    """상품 주문 (Place an order)."""
    order_id: int = await order_service.order(db, data.member_id, data.item_id, data.count)
    await db.commit()
    return OrderCreateResponse(order_id=order_id)


@router.get("/orders", response_model=list[OrderDto])
async def search_orders(
    db: Annotated[AsyncSession, Depends(get_db)],
    member_name: str | None = None,
    order_status: OrderStatus | None = None,
) -> list[OrderDto]:
    """주문 검색 - 회원 이름, 주문 상태 (Search by member name and status).

    The search query leaves associations lazy; a full read path is used to
    build the response for the matching ids.
    """
    orders: list[Order] = await order_service.find_orders(
        db, OrderSearch(member_name=member_name, order_status=order_status)
    )
    return await order_read_service.to_order_dtos(db, orders)


@router.post("/orders/{order_id}/cancel", response_model=OrderDto)
async def cancel_order(
    order_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> OrderDto:
    """주문 취소 - 재고 원복 (Cancel an order and restore stock)."""
    order: Order = await order_service.cancel_order(db, order_id)
    await db.commit()
    await order.awaitable_attrs.member
    return OrderDto.from_order(order)
