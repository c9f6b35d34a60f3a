"""주문 요약 API 라우터 - xToOne(ManyToOne, OneToOne) 관계 최적화.

Simple order API Router. Order -> Member and Order -> Delivery are both
to-one associations; each version loads them differently.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.order import SimpleOrderDto
from app.schemas.order_query import OrderSimpleQueryDto
from app.services.order_read_service import order_read_service

router: APIRouter = APIRouter()


@router.get("/v1/simple-orders")
async def orders_v1(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[dict[str, Any]]:
    """V1. 엔티티 직접 노출 - 지연 로딩 대상은 강제 초기화, 양방향 반대편은 제외."""
    return await order_read_service.simple_orders_v1(db)


@router.get("/v2/simple-orders", response_model=list[SimpleOrderDto])
async def orders_v2(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[SimpleOrderDto]:
    """V2. 엔티티를 DTO 로 변환 (페치 조인 X) - 지연 로딩으로 쿼리 N번 호출."""
    return await order_read_service.simple_orders_v2(db)


@router.get("/v3/simple-orders", response_model=list[SimpleOrderDto])
async def orders_v3(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[SimpleOrderDto]:
    """V3. 엔티티를 DTO 로 변환 (페치 조인 O) - 쿼리 1번 호출."""
    return await order_read_service.simple_orders_v3(db)


@router.get("/v4/simple-orders", response_model=list[OrderSimpleQueryDto])
async def orders_v4(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[OrderSimpleQueryDto]:
    """V4. DTO 로 바로 조회 - 쿼리 1번, select 절에서 원하는 데이터만 선택."""
    return await order_read_service.simple_orders_v4(db)
