"""API 라우터 패키지 - 모든 엔드포인트 통합.

API Router package. Aggregates every endpoint into a single router that
main.py mounts under /api.

Included routers:
    - members: 회원 등록/수정/조회 V1, V2 (Member endpoints)
    - simple_orders: xToOne 최적화 V1~V4 (/vN/simple-orders)
    - orders: 컬렉션 최적화 V1~V6 및 주문 명령 (/vN/orders, /orders)
    - items: 상품 관리 (/items)
"""

from fastapi import APIRouter

from app.api.items import router as items_router
from app.api.members import router as members_router
from app.api.orders import router as orders_router
from app.api.simple_orders import router as simple_orders_router

api_router: APIRouter = APIRouter()

api_router.include_router(members_router, tags=["Members"])
api_router.include_router(simple_orders_router, tags=["Simple Orders"])
api_router.include_router(orders_router, tags=["Orders"])
api_router.include_router(items_router, prefix="/items", tags=["Items"])
