"""주문 조회 전용 DTO 스키마 정의.

Query-side order DTOs. These shapes are produced directly by SQL
projections in the query repositories, never from entities.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from app.models.member import Address
from app.models.order import OrderStatus


class OrderSimpleQueryDto(BaseModel):
    """주문 요약 조회 DTO - select 절에서 필요한 컬럼만 조회.

    Order summary projected straight from a single joined query.
    """

    order_id: int
    name: str
    order_date: datetime  # 주문시간
    order_status: OrderStatus
    address: Address | None


class OrderItemQueryDto(BaseModel):
    """주문상품 조회 DTO.

    Order line projection. order_id is kept for grouping lines under their
    order but is not part of the JSON response.
    """

    order_id: int = Field(exclude=True)
    item_name: str  # 상품명
    order_price: int  # 주문 가격
    count: int  # 주문 수량


class OrderQueryDto(BaseModel):
    """주문 조회 DTO - 컬렉션은 별도 쿼리로 채움.

    Order projection. A SQL projection cannot produce a nested collection,
    so order_items starts empty and is filled in by a follow-up query.
    Two instances are the same order when their order_id matches.
    """

    order_id: int
    name: str
    order_date: datetime  # 주문시간
    order_status: OrderStatus
    address: Address | None
    order_items: list[OrderItemQueryDto] = Field(default_factory=list)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderQueryDto):
            return NotImplemented
        return self.order_id == other.order_id

    def __hash__(self) -> int:
        return hash(self.order_id)


class OrderFlatDto(BaseModel):
    """주문 + 주문상품 평탄화 DTO - 주문상품 한 건당 한 행.

    Flat join row: one row per order line, order columns repeated.
    """

    order_id: int
    name: str
    order_date: datetime  # 주문시간
    address: Address | None
    order_status: OrderStatus

    item_name: str  # 상품명
    order_price: int  # 주문 가격
    count: int  # 주문 수량
