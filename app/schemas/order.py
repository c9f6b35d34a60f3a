"""주문 관련 Pydantic 요청/응답 스키마 정의.

Order Pydantic request/response schema definitions.
SimpleOrderDto/OrderDto are built from loaded entities by the service layer;
building them from an order whose associations are not loaded fails, so
each read strategy must load what the DTO touches first.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from app.models.member import Address
from app.models.order import Order, OrderItem, OrderStatus


class OrderSearch(BaseModel):
    """주문 검색 조건.

    Order search criteria; both filters are optional.

    Attributes:
        member_name: 회원 이름 부분 일치 (Member name, substring match)
        order_status: 주문 상태 ORDER/CANCEL (Order status)
    """

    member_name: str | None = None
    order_status: OrderStatus | None = None


class OrderCreate(BaseModel):
    """주문 요청 스키마 (Place an order for one item)."""

    member_id: int
    item_id: int
    count: int = Field(gt=0)  # 주문 수량 (Quantity)


class OrderCreateResponse(BaseModel):
    """주문 응답 스키마 (Created order id)."""

    order_id: int


class SimpleOrderDto(BaseModel):
    """주문 요약 DTO - 회원 이름과 배송지만 포함.

    Order summary DTO with the member name and delivery address.
    """

    order_id: int
    name: str
    order_date: datetime  # 주문 시간
    order_status: OrderStatus
    address: Address | None

    @classmethod
    def from_order(cls, order: Order) -> "SimpleOrderDto":
        """member, delivery 가 로딩된 주문에서 생성 (Requires member/delivery loaded)."""
        return cls(
            order_id=order.id,
            name=order.member.name,
            order_date=order.order_date,
            order_status=order.status,
            address=order.delivery.address,
        )


class OrderItemDto(BaseModel):
    """주문상품 DTO - 엔티티(OrderItem) 대신 노출할 필드만 포함.

    Order line DTO. The line itself is also converted; wrapping an
    entity inside a DTO would still expose the entity.
    """

    item_name: str  # 상품명
    order_price: int  # 주문 가격
    count: int  # 주문 수량

    @classmethod
    def from_order_item(cls, order_item: OrderItem) -> "OrderItemDto":
        """item 이 로딩된 주문상품에서 생성 (Requires item loaded)."""
        return cls(
            item_name=order_item.item.name,
            order_price=order_item.order_price,
            count=order_item.count,
        )


class OrderDto(BaseModel):
    """주문 상세 DTO - 주문상품 목록 포함 (Order with its lines)."""

    order_id: int
    name: str
    order_date: datetime
    order_status: OrderStatus
    address: Address | None
    order_items: list[OrderItemDto]

    @classmethod
    def from_order(cls, order: Order) -> "OrderDto":
        """member, delivery, order_items.item 이 로딩된 주문에서 생성."""
        return cls(
            order_id=order.id,
            name=order.member.name,
            order_date=order.order_date,
            order_status=order.status,
            address=order.delivery.address,
            order_items=[OrderItemDto.from_order_item(oi) for oi in order.order_items],
        )
