"""주문 서비스 - 주문, 취소, 검색 비즈니스 로직.

Order Service, business logic for placing, cancelling and searching orders.
Domain rules (stock removal, cancel restrictions) live on the entities;
this service only loads what they need and wires them together.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload, selectinload

from app.models.item import Item
from app.models.member import Address, Member
from app.models.order import Delivery, DeliveryStatus, Order, OrderItem
from app.repositories.item_repository import item_repository
from app.repositories.member_repository import member_repository
from app.repositories.order_repository import order_repository
from app.schemas.order import OrderSearch
from app.utils.exceptions import NotFoundError


class OrderService:
    """주문 관련 비즈니스 로직을 처리하는 서비스."""

    async def order(self, db: AsyncSession, member_id: int, item_id: int, count: int) -> int:
        """상품 주문 - 회원 주소로 배송을 만들고 재고를 차감합니다.

        Place an order for one item. The delivery is created at the member's
        address and the ordered count is removed from stock.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            member_id: 주문 회원 ID (Ordering member)
            item_id: 주문 상품 ID (Ordered item)
            count: 주문 수량 (Quantity)

        Returns:
            int: 생성된 주문 ID (New order id)

        Raises:
            NotFoundError: 회원 또는 상품이 없을 때 (Member or item not found)
            NotEnoughStockError: 재고 부족 (Not enough stock)
        """
        member: Member | None = await member_repository.get_by_id(db, member_id)
        if member is None:
            raise NotFoundError("Member not found")
        item: Item | None = await item_repository.get_by_id(db, item_id)
        if item is None:
            raise NotFoundError("Item not found")

        # 배송정보 생성 - 주소 값 타입은 복사해서 공유하지 않음 (Copy the value type)
        address: Address = member.address or Address()
        delivery: Delivery = Delivery(
            address=Address(address.city, address.street, address.zipcode),
            status=DeliveryStatus.READY,
        )

        order_item: OrderItem = OrderItem.create_order_item(item, item.price, count)
        order: Order = Order.create_order(member, delivery, order_item)

        # cascade 로 배송, 주문상품까지 함께 저장 (Delivery and lines cascade)
        await order_repository.create(db, order)
        return order.id

    async def cancel_order(self, db: AsyncSession, order_id: int) -> Order:
        """주문 취소 - 배송과 주문상품, 상품을 로딩한 뒤 엔티티에 위임합니다.

        Cancel an order. Loads everything Order.cancel touches up front.

        Raises:
            NotFoundError: 주문이 없을 때 (Order not found)
            BadRequestError: 이미 취소되었거나 배송완료된 주문 (Already cancelled or delivered)
        """
        order: Order | None = await order_repository.get_by_id(
            db,
            order_id,
            options=(
                joinedload(Order.delivery),
                selectinload(Order.order_items).selectinload(OrderItem.item),
            ),
        )
        if order is None:
            raise NotFoundError("Order not found")

        order.cancel()
        await db.flush()
        return order

    async def find_orders(self, db: AsyncSession, search: OrderSearch) -> list[Order]:
        """주문 검색 (Search orders by member name and status)."""
        return await order_repository.find_all_by_search(db, search)


# 싱글턴 인스턴스 - Singleton instance
order_service: OrderService = OrderService()
