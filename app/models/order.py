"""주문, 주문상품, 배송 관련 SQLAlchemy ORM 모델 정의.

Order, OrderItem and Delivery SQLAlchemy ORM model definitions.
All associations are lazy; read paths choose how to load them
(lazy loading, fetch join, batched IN loading or DTO projection).

Tables:
    - orders: 주문 (Orders, "order" is a reserved word)
    - order_item: 주문상품 (Order lines)
    - delivery: 배송 (Delivery, one per order)
"""

import enum
from datetime import datetime

from sqlalchemy import DateTime, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, composite, mapped_column, relationship

from app.database import Base
from app.models.member import Address, Member
from app.utils.exceptions import BadRequestError


class OrderStatus(str, enum.Enum):
    """주문 상태 (Order status)."""

    ORDER = "ORDER"
    CANCEL = "CANCEL"


class DeliveryStatus(str, enum.Enum):
    """배송 상태 (Delivery status)."""

    READY = "READY"
    COMP = "COMP"


class Delivery(Base):
    """배송 모델 - 주문과 일대일.

    Delivery model, one-to-one with an order.

    Attributes:
        id: 배송 식별자 (Delivery identifier, column delivery_id)
        address: 배송지 (Embedded address)
        status: 배송 상태 READY/COMP (Delivery status)
    """

    __tablename__ = "delivery"
    __json_ignore__ = frozenset({"order"})

    id: Mapped[int] = mapped_column("delivery_id", Integer, primary_key=True, autoincrement=True)
    address: Mapped[Address] = composite(
        mapped_column("city", String(255), nullable=True),
        mapped_column("street", String(255), nullable=True),
        mapped_column("zipcode", String(20), nullable=True),
    )
    status: Mapped[DeliveryStatus | None] = mapped_column(
        Enum(DeliveryStatus, native_enum=False, length=20), nullable=True
    )

    order = relationship("Order", back_populates="delivery", uselist=False)


class Order(Base):
    """주문 모델 - 주문 생성/취소와 총액 계산 로직을 가진 엔티티.

    Order model. Owns the order creation and cancellation rules.

    Attributes:
        id: 주문 식별자 (Order identifier, column order_id)
        member_id: 주문 회원 FK (Ordering member)
        delivery_id: 배송 FK (Delivery, unique)
        order_date: 주문 시간 (Order timestamp)
        status: 주문 상태 ORDER/CANCEL (Order status)

    Relationships:
        member: 주문 회원 (N:1, lazy)
        delivery: 배송 정보 (1:1, lazy, cascade)
        order_items: 주문상품 목록 (1:N, lazy, cascade)
    """

    __tablename__ = "orders"

    id: Mapped[int] = mapped_column("order_id", Integer, primary_key=True, autoincrement=True)
    member_id: Mapped[int] = mapped_column(Integer, ForeignKey("member.member_id"), nullable=False)
    delivery_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("delivery.delivery_id"), unique=True, nullable=True
    )
    order_date: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.now)
    status: Mapped[OrderStatus] = mapped_column(
        Enum(OrderStatus, native_enum=False, length=20), nullable=False
    )

    member = relationship("Member", back_populates="orders")
    delivery = relationship("Delivery", back_populates="order", cascade="all")
    order_items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.id",
    )

    # ------------------------------------------------------------------
    # 생성 메서드 - Factory
    # ------------------------------------------------------------------
    @classmethod
    def create_order(cls, member: Member, delivery: Delivery, *order_items: "OrderItem") -> "Order":
        """주문 생성 - 회원, 배송, 주문상품을 연결하고 ORDER 상태로 시작.

        Create an order wired to its member, delivery and lines.
        Only the owning side is assigned; back_populates keeps the inverse
        collections in sync without loading them.
        """
        order: Order = cls(status=OrderStatus.ORDER, order_date=datetime.now())
        order.member = member
        order.delivery = delivery
        for order_item in order_items:
            order.order_items.append(order_item)
        return order

    # ------------------------------------------------------------------
    # 비즈니스 로직 - Business logic
    # ------------------------------------------------------------------
    def cancel(self) -> None:
        """주문 취소 - 이미 취소되었거나 배송완료된 주문은 취소 불가, 재고 원복.

        Cancel the order and restore stock for every line.
        Requires delivery, order_items and order_items.item to be loaded.

        Raises:
            BadRequestError: 이미 취소되었거나 배송완료된 주문일 때
                             (Already cancelled or already delivered)
        """
        if self.status == OrderStatus.CANCEL:
            raise BadRequestError("이미 취소된 주문입니다.")
        if self.delivery is not None and self.delivery.status == DeliveryStatus.COMP:
            raise BadRequestError("이미 배송완료된 상품은 취소가 불가능합니다.")

        self.status = OrderStatus.CANCEL
        for order_item in self.order_items:
            order_item.cancel()

    @property
    def total_price(self) -> int:
        """전체 주문 가격 조회 (Sum of all line totals)."""
        return sum(order_item.total_price for order_item in self.order_items)


class OrderItem(Base):
    """주문상품 모델 - 주문 당시 가격과 수량을 보관.

    Order line model. Keeps the price and quantity at the time of ordering.
    """

    __tablename__ = "order_item"
    __json_ignore__ = frozenset({"order"})

    id: Mapped[int] = mapped_column("order_item_id", Integer, primary_key=True, autoincrement=True)
    item_id: Mapped[int] = mapped_column(Integer, ForeignKey("item.item_id"), nullable=False)
    order_id: Mapped[int] = mapped_column(Integer, ForeignKey("orders.order_id"), nullable=False)
    order_price: Mapped[int] = mapped_column(Integer, nullable=False)  # 주문 당시 가격
    count: Mapped[int] = mapped_column(Integer, nullable=False)  # 주문 수량

    item = relationship("Item")
    order = relationship("Order", back_populates="order_items")

    @classmethod
    def create_order_item(cls, item, order_price: int, count: int) -> "OrderItem":
        """주문상품 생성 - 주문 수량만큼 재고를 차감.

        Create an order line and remove the ordered quantity from stock.

        Raises:
            NotEnoughStockError: 재고 부족 (Not enough stock)
        """
        item.remove_stock(count)
        order_item: OrderItem = cls(order_price=order_price, count=count)
        order_item.item = item
        return order_item

    def cancel(self) -> None:
        """주문 취소 시 재고 원복 (Restore stock on cancel)."""
        self.item.add_stock(self.count)

    @property
    def total_price(self) -> int:
        """주문상품 전체 가격 (order_price * count)."""
        return self.order_price * self.count
