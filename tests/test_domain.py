"""도메인 로직 단위 테스트 - 재고, 주문 생성/취소, 평탄화 그룹핑.

Domain unit tests that need no database.
"""

from datetime import datetime

import pytest

from app.models.item import Book, Category
from app.models.member import Address, Member
from app.models.order import Delivery, DeliveryStatus, Order, OrderItem, OrderStatus
from app.schemas.order_query import OrderFlatDto
from app.services.order_read_service import group_flat_orders
from app.utils.exceptions import BadRequestError, NotEnoughStockError


def _book(stock: int = 10) -> Book:
    return Book(name="시골 JPA", price=10000, stock_quantity=stock)


class TestStock:
    """재고 테스트."""

    def test_add_and_remove_stock(self):
        book = _book()
        book.add_stock(5)
        book.remove_stock(15)
        assert book.stock_quantity == 0

    def test_remove_more_than_stock(self):
        """재고 수량 초과 시 예외, 재고는 그대로."""
        book = _book(2)
        with pytest.raises(NotEnoughStockError) as exc_info:
            book.remove_stock(3)
        assert exc_info.value.status_code == 400
        assert book.stock_quantity == 2


class TestOrder:
    """주문 생성/취소 테스트."""

    def _order(self, book: Book, count: int) -> Order:
        member = Member(name="member1", address=Address("서울", "강가", "123-123"))
        delivery = Delivery(address=Address("서울", "강가", "123-123"), status=DeliveryStatus.READY)
        order_item = OrderItem.create_order_item(book, book.price, count)
        return Order.create_order(member, delivery, order_item)

    def test_create_order(self):
        """주문 생성 - 상태 ORDER, 재고 차감, 양방향 연관관계 설정."""
        book = _book()
        order = self._order(book, 2)

        assert order.status == OrderStatus.ORDER
        assert book.stock_quantity == 8
        assert order.total_price == 20000
        assert order.order_items[0].order is order
        assert order.delivery.order is order
        assert order in order.member.orders

    def test_cancel_restores_stock(self):
        book = _book()
        order = self._order(book, 4)
        order.cancel()

        assert order.status == OrderStatus.CANCEL
        assert book.stock_quantity == 10

    def test_cannot_cancel_twice(self):
        """이미 취소된 주문을 다시 취소하면 예외, 재고는 그대로."""
        book = _book()
        order = self._order(book, 4)
        order.cancel()

        with pytest.raises(BadRequestError):
            order.cancel()
        assert book.stock_quantity == 10

    def test_cannot_cancel_delivered_order(self):
        book = _book()
        order = self._order(book, 1)
        order.delivery.status = DeliveryStatus.COMP

        with pytest.raises(BadRequestError):
            order.cancel()
        assert order.status == OrderStatus.ORDER
        assert book.stock_quantity == 9


def test_category_tree():
    """카테고리 자식 추가 시 양쪽 연관관계 설정."""
    parent = Category(name="도서")
    child = Category(name="IT")
    parent.add_child_category(child)
    assert child.parent is parent
    assert parent.child == [child]


def test_group_flat_orders():
    """평탄화된 행을 주문 단위로 묶는다."""
    now = datetime(2024, 1, 1, 12, 0)
    address = Address("서울", "1", "1111")

    def flat(order_id: int, item_name: str, count: int) -> OrderFlatDto:
        return OrderFlatDto(
            order_id=order_id, name=f"user{order_id}", order_date=now, address=address,
            order_status=OrderStatus.ORDER, item_name=item_name, order_price=1000, count=count,
        )

    grouped = group_flat_orders([flat(2, "C", 3), flat(1, "A", 1), flat(1, "B", 2)])

    assert [o.order_id for o in grouped] == [1, 2]
    assert [oi.item_name for oi in grouped[0].order_items] == ["A", "B"]
    assert [oi.count for oi in grouped[1].order_items] == [3]
    assert grouped[0].address == address
