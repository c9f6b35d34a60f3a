"""SQLAlchemy ORM 모델 패키지 - 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package. Importing from this package ensures all
models are registered with the SQLAlchemy metadata, which is required for
schema creation and relationship resolution.

Modules:
    member: 회원 및 주소 값 타입 (Member, Address)
    order: 주문, 주문상품, 배송 (Order, OrderItem, Delivery)
    item: 상품(단일 테이블 상속)과 카테고리 (Item/Book/Album/Movie, Category)
"""

from app.models.member import Address, Member
from app.models.order import Delivery, DeliveryStatus, Order, OrderItem, OrderStatus
from app.models.item import Album, Book, Category, Item, Movie, category_item

__all__ = [
    "Address", "Member",
    "Delivery", "DeliveryStatus", "Order", "OrderItem", "OrderStatus",
    "Item", "Book", "Album", "Movie", "Category", "category_item",
]
