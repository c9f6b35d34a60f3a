"""상품 및 카테고리 관련 SQLAlchemy ORM 모델 정의.

Item and Category SQLAlchemy ORM model definitions.
Items use single-table inheritance (Book/Album/Movie share the item table,
discriminated by the dtype column). Categories form a tree and relate to
items through the category_item association table.

Tables:
    - item: 상품 (All item kinds, single table)
    - category: 카테고리 (Self-referencing category tree)
    - category_item: 카테고리-상품 연결 (Category/item association)
"""

from sqlalchemy import Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.utils.exceptions import NotEnoughStockError

# 카테고리-상품 다대다 연결 테이블 (Many-to-many association table)
category_item = Table(
    "category_item",
    Base.metadata,
    Column("category_id", Integer, ForeignKey("category.category_id"), primary_key=True),
    Column("item_id", Integer, ForeignKey("item.item_id"), primary_key=True),
)


class Item(Base):
    """상품 추상 모델 - 하위 구현체는 Book, Album, Movie.

    Abstract item model; concrete kinds are Book, Album and Movie.
    Owns the stock rules: stock may be added freely but never removed
    below zero.

    Attributes:
        id: 상품 식별자 (Item identifier, column item_id)
        name: 상품명 (Item name)
        price: 가격 (Unit price)
        stock_quantity: 재고 수량 (Stock quantity)
        dtype: 상품 구분값 B/A/M (Discriminator)
    """

    __tablename__ = "item"
    __json_ignore__ = frozenset({"categories"})

    id: Mapped[int] = mapped_column("item_id", Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    stock_quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    dtype: Mapped[str] = mapped_column(String(31), nullable=False)

    categories = relationship("Category", secondary=category_item, back_populates="items")

    __mapper_args__ = {
        "polymorphic_on": "dtype",
        "polymorphic_abstract": True,
        # 하위 타입 컬럼까지 항상 함께 조회 (Load every kind's columns up front)
        "with_polymorphic": "*",
    }

    def add_stock(self, quantity: int) -> None:
        """재고 증가 (Increase stock)."""
        self.stock_quantity += quantity

    def remove_stock(self, quantity: int) -> None:
        """재고 감소 - 재고가 0 미만이 되면 NotEnoughStockError.

        Decrease stock.

        Raises:
            NotEnoughStockError: 남은 재고보다 많이 빼려 할 때 (Not enough stock)
        """
        rest_stock: int = self.stock_quantity - quantity
        if rest_stock < 0:
            raise NotEnoughStockError("need more stock")
        self.stock_quantity = rest_stock


class Book(Item):
    """도서 (Book, dtype "B")."""

    author: Mapped[str | None] = mapped_column(String(255), nullable=True)
    isbn: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __mapper_args__ = {"polymorphic_identity": "B"}


class Album(Item):
    """음반 (Album, dtype "A")."""

    artist: Mapped[str | None] = mapped_column(String(255), nullable=True)
    etc: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __mapper_args__ = {"polymorphic_identity": "A"}


class Movie(Item):
    """영화 (Movie, dtype "M")."""

    director: Mapped[str | None] = mapped_column(String(255), nullable=True)
    actor: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __mapper_args__ = {"polymorphic_identity": "M"}


class Category(Base):
    """카테고리 모델 - 부모/자식 계층 구조.

    Category model forming a parent/child tree, linked to items many-to-many.
    """

    __tablename__ = "category"
    __json_ignore__ = frozenset({"items", "parent"})

    id: Mapped[int] = mapped_column("category_id", Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    parent_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("category.category_id"), nullable=True
    )

    items = relationship("Item", secondary=category_item, back_populates="categories")
    parent = relationship("Category", remote_side="Category.id", back_populates="child")
    child = relationship("Category", back_populates="parent")

    def add_child_category(self, child: "Category") -> None:
        """자식 카테고리 추가 - 양쪽 연관관계를 함께 설정.

        Attach a child category, wiring both sides of the association.
        """
        self.child.append(child)
        child.parent = self
