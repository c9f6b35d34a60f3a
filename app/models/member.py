"""회원 및 주소 관련 SQLAlchemy ORM 모델 정의.

Member and Address SQLAlchemy ORM model definitions.

Tables:
    - member: 회원 (Shop members)
"""

from dataclasses import dataclass

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, composite, mapped_column, relationship

from app.database import Base


@dataclass
class Address:
    """주소 값 타입 - 회원과 배송에 임베디드 컬럼으로 매핑.

    Address value type, embedded as city/street/zipcode columns
    into both the member and delivery tables.
    """

    city: str | None = None
    street: str | None = None
    zipcode: str | None = None


class Member(Base):
    """회원 모델.

    Member model. A member places many orders; the orders collection is the
    inverse side of Order.member and is never serialized.

    Attributes:
        id: 회원 식별자 (Member identifier, column member_id)
        name: 회원 이름 (Member name)
        address: 회원 주소 (Embedded address)

    Relationships:
        orders: 회원의 주문 목록 (Orders placed by this member, lazy)
    """

    __tablename__ = "member"
    # 양방향 연관관계 중 한쪽은 직렬화에서 제외 (JSON ignore for the inverse side)
    __json_ignore__ = frozenset({"orders"})

    id: Mapped[int] = mapped_column("member_id", Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[Address] = composite(
        mapped_column("city", String(255), nullable=True),
        mapped_column("street", String(255), nullable=True),
        mapped_column("zipcode", String(20), nullable=True),
    )

    orders = relationship("Order", back_populates="member")
