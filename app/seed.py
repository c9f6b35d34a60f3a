"""샘플 데이터 시드 스크립트 - 회원 2명과 각 회원의 주문 1건 생성.

Seed script, inserts the sample data every read strategy is demonstrated on.

Usage:
    python -m app.seed

또는 INIT_DB=true 로 서버를 띄우면 기동 시 자동 실행 (or start the server
with INIT_DB=true).

Creates:
    - userA (서울): JPA1 BOOK x1, JPA2 BOOK x2 주문
    - userB (진주): SPRING1 BOOK x3, SPRING2 BOOK x4 주문
"""

import asyncio

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base, async_session, engine
from app.models import Address, Book, Delivery, DeliveryStatus, Member, Order, OrderItem


def _create_member(name: str, city: str, street: str, zipcode: str) -> Member:
    return Member(name=name, address=Address(city, street, zipcode))


def _create_book(name: str, price: int, stock_quantity: int) -> Book:
    return Book(name=name, price=price, stock_quantity=stock_quantity)


def _create_delivery(member: Member) -> Delivery:
    address: Address = member.address
    return Delivery(
        address=Address(address.city, address.street, address.zipcode),
        status=DeliveryStatus.READY,
    )


async def insert_sample_data(db: AsyncSession) -> list[Order]:
    """userA, userB 와 각자의 주문을 저장합니다 (flush only, caller commits).

    Insert the two sample members with one two-line order each.

    Returns:
        list[Order]: 생성된 주문 2건 (The two created orders)
    """
    orders: list[Order] = []

    # userA - 서울, JPA 책 두 권
    member: Member = _create_member("userA", "서울", "1", "1111")
    book1: Book = _create_book("JPA1 BOOK", 10000, 100)
    book2: Book = _create_book("JPA2 BOOK", 20000, 100)
    order_item1: OrderItem = OrderItem.create_order_item(book1, 10000, 1)
    order_item2: OrderItem = OrderItem.create_order_item(book2, 20000, 2)
    orders.append(Order.create_order(member, _create_delivery(member), order_item1, order_item2))

    # userB - 진주, SPRING 책 두 권
    member = _create_member("userB", "진주", "2", "2222")
    book1 = _create_book("SPRING1 BOOK", 20000, 200)
    book2 = _create_book("SPRING2 BOOK", 40000, 300)
    order_item1 = OrderItem.create_order_item(book1, 20000, 3)
    order_item2 = OrderItem.create_order_item(book2, 40000, 4)
    orders.append(Order.create_order(member, _create_delivery(member), order_item1, order_item2))

    db.add_all(orders)
    await db.flush()
    return orders


async def seed() -> None:
    """데이터베이스를 샘플 데이터로 시드합니다.

    Create tables if they don't exist, then insert the sample data.

    Idempotent: 회원이 이미 있으면 건너뜁니다 (Skips if any member exists).
    """
    # 테이블 생성 - DDL 실행 (Create all tables from ORM metadata)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        result = await db.execute(select(Member).limit(1))
        if result.scalar_one_or_none():
            print("Already seeded. Skipping.")
            return

        orders: list[Order] = await insert_sample_data(db)
        await db.commit()
        print(f"Seeded: orders={[order.id for order in orders]}")


if __name__ == "__main__":
    asyncio.run(seed())
