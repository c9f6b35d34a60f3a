"""테스트 인프라 - 인메모리 SQLite DB, 세션, httpx 클라이언트, 쿼리 카운터 픽스처.

Test infrastructure: in-memory SQLite engine, session, httpx client and a
SQL statement counter. Each test gets a fresh schema.
"""

from collections.abc import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models import *  # noqa: F401,F403 - register all models with metadata
from app.seed import insert_sample_data

# ---------------------------------------------------------------------------
# 테스트 DB 설정 - 연결 하나를 공유하는 인메모리 SQLite
# ---------------------------------------------------------------------------
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


class QueryCounter:
    """실행된 SQL 문을 기록하는 카운터 (Records executed SQL statements)."""

    def __init__(self) -> None:
        self.statements: list[str] = []

    @property
    def count(self) -> int:
        return len(self.statements)

    def reset(self) -> None:
        self.statements.clear()


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 매 테스트마다 스키마를 새로 생성합니다."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 - DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def query_counter(engine: AsyncEngine) -> Generator[QueryCounter, None, None]:
    """엔진에서 실행되는 SQL 문 수를 셉니다 (before_cursor_execute 이벤트)."""
    counter = QueryCounter()

    def _before_cursor_execute(conn, cursor, statement, parameters, context, executemany) -> None:
        counter.statements.append(statement)

    event.listen(engine.sync_engine, "before_cursor_execute", _before_cursor_execute)
    yield counter
    event.remove(engine.sync_engine, "before_cursor_execute", _before_cursor_execute)


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def sample_orders(db: AsyncSession) -> list[int]:
    """userA/userB 샘플 주문을 저장하고 세션을 비웁니다.

    Insert the sample orders, commit, then detach everything so that read
    strategies start from an empty identity map (as in a fresh request).

    Returns:
        list[int]: 주문 ID 목록 (Order ids, userA first)
    """
    orders = await insert_sample_data(db)
    await db.commit()
    order_ids = [order.id for order in orders]
    db.expunge_all()
    return order_ids


@pytest_asyncio.fixture
async def member(db: AsyncSession):
    """주소가 있는 테스트 회원을 생성합니다."""
    from app.models.member import Address, Member
    m = Member(name="member1", address=Address("서울", "강가", "123-123"))
    db.add(m)
    await db.flush()
    await db.commit()
    return m


@pytest_asyncio.fixture
async def book(db: AsyncSession):
    """재고 10개짜리 테스트 도서를 생성합니다."""
    from app.models.item import Book
    b = Book(name="시골 JPA", price=10000, stock_quantity=10, author="김영한", isbn="1234")
    db.add(b)
    await db.flush()
    await db.commit()
    return b
