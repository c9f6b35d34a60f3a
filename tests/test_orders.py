"""주문 API 테스트 - 컬렉션 조회 전략별 응답, 페이징, SQL 실행 횟수.

Order API tests for the collection read strategies (V1 to V6).
"""

import pytest
from httpx import AsyncClient

from app.config import settings

EXPECTED_ORDERS = [
    {
        "name": "userA",
        "order_status": "ORDER",
        "address": {"city": "서울", "street": "1", "zipcode": "1111"},
        "order_items": [
            {"item_name": "JPA1 BOOK", "order_price": 10000, "count": 1},
            {"item_name": "JPA2 BOOK", "order_price": 20000, "count": 2},
        ],
    },
    {
        "name": "userB",
        "order_status": "ORDER",
        "address": {"city": "진주", "street": "2", "zipcode": "2222"},
        "order_items": [
            {"item_name": "SPRING1 BOOK", "order_price": 20000, "count": 3},
            {"item_name": "SPRING2 BOOK", "order_price": 40000, "count": 4},
        ],
    },
]


def _without_ids(orders: list[dict]) -> list[dict]:
    return [
        {key: value for key, value in order.items() if key not in ("order_id", "order_date")}
        for order in orders
    ]


@pytest.mark.parametrize("version", ["v2", "v3", "v3.1", "v4", "v5", "v6"])
async def test_orders_dto_shape(client: AsyncClient, sample_orders, version):
    """모든 DTO 버전이 같은 주문 트리를 반환한다 (중복 없음)."""
    res = await client.get(f"/api/{version}/orders")
    assert res.status_code == 200
    data = res.json()

    assert [o["order_id"] for o in data] == sample_orders
    assert _without_ids(data) == EXPECTED_ORDERS


async def test_orders_v1_exposes_entities(client: AsyncClient, sample_orders):
    """V1 - 주문상품과 상품까지 엔티티 그대로 노출."""
    res = await client.get("/api/v1/orders")
    assert res.status_code == 200
    data = res.json()

    assert len(data) == 2
    order_items = data[0]["order_items"]
    assert [oi["count"] for oi in order_items] == [1, 2]
    assert order_items[0]["item"]["name"] == "JPA1 BOOK"
    assert order_items[0]["item"]["dtype"] == "B"
    assert order_items[0]["item"]["stock_quantity"] == 99
    assert "order" not in order_items[0]
    assert "categories" not in order_items[0]["item"]


@pytest.mark.parametrize(
    ("version", "expected_queries"),
    [
        ("v1", 11),  # 주문 1 + 회원 2 + 배송 2 + 주문상품 2 + 상품 4
        ("v2", 11),
        ("v3", 1),  # 컬렉션 페치 조인
        ("v3.1", 3),  # 주문(+회원, 배송) 1 + 주문상품 IN 1 + 상품 IN 1
        ("v4", 3),  # 루트 1 + 주문마다 1
        ("v5", 2),  # 루트 1 + IN 1
        ("v6", 1),  # 평탄화 1
    ],
)
async def test_orders_query_count(
    client: AsyncClient, sample_orders, query_counter, version, expected_queries
):
    """조회 전략별 SQL 실행 횟수."""
    query_counter.reset()
    res = await client.get(f"/api/{version}/orders")
    assert res.status_code == 200
    assert query_counter.count == expected_queries


class TestOrdersPaging:
    """V3.1 페이징 테스트."""

    async def test_offset_limit(self, client: AsyncClient, sample_orders):
        """offset/limit 은 주문 단위로 적용된다."""
        res = await client.get("/api/v3.1/orders", params={"offset": 1, "limit": 1})
        assert res.status_code == 200
        data = res.json()
        assert [o["order_id"] for o in data] == [sample_orders[1]]
        assert len(data[0]["order_items"]) == 2

    async def test_offset_past_end(self, client: AsyncClient, sample_orders):
        """범위를 벗어난 offset 은 빈 목록."""
        res = await client.get("/api/v3.1/orders", params={"offset": 10})
        assert res.status_code == 200
        assert res.json() == []

    async def test_invalid_paging_params(self, client: AsyncClient):
        """음수 offset, 0 limit 은 422."""
        assert (await client.get("/api/v3.1/orders", params={"offset": -1})).status_code == 422
        assert (await client.get("/api/v3.1/orders", params={"limit": 0})).status_code == 422


async def test_v5_splits_in_clause_by_batch_size(
    client: AsyncClient, sample_orders, query_counter, monkeypatch
):
    """V5 - IN 절 크기가 DEFAULT_BATCH_FETCH_SIZE 를 넘으면 나눠서 조회."""
    monkeypatch.setattr(settings, "DEFAULT_BATCH_FETCH_SIZE", 1)

    query_counter.reset()
    res = await client.get("/api/v5/orders")
    assert res.status_code == 200
    assert query_counter.count == 3
    assert _without_ids(res.json()) == EXPECTED_ORDERS


async def test_order_item_query_dto_hides_order_id(client: AsyncClient, sample_orders):
    """V4~V6 주문상품에는 order_id 가 노출되지 않는다."""
    for version in ("v4", "v5", "v6"):
        data = (await client.get(f"/api/{version}/orders")).json()
        assert all("order_id" not in oi for o in data for oi in o["order_items"])


async def test_v3_1_batch_loads_by_batch_size(
    client: AsyncClient, sample_orders, query_counter, monkeypatch
):
    """V3.1 - 주문상품, 상품 IN 절도 DEFAULT_BATCH_FETCH_SIZE 단위로 나눠서 조회."""
    monkeypatch.setattr(settings, "DEFAULT_BATCH_FETCH_SIZE", 1)

    query_counter.reset()
    res = await client.get("/api/v3.1/orders")
    assert res.status_code == 200
    # 주문 1 + 주문상품 2 (주문 2건) + 상품 4 (상품 4종)
    assert query_counter.count == 7
    assert _without_ids(res.json()) == EXPECTED_ORDERS
