"""주문 요약 API 테스트 - xToOne 조회 전략별 응답과 SQL 실행 횟수.

Simple order API tests. Every version returns the same orders; they differ
in how many SQL statements it takes.
"""

import pytest
from httpx import AsyncClient

USER_A = {
    "name": "userA",
    "order_status": "ORDER",
    "address": {"city": "서울", "street": "1", "zipcode": "1111"},
}
USER_B = {
    "name": "userB",
    "order_status": "ORDER",
    "address": {"city": "진주", "street": "2", "zipcode": "2222"},
}


def _summary(order: dict) -> dict:
    return {key: order[key] for key in ("name", "order_status", "address")}


@pytest.mark.parametrize("version", ["v2", "v3", "v4"])
async def test_simple_orders_dto_shape(client: AsyncClient, sample_orders, version):
    """DTO 버전은 모두 같은 모양의 응답을 돌려준다."""
    res = await client.get(f"/api/{version}/simple-orders")
    assert res.status_code == 200
    data = res.json()

    assert [o["order_id"] for o in data] == sample_orders
    assert [_summary(o) for o in data] == [USER_A, USER_B]
    assert all("order_date" in o for o in data)
    assert all("order_items" not in o for o in data)


async def test_simple_orders_v1_exposes_entities(client: AsyncClient, sample_orders):
    """V1 - 초기화한 member/delivery 는 노출, 초기화하지 않은 order_items 는 null."""
    res = await client.get("/api/v1/simple-orders")
    assert res.status_code == 200
    data = res.json()

    assert len(data) == 2
    first = data[0]
    assert first["id"] == sample_orders[0]
    assert first["status"] == "ORDER"
    assert first["member"]["name"] == "userA"
    assert first["delivery"]["address"]["city"] == "서울"
    assert first["order_items"] is None
    # 양방향 연관관계의 반대편은 직렬화하지 않음 (no infinite recursion)
    assert "orders" not in first["member"]
    assert "order" not in first["delivery"]


@pytest.mark.parametrize(
    ("version", "expected_queries"),
    [
        ("v1", 5),  # 주문 1 + 회원 2 + 배송 2
        ("v2", 5),  # 주문 1 + 회원 2 + 배송 2 (N + 1)
        ("v3", 1),  # 페치 조인
        ("v4", 1),  # DTO 직접 조회
    ],
)
async def test_simple_orders_query_count(
    client: AsyncClient, sample_orders, query_counter, version, expected_queries
):
    """조회 전략별 SQL 실행 횟수."""
    query_counter.reset()
    res = await client.get(f"/api/{version}/simple-orders")
    assert res.status_code == 200
    assert query_counter.count == expected_queries


async def test_simple_orders_empty(client: AsyncClient):
    """주문이 없으면 빈 목록."""
    for version in ("v1", "v2", "v3", "v4"):
        res = await client.get(f"/api/{version}/simple-orders")
        assert res.status_code == 200
        assert res.json() == []
