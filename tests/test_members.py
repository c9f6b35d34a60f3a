"""회원 API 테스트.

Member API tests - V1 (entity-shaped) and V2 (dedicated schema) endpoints.
"""

from httpx import AsyncClient

V1_URL = "/api/v1/members"
V2_URL = "/api/v2/members"


class TestMemberCreate:
    """회원 등록 테스트."""

    async def test_save_member_v1_with_address(self, client: AsyncClient):
        """V1 - 엔티티 필드(이름, 주소)를 그대로 받아 등록."""
        res = await client.post(V1_URL, json={
            "name": "hello",
            "address": {"city": "서울", "street": "강가", "zipcode": "123-123"},
        })
        assert res.status_code == 200
        assert isinstance(res.json()["id"], int)

        members = (await client.get(V1_URL)).json()
        assert members[0]["address"] == {"city": "서울", "street": "강가", "zipcode": "123-123"}

    async def test_save_member_v2(self, client: AsyncClient):
        """V2 - 이름만 받는 요청 스키마로 등록."""
        res = await client.post(V2_URL, json={"name": "hello"})
        assert res.status_code == 200
        assert res.json()["id"] > 0

    async def test_empty_name_rejected(self, client: AsyncClient):
        """빈 이름은 422."""
        res = await client.post(V2_URL, json={"name": ""})
        assert res.status_code == 422

        res = await client.post(V1_URL, json={})
        assert res.status_code == 422

    async def test_duplicate_member(self, client: AsyncClient, member):
        """같은 이름으로 가입하면 409."""
        res = await client.post(V2_URL, json={"name": "member1"})
        assert res.status_code == 409
        assert res.json()["detail"] == "이미 존재하는 회원입니다."


class TestMemberUpdate:
    """회원 수정 테스트."""

    async def test_update_member(self, client: AsyncClient, member):
        """이름 수정 후 id, name 반환."""
        res = await client.put(f"{V2_URL}/{member.id}", json={"name": "new-hello"})
        assert res.status_code == 200
        assert res.json() == {"id": member.id, "name": "new-hello"}

        listed = (await client.get(V2_URL)).json()
        assert listed["data"] == [{"name": "new-hello"}]

    async def test_update_nonexistent_member(self, client: AsyncClient):
        """존재하지 않는 회원 수정 시 404."""
        res = await client.put(f"{V2_URL}/9999", json={"name": "x"})
        assert res.status_code == 404


class TestMemberRead:
    """회원 조회 테스트."""

    async def test_members_v1_exposes_entity(self, client: AsyncClient, member):
        """V1 - 엔티티 필드가 그대로 노출되지만 역방향 orders 는 제외."""
        res = await client.get(V1_URL)
        assert res.status_code == 200
        data = res.json()
        assert len(data) == 1
        assert data[0]["id"] == member.id
        assert data[0]["name"] == "member1"
        assert data[0]["address"]["city"] == "서울"
        assert "orders" not in data[0]

    async def test_members_v2_wrapped_in_result(self, client: AsyncClient, member):
        """V2 - Result 로 감싸고 이름만 노출."""
        await client.post(V2_URL, json={"name": "member2"})

        res = await client.get(V2_URL)
        assert res.status_code == 200
        assert res.json() == {
            "count": 2,
            "data": [{"name": "member1"}, {"name": "member2"}],
        }
