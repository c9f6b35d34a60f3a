"""상품 API 테스트.

Item API tests - registration of every item kind, listing and update.
"""

from httpx import AsyncClient

URL = "/api/items"


class TestItemCreate:
    """상품 등록 테스트."""

    async def test_create_book(self, client: AsyncClient):
        """도서 등록 (dtype 기본값 B)."""
        res = await client.post(URL, json={
            "name": "JPA 프로그래밍",
            "price": 43000,
            "stock_quantity": 20,
            "author": "김영한",
            "isbn": "9788960777330",
        })
        assert res.status_code == 201
        data = res.json()
        assert data["dtype"] == "B"
        assert data["author"] == "김영한"
        assert data["artist"] is None

    async def test_create_album_and_movie(self, client: AsyncClient):
        """음반, 영화 등록."""
        album = await client.post(URL, json={
            "dtype": "A", "name": "앨범", "price": 15000, "stock_quantity": 5, "artist": "IU",
        })
        movie = await client.post(URL, json={
            "dtype": "M", "name": "영화", "price": 9000, "stock_quantity": 3,
            "director": "봉준호", "actor": "송강호",
        })
        assert album.status_code == 201
        assert album.json()["artist"] == "IU"
        assert movie.status_code == 201
        assert movie.json()["director"] == "봉준호"

        listed = (await client.get(URL)).json()
        assert [i["dtype"] for i in listed] == ["A", "M"]

    async def test_create_invalid_item(self, client: AsyncClient):
        """음수 가격, 알 수 없는 dtype 은 422."""
        res = await client.post(URL, json={"name": "x", "price": -1, "stock_quantity": 1})
        assert res.status_code == 422
        res = await client.post(URL, json={"dtype": "Z", "name": "x", "price": 1, "stock_quantity": 1})
        assert res.status_code == 422


class TestItemUpdate:
    """상품 수정 테스트."""

    async def test_update_item(self, client: AsyncClient, book):
        """이름, 가격, 재고만 바뀌고 도서 필드는 유지."""
        res = await client.put(f"{URL}/{book.id}", json={
            "name": "시골 JPA 2판",
            "price": 12000,
            "stock_quantity": 30,
        })
        assert res.status_code == 200
        data = res.json()
        assert data["name"] == "시골 JPA 2판"
        assert data["price"] == 12000
        assert data["stock_quantity"] == 30
        assert data["author"] == "김영한"

    async def test_get_nonexistent_item(self, client: AsyncClient):
        """존재하지 않는 상품 조회/수정 시 404."""
        assert (await client.get(f"{URL}/9999")).status_code == 404
        res = await client.put(f"{URL}/9999", json={"name": "x", "price": 1, "stock_quantity": 1})
        assert res.status_code == 404
