"""상품 관련 Pydantic 요청/응답 스키마 정의.

Item Pydantic request/response schema definitions.
A single payload covers all item kinds; the dtype discriminator picks
which kind-specific fields apply.
"""

from typing import Literal

from pydantic import BaseModel, Field


class ItemCreate(BaseModel):
    """상품 등록 요청 스키마.

    Item creation request schema.

    Attributes:
        dtype: 상품 구분 B=도서, A=음반, M=영화 (Item kind)
        name: 상품명 (Item name)
        price: 가격 (Unit price)
        stock_quantity: 재고 수량 (Initial stock)
        author/isbn: 도서 전용 (Book only)
        artist/etc: 음반 전용 (Album only)
        director/actor: 영화 전용 (Movie only)
    """

    dtype: Literal["B", "A", "M"] = "B"
    name: str = Field(min_length=1)
    price: int = Field(ge=0)
    stock_quantity: int = Field(ge=0)

    author: str | None = None
    isbn: str | None = None
    artist: str | None = None
    etc: str | None = None
    director: str | None = None
    actor: str | None = None


class ItemUpdate(BaseModel):
    """상품 수정 요청 스키마 - 변경 감지로 반영되는 필드만 받음.

    Item update request. Only these fields are changed, through the
    session's dirty checking rather than a merge of the whole entity.
    """

    name: str = Field(min_length=1)
    price: int = Field(ge=0)
    stock_quantity: int = Field(ge=0)


class ItemResponse(BaseModel):
    """상품 응답 스키마 (Item response; kind-specific fields may be null)."""

    id: int
    dtype: str
    name: str
    price: int
    stock_quantity: int

    author: str | None = None
    isbn: str | None = None
    artist: str | None = None
    etc: str | None = None
    director: str | None = None
    actor: str | None = None
