"""회원 관련 Pydantic 요청/응답 스키마 정의.

Member Pydantic request/response schema definitions.
V2 API 는 엔티티 대신 API 전용 스키마를 받고 돌려줍니다 (V2 endpoints never
bind or return entities, so entity changes cannot break the API contract).
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from app.models.member import Address

T = TypeVar("T")


class MemberEntityPayload(BaseModel):
    """V1 회원 등록 요청 - 엔티티 필드를 그대로 바인딩.

    V1 member registration body mirroring the entity's own fields.

    Attributes:
        name: 회원 이름, 빈 값 불가 (Member name, must not be empty)
        address: 회원 주소 (Member address, optional)
    """

    name: str = Field(min_length=1)  # @NotEmpty 와 같은 검증 (Must not be empty)
    address: Address | None = None


class CreateMemberRequest(BaseModel):
    """V2 회원 등록 요청 스키마.

    Attributes:
        name: 회원 이름, 빈 값 불가 (Member name, must not be empty)
    """

    name: str = Field(min_length=1)


class CreateMemberResponse(BaseModel):
    """회원 등록 응답 스키마 (Created member id)."""

    id: int


class UpdateMemberRequest(BaseModel):
    """회원 수정 요청 스키마 (Member rename request)."""

    name: str = Field(min_length=1)


class UpdateMemberResponse(BaseModel):
    """회원 수정 응답 스키마 (Updated member id and name)."""

    id: int
    name: str


class MemberDto(BaseModel):
    """회원 목록 응답 항목 - 필요한 필드만 노출 (Only the name is exposed)."""

    name: str


class Result(BaseModel, Generic[T]):
    """목록 응답 래퍼 - 배열을 직접 반환하지 않고 객체로 감싸 확장성 확보.

    List response wrapper. Wrapping the array in an object leaves room to add
    fields such as count without breaking clients.

    Attributes:
        count: 항목 수 (Number of items)
        data: 응답 데이터 (Payload)
    """

    count: int
    data: T
