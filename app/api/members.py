"""회원 API 라우터 - 엔티티 노출(V1)과 API 전용 스키마(V2) 비교.

Member API Router. V1 endpoints bind and return the entity itself; V2
endpoints use dedicated request/response schemas, so the entity can change
without breaking the API contract.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.member import Member
from app.schemas.member import (
    CreateMemberRequest,
    CreateMemberResponse,
    MemberDto,
    MemberEntityPayload,
    Result,
    UpdateMemberRequest,
    UpdateMemberResponse,
)
from app.services.member_service import member_service
from app.utils.serialization import entity_to_dict

router: APIRouter = APIRouter()


@router.post("/v1/members", response_model=CreateMemberResponse)
async def save_member_v1(
    data: MemberEntityPayload,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CreateMemberResponse:
    """V1. 요청 바디를 엔티티 필드 그대로 받아 회원 등록.

    Register a member from a body that mirrors the entity.
    """
    member: Member = Member(name=data.name, address=data.address)
    member_id: int = await member_service.join(db, member)
    await db.commit()
    return CreateMemberResponse(id=member_id)


@router.post("/v2/members", response_model=CreateMemberResponse)
async def save_member_v2(
    data: CreateMemberRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CreateMemberResponse:
    """V2. 별도 요청 스키마로 회원 등록 (Register via a dedicated request schema)."""
    member: Member = Member(name=data.name)
    member_id: int = await member_service.join(db, member)
    await db.commit()
    return CreateMemberResponse(id=member_id)


@router.put("/v2/members/{member_id}", response_model=UpdateMemberResponse)
async def update_member_v2(
    member_id: int,
    data: UpdateMemberRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UpdateMemberResponse:
    """V2. 회원 이름 수정 (Rename a member)."""
    member: Member = await member_service.update(db, member_id, data.name)
    await db.commit()
    return UpdateMemberResponse(id=member.id, name=member.name)


@router.get("/v1/members")
async def members_v1(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[dict[str, Any]]:
    """V1. 회원 엔티티 목록을 그대로 반환 (Raw entity list)."""
    members: list[Member] = await member_service.find_members(db)
    return [entity_to_dict(member) for member in members]


@router.get("/v2/members", response_model=Result[list[MemberDto]])
async def members_v2(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Result[list[MemberDto]]:
    """V2. 필요한 필드만 담은 DTO 목록을 Result 로 감싸 반환.

    Return only member names, wrapped in a Result object with a count.
    """
    members: list[Member] = await member_service.find_members(db)
    collect: list[MemberDto] = [MemberDto(name=m.name) for m in members]
    return Result(count=len(collect), data=collect)
