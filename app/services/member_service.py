"""회원 서비스 - 회원 가입, 조회, 수정 비즈니스 로직.

Member Service, business logic for member registration, lookup and update.
Returns entities; the API layer decides whether to expose them (V1) or
convert them into response schemas (V2).
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.member import Member
from app.repositories.member_repository import member_repository
from app.utils.exceptions import DuplicateError, NotFoundError


class MemberService:
    """회원 관련 비즈니스 로직을 처리하는 서비스."""

    async def join(self, db: AsyncSession, member: Member) -> int:
        """회원 가입 - 중복 이름을 검증한 뒤 저장합니다.

        Register a member after checking that the name is not taken.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            member: 저장할 회원 엔티티 (Member to persist)

        Returns:
            int: 생성된 회원 ID (New member id)

        Raises:
            DuplicateError: 같은 이름의 회원이 이미 있을 때 (Name already taken)
        """
        await self._validate_duplicate_member(db, member)
        await member_repository.create(db, member)
        return member.id

    async def _validate_duplicate_member(self, db: AsyncSession, member: Member) -> None:
        find_members: list[Member] = await member_repository.find_by_name(db, member.name)
        if find_members:
            raise DuplicateError("이미 존재하는 회원입니다.")

    async def find_members(self, db: AsyncSession) -> list[Member]:
        """전체 회원 조회 (All members ordered by id)."""
        return list(await member_repository.get_all(db))

    async def find_one(self, db: AsyncSession, member_id: int) -> Member:
        """회원 단건 조회.

        Raises:
            NotFoundError: 회원이 없을 때 (Member not found)
        """
        member: Member | None = await member_repository.get_by_id(db, member_id)
        if member is None:
            raise NotFoundError("Member not found")
        return member

    async def update(self, db: AsyncSession, member_id: int, name: str) -> Member:
        """회원 이름 수정 - 영속 상태 엔티티를 변경하고 flush (변경 감지).

        Rename a member. The managed entity is modified in place and the
        session's dirty checking issues the UPDATE on flush.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            member_id: 회원 ID (Member id)
            name: 새 이름 (New name)

        Returns:
            Member: 수정된 회원 (Updated member)
        """
        member: Member = await self.find_one(db, member_id)
        member.name = name
        await db.flush()
        return member


# 싱글턴 인스턴스 - Singleton instance
member_service: MemberService = MemberService()
