"""주문 요약 조회 전용 레포지토리 - DTO 로 직접 조회.

Order summary query repository. Projects straight into
OrderSimpleQueryDto from one joined query, selecting only the columns the
response needs. Fast, but the query is shaped for one API response.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.member import Member
from app.models.order import Delivery, Order
from app.schemas.order_query import OrderSimpleQueryDto


class OrderSimpleQueryRepository:
    """화면/API 에 맞춘 주문 요약 조회 쿼리."""

    async def find_order_dtos(self, db: AsyncSession) -> list[OrderSimpleQueryDto]:
        """주문 요약을 쿼리 1번으로 조회합니다.

        Retrieve order summaries in a single query.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)

        Returns:
            list[OrderSimpleQueryDto]: 주문 요약 목록 (Order summaries by id)
        """
        query: Select = (
            select(Order.id, Member.name, Order.order_date, Order.status, Delivery.address)
            .join(Order.member)
            .join(Order.delivery)
            .order_by(Order.id)
        )
        result = await db.execute(query)
        return [
            OrderSimpleQueryDto(
                order_id=order_id,
                name=name,
                order_date=order_date,
                order_status=status,
                address=address,
            )
            for order_id, name, order_date, status, address in result.all()
        ]


# 싱글턴 인스턴스 - Singleton instance
order_simple_query_repository: OrderSimpleQueryRepository = OrderSimpleQueryRepository()
