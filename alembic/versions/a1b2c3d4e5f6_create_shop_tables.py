"""create_shop_tables

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-16 10:00:00.000000

쇼핑몰 기본 테이블 생성: member, delivery, orders, item, order_item,
category, category_item.
Create the shop schema.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a1b2c3d4e5f6'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # member - 회원 (주소는 임베디드 컬럼)
    op.create_table(
        'member',
        sa.Column('member_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('city', sa.String(255), nullable=True),
        sa.Column('street', sa.String(255), nullable=True),
        sa.Column('zipcode', sa.String(20), nullable=True),
    )

    # delivery - 배송 (주문과 일대일)
    op.create_table(
        'delivery',
        sa.Column('delivery_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('city', sa.String(255), nullable=True),
        sa.Column('street', sa.String(255), nullable=True),
        sa.Column('zipcode', sa.String(20), nullable=True),
        sa.Column('status', sa.String(20), nullable=True),
    )

    # orders - 주문 ("order" 는 예약어)
    op.create_table(
        'orders',
        sa.Column('order_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('member_id', sa.Integer(), sa.ForeignKey('member.member_id'), nullable=False),
        sa.Column('delivery_id', sa.Integer(), sa.ForeignKey('delivery.delivery_id'), nullable=True, unique=True),
        sa.Column('order_date', sa.DateTime(), nullable=False),
        sa.Column('status', sa.String(20), nullable=False),
    )
    op.create_index('ix_orders_member', 'orders', ['member_id'])

    # item - 상품 단일 테이블 (dtype: B=도서, A=음반, M=영화)
    op.create_table(
        'item',
        sa.Column('item_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('dtype', sa.String(31), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('price', sa.Integer(), nullable=False),
        sa.Column('stock_quantity', sa.Integer(), nullable=False),
        sa.Column('author', sa.String(255), nullable=True),
        sa.Column('isbn', sa.String(255), nullable=True),
        sa.Column('artist', sa.String(255), nullable=True),
        sa.Column('etc', sa.String(255), nullable=True),
        sa.Column('director', sa.String(255), nullable=True),
        sa.Column('actor', sa.String(255), nullable=True),
    )

    # order_item - 주문상품
    op.create_table(
        'order_item',
        sa.Column('order_item_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('item_id', sa.Integer(), sa.ForeignKey('item.item_id'), nullable=False),
        sa.Column('order_id', sa.Integer(), sa.ForeignKey('orders.order_id'), nullable=False),
        sa.Column('order_price', sa.Integer(), nullable=False),
        sa.Column('count', sa.Integer(), nullable=False),
    )
    # 컬렉션 IN 조회용 인덱스 - Index used by order_id IN (...) lookups
    op.create_index('ix_order_item_order', 'order_item', ['order_id'])

    # category - 카테고리 계층
    op.create_table(
        'category',
        sa.Column('category_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('parent_id', sa.Integer(), sa.ForeignKey('category.category_id'), nullable=True),
    )

    # category_item - 카테고리-상품 다대다 연결
    op.create_table(
        'category_item',
        sa.Column('category_id', sa.Integer(), sa.ForeignKey('category.category_id'), primary_key=True),
        sa.Column('item_id', sa.Integer(), sa.ForeignKey('item.item_id'), primary_key=True),
    )


def downgrade() -> None:
    op.drop_table('category_item')
    op.drop_table('category')
    op.drop_index('ix_order_item_order', table_name='order_item')
    op.drop_table('order_item')
    op.drop_table('item')
    op.drop_index('ix_orders_member', table_name='orders')
    op.drop_table('orders')
    op.drop_table('delivery')
    op.drop_table('member')
