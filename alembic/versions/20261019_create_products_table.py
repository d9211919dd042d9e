"""create_products_table

Revision ID: 001_create_products
Revises:
Create Date: 2026-10-19

Creates the products table. Prices are fixed-point with two fractional
digits; both price and quantity are guarded by check constraints. On SQLite
the primary key uses AUTOINCREMENT so deleted ids are not reused.

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = '001_create_products'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'products',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column(
            'created_at',
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            'updated_at',
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.CheckConstraint('price >= 0', name='chk_product_price_non_negative'),
        sa.CheckConstraint('quantity >= 0', name='chk_product_quantity_non_negative'),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    op.drop_table('products')
