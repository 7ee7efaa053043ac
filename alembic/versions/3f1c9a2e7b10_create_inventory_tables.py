"""create_inventory_tables

Revision ID: 3f1c9a2e7b10
Revises:
Create Date: 2026-10-19 10:12:41.508113

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a2e7b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'brands',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=600), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name', name='uq_brands_name'),
    )
    # Gender is a VARCHAR with a CHECK constraint rather than a native enum
    op.create_table(
        'categories',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column(
            'gender',
            sa.Enum(
                'mens', 'womens', 'kids', 'unisex',
                name='category_gender',
                native_enum=False,
                create_constraint=True,
                length=10,
            ),
            nullable=False,
        ),
        sa.Column('style', sa.String(length=600), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('gender', 'style', name='uq_categories_gender_style'),
    )
    op.create_table(
        'shoes',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=600), nullable=False),
        sa.Column('brand_id', sa.String(length=36), nullable=False),
        sa.Column('category_id', sa.String(length=36), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(['brand_id'], ['brands.id'], ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['category_id'], ['categories.id'], ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name', 'brand_id', name='uq_shoes_name_brand'),
    )
    op.create_index('ix_shoes_brand_id', 'shoes', ['brand_id'])
    op.create_index('ix_shoes_category_id', 'shoes', ['category_id'])
    op.create_table(
        'skus',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('shoe_id', sa.String(length=36), nullable=False),
        sa.Column('color', sa.String(length=300), nullable=False),
        sa.Column('size', sa.Integer(), nullable=False),
        sa.Column('price', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('qty', sa.Integer(), nullable=False),
        sa.CheckConstraint('size BETWEEN 1 AND 99', name='ck_skus_size_range'),
        sa.CheckConstraint('price >= 0', name='ck_skus_price_non_negative'),
        sa.CheckConstraint('qty >= 0', name='ck_skus_qty_non_negative'),
        sa.ForeignKeyConstraint(['shoe_id'], ['shoes.id'], ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('shoe_id', 'color', 'size', name='uq_skus_shoe_color_size'),
    )
    op.create_index('ix_skus_shoe_id', 'skus', ['shoe_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_skus_shoe_id', table_name='skus')
    op.drop_table('skus')
    op.drop_index('ix_shoes_category_id', table_name='shoes')
    op.drop_index('ix_shoes_brand_id', table_name='shoes')
    op.drop_table('shoes')
    op.drop_table('categories')
    op.drop_table('brands')
