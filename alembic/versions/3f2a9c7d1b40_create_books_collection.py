"""Create books collection

Revision ID: 3f2a9c7d1b40
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from bookshelf.config import get_settings


# revision identifiers, used by Alembic.
revision: str = '3f2a9c7d1b40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

collection = get_settings().books_collection


def upgrade() -> None:
    op.create_table(collection,
        sa.Column('id', sa.String(), nullable=False, comment='Service-assigned unique identifier'),
        sa.Column('name', sa.Text(), nullable=False, comment='Book title'),
        sa.Column('author', sa.Text(), nullable=False, comment='Author name'),
        sa.Column('year', sa.Text(), nullable=False, comment='Publication year as free text'),
        sa.PrimaryKeyConstraint('id')
    )


def downgrade() -> None:
    op.drop_table(collection)
