"""Create weather_queries

Revision ID: a1c3e5f7b9d2
Revises:
Create Date: 2026-10-18 12:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = 'a1c3e5f7b9d2'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'weather_queries',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('location', sa.Text(), nullable=False),
        sa.Column('date_from', sa.Text(), nullable=True),
        sa.Column('date_to', sa.Text(), nullable=True),
        sa.Column('weather_data', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('weather_queries', schema=None) as batch_op:
        batch_op.create_index('ix_weather_queries_created_at', ['created_at'], unique=False)


def downgrade():
    with op.batch_alter_table('weather_queries', schema=None) as batch_op:
        batch_op.drop_index('ix_weather_queries_created_at')

    op.drop_table('weather_queries')
