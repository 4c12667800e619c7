"""create high_score table

Revision ID: 1a2b3c4d5e6f
Revises:
Create Date: 2026-10-19 00:00:00
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '1a2b3c4d5e6f'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    if 'high_score' in insp.get_table_names():
        return
    op.create_table(
        'high_score',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=15), nullable=False),
        sa.Column('score', sa.Integer(), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('high_score') as batch_op:
        batch_op.create_index(batch_op.f('ix_high_score_score'), ['score'], unique=False)


def downgrade():
    with op.batch_alter_table('high_score') as batch_op:
        batch_op.drop_index(batch_op.f('ix_high_score_score'))
    op.drop_table('high_score')
