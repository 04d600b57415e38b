"""create scores and proofs tables, seed the score ladder

Revision ID: 4a7c2e91b0d3
Revises:
Create Date: 2026-10-18 00:00:00
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '4a7c2e91b0d3'
down_revision = None
branch_labels = None
depends_on = None

# Snapshot of models.INITIAL_SCORES at this revision
SEED_SCORES = [
    131072, 65536, 32768, 16384, 8192, 4096, 2048, 1024,
    512, 256, 128, 64, 32, 16, 8, 4, 2,
]


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    existing_tables = set(insp.get_table_names())

    # Databases created by init_db() already carry both tables
    if 'scores' not in existing_tables:
        scores = op.create_table(
            'scores',
            sa.Column('score', sa.Integer(), autoincrement=False, nullable=False),
            sa.Column('count', sa.Integer(), nullable=False),
            sa.PrimaryKeyConstraint('score'),
        )
        op.bulk_insert(scores, [{'score': s, 'count': 0} for s in SEED_SCORES])

    if 'proofs' not in existing_tables:
        op.create_table(
            'proofs',
            sa.Column('proof_id', sa.String(length=255), nullable=False),
            sa.Column('proof', sa.Text(), nullable=True),
            sa.Column('score', sa.Integer(), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=False),
            sa.PrimaryKeyConstraint('proof_id'),
        )
        op.create_index('ix_proofs_created_at', 'proofs', ['created_at'], unique=False)


def downgrade():
    op.drop_index('ix_proofs_created_at', table_name='proofs')
    op.drop_table('proofs')
    op.drop_table('scores')
