"""create proofs and admins tables

Revision ID: 3a9e1f04b7c2
Revises:
Create Date: 2025-10-02 14:11:37.208519

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3a9e1f04b7c2'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'proofs',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('entryType', sa.String(), nullable=False),
        sa.Column('userSubmitted', sa.String(), nullable=False),
        sa.Column('proofName', sa.String(), nullable=False),
        sa.Column('proofType', sa.String(), nullable=False),
        sa.Column('premise', sa.Text(), nullable=False),
        sa.Column('logic', sa.Text(), nullable=False),
        sa.Column('rules', sa.Text(), nullable=False),
        sa.Column('proofCompleted', sa.String(), nullable=False),
        sa.Column('timeSubmitted', sa.DateTime(timezone=True), nullable=False),
        sa.Column('conclusion', sa.Text(), nullable=False),
        sa.Column('repoProblem', sa.String(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('idx_user_proof', 'proofs', ['userSubmitted', 'proofName'], unique=True)
    op.create_table(
        'admins',
        sa.Column('email', sa.String(), nullable=False),
        sa.PrimaryKeyConstraint('email')
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('admins')
    op.drop_index('idx_user_proof', table_name='proofs')
    op.drop_table('proofs')
