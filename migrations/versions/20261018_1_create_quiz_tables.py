"""create quiz and question tables

Revision ID: 20261018_1
Revises: 
Create Date: 2026-10-18 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '20261018_1'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'quiz',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('title'),
    )
    op.create_table(
        'question',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('quiz_id', sa.Integer(), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('prompt', sa.String(length=500), nullable=False),
        sa.Column('candidates', sa.JSON(), nullable=False),
        sa.Column('correct_index', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['quiz_id'], ['quiz.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('question') as batch_op:
        batch_op.create_index('idx_question_quiz_position', ['quiz_id', 'position'], unique=False)


def downgrade():
    with op.batch_alter_table('question') as batch_op:
        batch_op.drop_index('idx_question_quiz_position')
    op.drop_table('question')
    op.drop_table('quiz')
