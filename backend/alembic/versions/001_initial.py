"""Job result tables

Revision ID: 001_initial
Revises: 
Create Date: 2026-10-18 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('job_result',
    sa.Column('job_id', sa.String(length=50), nullable=False),
    sa.Column('job_name', sa.String(length=100), nullable=False),
    sa.Column('username', sa.String(length=50), nullable=False),
    sa.Column('start_time', sa.DateTime(), nullable=True),
    sa.Column('analysis_time', sa.DateTime(), nullable=False),
    sa.Column('severity', sa.Integer(), nullable=False),
    sa.Column('job_type', sa.String(length=20), nullable=False),
    sa.Column('url', sa.String(length=200), nullable=False),
    sa.Column('cluster', sa.String(length=100), nullable=True),
    sa.Column('job_exec_url', sa.String(length=200), nullable=True),
    sa.Column('job_url', sa.String(length=200), nullable=True),
    sa.Column('flow_exec_url', sa.String(length=200), nullable=True),
    sa.Column('flow_url', sa.String(length=200), nullable=True),
    sa.PrimaryKeyConstraint('job_id')
    )
    op.create_index('ix_job_result_username', 'job_result', ['username'], unique=False)
    op.create_index('ix_job_result_analysis_time', 'job_result', ['analysis_time'], unique=False)
    op.create_index('ix_job_result_job_exec_url', 'job_result', ['job_exec_url'], unique=False)
    op.create_index('ix_job_result_job_url', 'job_result', ['job_url'], unique=False)
    op.create_index('ix_job_result_flow_exec_url', 'job_result', ['flow_exec_url'], unique=False)

    op.create_table('job_heuristic_result',
    sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
    sa.Column('job_id', sa.String(length=50), nullable=False),
    sa.Column('analysis_name', sa.String(length=128), nullable=False),
    sa.Column('severity', sa.Integer(), nullable=False),
    sa.Column('data', sa.JSON(), nullable=True),
    sa.ForeignKeyConstraint(['job_id'], ['job_result.job_id'], ),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_job_heuristic_result_job_id', 'job_heuristic_result', ['job_id'], unique=False)
    op.create_index(
        'ix_job_heuristic_result_analysis_severity',
        'job_heuristic_result',
        ['analysis_name', 'severity'],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index('ix_job_heuristic_result_analysis_severity', table_name='job_heuristic_result')
    op.drop_index('ix_job_heuristic_result_job_id', table_name='job_heuristic_result')
    op.drop_table('job_heuristic_result')
    op.drop_index('ix_job_result_flow_exec_url', table_name='job_result')
    op.drop_index('ix_job_result_job_url', table_name='job_result')
    op.drop_index('ix_job_result_job_exec_url', table_name='job_result')
    op.drop_index('ix_job_result_analysis_time', table_name='job_result')
    op.drop_index('ix_job_result_username', table_name='job_result')
    op.drop_table('job_result')
