"""create_users_circuits_and_import_report

Revision ID: 3f1c0a9e7b21
Revises:
Create Date: 2026-10-18 09:12:40.118305

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '3f1c0a9e7b21'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

CIRCUIT_COLUMNS = (
    'state', 'site_name', 'ckt_id', 'parent', 'link_type', 'provider', 'z_loc',
    'rtr_name_z_loc', 'to_description', 'rtr_port_z_loc', 'interf_ip_z_loc', 'a_loc',
    'rtr_name_a_loc', 'rtr_port', 'interf_ip_a_loc', 'bw_mbps', 'single_isp',
    'ups_closet', 'router_ip',
)


def upgrade() -> None:
    op.create_table('users',
        sa.Column('username', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=50), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('id', sa.String(length=26), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_users_username'), 'users', ['username'], unique=True)

    op.create_table('circuits',
        sa.Column('id', sa.String(length=26), nullable=False),
        *[sa.Column(name, sa.Text(), server_default='', nullable=False) for name in CIRCUIT_COLUMNS],
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table('import_report',
        sa.Column('type', sa.String(length=20), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('file_name', sa.Text(), nullable=True),
        sa.Column('seen', sa.Boolean(), server_default=sa.text('false'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('id', sa.String(length=26), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_import_report_type'), 'import_report', ['type'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_import_report_type'), table_name='import_report')
    op.drop_table('import_report')
    op.drop_table('circuits')
    op.drop_index(op.f('ix_users_username'), table_name='users')
    op.drop_table('users')
