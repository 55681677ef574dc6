"""Initial migration

Revision ID: 001
Revises: 
Create Date: 2026-01-15 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


reservation_status = sa.Enum(
    'confirmed', 'cancelled',
    name='reservation_status',
    create_constraint=True,
)


def upgrade() -> None:
    # Create reservations table
    op.create_table(
        'reservations',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('table_id', sa.Integer(), nullable=False),
        sa.Column('customer_name', sa.String(100), nullable=False),
        sa.Column('customer_email', sa.String(255), nullable=False),
        sa.Column('customer_phone', sa.String(20), nullable=False),
        sa.Column('guest_count', sa.Integer(), nullable=False),
        sa.Column('reservation_date', sa.Date(), nullable=False),
        sa.Column('slot_start_time', sa.Time(), nullable=False),
        sa.Column('slot_end_time', sa.Time(), nullable=False),
        sa.Column('status', reservation_status, nullable=False, server_default='confirmed'),
        sa.Column('special_requests', sa.Text()),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )

    # Create indexes
    op.create_index('ix_reservations_table_id', 'reservations', ['table_id'])
    op.create_index(
        'ix_reservations_date_start',
        'reservations',
        ['reservation_date', 'slot_start_time'],
    )
    op.create_index(
        'uq_reservations_confirmed_slot',
        'reservations',
        ['table_id', 'reservation_date', 'slot_start_time'],
        unique=True,
        postgresql_where=sa.text("status = 'confirmed'"),
        sqlite_where=sa.text("status = 'confirmed'"),
    )


def downgrade() -> None:
    op.drop_index('uq_reservations_confirmed_slot', table_name='reservations')
    op.drop_index('ix_reservations_date_start', table_name='reservations')
    op.drop_index('ix_reservations_table_id', table_name='reservations')
    op.drop_table('reservations')
    reservation_status.drop(op.get_bind(), checkfirst=True)
