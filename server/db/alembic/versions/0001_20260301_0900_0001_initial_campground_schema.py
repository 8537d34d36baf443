"""Initial campground schema

Revision ID: 0001
Revises:
Create Date: 2026-03-01 09:00:00.000000

"""
from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade database schema."""
    # Create campsite_types table
    op.create_table('campsite_types',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('campsite_type_name', sa.String(length=100), nullable=False),
        sa.Column('fee_per_night', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('max_occupants', sa.Integer(), nullable=False),
        sa.CheckConstraint('fee_per_night >= 0', name='ck_campsite_type_fee_non_negative'),
        sa.CheckConstraint('max_occupants > 0', name='ck_campsite_type_max_occupants_positive'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('campsite_type_name')
    )

    # Create campsites table
    op.create_table('campsites',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('nickname', sa.String(length=255), nullable=False),
        sa.Column('image_url', sa.String(length=2048), nullable=True),
        sa.Column('campsite_type_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['campsite_type_id'], ['campsite_types.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_campsites_campsite_type_id'), 'campsites', ['campsite_type_id'], unique=False)

    # Create user_profiles table
    op.create_table('user_profiles',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('last_name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_user_profiles_email'), 'user_profiles', ['email'], unique=True)

    # Create reservations table
    op.create_table('reservations',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('campsite_id', sa.Integer(), nullable=False),
        sa.Column('user_profile_id', sa.Integer(), nullable=False),
        sa.Column('checkin_date', sa.Date(), nullable=False),
        sa.Column('checkout_date', sa.Date(), nullable=False),
        sa.CheckConstraint('checkout_date > checkin_date', name='ck_reservation_checkout_after_checkin'),
        sa.ForeignKeyConstraint(['campsite_id'], ['campsites.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_profile_id'], ['user_profiles.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_reservations_campsite_id'), 'reservations', ['campsite_id'], unique=False)
    op.create_index(op.f('ix_reservations_user_profile_id'), 'reservations', ['user_profile_id'], unique=False)
    op.create_index(op.f('ix_reservations_checkin_date'), 'reservations', ['checkin_date'], unique=False)


def downgrade() -> None:
    """Downgrade database schema."""
    op.drop_index(op.f('ix_reservations_checkin_date'), table_name='reservations')
    op.drop_index(op.f('ix_reservations_user_profile_id'), table_name='reservations')
    op.drop_index(op.f('ix_reservations_campsite_id'), table_name='reservations')
    op.drop_table('reservations')
    op.drop_index(op.f('ix_user_profiles_email'), table_name='user_profiles')
    op.drop_table('user_profiles')
    op.drop_index(op.f('ix_campsites_campsite_type_id'), table_name='campsites')
    op.drop_table('campsites')
    op.drop_table('campsite_types')
