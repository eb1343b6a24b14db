"""initial schema: providers, routes, schedules, bookings, popular routes, offers

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa

revision = '0001_initial'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'transport_providers',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('type', sa.String(length=12), nullable=False),
        sa.Column('logo_url', sa.String(length=512), nullable=True),
        sa.Column('contact_info', sa.String(length=120), nullable=True),
        sa.Column('rating', sa.Float(), nullable=True),
    )
    op.create_index('ix_transport_providers_type', 'transport_providers', ['type'])

    op.create_table(
        'routes',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('provider_id', sa.Integer(), sa.ForeignKey('transport_providers.id'), nullable=False),
        sa.Column('source', sa.String(length=120), nullable=False),
        sa.Column('destination', sa.String(length=120), nullable=False),
        sa.Column('duration', sa.Integer(), nullable=False),
        sa.Column('distance', sa.Integer(), nullable=True),
        sa.Column('stops_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('route_number', sa.String(length=40), nullable=True),
    )
    op.create_index('ix_routes_provider_id', 'routes', ['provider_id'])
    op.create_index('ix_routes_source', 'routes', ['source'])
    op.create_index('ix_routes_destination', 'routes', ['destination'])

    op.create_table(
        'schedules',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('route_id', sa.Integer(), sa.ForeignKey('routes.id'), nullable=False),
        sa.Column('departure_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('arrival_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('fare_amount', sa.Integer(), nullable=False),
        sa.Column('available_seats', sa.Integer(), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='active'),
        sa.Column('vehicle_id', sa.String(length=40), nullable=True),
        sa.CheckConstraint('available_seats >= 0', name='ck_schedule_available_seats_non_negative'),
    )
    op.create_index('ix_schedules_route_id', 'schedules', ['route_id'])
    op.create_index('ix_schedules_departure_time', 'schedules', ['departure_time'])

    op.create_table(
        'bookings',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer(), nullable=True),
        sa.Column('schedule_id', sa.Integer(), sa.ForeignKey('schedules.id'), nullable=False),
        sa.Column('booking_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('passenger_name', sa.String(length=200), nullable=False),
        sa.Column('passenger_phone', sa.String(length=40), nullable=False),
        sa.Column('passenger_email', sa.String(length=320), nullable=True),
        sa.Column('seat_number', sa.String(length=10), nullable=False),
        sa.Column('total_amount', sa.Integer(), nullable=False),
        sa.Column('status', sa.String(length=30), nullable=False, server_default='confirmed'),
        sa.Column('payment_method', sa.String(length=40), nullable=True),
    )
    op.create_index('ix_bookings_user_id', 'bookings', ['user_id'])
    op.create_index('ix_bookings_schedule_id', 'bookings', ['schedule_id'])

    op.create_table(
        'popular_routes',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('route_id', sa.Integer(), sa.ForeignKey('routes.id'), nullable=False),
        sa.Column('schedule_id', sa.Integer(), sa.ForeignKey('schedules.id'), nullable=False),
        sa.Column('count', sa.Integer(), nullable=False, server_default='0'),
    )
    op.create_index('ix_popular_routes_route_id', 'popular_routes', ['route_id'])
    op.create_index('ix_popular_routes_schedule_id', 'popular_routes', ['schedule_id'])

    op.create_table(
        'offers',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('discount', sa.Integer(), nullable=True),
        sa.Column('valid_until', sa.DateTime(timezone=True), nullable=True),
        sa.Column('image_url', sa.String(length=512), nullable=True),
        sa.Column('applicable_types', sa.JSON(), nullable=False),
    )


def downgrade():
    op.drop_table('offers')
    op.drop_table('popular_routes')
    op.drop_table('bookings')
    op.drop_table('schedules')
    op.drop_table('routes')
    op.drop_table('transport_providers')
