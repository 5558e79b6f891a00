"""Initial schema: locations, semesters, course and non-class parents, meetings

Revision ID: 3a1d2f9c7b10
Revises:
Create Date: 2026-10-19 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '3a1d2f9c7b10'
down_revision = None
branch_labels = None
depends_on = None

TERM = sa.Enum('FALL', 'SPRING', name='term')
DAY = sa.Enum('MON', 'TUE', 'WED', 'THU', 'FRI', name='day')


def _audit_columns():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        'campuses',
        sa.Column('id', sa.UUID(), primary_key=True),
        sa.Column('name', sa.String(100), nullable=False, unique=True),
        *_audit_columns(),
    )
    op.create_table(
        'buildings',
        sa.Column('id', sa.UUID(), primary_key=True),
        sa.Column('name', sa.String(100), nullable=False, unique=True),
        sa.Column('campus_id', sa.UUID(), sa.ForeignKey('campuses.id', ondelete='RESTRICT'), nullable=False),
        *_audit_columns(),
    )
    op.create_table(
        'rooms',
        sa.Column('id', sa.UUID(), primary_key=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('capacity', sa.Integer(), nullable=True),
        sa.Column('building_id', sa.UUID(), sa.ForeignKey('buildings.id', ondelete='RESTRICT'), nullable=False),
        *_audit_columns(),
        sa.UniqueConstraint('building_id', 'name', name='uq_room_building_name'),
    )
    op.create_table(
        'semesters',
        sa.Column('id', sa.UUID(), primary_key=True),
        sa.Column('calendar_year', sa.Integer(), nullable=False),
        sa.Column('term', TERM, nullable=False),
        *_audit_columns(),
        sa.UniqueConstraint('calendar_year', 'term', name='uq_semester_year_term'),
    )
    op.create_table(
        'courses',
        sa.Column('id', sa.UUID(), primary_key=True),
        sa.Column('prefix', sa.String(20), nullable=False),
        sa.Column('number', sa.String(20), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        *_audit_columns(),
    )
    op.create_table(
        'course_instances',
        sa.Column('id', sa.UUID(), primary_key=True),
        sa.Column('course_id', sa.UUID(), sa.ForeignKey('courses.id', ondelete='CASCADE'), nullable=False),
        sa.Column('semester_id', sa.UUID(), sa.ForeignKey('semesters.id', ondelete='RESTRICT'), nullable=False),
        *_audit_columns(),
    )
    op.create_table(
        'non_class_parents',
        sa.Column('id', sa.UUID(), primary_key=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('contact_name', sa.String(255), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        *_audit_columns(),
    )
    op.create_table(
        'non_class_events',
        sa.Column('id', sa.UUID(), primary_key=True),
        sa.Column('non_class_parent_id', sa.UUID(), sa.ForeignKey('non_class_parents.id', ondelete='CASCADE'), nullable=False),
        sa.Column('semester_id', sa.UUID(), sa.ForeignKey('semesters.id', ondelete='RESTRICT'), nullable=False),
        *_audit_columns(),
    )
    op.create_table(
        'meetings',
        sa.Column('id', sa.UUID(), primary_key=True),
        sa.Column('day', DAY, nullable=False),
        sa.Column('start_time', sa.Time(timezone=False), nullable=False),
        sa.Column('end_time', sa.Time(timezone=False), nullable=False),
        sa.Column('room_id', sa.UUID(), sa.ForeignKey('rooms.id', ondelete='RESTRICT'), nullable=True),
        sa.Column('course_instance_id', sa.UUID(), sa.ForeignKey('course_instances.id', ondelete='CASCADE'), nullable=True),
        sa.Column('non_class_event_id', sa.UUID(), sa.ForeignKey('non_class_events.id', ondelete='CASCADE'), nullable=True),
        *_audit_columns(),
        sa.CheckConstraint('start_time < end_time', name='meetings_time_range_check'),
        sa.CheckConstraint(
            '(course_instance_id IS NULL) <> (non_class_event_id IS NULL)',
            name='meetings_single_parent_check',
        ),
    )
    op.create_index('ix_meetings_room_day', 'meetings', ['room_id', 'day'])


def downgrade() -> None:
    op.drop_index('ix_meetings_room_day', table_name='meetings')
    op.drop_table('meetings')
    op.drop_table('non_class_events')
    op.drop_table('non_class_parents')
    op.drop_table('course_instances')
    op.drop_table('courses')
    op.drop_table('semesters')
    op.drop_table('rooms')
    op.drop_table('buildings')
    op.drop_table('campuses')
    DAY.drop(op.get_bind(), checkfirst=True)
    TERM.drop(op.get_bind(), checkfirst=True)
