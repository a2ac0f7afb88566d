"""missionary store

Revision ID: 4f1c2a9b7d10
Revises:
Create Date: 2025-02-03 19:12:40.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '4f1c2a9b7d10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SCHEMA = 'heroes'


def _bookkeeping() -> list:
    return [
        sa.Column('date_created', sa.DateTime(timezone=True), server_default=sa.text('clock_timestamp()'), nullable=True),
        sa.Column('last_updated', sa.DateTime(timezone=True), server_default=sa.text('clock_timestamp()'), nullable=True),
        sa.Column('data_origin', sa.Text(), nullable=True),
    ]


def _child_key(table: str) -> list:
    return [
        sa.Column('id', sa.UUID(), server_default=sa.text('gen_random_uuid()'), nullable=False),
        sa.Column('missionary_id', sa.String(length=128), nullable=False),
        *_bookkeeping(),
        sa.ForeignKeyConstraint(['missionary_id'], [f'{SCHEMA}.missionaries.id'],
                                name=op.f(f'fk_{table}_missionary_id_missionaries'), ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name=op.f(f'pk_{table}')),
    ]


def upgrade() -> None:
    op.execute("CREATE EXTENSION IF NOT EXISTS pgcrypto;")

    op.create_table(
        'missionaries',
        sa.Column('id', sa.String(length=128), nullable=False),
        *_bookkeeping(),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('display_name', sa.String(length=255), nullable=False),
        sa.Column('birth_year', sa.Integer(), nullable=False),
        sa.Column('death_year', sa.Integer(), nullable=True),
        sa.Column('century', sa.Integer(), nullable=False),
        sa.Column('summary', sa.Text(), nullable=False),
        sa.Column('categories', postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column('achievements', postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column('locations', postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column('quiz', postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column('source', sa.String(length=64), nullable=True),
        sa.Column('source_url', sa.Text(), nullable=True),
        sa.Column('attribution', sa.Text(), nullable=True),
        sa.Column('last_modified', sa.DateTime(timezone=True), nullable=True),
        sa.Column('lang', sa.String(length=8), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_missionaries')),
        schema=SCHEMA
    )
    op.create_index('ix_missionaries_birth_year', 'missionaries', ['birth_year'], unique=False, schema=SCHEMA)
    op.create_index('ix_missionaries_century', 'missionaries', ['century'], unique=False, schema=SCHEMA)

    op.create_table(
        'biography_sections',
        *_child_key('biography_sections'),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('section_order', sa.Integer(), nullable=False),
        sa.UniqueConstraint('missionary_id', 'section_order', name='uq_biography_sections_missionary_order'),
        schema=SCHEMA
    )
    op.create_index('ix_biography_sections_missionary_id', 'biography_sections', ['missionary_id'],
                    unique=False, schema=SCHEMA)

    op.create_table(
        'timeline_events',
        *_child_key('timeline_events'),
        sa.Column('year', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('event_type', sa.String(length=64), nullable=True),
        sa.Column('significance', sa.Text(), nullable=True),
        sa.Column('location', sa.String(length=255), nullable=True),
        schema=SCHEMA
    )
    op.create_index('ix_timeline_events_missionary_id', 'timeline_events', ['missionary_id'],
                    unique=False, schema=SCHEMA)

    image_kind = postgresql.ENUM('portrait', 'ai_headshot', name='image_kind', schema=SCHEMA)
    image_kind.create(op.get_bind(), checkfirst=True)
    op.create_table(
        'missionary_images',
        *_child_key('missionary_images'),
        sa.Column('image_url', sa.Text(), nullable=False),
        sa.Column('image_type', postgresql.ENUM(name='image_kind', schema=SCHEMA, create_type=False), nullable=False),
        sa.Column('caption', sa.Text(), nullable=True),
        sa.Column('is_primary', sa.Boolean(), server_default=sa.text('false'), nullable=False),
        sa.UniqueConstraint('missionary_id', 'image_url', name='uq_missionary_images_missionary_url'),
        schema=SCHEMA
    )
    op.create_index('ix_missionary_images_missionary_id', 'missionary_images', ['missionary_id'],
                    unique=False, schema=SCHEMA)


def downgrade() -> None:
    op.drop_index('ix_missionary_images_missionary_id', table_name='missionary_images', schema=SCHEMA)
    op.drop_table('missionary_images', schema=SCHEMA)
    postgresql.ENUM(name='image_kind', schema=SCHEMA).drop(op.get_bind(), checkfirst=True)
    op.drop_index('ix_timeline_events_missionary_id', table_name='timeline_events', schema=SCHEMA)
    op.drop_table('timeline_events', schema=SCHEMA)
    op.drop_index('ix_biography_sections_missionary_id', table_name='biography_sections', schema=SCHEMA)
    op.drop_table('biography_sections', schema=SCHEMA)
    op.drop_index('ix_missionaries_century', table_name='missionaries', schema=SCHEMA)
    op.drop_index('ix_missionaries_birth_year', table_name='missionaries', schema=SCHEMA)
    op.drop_table('missionaries', schema=SCHEMA)
