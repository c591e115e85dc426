"""Create herd lifecycle tables

Revision ID: 3f1c9e2a7b40
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9e2a7b40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps(with_updated: bool = False) -> list[sa.Column]:
    cols = [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    ]
    if with_updated:
        cols.append(
            sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False)
        )
    return cols


def upgrade() -> None:
    """Create registry, reproduction, calving and lactation tables."""

    # --- pens ---
    op.create_table(
        'pens',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('farm_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('type', sa.String(length=32), nullable=True),
        sa.Column('description', sa.String(length=1024), nullable=True),
        sa.Column('active', sa.Boolean(), server_default='true', nullable=False),
        *_timestamps(with_updated=True),
        sa.PrimaryKeyConstraint('id', name='pk_pens'),
    )
    op.create_index('ix_pens_farm_id', 'pens', ['farm_id'], unique=False)

    # --- animals ---
    op.create_table(
        'animals',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('farm_id', sa.Uuid(), nullable=False),
        sa.Column('identification', sa.String(length=128), nullable=False),
        sa.Column('breed', sa.String(length=255), nullable=True),
        sa.Column('birth_date', sa.Date(), nullable=True),
        sa.Column('sex', sa.String(length=1), nullable=True),
        sa.Column('health_status', sa.String(length=32), nullable=True),
        sa.Column('category', sa.String(length=32), nullable=True),
        sa.Column('reproductive_status', sa.String(length=32), nullable=True),
        sa.Column('mother_id', sa.Uuid(), nullable=True),
        sa.Column('sire_info', sa.String(length=255), nullable=True),
        sa.Column('current_pen_id', sa.Uuid(), nullable=True),
        sa.Column('birth_weight', sa.Float(), nullable=True),
        sa.Column('entry_date', sa.Date(), nullable=True),
        sa.Column('exit_date', sa.Date(), nullable=True),
        sa.Column('exit_reason', sa.String(length=32), nullable=True),
        sa.Column('acquisition_origin', sa.String(length=32), nullable=True),
        *_timestamps(with_updated=True),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
        sa.ForeignKeyConstraint(['current_pen_id'], ['pens.id'], name='fk_animals_current_pen_id_pens'),
        sa.PrimaryKeyConstraint('id', name='pk_animals'),
        sa.UniqueConstraint('identification', name='uq_animals_identification'),
    )
    op.create_index('ix_animals_farm_id', 'animals', ['farm_id'], unique=False)
    op.create_index('ix_animals_farm_category', 'animals', ['farm_id', 'category'], unique=False)
    op.create_index(
        'ix_animals_farm_reproductive_status', 'animals', ['farm_id', 'reproductive_status'],
        unique=False,
    )

    # --- pen_movements ---
    op.create_table(
        'pen_movements',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('farm_id', sa.Uuid(), nullable=False),
        sa.Column('animal_id', sa.Uuid(), nullable=False),
        sa.Column('origin_pen_id', sa.Uuid(), nullable=True),
        sa.Column('destination_pen_id', sa.Uuid(), nullable=False),
        sa.Column('moved_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('reason', sa.String(length=512), nullable=True),
        sa.Column('moved_by', sa.Uuid(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['animal_id'], ['animals.id'], name='fk_pen_movements_animal_id_animals'),
        sa.ForeignKeyConstraint(['origin_pen_id'], ['pens.id'], name='fk_pen_movements_origin_pen_id_pens'),
        sa.ForeignKeyConstraint(
            ['destination_pen_id'], ['pens.id'], name='fk_pen_movements_destination_pen_id_pens'
        ),
        sa.PrimaryKeyConstraint('id', name='pk_pen_movements'),
    )
    op.create_index('ix_pen_movements_farm_id', 'pen_movements', ['farm_id'], unique=False)
    op.create_index('ix_pen_movements_animal_id', 'pen_movements', ['animal_id'], unique=False)

    # --- estrus_events ---
    op.create_table(
        'estrus_events',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('farm_id', sa.Uuid(), nullable=False),
        sa.Column('animal_id', sa.Uuid(), nullable=False),
        sa.Column('detected_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('detection_method', sa.String(length=16), nullable=True),
        sa.Column('intensity', sa.String(length=16), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('recorded_by', sa.Uuid(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['animal_id'], ['animals.id'], name='fk_estrus_events_animal_id_animals'),
        sa.PrimaryKeyConstraint('id', name='pk_estrus_events'),
    )
    op.create_index(
        'ix_estrus_events_farm_animal_detected', 'estrus_events',
        ['farm_id', 'animal_id', 'detected_at'], unique=False,
    )

    # --- iatf_protocols ---
    op.create_table(
        'iatf_protocols',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('farm_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('duration_days', sa.Integer(), nullable=True),
        sa.Column('active', sa.Boolean(), server_default='true', nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id', name='pk_iatf_protocols'),
    )
    op.create_index('ix_iatf_protocols_farm_id', 'iatf_protocols', ['farm_id'], unique=False)

    # --- breedings ---
    op.create_table(
        'breedings',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('farm_id', sa.Uuid(), nullable=False),
        sa.Column('animal_id', sa.Uuid(), nullable=False),
        sa.Column('type', sa.String(length=16), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('estrus_id', sa.Uuid(), nullable=True),
        sa.Column('sire_animal_id', sa.Uuid(), nullable=True),
        sa.Column('sire_info', sa.String(length=255), nullable=True),
        sa.Column('semen_batch', sa.String(length=128), nullable=True),
        sa.Column('technician', sa.String(length=255), nullable=True),
        sa.Column('protocol_id', sa.Uuid(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(with_updated=True),
        sa.ForeignKeyConstraint(['animal_id'], ['animals.id'], name='fk_breedings_animal_id_animals'),
        sa.ForeignKeyConstraint(['estrus_id'], ['estrus_events.id'], name='fk_breedings_estrus_id_estrus_events'),
        sa.ForeignKeyConstraint(['sire_animal_id'], ['animals.id'], name='fk_breedings_sire_animal_id_animals'),
        sa.ForeignKeyConstraint(['protocol_id'], ['iatf_protocols.id'], name='fk_breedings_protocol_id_iatf_protocols'),
        sa.PrimaryKeyConstraint('id', name='pk_breedings'),
    )
    op.create_index(
        'ix_breedings_farm_animal_date', 'breedings', ['farm_id', 'animal_id', 'date'], unique=False
    )
    op.create_index('ix_breedings_farm_sire', 'breedings', ['farm_id', 'sire_animal_id'], unique=False)

    # --- pregnancy_diagnoses ---
    op.create_table(
        'pregnancy_diagnoses',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('farm_id', sa.Uuid(), nullable=False),
        sa.Column('animal_id', sa.Uuid(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('result', sa.String(length=16), nullable=False),
        sa.Column('breeding_id', sa.Uuid(), nullable=True),
        sa.Column('estimated_days', sa.Integer(), nullable=True),
        sa.Column('method', sa.String(length=16), nullable=True),
        sa.Column('veterinarian', sa.String(length=255), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ['animal_id'], ['animals.id'], name='fk_pregnancy_diagnoses_animal_id_animals'
        ),
        sa.PrimaryKeyConstraint('id', name='pk_pregnancy_diagnoses'),
    )
    op.create_index(
        'ix_pregnancy_diagnoses_farm_animal', 'pregnancy_diagnoses', ['farm_id', 'animal_id'],
        unique=False,
    )

    # --- pregnancies ---
    op.create_table(
        'pregnancies',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('farm_id', sa.Uuid(), nullable=False),
        sa.Column('animal_id', sa.Uuid(), nullable=False),
        sa.Column('breeding_id', sa.Uuid(), nullable=False),
        sa.Column('confirmation_date', sa.Date(), nullable=False),
        sa.Column('due_date', sa.Date(), nullable=False),
        sa.Column('status', sa.String(length=16), nullable=False, server_default='CONFIRMED'),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(with_updated=True),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
        sa.ForeignKeyConstraint(['animal_id'], ['animals.id'], name='fk_pregnancies_animal_id_animals'),
        sa.ForeignKeyConstraint(['breeding_id'], ['breedings.id'], name='fk_pregnancies_breeding_id_breedings'),
        sa.PrimaryKeyConstraint('id', name='pk_pregnancies'),
    )
    op.create_index('ix_pregnancies_farm_animal', 'pregnancies', ['farm_id', 'animal_id'], unique=False)
    op.create_index('ix_pregnancies_farm_status', 'pregnancies', ['farm_id', 'status'], unique=False)

    # --- calvings ---
    op.create_table(
        'calvings',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('farm_id', sa.Uuid(), nullable=False),
        sa.Column('animal_id', sa.Uuid(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('offspring_count', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('pregnancy_id', sa.Uuid(), nullable=True),
        sa.Column('type', sa.String(length=16), nullable=True),
        sa.Column('complications', sa.Text(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['animal_id'], ['animals.id'], name='fk_calvings_animal_id_animals'),
        sa.PrimaryKeyConstraint('id', name='pk_calvings'),
    )
    op.create_index(
        'ix_calvings_farm_animal_date', 'calvings', ['farm_id', 'animal_id', 'date'], unique=False
    )

    # --- offspring ---
    op.create_table(
        'offspring',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('calving_id', sa.Uuid(), nullable=False),
        sa.Column('animal_id', sa.Uuid(), nullable=True),
        sa.Column('sex', sa.String(length=1), nullable=False),
        sa.Column('condition', sa.String(length=16), nullable=False),
        sa.Column('weight', sa.Float(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['calving_id'], ['calvings.id'], name='fk_offspring_calving_id_calvings'),
        sa.ForeignKeyConstraint(['animal_id'], ['animals.id'], name='fk_offspring_animal_id_animals'),
        sa.PrimaryKeyConstraint('id', name='pk_offspring'),
    )
    op.create_index('ix_offspring_calving_id', 'offspring', ['calving_id'], unique=False)

    # --- lactations ---
    op.create_table(
        'lactations',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('farm_id', sa.Uuid(), nullable=False),
        sa.Column('animal_id', sa.Uuid(), nullable=False),
        sa.Column('number', sa.Integer(), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.Column('status', sa.String(length=16), nullable=False, server_default='IN_PROGRESS'),
        sa.Column('calving_id', sa.Uuid(), nullable=True),
        sa.Column('days_in_milk', sa.Integer(), nullable=True),
        sa.Column('total_production', sa.Float(), nullable=True),
        sa.Column('daily_average', sa.Float(), nullable=True),
        *_timestamps(with_updated=True),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
        sa.ForeignKeyConstraint(['animal_id'], ['animals.id'], name='fk_lactations_animal_id_animals'),
        sa.ForeignKeyConstraint(['calving_id'], ['calvings.id'], name='fk_lactations_calving_id_calvings'),
        sa.PrimaryKeyConstraint('id', name='pk_lactations'),
        sa.UniqueConstraint('animal_id', 'number', name='ux_lactations_animal_number'),
    )
    op.create_index('ix_lactations_farm_id', 'lactations', ['farm_id'], unique=False)
    op.create_index('ix_lactations_farm_animal', 'lactations', ['farm_id', 'animal_id'], unique=False)
    op.create_index('ix_lactations_farm_status', 'lactations', ['farm_id', 'status'], unique=False)

    # --- dry_offs ---
    op.create_table(
        'dry_offs',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('farm_id', sa.Uuid(), nullable=False),
        sa.Column('animal_id', sa.Uuid(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('pregnancy_id', sa.Uuid(), nullable=True),
        sa.Column('expected_calving_date', sa.Date(), nullable=True),
        sa.Column('protocol', sa.String(length=255), nullable=True),
        sa.Column('reason', sa.String(length=32), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['animal_id'], ['animals.id'], name='fk_dry_offs_animal_id_animals'),
        sa.PrimaryKeyConstraint('id', name='pk_dry_offs'),
    )
    op.create_index('ix_dry_offs_farm_animal', 'dry_offs', ['farm_id', 'animal_id'], unique=False)


def downgrade() -> None:
    """Drop herd lifecycle tables in reverse dependency order."""
    op.drop_table('dry_offs')
    op.drop_table('lactations')
    op.drop_table('offspring')
    op.drop_table('calvings')
    op.drop_table('pregnancies')
    op.drop_table('pregnancy_diagnoses')
    op.drop_table('breedings')
    op.drop_table('iatf_protocols')
    op.drop_table('estrus_events')
    op.drop_table('pen_movements')
    op.drop_table('animals')
    op.drop_table('pens')
