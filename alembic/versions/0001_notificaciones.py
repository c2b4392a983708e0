"""notificaciones de emergencia

Revision ID: 0001_notificaciones
Revises: 
Create Date: 2026-10-19 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_notificaciones'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    # --- notificacion_emergencia ---
    op.create_table(
        'notificacion_emergencia',
        sa.Column('id_notificacion', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('id_emisor', sa.Integer(), nullable=False),
        sa.Column('titulo_notificacion', sa.String(length=50), nullable=False),
        sa.Column('contenido_notificacion', sa.String(length=500), nullable=False),
        sa.Column('fecha_notificacion', sa.TIMESTAMP(), nullable=False),
        sa.Column('estado_notificacion', sa.Boolean(), nullable=False),
    )

    # --- notificacion_receptores (depends on notificacion_emergencia) ---
    op.create_table(
        'notificacion_receptores',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            'id_notificacion',
            sa.Integer(),
            sa.ForeignKey('notificacion_emergencia.id_notificacion', ondelete='CASCADE'),
            nullable=False,
        ),
        sa.Column('id_receptor', sa.Integer(), nullable=False),
    )

    op.create_index('ix_notificacion_emergencia_id_notificacion', 'notificacion_emergencia', ['id_notificacion'])
    op.create_index('ix_notificacion_receptores_id_notificacion', 'notificacion_receptores', ['id_notificacion'])


def downgrade():
    op.drop_index('ix_notificacion_receptores_id_notificacion', table_name='notificacion_receptores')
    op.drop_index('ix_notificacion_emergencia_id_notificacion', table_name='notificacion_emergencia')

    # hijos antes que padres
    op.drop_table('notificacion_receptores')
    op.drop_table('notificacion_emergencia')
