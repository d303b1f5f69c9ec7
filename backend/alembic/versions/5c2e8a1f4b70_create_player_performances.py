"""Création de la table player_performances.

Rôle (fonctionnel) :
- Une ligne par performance de joueur : 5 statistiques + label supervisé.
- Cette table est l’intégralité du dataset d’entraînement du modèle d’aptitude.

Revision ID: 5c2e8a1f4b70
Revises:
Create Date: 2026-10-19
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# Identifiants Alembic
revision: str = "5c2e8a1f4b70"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "player_performances",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("average", sa.Float(), nullable=False),
        sa.Column("strike_rate", sa.Float(), nullable=False),
        sa.Column("bowling_average", sa.Float(), nullable=False),
        sa.Column("economy_rate", sa.Float(), nullable=False),
        sa.Column("fielding_stats", sa.Float(), nullable=False),
        sa.Column("label", sa.Float(), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("player_performances")
