from __future__ import annotations

from sqlalchemy import Float, Integer
from sqlalchemy.orm import Mapped, mapped_column

from player_ai.db.base import Base

"""
Model PlayerPerformance.

Rôle (fonctionnel) :
- Une ligne = les statistiques d’un joueur + un label supervisé (cible d’entraînement).
- Table plate, sans relation : c’est l’intégralité du dataset d’entraînement du modèle.

Champs :
- average, strike_rate : batte.
- bowling_average, economy_rate : lancer.
- fielding_stats : terrain.
- label : “apte / pas apte”, stocké en float (>= 0.5 => apte pour l’entraînement).

Aucune contrainte de plage : seules la présence et le type numérique sont garantis.
"""

# Plus grand id représentable (INTEGER 32 bits, int4 Postgres)
ID_MAX = 2_147_483_647


class PlayerPerformance(Base):
    __tablename__ = "player_performances"

    # Identifiant attribué par la base à l’insertion
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    average: Mapped[float] = mapped_column(Float, nullable=False)
    strike_rate: Mapped[float] = mapped_column(Float, nullable=False)
    bowling_average: Mapped[float] = mapped_column(Float, nullable=False)
    economy_rate: Mapped[float] = mapped_column(Float, nullable=False)
    fielding_stats: Mapped[float] = mapped_column(Float, nullable=False)

    label: Mapped[float] = mapped_column(Float, nullable=False)

    def __repr__(self) -> str:
        return f"<PlayerPerformance id={self.id} label={self.label}>"
