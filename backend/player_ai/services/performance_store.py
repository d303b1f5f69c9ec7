from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from player_ai.models.player_performance import ID_MAX, PlayerPerformance

"""
Performance Store.

Accès à la table player_performances (une session async par requête).
Chaque écriture est commitée immédiatement : le ré-entraînement qui suit relit la table
et doit voir l’état persistant.
"""


class PerformanceStore:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def find_all(self) -> List[PlayerPerformance]:
        # Ordre naturel de la table (id croissant)
        rows = await self.db.execute(select(PlayerPerformance).order_by(PlayerPerformance.id))
        return list(rows.scalars().all())

    async def get(self, record_id: int) -> Optional[PlayerPerformance]:
        # Hors bornes de la colonne : la base lèverait, on répond “absent”
        if not 1 <= record_id <= ID_MAX:
            return None
        return await self.db.get(PlayerPerformance, record_id)

    async def insert(self, record: PlayerPerformance) -> PlayerPerformance:
        self.db.add(record)
        await self.db.commit()
        await self.db.refresh(record)
        return record

    async def save(self, record: PlayerPerformance) -> PlayerPerformance:
        await self.db.commit()
        await self.db.refresh(record)
        return record

    async def remove(self, record: PlayerPerformance) -> None:
        await self.db.delete(record)
        await self.db.commit()
