from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from player_ai.models.player_performance import PlayerPerformance
from player_ai.schemas.performances import PerformanceIn, PerformanceOut
from player_ai.services.performance_store import PerformanceStore
from player_ai.services.training_service import ModelSync, TrainingService

"""
Performance Service.

Rôle (fonctionnel) :
- CRUD sur les performances de joueurs (PerformanceStore).
- Après chaque écriture réussie : ré-entraînement complet du modèle (TrainingService).
- Prédiction d’aptitude : simple délégation au modèle courant.

Contrat :
- update / delete sur un id absent : résultat “vide” (None / DeleteResult falsy),
  aucune écriture, aucun ré-entraînement.
- Une écriture reste valide même si la synchro du modèle échoue :
  l’état du modèle est porté par ModelSync dans le résultat.
"""

log = logging.getLogger("player_ai.performances")


@dataclass(frozen=True)
class MutationResult:
    record: PerformanceOut
    sync: ModelSync


@dataclass(frozen=True)
class DeleteResult:
    deleted: bool
    sync: Optional[ModelSync] = None

    def __bool__(self) -> bool:
        return self.deleted


def _to_out(entity: PlayerPerformance) -> PerformanceOut:
    return PerformanceOut.model_validate(entity)


def _apply(entity: PlayerPerformance, payload: PerformanceIn) -> PlayerPerformance:
    # Écrasement complet : pas de mise à jour partielle
    entity.average = payload.average
    entity.strike_rate = payload.strike_rate
    entity.bowling_average = payload.bowling_average
    entity.economy_rate = payload.economy_rate
    entity.fielding_stats = payload.fielding_stats
    entity.label = payload.label
    return entity


class PerformanceService:
    def __init__(self, db: AsyncSession, trainer: TrainingService) -> None:
        self.store = PerformanceStore(db)
        self.trainer = trainer
        self.db = db

    async def get_all(self) -> List[PerformanceOut]:
        return [_to_out(r) for r in await self.store.find_all()]

    async def add(self, payload: PerformanceIn) -> MutationResult:
        entity = await self.store.insert(_apply(PlayerPerformance(), payload))
        log.info("Performance created", extra={"record_id": entity.id})

        sync = await self.train_model()
        return MutationResult(record=_to_out(entity), sync=sync)

    async def update(self, record_id: int, payload: PerformanceIn) -> Optional[MutationResult]:
        entity = await self.store.get(record_id)
        if entity is None:
            return None

        entity = await self.store.save(_apply(entity, payload))
        log.info("Performance updated", extra={"record_id": entity.id})

        sync = await self.train_model()
        return MutationResult(record=_to_out(entity), sync=sync)

    async def delete(self, record_id: int) -> DeleteResult:
        entity = await self.store.get(record_id)
        if entity is None:
            return DeleteResult(deleted=False)

        await self.store.remove(entity)
        log.info("Performance deleted", extra={"record_id": record_id})

        sync = await self.train_model()
        return DeleteResult(deleted=True, sync=sync)

    def predict_suitability(self, features: Sequence[float]) -> bool:
        """Délègue au modèle courant, sans validation du vecteur."""
        return self.trainer.predict(features)

    async def train_model(self) -> ModelSync:
        return await self.trainer.retrain(self.db)
