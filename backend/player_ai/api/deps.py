from __future__ import annotations

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from player_ai.core.security import require_api_key
from player_ai.db.session import get_db
from player_ai.services.performance_service import PerformanceService
from player_ai.services.training_service import TrainingService

"""
Dépendances API.

Rôle (fonctionnel) :
- Auth “démo” (clé API) sur les routes d’écriture.
- Accès au TrainingService partagé (app.state.trainer) et construction du PerformanceService
  par requête (session DB propre à la requête, modèle commun au process).
"""


async def require_write_auth(request: Request) -> None:
    await require_api_key(request)


WriteAuthDep = Depends(require_write_auth)


def get_trainer(request: Request) -> TrainingService:
    return request.app.state.trainer


async def get_performance_service(
    db: AsyncSession = Depends(get_db),
    trainer: TrainingService = Depends(get_trainer),
) -> PerformanceService:
    return PerformanceService(db, trainer)
