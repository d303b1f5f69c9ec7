from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from player_ai.api.deps import get_trainer
from player_ai.db.session import get_db
from player_ai.models.player_performance import PlayerPerformance
from player_ai.services.training_service import TrainingService

"""
API System Status.

Rôle (fonctionnel) :
- Vérifie la disponibilité de la base (comptage de la table).
- Expose l’état du modèle : entraîné ou non, présence de l’artefact sur disque,
  métadonnées du dernier fit, statut de la dernière synchro.
- Met en évidence l’incohérence possible “données écrites / modèle non persisté”.
"""

router = APIRouter(prefix="/system", tags=["system"])


@router.get("/status")
async def system_status(
    db: AsyncSession = Depends(get_db),
    trainer: TrainingService = Depends(get_trainer),
):
    db_ok = True
    records = None
    try:
        records = (await db.execute(select(func.count(PlayerPerformance.id)))).scalar_one()
    except Exception:
        db_ok = False

    model = trainer.model
    last_sync = trainer.last_sync

    return {
        "ok": db_ok,
        "db": {"ok": db_ok, "records": records},
        "model": {
            "trained": model.is_trained,
            "artifact_exists": trainer.model_path.exists(),
            "path": str(trainer.model_path),
            "trained_at": model.meta.get("trained_at"),
            "samples": model.meta.get("samples"),
            "last_sync": last_sync.status.value if last_sync else None,
        },
        "ts": datetime.now(timezone.utc).isoformat(),
    }
