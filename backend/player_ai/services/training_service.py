from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Sequence, Union

import numpy as np
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from player_ai.core.settings import settings
from player_ai.ml.feature_vectorizer import build_training_set
from player_ai.ml.model_registry import load_model, save_model
from player_ai.ml.suitability_model import SuitabilityModel
from player_ai.services.performance_store import PerformanceStore

"""
Training Service.

Rôle (fonctionnel) :
- Possède l’unique instance du modèle (process-wide, stockée sur app.state.trainer).
- Sérialise les ré-entraînements (un seul “écrivain”) :
  lecture de la table -> fit -> sauvegarde, sous un asyncio.Lock.
  Le dernier état committé de la table est donc toujours celui du modèle final.
- Le fit (CPU) tourne dans le threadpool, sur une copie du réseau ; la copie remplace
  le modèle courant une fois entraînée. Les prédictions concurrentes lisent toujours
  un réseau complet.
- Retourne un ModelSync typé au lieu d’avaler les erreurs :
  - SYNCED          : entraîné et écrit sur disque
  - NOT_PERSISTED   : entraîné en mémoire, écriture du fichier en échec
  - TRAINING_FAILED : fit en erreur, modèle précédent conservé

Notes :
- Table vide : pas de fit, mais l’artefact est réécrit (sa date avance après chaque écriture).
- Ré-entraînement complet à chaque écriture : coût O(n x epochs) par requête.
"""

log = logging.getLogger("player_ai.training")

PathLike = Union[str, Path]


class ModelSyncStatus(str, Enum):
    SYNCED = "synced"
    NOT_PERSISTED = "not_persisted"
    TRAINING_FAILED = "training_failed"


@dataclass(frozen=True)
class ModelSync:
    """Résultat d’un ré-entraînement, remonté jusqu’au client HTTP."""
    status: ModelSyncStatus
    trained_on: int
    epochs: int
    model_path: str
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is ModelSyncStatus.SYNCED


class TrainingService:
    def __init__(
        self,
        model_path: PathLike,
        *,
        epochs: int = 50,
        model: Optional[SuitabilityModel] = None,
    ) -> None:
        self.model_path = Path(model_path)
        self.epochs = epochs
        self._model = model if model is not None else load_model(self.model_path)
        self._lock = asyncio.Lock()
        self.last_sync: Optional[ModelSync] = None

    @classmethod
    def from_settings(cls) -> "TrainingService":
        return cls(settings.MODEL_PATH, epochs=settings.TRAINING_EPOCHS)

    @property
    def model(self) -> SuitabilityModel:
        return self._model

    def predict(self, features: Sequence[float]) -> bool:
        return self._model.predict(features)

    async def retrain(self, db: AsyncSession) -> ModelSync:
        """Ré-entraîne sur toute la table courante puis écrit l’artefact."""
        async with self._lock:
            records = await PerformanceStore(db).find_all()
            X, y = build_training_set(records)
            sync = await run_in_threadpool(self._fit_and_persist, X, y)

        self.last_sync = sync
        return sync

    def _fit_and_persist(self, X: np.ndarray, y: np.ndarray) -> ModelSync:
        samples = int(len(X))
        extra = {"samples": samples, "epochs": self.epochs, "model_path": str(self.model_path)}

        candidate = self._model.clone()
        try:
            candidate.fit(X, y, self.epochs)
        except Exception as exc:
            log.exception("Model training failed", extra={**extra, "sync_status": ModelSyncStatus.TRAINING_FAILED.value})
            return self._sync(ModelSyncStatus.TRAINING_FAILED, samples, error=str(exc))

        self._model = candidate

        try:
            save_model(candidate, self.model_path)
        except OSError as exc:
            log.error(
                "Failed to save the model: %s",
                exc,
                extra={**extra, "sync_status": ModelSyncStatus.NOT_PERSISTED.value},
            )
            return self._sync(ModelSyncStatus.NOT_PERSISTED, samples, error=str(exc))

        log.info("Model retrained and saved", extra={**extra, "sync_status": ModelSyncStatus.SYNCED.value})
        return self._sync(ModelSyncStatus.SYNCED, samples)

    def _sync(self, status: ModelSyncStatus, samples: int, error: Optional[str] = None) -> ModelSync:
        return ModelSync(
            status=status,
            trained_on=samples,
            epochs=self.epochs,
            model_path=str(self.model_path),
            error=error,
        )
