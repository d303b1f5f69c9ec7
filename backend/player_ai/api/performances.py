from __future__ import annotations

from typing import Annotated, List

from fastapi import APIRouter, Depends, Path, Response

from player_ai.api.deps import WriteAuthDep, get_performance_service
from player_ai.core.errors import AppHTTPException, ModelNotTrainedError
from player_ai.models.player_performance import ID_MAX
from player_ai.schemas.performances import (
    ModelSyncOut,
    PerformanceDeleteResponse,
    PerformanceIn,
    PerformanceMutationResponse,
    PerformanceOut,
    PredictRequest,
    PredictResponse,
)
from player_ai.services.performance_service import PerformanceService
from player_ai.services.training_service import ModelSync

"""
API Performances.

Rôle (fonctionnel) :
- CRUD des performances de joueurs (forme plate camelCase).
- Chaque écriture déclenche un ré-entraînement complet ; son résultat est renvoyé
  dans le champ `model` et dans le header X-Model-Sync (synced / not_persisted / training_failed).
- Prédiction d’aptitude à partir d’un vecteur de 5 valeurs.
- Ré-entraînement manuel (POST /performances/train).

Notes :
- 404 NOT_FOUND sur update / delete d’un id inconnu (aucun ré-entraînement dans ce cas).
- 409 MODEL_NOT_TRAINED si aucune donnée n’a encore servi à entraîner le modèle.
"""

router = APIRouter(prefix="/performances", tags=["performances"])

RecordId = Annotated[int, Path(ge=1, le=ID_MAX)]


def _sync_out(response: Response, sync: ModelSync) -> ModelSyncOut:
    response.headers["X-Model-Sync"] = sync.status.value
    return ModelSyncOut.model_validate(sync)


@router.get("", response_model=List[PerformanceOut])
async def list_performances(svc: PerformanceService = Depends(get_performance_service)):
    return await svc.get_all()


@router.post("", response_model=PerformanceMutationResponse, status_code=201, dependencies=[WriteAuthDep])
async def create_performance(
    payload: PerformanceIn,
    response: Response,
    svc: PerformanceService = Depends(get_performance_service),
):
    res = await svc.add(payload)
    return PerformanceMutationResponse(data=res.record, model=_sync_out(response, res.sync))


@router.put("/{record_id}", response_model=PerformanceMutationResponse, dependencies=[WriteAuthDep])
async def update_performance(
    record_id: RecordId,
    payload: PerformanceIn,
    response: Response,
    svc: PerformanceService = Depends(get_performance_service),
):
    res = await svc.update(record_id, payload)
    if res is None:
        raise AppHTTPException(404, "NOT_FOUND", "Performance introuvable", details={"id": record_id})

    return PerformanceMutationResponse(data=res.record, model=_sync_out(response, res.sync))


@router.delete("/{record_id}", response_model=PerformanceDeleteResponse, dependencies=[WriteAuthDep])
async def delete_performance(
    record_id: RecordId,
    response: Response,
    svc: PerformanceService = Depends(get_performance_service),
):
    res = await svc.delete(record_id)
    if not res:
        raise AppHTTPException(404, "NOT_FOUND", "Performance introuvable", details={"id": record_id})

    return PerformanceDeleteResponse(deleted=True, model=_sync_out(response, res.sync))


@router.post("/predict", response_model=PredictResponse)
async def predict_suitability(
    payload: PredictRequest,
    svc: PerformanceService = Depends(get_performance_service),
):
    try:
        suitable = svc.predict_suitability(payload.features)
    except ModelNotTrainedError as exc:
        raise AppHTTPException(409, "MODEL_NOT_TRAINED", str(exc))

    return PredictResponse(suitable=suitable)


@router.post("/train", response_model=ModelSyncOut, dependencies=[WriteAuthDep])
async def train_model(
    response: Response,
    svc: PerformanceService = Depends(get_performance_service),
):
    sync = await svc.train_model()
    return _sync_out(response, sync)
