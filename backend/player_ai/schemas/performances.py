from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat
from pydantic.alias_generators import to_camel

from player_ai.services.training_service import ModelSyncStatus

"""
Schemas Performances (Pydantic).

Rôle (fonctionnel) :
- Définit le contrat HTTP : forme plate
  {id, average, strikeRate, bowlingAverage, economyRate, fieldingStats, label}.
- Entrées : clés camelCase (snake_case aussi accepté), `id` refusé (attribué par la base).
- Sorties : sérialisation en camelCase (response_model => by_alias).

Notes :
- Pas de validation de plage sur les valeurs numériques : présence + type seulement.
  Les non-finis (NaN, Infinity) sont refusés : ils rendent la table non sérialisable et non entraînable.
- Le vecteur de prédiction est contraint à 5 valeurs côté HTTP ; le service, lui, ne valide rien.
"""

FEATURE_COUNT = 5


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PerformanceIn(_CamelModel):
    """Payload de création / mise à jour (tous les champs sont requis et écrasés)."""
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    average: float
    strike_rate: float
    bowling_average: float
    economy_rate: float
    fielding_stats: float
    label: float


class PerformanceOut(_CamelModel):
    """Représentation externe d’un enregistrement."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    average: float
    strike_rate: float
    bowling_average: float
    economy_rate: float
    fielding_stats: float
    label: float


class ModelSyncOut(_CamelModel):
    """État du modèle après le ré-entraînement déclenché par une écriture."""
    model_config = ConfigDict(from_attributes=True, protected_namespaces=())

    status: ModelSyncStatus
    trained_on: int
    epochs: int
    model_path: str
    error: Optional[str] = None


class PerformanceMutationResponse(BaseModel):
    """Réponse d’un ajout / d’une mise à jour : l’enregistrement + la synchro du modèle."""
    data: PerformanceOut
    model: ModelSyncOut


class PerformanceDeleteResponse(BaseModel):
    deleted: bool
    model: ModelSyncOut


class PredictRequest(BaseModel):
    """Vecteur [average, strikeRate, bowlingAverage, economyRate, fieldingStats]."""
    model_config = ConfigDict(extra="forbid")

    features: List[FiniteFloat] = Field(..., min_length=FEATURE_COUNT, max_length=FEATURE_COUNT)


class PredictResponse(BaseModel):
    suitable: bool
