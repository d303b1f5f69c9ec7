from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Union

import joblib

from player_ai.core.settings import settings
from player_ai.ml.suitability_model import SuitabilityModel

"""
ML Model Registry.

Rôle (fonctionnel) :
- Charge / sauvegarde l’unique artefact modèle à un chemin fixe (settings.MODEL_PATH).
- Format : bundle joblib { "model": MLPClassifier, "meta": {...} }.

Conventions :
- Pas de versioning : chaque sauvegarde écrase la précédente (pas de rollback).
- Écriture atomique : dump dans un fichier temporaire du même dossier puis os.replace,
  un crash en cours d’écriture ne laisse jamais un artefact tronqué.
- Fichier absent au chargement : nouveau réseau non entraîné (hyperparamètres depuis settings).
"""

log = logging.getLogger("player_ai.ml")

PathLike = Union[str, Path]


def new_model() -> SuitabilityModel:
    return SuitabilityModel.create(
        hidden_units=settings.HIDDEN_UNITS,
        learning_rate=settings.LEARNING_RATE,
        random_state=settings.RANDOM_STATE,
    )


def load_model(path: PathLike) -> SuitabilityModel:
    """Charge l’artefact s’il existe, sinon retourne un réseau vierge."""
    path = Path(path)
    if not path.exists():
        log.info("No model artifact, starting untrained", extra={"model_path": str(path)})
        return new_model()

    bundle = joblib.load(path)
    model = SuitabilityModel(bundle["model"], meta=bundle.get("meta", {}))
    log.info("Model loaded", extra={"model_path": str(path), "samples": model.meta.get("samples")})
    return model


def save_model(model: SuitabilityModel, path: PathLike) -> Path:
    """
    Écrit le bundle au chemin fixe (écrasement atomique).

    Lève OSError si le dossier ou le fichier ne sont pas inscriptibles.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    os.close(fd)
    try:
        joblib.dump({"model": model.network, "meta": model.meta}, tmp_name)
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.remove(tmp_name)
        raise

    return path
