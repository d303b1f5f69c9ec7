from __future__ import annotations

from typing import Any, Iterable, List, Sequence, Tuple

import numpy as np

"""
ML Feature Vectorizer.

Rôle (fonctionnel) :
- Convertit un enregistrement de performance en vecteur numérique de taille fixe (5 floats).
- Convertit le label (float) en classe binaire pour l’entraînement.
- Construit le batch complet (X, y) à partir de toute la table.

Notes :
- L’ordre des features est le contrat entre entraînement et prédiction : le vecteur reçu par
  /performances/predict doit suivre exactement FEATURE_ORDER.
- Pas de normalisation : les valeurs brutes sont passées au réseau.
"""

FEATURE_ORDER: Tuple[str, ...] = (
    "average",
    "strike_rate",
    "bowling_average",
    "economy_rate",
    "fielding_stats",
)

LABEL_THRESHOLD = 0.5


def vectorize(record: Any) -> List[float]:
    """Encode un enregistrement (ORM ou objet équivalent) dans l’ordre FEATURE_ORDER."""
    return [float(getattr(record, name)) for name in FEATURE_ORDER]


def encode_label(label: float) -> int:
    """Label stocké en float -> classe 0/1 (>= 0.5 => apte)."""
    return 1 if float(label) >= LABEL_THRESHOLD else 0


def build_training_set(records: Iterable[Any]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Un vecteur par enregistrement, regroupés en un seul batch.

    Retourne X de forme (n, 5) et y de forme (n,). Table vide => tableaux vides (0, 5) / (0,).
    """
    rows: List[List[float]] = []
    labels: List[int] = []
    for record in records:
        rows.append(vectorize(record))
        labels.append(encode_label(record.label))

    X = np.asarray(rows, dtype=np.float64).reshape(-1, len(FEATURE_ORDER))
    y = np.asarray(labels, dtype=np.int64)
    return X, y


def as_input(features: Sequence[float]) -> np.ndarray:
    """Vecteur de prédiction -> matrice (1, n) attendue par scikit-learn."""
    return np.asarray(features, dtype=np.float64).reshape(1, -1)
