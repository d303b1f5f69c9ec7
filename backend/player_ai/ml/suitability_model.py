from __future__ import annotations

import copy
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Sequence

import numpy as np
from sklearn.neural_network import MLPClassifier

from player_ai.core.errors import ModelNotTrainedError
from player_ai.ml.feature_vectorizer import as_input

"""
ML Suitability Model.

Rôle (fonctionnel) :
- Enveloppe un réseau de neurones scikit-learn (MLPClassifier) derrière deux opérations :
  - fit(X, y, epochs) : entraînement par passes complètes sur le batch (1 epoch = 1 partial_fit)
  - predict(vector) -> bool : “apte” si P(classe 1) >= 0.5
- Transporte des métadonnées (kind, trained_at, samples, epochs) persistées avec le réseau.

Notes :
- partial_fit repart des poids courants : un ré-entraînement prolonge l’apprentissage précédent.
- Les classes sont fixées à {0, 1} pour accepter une table ne contenant qu’une seule classe.
"""

CLASSES = np.array([0, 1])
DECISION_THRESHOLD = 0.5


class SuitabilityModel:
    """Classifieur “apte / pas apte” entraînable et sérialisable."""

    kind = "mlp"

    def __init__(self, network: MLPClassifier, meta: Optional[Dict[str, Any]] = None) -> None:
        self.network = network
        self.meta: Dict[str, Any] = dict(meta or {})
        self.meta.setdefault("kind", self.kind)

    @classmethod
    def create(
        cls,
        *,
        hidden_units: int = 10,
        learning_rate: float = 0.01,
        random_state: int = 42,
    ) -> "SuitabilityModel":
        """Nouveau réseau non entraîné (une couche cachée, ReLU, Adam)."""
        network = MLPClassifier(
            hidden_layer_sizes=(hidden_units,),
            activation="relu",
            solver="adam",
            learning_rate_init=learning_rate,
            random_state=random_state,
        )
        return cls(network)

    @property
    def is_trained(self) -> bool:
        return hasattr(self.network, "coefs_")

    def clone(self) -> "SuitabilityModel":
        """Copie profonde : permet d’entraîner hors de l’instance utilisée pour prédire."""
        return SuitabilityModel(copy.deepcopy(self.network), meta=self.meta)

    def fit(self, X: np.ndarray, y: np.ndarray, epochs: int) -> None:
        if len(X) == 0:
            return

        for _ in range(epochs):
            self.network.partial_fit(X, y, classes=CLASSES)

        self.meta.update(
            {
                "trained_at": datetime.now(timezone.utc).isoformat(),
                "samples": int(len(X)),
                "epochs": int(epochs),
            }
        )

    def predict(self, features: Sequence[float]) -> bool:
        """
        Prédit l’aptitude d’un joueur.

        Aucune validation : un vecteur mal dimensionné remonte l’erreur scikit-learn (ValueError).
        """
        if not self.is_trained:
            raise ModelNotTrainedError("Le modèle n’a pas encore été entraîné")

        proba = self.network.predict_proba(as_input(features))[0]
        positive = list(self.network.classes_).index(1)
        return bool(proba[positive] >= DECISION_THRESHOLD)
