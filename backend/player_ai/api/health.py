from fastapi import APIRouter

from player_ai.core.settings import settings

"""
API Health.

Vérifie que l’API répond ; expose l’env et le nombre d’epochs par ré-entraînement.
"""

router = APIRouter()


@router.get("/health")
def health():
    return {
        "status": "ok",
        "env": settings.ENV,
        "epochs": settings.TRAINING_EPOCHS,
    }
