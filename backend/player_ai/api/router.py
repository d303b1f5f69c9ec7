from fastapi import APIRouter

from .health import router as health_router
from .performances import router as performances_router
from .status import router as status_router

"""
Router principal de l’API : health, performances (CRUD + prédiction + ré-entraînement), statut système.
"""

api_router = APIRouter()

api_router.include_router(health_router, tags=["health"])
api_router.include_router(performances_router)
api_router.include_router(status_router)
