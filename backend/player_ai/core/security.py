from __future__ import annotations

import secrets
from typing import Optional

from fastapi import Request

from player_ai.core.errors import AppHTTPException
from player_ai.core.settings import settings

"""
Core Security (API Key).

Rôle (fonctionnel) :
- Protège les routes d’écriture (ajout / mise à jour / suppression / ré-entraînement manuel) :
  chacune déclenche un ré-entraînement complet du modèle.
- Headers acceptés : `Authorization: Bearer <token>` ou `X-API-Key: <token>`.

Comportement :
- API_KEY configurée : clé requise sur les routes protégées.
- API_KEY vide hors prod : bypass (dev / tests).
- API_KEY vide en prod : 500 SERVER_MISCONFIG.
"""


def _extract_token(request: Request) -> Optional[str]:
    auth = request.headers.get("authorization")
    if auth:
        scheme, _, token = auth.partition(" ")
        if scheme.lower() == "bearer" and token.strip():
            return token.strip()

    x_api_key = request.headers.get("x-api-key")
    if x_api_key:
        return x_api_key.strip()

    return None


async def require_api_key(request: Request) -> None:
    """Dépendance FastAPI : lève AppHTTPException si la clé est absente ou invalide."""
    expected = settings.API_KEY or ""

    if not expected:
        if settings.ENV.lower() == "prod":
            raise AppHTTPException(500, "SERVER_MISCONFIG", "API_KEY manquante côté serveur")
        return

    token = _extract_token(request)
    if not token or not secrets.compare_digest(token, expected):
        raise AppHTTPException(401, "UNAUTHORIZED", "Clé API invalide ou manquante")
