from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import HTTPException

"""
Core Errors.

Rôle (fonctionnel) :
- Standardise le format des erreurs renvoyées par l’API (payload homogène).
- Fournit une exception HTTP applicative (AppHTTPException) utilisée par les routes.
- Définit les erreurs “domaine” levées hors couche HTTP (services / ml).

Codes utilisés : NOT_FOUND (404), VALIDATION_ERROR (422), MODEL_NOT_TRAINED (409),
UNAUTHORIZED (401), RATE_LIMITED (429), INTERNAL_ERROR (500).
"""


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def error_payload(
    *,
    code: str,
    message: str,
    status: int,
    request_id: str,
    details: Optional[Any] = None,
) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "error": {
            "code": code,
            "message": message,
            "status": status,
            "request_id": request_id,
            "timestamp": now_iso(),
        }
    }
    if details is not None:
        payload["error"]["details"] = details
    return payload


class AppHTTPException(HTTPException):
    """HTTPException dont le detail porte {code, message, details} ; rendue par les handlers de main.py."""

    def __init__(self, status_code: int, code: str, message: str, details: Any = None):
        super().__init__(status_code=status_code, detail={"code": code, "message": message, "details": details})


class ModelNotTrainedError(RuntimeError):
    """Le réseau n’a encore jamais été entraîné : aucune prédiction possible."""
