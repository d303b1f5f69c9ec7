from __future__ import annotations

import uuid
from contextvars import ContextVar

"""
Core Request ID.

Rôle (fonctionnel) :
- Conserve l’identifiant de la requête HTTP courante dans un ContextVar.
- Repris du header X-Request-Id ou généré (UUID4), puis renvoyé dans la réponse.
- Lu par le logging : une écriture et son ré-entraînement partagent le même request_id,
  y compris quand le fit tourne dans le threadpool (starlette copie le contexte).
"""

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)


def set_request_id(rid: str | None) -> None:
    _request_id.set(rid)


def get_request_id() -> str | None:
    return _request_id.get()


def ensure_request_id(incoming: str | None = None) -> str:
    """Réutilise le request_id entrant (nettoyé) ou en génère un nouveau."""
    rid = (incoming or "").strip() or str(uuid.uuid4())
    set_request_id(rid)
    return rid
