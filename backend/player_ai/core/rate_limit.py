from __future__ import annotations

import time
from collections import deque
from threading import Lock
from typing import Deque, Dict

from fastapi import Request

from player_ai.core.errors import AppHTTPException
from player_ai.core.settings import settings

"""
Core Rate Limit.

Rôle (fonctionnel) :
- Limite les écritures (POST / PUT / DELETE) par IP : chaque écriture coûte un ré-entraînement complet,
  une rafale d’écritures sature le CPU du process.
- Fenêtre glissante de 60 secondes, en mémoire (un seul process).
- Les lectures ne sont jamais limitées : GET, et POST /performances/predict (aucun ré-entraînement).
- Les IP sans écriture récente sont purgées (au plus une fois par fenêtre).

Activation via settings :
- RATE_LIMIT_ENABLED
- RATE_LIMIT_RPM : écritures autorisées par minute et par IP.
"""

WRITE_METHODS = frozenset({"POST", "PUT", "DELETE"})
READ_ONLY_PATHS = frozenset({"/performances/predict"})
WINDOW_SECONDS = 60.0


def is_write(request: Request) -> bool:
    return request.method in WRITE_METHODS and request.url.path.rstrip("/") not in READ_ONLY_PATHS


class WriteRateLimiter:
    """Fenêtre glissante par IP (timestamps des dernières écritures)."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._hits: Dict[str, Deque[float]] = {}
        self._last_sweep = 0.0

    def __len__(self) -> int:
        return len(self._hits)

    def reset(self) -> None:
        with self._lock:
            self._hits.clear()
            self._last_sweep = 0.0

    def _sweep(self, now: float) -> None:
        # Appelé sous self._lock
        if now - self._last_sweep < WINDOW_SECONDS:
            return
        stale = [ip for ip, hits in self._hits.items() if not hits or now - hits[-1] >= WINDOW_SECONDS]
        for ip in stale:
            del self._hits[ip]
        self._last_sweep = now

    def check(self, request: Request, now: float | None = None) -> None:
        """Lève 429 RATE_LIMITED si l’IP dépasse RATE_LIMIT_RPM écritures sur 60s."""
        if not settings.RATE_LIMIT_ENABLED or not is_write(request):
            return

        limit = int(settings.RATE_LIMIT_RPM or 0)
        if limit <= 0:
            return

        ip = request.client.host if request.client else "unknown"
        now = time.monotonic() if now is None else now

        with self._lock:
            self._sweep(now)

            hits = self._hits.setdefault(ip, deque())
            while hits and now - hits[0] >= WINDOW_SECONDS:
                hits.popleft()

            if len(hits) >= limit:
                raise AppHTTPException(
                    429,
                    "RATE_LIMITED",
                    f"Trop d’écritures (limite: {limit}/min).",
                    details={"limit_rpm": limit},
                )
            hits.append(now)


rate_limiter = WriteRateLimiter()
