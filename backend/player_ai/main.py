from __future__ import annotations

import math
import time
import uuid
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from player_ai.api.router import api_router
from player_ai.core.settings import settings
from player_ai.core.logging import setup_logging
from player_ai.core.errors import error_payload, AppHTTPException
from player_ai.core.request_id import set_request_id, get_request_id, ensure_request_id
from player_ai.core.rate_limit import rate_limiter
from player_ai.services.training_service import TrainingService

"""
Application FastAPI (entrypoint).

Rôle (fonctionnel) :
- Configure l’application (settings, CORS, middlewares, routers).
- Charge le modèle unique au démarrage (TrainingService -> app.state.trainer).
- Observabilité : request_id propagé (X-Request-Id), logs JSON (timing, status), seuil “slow request”
  (les écritures incluent un ré-entraînement complet, elles sont naturellement lentes).
- Rate-limit optionnel sur les écritures /performances.
- Erreurs client uniformes (format error_payload).

Lancement :
    uvicorn player_ai.main:app --reload
"""


class UTF8JSONResponse(JSONResponse):
    media_type = "application/json; charset=utf-8"


setup_logging(settings.LOG_LEVEL)

log = logging.getLogger("player_ai")
http_log = logging.getLogger("player_ai.http")

SLOW_MS = int(settings.SLOW_REQUEST_MS)


def _split_origins(value: str) -> list[str]:
    """Parse une liste d’origines CORS depuis une string 'a,b,c'."""
    if not value:
        return []
    return [o.strip() for o in value.split(",") if o.strip()]


app = FastAPI(
    title=settings.APP_NAME,
    debug=settings.DEBUG,
    default_response_class=UTF8JSONResponse,
)

# Modèle partagé par tout le process (request.app.state.trainer)
app.state.trainer = TrainingService.from_settings()

app.add_middleware(
    CORSMiddleware,
    allow_origins=_split_origins(settings.CORS_ORIGINS) or ["http://localhost:5173"],
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-API-Key", "X-Request-Id"],
    expose_headers=["X-Request-Id", "X-Model-Sync"],
)

app.include_router(api_router)


@app.middleware("http")
async def request_observability(request: Request, call_next):
    rid = ensure_request_id(request.headers.get("X-Request-Id"))
    request.state.request_id = rid

    start = time.perf_counter()
    response = None
    try:
        response = await call_next(request)
        return response
    finally:
        duration_ms = int((time.perf_counter() - start) * 1000)

        if response is not None:
            response.headers["X-Request-Id"] = rid

        level = logging.WARNING if duration_ms >= SLOW_MS else logging.INFO
        http_log.log(
            level,
            "request",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": getattr(response, "status_code", None),
                "duration_ms": duration_ms,
                "client_ip": request.client.host if request.client else None,
            },
        )

        set_request_id(None)


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", None) or get_request_id() or str(uuid.uuid4())


def _detail_fields(detail, default_code: str, default_message: str):
    if isinstance(detail, dict):
        return (
            str(detail.get("code", default_code)),
            str(detail.get("message", default_message)),
            detail.get("details", None),
        )
    return default_code, str(detail) if detail else default_message, None


@app.middleware("http")
async def rate_limit_middleware(request: Request, call_next):
    """Limite les écritures sur /performances ; lectures et préflights CORS jamais bloqués."""
    if request.url.path.startswith("/performances"):
        try:
            rate_limiter.check(request)
        except AppHTTPException as exc:
            code, message, details = _detail_fields(exc.detail, "RATE_LIMITED", "Trop de requêtes")
            return UTF8JSONResponse(
                status_code=exc.status_code,
                content=error_payload(
                    code=code,
                    message=message,
                    status=exc.status_code,
                    request_id=_request_id(request),
                    details=details,
                ),
            )

    return await call_next(request)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """AppHTTPException et erreurs HTTP natives (404, 405…) -> payload standard."""
    default_code = "NOT_FOUND" if exc.status_code == 404 else "HTTP_ERROR"
    code, message, details = _detail_fields(exc.detail, default_code, "Erreur HTTP")

    return UTF8JSONResponse(
        status_code=exc.status_code,
        content=error_payload(
            code=code,
            message=message,
            status=exc.status_code,
            request_id=_request_id(request),
            details=details,
        ),
    )


def _finite(value):
    # JSONResponse refuse NaN / Infinity (allow_nan=False)
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    if isinstance(value, (list, tuple)):
        return [_finite(v) for v in value]
    if isinstance(value, dict):
        return {k: _finite(v) for k, v in value.items()}
    return value


def jsonable_errors(exc: RequestValidationError) -> list:
    # ctx peut contenir des exceptions non sérialisables (ValueError)
    return [{k: _finite(v) for k, v in err.items() if k != "ctx"} for err in exc.errors()]


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return UTF8JSONResponse(
        status_code=422,
        content=error_payload(
            code="VALIDATION_ERROR",
            message="Requête invalide",
            status=422,
            request_id=_request_id(request),
            details=jsonable_errors(exc),
        ),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Fallback : toute exception non gérée -> 500 + log serveur."""
    log.exception("Unhandled error: %s", exc)

    return UTF8JSONResponse(
        status_code=500,
        content=error_payload(
            code="INTERNAL_ERROR",
            message="Erreur interne du serveur",
            status=500,
            request_id=_request_id(request),
        ),
    )
