"""Gestion standardisée des erreurs API avec enveloppe `{error, details}`.

Ce module fournit l'exception `APIError`, la construction des réponses d'erreur et les handlers
enregistrés sur l'application (erreurs métier, validation, HTTP, exceptions inattendues).
"""

from __future__ import annotations

import structlog
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from aura_backend.core.http_constants import HTTP_BAD_REQUEST, HTTP_INTERNAL_SERVER_ERROR

log = structlog.get_logger(__name__)


class APIError(HTTPException):
    """Erreur API portant l'enveloppe standard."""

    def __init__(self, status_code: int, error: str, details: str | None = None) -> None:
        """Initialise l'erreur avec statut, message principal et détails."""
        super().__init__(status_code=status_code, detail=error)
        self.error = error
        self.details = details


def create_error_response(
    status_code: int, error: str, details: str | None = None
) -> JSONResponse:
    """Construit une réponse JSON `{error, details}`."""
    content: dict[str, str] = {"error": error}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


def bad_request(error: str, details: str | None = None) -> APIError:
    """Erreur 400 (saisie manquante ou invalide)."""
    return APIError(HTTP_BAD_REQUEST, error, details)


def internal_error(error: str, details: str | None = None) -> APIError:
    """Erreur 500 (échec d'un relais ou erreur interne)."""
    return APIError(HTTP_INTERNAL_SERVER_ERROR, error, details)


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(x) for x in err.get("loc", ()) if x != "body")
        parts.append(f"{loc or 'body'}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)


async def handle_api_error(request: Request, exc: APIError) -> JSONResponse:
    """Convertit une `APIError` en réponse standard."""
    log.warning(
        "api_error",
        path=request.url.path,
        status_code=exc.status_code,
        error=exc.error,
        details=exc.details,
    )
    return create_error_response(exc.status_code, exc.error, exc.details)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Les corps mal formés sont des erreurs client (400), pas des 422."""
    details = _format_validation_errors(exc)
    log.warning("request_validation_error", path=request.url.path, details=details)
    return create_error_response(HTTP_BAD_REQUEST, "Invalid request body", details)


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Enveloppe les `HTTPException` génériques (404, 405, ...)."""
    return create_error_response(exc.status_code, str(exc.detail))


async def handle_generic_exception(request: Request, exc: Exception) -> JSONResponse:
    """Dernier filet: aucune exception ne remonte sans réponse structurée."""
    log.error(
        "unexpected_error",
        path=request.url.path,
        exception_type=type(exc).__name__,
        exc_info=exc,
    )
    return create_error_response(HTTP_INTERNAL_SERVER_ERROR, "Internal server error", str(exc))


def register_error_handlers(app: FastAPI) -> None:
    """Enregistre tous les handlers d'erreurs sur l'application."""
    app.add_exception_handler(APIError, handle_api_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_generic_exception)
