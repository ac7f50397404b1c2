"""
Application principale FastAPI.

Ce module assemble les composants de l'application : middlewares, routes de relais, page
statique, santé et métriques.

Responsabilités du module:
- Initialiser le logging structuré et journaliser l'état des clés
- Construire l'application FastAPI avec son titre/debug
- Ajouter les middlewares (CORS, limite de corps, request id, timing, métriques)
- Enregistrer les handlers d'erreurs et monter les routers
"""

from __future__ import annotations

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from aura_backend.api.routes_health import router as health_router
from aura_backend.api.routes_pages import PUBLIC_DIR
from aura_backend.api.routes_pages import router as pages_router
from aura_backend.api.routes_profile import router as profile_router
from aura_backend.api.routes_relay import router as relay_router
from aura_backend.apigw.errors import register_error_handlers
from aura_backend.app.metrics import PrometheusMiddleware, metrics_router
from aura_backend.core.container import container
from aura_backend.core.logging import setup_logging
from aura_backend.middlewares.body_limit import BodySizeLimitMiddleware
from aura_backend.middlewares.request_id import RequestIDMiddleware
from aura_backend.middlewares.timing import TimingMiddleware


def create_app() -> FastAPI:
    """
    Construit et retourne l'application FastAPI prête à l'usage.

    Étapes:
    - Configure le logging structuré (structlog)
    - Lit les paramètres d'exécution et journalise la présence des clés
    - Ajoute les middlewares
    - Publie les routes de relais, de profil, de santé, de métriques et la page d'accueil
    """
    settings = container.settings
    setup_logging(settings.LOG_LEVEL)
    container.log_startup_diagnostics()
    app = FastAPI(title=settings.APP_NAME, debug=settings.APP_DEBUG)
    # Le dernier ajouté est le plus externe: request id avant timing pour les logs
    app.add_middleware(PrometheusMiddleware)
    app.add_middleware(TimingMiddleware)
    app.add_middleware(BodySizeLimitMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    app.include_router(pages_router)
    app.include_router(health_router)
    app.include_router(profile_router)
    app.include_router(relay_router)
    app.include_router(metrics_router)
    app.mount("/static", StaticFiles(directory=PUBLIC_DIR), name="static")
    return app


app = create_app()


def main() -> None:
    """Point d'entrée `aura-server`: lance uvicorn sur le port configuré."""
    settings = container.settings
    structlog.get_logger(__name__).info("proxy_server_starting", port=settings.PORT)
    uvicorn.run(app, host=settings.APP_HOST, port=settings.PORT, reload=False)


if __name__ == "__main__":
    main()
