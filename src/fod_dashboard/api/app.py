"""FastAPI application factory.

Exposes:
- the site-settings bridge (`/fod-bridge/v1/site-settings`)
- the league directory (`/dashboard`) and team rosters (`/teams/{id}`)
- the HTML dashboard and roster pages (`/`, `/roster/{id}`)
- a health check
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session, sessionmaker

from fod_dashboard import __version__
from fod_dashboard.api.auth import SecretVerifier
from fod_dashboard.api.routes import leagues_router, pages_router, site_settings_router
from fod_dashboard.client.api import DashboardApiClient, build_http_client
from fod_dashboard.core.config import Settings, settings as default_settings
from fod_dashboard.core.errors import DashboardError
from fod_dashboard.core.logging import configure_logging
from fod_dashboard.db import DatabaseConfig, create_db_engine, create_session_factory

logger = logging.getLogger(__name__)


def _default_api_client_factory(cfg: Settings) -> Callable[[], DashboardApiClient]:
    def factory() -> DashboardApiClient:
        return DashboardApiClient(http=build_http_client(cfg.api_base_url))

    return factory


def create_app(
    cfg: Settings | None = None,
    *,
    session_factory: sessionmaker[Session] | None = None,
    secret_verifier: SecretVerifier | None = None,
    api_client_factory: Callable[[], DashboardApiClient] | None = None,
) -> FastAPI:
    cfg = cfg or default_settings
    configure_logging(cfg.log_level)

    if session_factory is None:
        engine = create_db_engine(DatabaseConfig(database_url=cfg.database_url, echo=cfg.db_echo))
        session_factory = create_session_factory(engine)

    app = FastAPI(title="FOD Dashboard API", version=__version__)
    app.state.session_factory = session_factory
    app.state.secret_verifier = secret_verifier or SecretVerifier.from_settings(cfg)
    app.state.api_client_factory = api_client_factory or _default_api_client_factory(cfg)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.exception_handler(DashboardError)
    async def dashboard_error_handler(request: Request, exc: DashboardError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.code, "message": str(exc)},
        )

    app.include_router(site_settings_router)
    app.include_router(leagues_router)
    app.include_router(pages_router)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "service": "api"}

    return app
