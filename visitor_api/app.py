"""Application factory for the visitor registration API."""
from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from visitor_api.core.config import Settings, get_settings, require_database_url
from visitor_api.core.logs import configure_logging
from visitor_api.db.session import build_engine, build_sessionmaker
from visitor_api.repositories.visitor_repository import VisitorRepository
from visitor_api.routers import visitors as visitors_router
from visitor_api.services.registration_service import RegistrationService

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the app from explicit settings; fails when no connection string is set.

    Compatible with ``uvicorn visitor_api.app:create_app --factory``.
    """
    settings = settings or get_settings()
    database_url = require_database_url(settings)
    configure_logging(settings.log_level)

    engine = build_engine(database_url)
    repository = VisitorRepository(build_sessionmaker(engine))

    app = FastAPI(title="Visitor Registration API")
    app.state.settings = settings
    app.state.engine = engine
    app.state.registration_service = RegistrationService(repository)

    if settings.cors_allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=sorted(settings.cors_allowed_origins),
            allow_methods=["POST", "OPTIONS"],
            allow_headers=["*"],
        )

    app.include_router(visitors_router.router)
    logger.info("Visitor API configured (env=%s)", settings.app_env)
    return app
