# app/main.py

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1.api import api_router, root_router
from app.core.config import Settings, get_settings
from app.core.errors import register_exception_handlers
from app.core.logging import add_access_log, configure_logging
from app.db.init_db import init_db
from app.db.session import create_db_engine, create_session_factory

logger = logging.getLogger(__name__)


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
    )

    # ---------- DATABASE ----------
    engine = create_db_engine(settings.database_url)
    if settings.create_tables:
        init_db(engine)

    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    # ---------- CORS ----------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.backend_cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ---------- LOGGING / ERRORS ----------
    add_access_log(app)
    register_exception_handlers(app)

    # ---------- ROUTERS ----------
    @app.get("/", summary="Liveness message")
    def index():
        return {"message": "Backend is running"}

    @app.get("/healthz", summary="Health check")
    def healthz():
        return {"status": "ok"}

    app.include_router(api_router, prefix=settings.api_prefix)
    app.include_router(root_router)

    logger.info("%s %s ready", settings.PROJECT_NAME, settings.VERSION)
    return app
