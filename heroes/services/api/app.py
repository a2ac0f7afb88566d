# heroes/services/api/app.py
from __future__ import annotations

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from heroes.common.logging import get_logger
from heroes.common.settings import get_settings
from heroes.services.api.errors import register_exception_handlers
from heroes.services.api.routers import health, profiles, index, missionaries, headshots


def create_app() -> FastAPI:
    cfg = get_settings()
    log = get_logger("heroes", cfg.log_level)

    app = FastAPI(
        title="Heroes of Faith API",
        version=cfg.version,
        docs_url=f"{cfg.api.prefix}/docs",
        openapi_url=f"{cfg.api.prefix}/openapi.json",
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.api.cors_allow_origins,
        allow_methods=cfg.api.cors_allow_methods,
        allow_headers=cfg.api.cors_allow_headers,
        allow_credentials=cfg.api.cors_allow_credentials,
    )

    register_exception_handlers(app)

    # Static catalog
    app.include_router(health.router)
    app.include_router(profiles.router, prefix=cfg.api.prefix)

    # Normalized store
    if cfg.features.store_enabled:
        app.include_router(index.router)
        app.include_router(missionaries.router)
        app.include_router(headshots.router)
    else:
        log.info("Store routes disabled (FEATURES__STORE_ENABLED=false)")

    return app

app = create_app()


def main() -> None:
    """`heroes-api`: serve the app with uvicorn on the configured host and port."""
    cfg = get_settings()
    uvicorn.run(
        "heroes.services.api.app:app",
        host=cfg.api.host,
        port=cfg.api.port,
        log_level=cfg.log_level.lower(),
    )
