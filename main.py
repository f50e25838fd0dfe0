"""
Session Auth API — application entry point.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.middleware import register_error_handlers, register_middleware
from auth.jwt import TokenSigner
from auth.routes import router as auth_router
from config.settings import Settings, load_settings
from database.session import build_engine, build_session_factory, create_tables

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
        stream=sys.stdout,
    )
    for _noisy in ("aiosqlite", "asyncio"):
        logging.getLogger(_noisy).setLevel(logging.WARNING)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()

    app = FastAPI(
        title="Session Auth API",
        version="1.0.0",
        description="Register, login, logout and whoami over JWT bearer or signed cookie.",
    )

    engine = build_engine(settings.database_url)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.token_signer = TokenSigner(settings.jwt_secret, settings.jwt_expiry_seconds)

    # CORS; the session cookie needs credentials
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    register_middleware(app)
    register_error_handlers(app)

    app.include_router(auth_router)

    @app.on_event("startup")
    async def on_startup():
        if settings.is_production and settings.uses_default_secrets():
            logger.warning("Running in production with a default JWT or cookie secret")
        await create_tables(engine)
        logger.info(
            "Application ready (%s mode).",
            "production" if settings.is_production else "development",
        )

    @app.on_event("shutdown")
    async def on_shutdown():
        await engine.dispose()

    return app


config = load_settings()
configure_logging(config)
app = create_app(config)

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level="debug" if config.debug else "info",
    )
