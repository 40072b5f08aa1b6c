"""
User account service — application entry point.
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.auth import router as auth_router
from api.middleware import register_exception_handlers, register_middleware
from api.users import router as users_router
from auth.strategies import BearerStrategy
from auth.tokens import TokenIssuer
from config.settings import Settings, config

logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
    stream=sys.stdout,
)
for _noisy in ("sqlalchemy.engine", "asyncpg"):
    logging.getLogger(_noisy).setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


def create_app(settings: Settings = config) -> FastAPI:
    # Fails here, before serving anything, when JWT_SECRET is missing.
    token_issuer = TokenIssuer(
        settings.jwt_secret,
        expiry_seconds=settings.token_expiry,
        algorithm=settings.jwt_algorithm,
    )
    if token_issuer.expiry_seconds is None:
        logger.warning("JWT_EXPIRY_SECONDS=0, issued tokens never expire")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.create_tables_on_startup:
            from database.session import init_models

            logger.info("Ensuring database tables exist…")
            await init_models()
        logger.info("Application ready to accept requests.")
        yield

    app = FastAPI(
        title="User Account Service",
        version="1.0.0",
        description="Account registration, login and user lookup.",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.token_issuer = token_issuer
    app.state.bearer_strategy = BearerStrategy(token_issuer)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_middleware(app)
    register_exception_handlers(app)

    # Routes
    app.include_router(auth_router)
    app.include_router(users_router)

    return app


if __name__ == "__main__":
    uvicorn.run(
        "main:create_app",
        factory=True,
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level="debug" if config.debug else "info",
    )
