# Main application entry point
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import auth_router, notes_router, register_exception_handlers
from .config import Settings, get_settings
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .core.schemas.common import HealthResponse
from .database import Database
from .security import PasswordHasher, TokenIssuer

logger = get_logger("main")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application.

    Used as a factory (``uvicorn quirknotes.main:create_app --factory``) so
    nothing reads the environment at import time.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events."""
        setup_logging(settings)
        logger.info(
            "Starting QuirkNotes application",
            extra={"version": settings.app_version, "environment": settings.environment},
        )

        db = Database.from_settings(settings)
        db.connect()
        try:
            await db.create_tables()
            logger.info("Database tables created/verified")
        except Exception as e:
            logger.error("Failed to create database tables", exc_info=e)
            await db.dispose()
            raise

        app.state.db = db
        app.state.hasher = PasswordHasher(rounds=settings.password_hash_rounds)
        app.state.tokens = TokenIssuer(
            key_source=lambda: settings.secret_key,
            algorithm=settings.algorithm,
            lifetime=timedelta(minutes=settings.access_token_expire_minutes),
        )

        yield

        logger.info("Shutting down QuirkNotes application")
        await db.dispose()

    app = FastAPI(
        title=settings.app_name,
        description="Personal note-taking API",
        version=settings.app_version,
        lifespan=lifespan,
    )

    # Add logging middleware
    app.add_middleware(LoggingMiddleware)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(auth_router)
    app.include_router(notes_router)

    @app.get("/health", response_model=HealthResponse)
    async def basic_health():
        return HealthResponse(status="ok")

    return app


if __name__ == "__main__":
    import uvicorn

    config = get_settings()
    uvicorn.run(
        "quirknotes.main:create_app",
        factory=True,
        host=config.host,
        port=config.port,
        reload=config.reload,
    )
