"""
Airport Directory API - Main application entry point.

Create/read/update/delete over a single MongoDB collection of airports.
Run with ``python -m app.main`` or ``uvicorn app.main:app``.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import Settings, get_settings
from app.core.database import Database
from app.core.exceptions import register_exception_handlers
from app.core.logging_config import setup_logging
from app.core.middleware import MaxBodySizeMiddleware
from app.airports.views import router as airports_router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """
    Build the application around an owned Database handle.

    The handle is connected in the lifespan and stored on ``app.state`` for
    the request dependencies; a failed connect leaves the app serving in
    degraded mode, where every airport route answers 500.
    """
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)
    database = database or Database.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan - startup and shutdown events."""
        # Startup
        await app.state.database.connect()
        yield
        # Shutdown
        await app.state.database.disconnect()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        description="Directory of airports: list, search by city, add, update and remove.",
        lifespan=lifespan,
    )
    app.state.database = database

    app.add_middleware(MaxBodySizeMiddleware, limit=settings.MAX_REQUEST_BODY_BYTES)

    # CORS middleware (outermost, so rejected bodies still carry CORS headers)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(airports_router)

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Detailed health check."""
        return {
            "status": "healthy" if app.state.database.is_connected else "degraded",
            "database": app.state.database.state.value,
            "version": settings.APP_VERSION,
        }

    return app


app = create_app()


def run() -> None:
    """Serve ``app`` on HOST:PORT."""
    settings = get_settings()
    logger.info(f"Server is running on http://{settings.HOST}:{settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
