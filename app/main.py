"""
BackOffice API - Main Application Entry Point
Clients, appointments, quotes, jobs and invoices behind one GraphQL endpoint.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import Settings, get_settings
from app.core.database import (
    close_db,
    create_engine,
    create_session_factory,
    init_db,
)
from app.graphql import create_graphql_router


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    settings: Settings = app.state.settings

    # Startup
    logger.info(f"🚀 Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    logger.info(f"📊 Environment: {settings.ENVIRONMENT}")

    # Initialize database tables (for development)
    if settings.is_development:
        await init_db(app.state.engine)

    yield

    # Shutdown
    logger.info("👋 Shutting down...")
    await close_db(app.state.engine)
    logger.info("✅ Database connections closed")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application.

    The settings, engine and session factory live on ``app.state`` for the
    lifetime of the process and are read-only after this call.
    """
    settings = settings or get_settings()

    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = FastAPI(
        title=settings.APP_NAME,
        description="""
## BackOffice API

GraphQL API for a small service business.

* **Clients** - clients and their addresses
* **Appointments** - requested visits
* **Quotes, Jobs, Invoices** - from estimate to billing
* **Users** - sign-up and bearer-token login

Send operations to `/graphql`, with `Authorization: Bearer <token>` for mutations.
        """,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.is_development else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.is_development else None,
        lifespan=lifespan,
    )

    engine = create_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    # CORS Middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(
        create_graphql_router(settings.GRAPHQL_IDE),
        prefix="/graphql",
        tags=["GraphQL"],
    )

    @app.get(
        "/health",
        tags=["Health"],
        summary="Server health check",
    )
    async def health_check():
        """Check if the API is running."""
        return {
            "status": "healthy",
            "app": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "environment": settings.ENVIRONMENT,
        }

    @app.get(
        "/",
        tags=["Info"],
        summary="API information",
    )
    async def root():
        """Get API information."""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "graphql": "/graphql",
            "health": "/health",
        }

    return app


app = create_app()


# For running with uvicorn directly
if __name__ == "__main__":
    import os
    import uvicorn

    # Get port from environment or default to 8000
    port = int(os.getenv("PORT", "8000"))
    settings = get_settings()

    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=port,
        reload=settings.is_development,
    )
