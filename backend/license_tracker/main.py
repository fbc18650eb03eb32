"""
License Tracker - Main FastAPI Application

This is the entry point for the FastAPI application.
It configures middleware, routes, and lifecycle handlers.
"""

from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .config.settings import Settings, settings as default_settings
from .api.routes import api_router, auth_router
from .api.middleware import CorrelationIdMiddleware, register_error_handlers
from .repositories.catalog_repo import CatalogRepository
from .repositories.mongo_client import MongoStore
from .domain.errors import DomainError
from .services.catalog_service import CatalogService
from .utils.logger import setup_logging, get_logger

logger = get_logger(__name__)

APP_VERSION = "1.0.0"


# =============================================================================
# Application Lifecycle
# =============================================================================

def _build_lifespan(config: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan handler.

        Startup:
            - Connects the MongoDB store
            - Creates indexes
            - Seeds the status / vehicle class catalogs; startup fails if this fails

        Shutdown:
            - Closes the store
        """
        logger.info("Starting License Tracker...")

        store = MongoStore.from_settings(config).connect()
        app.state.store = store

        try:
            store.create_indexes()
        except Exception as e:
            logger.error(f"Failed to create indexes: {e}", exc_info=True)

        catalog = CatalogService(
            statuses=CatalogRepository.statuses(store.database),
            vehicle_classes=CatalogRepository.vehicle_classes(store.database)
        )
        try:
            catalog.seed_defaults()
        except DomainError as e:
            # An empty status catalog rejects every transition
            logger.critical(f"Failed to seed catalogs, aborting startup: {e.message}", exc_info=True)
            store.close()
            raise

        logger.info("Application started successfully")

        yield

        logger.info("Shutting down...")
        store.close()
        logger.info("Application shutdown complete")

    return lifespan


# =============================================================================
# Application Factory
# =============================================================================

def create_app(config: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    config = config or default_settings
    setup_logging(config)

    application = FastAPI(
        title="License Tracker",
        description="Driving-license application tracking with status workflow",
        version=APP_VERSION,
        lifespan=_build_lifespan(config),
        docs_url="/api/docs" if config.debug else None,
        redoc_url="/api/redoc" if config.debug else None,
        openapi_url="/api/openapi.json" if config.debug else None,
    )
    application.state.settings = config

    _configure_middleware(application, config)
    register_error_handlers(application)
    _configure_routes(application, config)

    return application


def _configure_middleware(app: FastAPI, config: Settings) -> None:
    """Configure application middleware."""
    # allow_credentials must be False when allowing all origins
    allow_all = config.cors_origins.strip() == "*"

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else config.cors_origins_list,
        allow_credentials=not allow_all,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Correlation-Id"],
    )

    app.add_middleware(CorrelationIdMiddleware)


def _configure_routes(app: FastAPI, config: Settings) -> None:
    """Configure application routes."""
    app.include_router(auth_router, tags=["Auth"])
    app.include_router(api_router, prefix="/api")

    @app.get("/health", tags=["Health"])
    async def health(request: Request):
        """
        Health check endpoint.

        Returns application health status including database connectivity.
        """
        store: Optional[MongoStore] = getattr(request.app.state, "store", None)
        mongo_health = store.health_check() if store else {"status": "unhealthy", "error": "store not initialised"}
        return {
            "status": "healthy" if mongo_health.get("status") == "healthy" else "degraded",
            "version": APP_VERSION,
            "mongo": mongo_health
        }

    @app.get("/", tags=["Health"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": "License Tracker",
            "version": APP_VERSION,
            "environment": config.environment,
        }


# =============================================================================
# Application Instance
# =============================================================================

app = create_app()
