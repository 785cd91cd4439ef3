"""
==============================================================================
Liquidation Price Check - Application Entry Point
==============================================================================

FastAPI application with:
- Barcode / item number catalog search
- TTL-cached Google Sheets catalog
- Health endpoints

Usage:
------
    # Development
    uvicorn pricecheck.main:app --reload

    # Production
    uvicorn pricecheck.main:app --host 0.0.0.0 --port 8000

==============================================================================
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pricecheck.config import get_settings
from pricecheck.core.exceptions import register_exception_handlers
from pricecheck.api.router import api_router
from pricecheck.catalog import CatalogCache, GoogleSheetsSource, get_catalog_cache, init_catalog_cache


# ============================================================================
# LOGGING SETUP
# ============================================================================

settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)

logger = logging.getLogger(__name__)


# ============================================================================
# APPLICATION FACTORY
# ============================================================================

class Application:
    """
    FastAPI application factory and manager.

    Handles application lifecycle including:
    - Catalog cache setup on startup
    - Middleware configuration
    - Router registration
    - Exception handler setup
    """

    def __init__(self):
        """Initialize the application."""
        self._settings = get_settings()
        self._app = self._create_app()

    def _create_app(self) -> FastAPI:
        """Create and configure the FastAPI application."""
        app = FastAPI(
            title=self._settings.app_name,
            version="1.0.0",
            description="Liquidation catalog lookup with discounted price tiers",
            lifespan=self._lifespan,
            docs_url="/docs",
            redoc_url="/redoc",
        )

        self._configure_middleware(app)
        register_exception_handlers(app)
        self._register_routers(app)

        return app

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        """Application lifespan manager."""
        self._startup()
        yield
        logger.info("🛑 Shutting down")

    def _startup(self) -> None:
        """Application startup tasks."""
        logger.info(f"🚀 Starting {self._settings.app_name}")

        # Tests may have installed their own cache already
        if get_catalog_cache() is None:
            self._init_catalog_cache()

        logger.info(f"📖 API Docs: http://{self._settings.host}:{self._settings.port}/docs")

    def _init_catalog_cache(self) -> None:
        """Create the catalog cache; the sheet is fetched on first lookup."""
        if not self._settings.sheets_configured:
            logger.warning(
                "⚠️ Google Sheets credentials incomplete; lookups will fail "
                "until they are configured"
            )

        source = GoogleSheetsSource.from_settings(self._settings)
        init_catalog_cache(
            CatalogCache(source, ttl_seconds=self._settings.sheets_cache_seconds)
        )
        logger.info(
            f"Catalog source {source.a1_range} "
            f"(cache {self._settings.sheets_cache_seconds:g}s)"
        )

    def _configure_middleware(self, app: FastAPI) -> None:
        """Configure application middleware."""
        app.add_middleware(
            CORSMiddleware,
            allow_origins=self._settings.cors_origins_list,
            allow_credentials=True,
            allow_methods=["GET"],
            allow_headers=["*"],
        )

    def _register_routers(self, app: FastAPI) -> None:
        """Register API routers."""
        app.include_router(api_router)

    @property
    def app(self) -> FastAPI:
        """Get the FastAPI application instance."""
        return self._app


# ============================================================================
# APPLICATION INSTANCE
# ============================================================================

application = Application()
app = application.app


# ============================================================================
# ENTRY POINT
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "pricecheck.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )
