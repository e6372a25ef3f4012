"""
==============================================================================
Product Catalog API - Application Entry Point
==============================================================================

FastAPI application with:
- RESTful product CRUD endpoints
- Category filtering, pagination and discount codes
- In-memory product store seeded at startup
- Static web client serving

Usage:
------
    # Development
    uvicorn app.main:app --reload

    # Production
    uvicorn app.main:app --host 0.0.0.0 --port 3000

==============================================================================
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.config import Settings, get_settings
from app.core.exceptions import register_exception_handlers
from app.api.router import MainAPIRouter
from app.catalog.discounts import DiscountCatalog
from app.catalog.identifiers import IdentifierGenerator
from app.catalog.seed import seed_store
from app.catalog.store import ProductStore
from app.services.product_service import ProductService


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
    - Store creation and seeding
    - Middleware configuration
    - Router registration
    - Exception handler setup

    Every instance owns its own product store, exposed to request
    handlers through ``app.state.product_service``.
    """

    CORS_METHODS = ["OPTIONS", "GET", "POST", "PUT", "PATCH", "DELETE"]

    def __init__(
        self,
        settings: Optional[Settings] = None,
        id_generator: Optional[IdentifierGenerator] = None
    ):
        """
        Initialize the application.

        Args:
            settings: Configuration (global settings if None)
            id_generator: Product id source (random ids if None)
        """
        self._settings = settings or get_settings()
        self._service = ProductService(
            store=ProductStore(),
            discounts=DiscountCatalog(self._settings.discount_codes_map),
            id_generator=id_generator,
        )
        self._app = self._create_app()

    def _create_app(self) -> FastAPI:
        """Create and configure the FastAPI application."""
        app = FastAPI(
            title=self._settings.app_name,
            version="1.0.0",
            description="In-memory product catalog with filtering, pagination and discounts",
            lifespan=self._lifespan,
            docs_url="/docs",
            redoc_url="/redoc",
        )
        app.state.product_service = self._service

        # Configure middleware
        self._configure_middleware(app)

        # Register exception handlers
        register_exception_handlers(app)

        # Register routers
        self._register_routers(app)

        # Static assets and web client
        self._mount_static(app)

        return app

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        """Application lifespan manager."""
        # Startup
        self._startup()
        yield
        # Shutdown
        self._shutdown()

    def _startup(self) -> None:
        """Application startup tasks."""
        logger.info("=" * 60)
        logger.info(f"🚀 Starting {self._settings.app_name}")
        logger.info("=" * 60)

        self._load_products()

        logger.info("=" * 60)
        logger.info(f"✅ {self._settings.app_name} ready")
        logger.info(f"📍 Running on http://{self._settings.host}:{self._settings.port}")
        logger.info(f"📖 API Docs: http://{self._settings.host}:{self._settings.port}/docs")
        logger.info("=" * 60)

    def _shutdown(self) -> None:
        """Application shutdown tasks."""
        logger.info("🛑 Shutting down...")
        logger.info("✅ Shutdown complete")

    def _load_products(self) -> None:
        """Seed the product store."""
        added = seed_store(
            self._service.store,
            self._service.id_generator,
            self._settings.products_path,
        )
        logger.info(f"✅ Loaded {added} products")

    def _configure_middleware(self, app: FastAPI) -> None:
        """Configure application middleware."""
        app.add_middleware(
            CORSMiddleware,
            allow_origins=self._settings.cors_origins_list,
            allow_credentials=True,
            allow_methods=self.CORS_METHODS,
            allow_headers=["*"],
            max_age=self._settings.cors_max_age,
        )

        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            """Log method and path of every request."""
            target = request.url.path
            if request.url.query:
                target = f"{target}?{request.url.query}"
            logger.info(f'[{request.method}] "{target}"')
            return await call_next(request)

    def _register_routers(self, app: FastAPI) -> None:
        """Register API routers."""
        app.include_router(MainAPIRouter(self._settings.api_prefix).router)

    def _mount_static(self, app: FastAPI) -> None:
        """Mount <static>/assets at /assets and <static>/client at /, when present."""
        assets = self._settings.static_path / "assets"
        client = self._settings.static_path / "client"

        if assets.is_dir():
            app.mount("/assets", StaticFiles(directory=assets), name="assets")
        if client.is_dir():
            app.mount("/", StaticFiles(directory=client, html=True), name="client")

        if not assets.is_dir() and not client.is_dir():
            logger.debug(f"No static files under {self._settings.static_path}")

    @property
    def service(self) -> ProductService:
        """Get the application's product service."""
        return self._service

    @property
    def app(self) -> FastAPI:
        """Get the FastAPI application instance."""
        return self._app


# ============================================================================
# APPLICATION INSTANCE
# ============================================================================

# Create application instance
application = Application()
app = application.app


# ============================================================================
# ENTRY POINT
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )
