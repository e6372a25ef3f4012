"""
==============================================================================
Main API Router
==============================================================================

Combines all REST routes under the configured API prefix.

==============================================================================
"""

from fastapi import APIRouter

from app.api.endpoints import health, products


class MainAPIRouter:
    """
    Main API router combining all endpoint routers.

    Provides a single entry point for all API endpoints.
    """

    def __init__(self, prefix: str = "/api"):
        """Initialize the main router with all sub-routers."""
        self._router = APIRouter(prefix=prefix)
        self._include_routers()

    def _include_routers(self) -> None:
        """Include all endpoint routers."""
        self._router.include_router(health.router)
        self._router.include_router(products.router)

    @property
    def router(self) -> APIRouter:
        """Get the FastAPI router instance."""
        return self._router
