"""
==============================================================================
Health Check Endpoints
==============================================================================

System health status endpoints for monitoring and orchestration.

==============================================================================
"""

from fastapi import APIRouter, Depends

from app.core.dependencies import get_product_service
from app.services.product_service import ProductService


router = APIRouter(prefix="/health", tags=["Health"])


class HealthController:
    """Controller for health check operations."""

    def __init__(self, service: ProductService):
        self._service = service

    def check_store(self) -> dict:
        """Check product store status."""
        products = len(self._service.store)
        return {"status": "healthy" if products else "empty", "products": products}

    def get_health(self) -> dict:
        """Get full health status."""
        store_info = self.check_store()

        return {
            "status": "healthy",
            "components": {
                "api": "healthy",
                "store": store_info["status"]
            },
            "details": {
                "products_loaded": store_info["products"]
            }
        }


@router.get("")
async def health_check(service: ProductService = Depends(get_product_service)):
    """
    Health check endpoint.

    Returns API status and the number of products in the store.
    """
    controller = HealthController(service)
    return controller.get_health()


@router.get("/ready")
async def readiness_check():
    """Readiness probe for container orchestration."""
    return {"ready": True}


@router.get("/live")
async def liveness_check():
    """Liveness probe for container orchestration."""
    return {"alive": True}
