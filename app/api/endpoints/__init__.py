"""
==============================================================================
API Endpoints
==============================================================================

REST API routers.

Routers:
--------
- health: Health check endpoints
- products: Product catalog CRUD

==============================================================================
"""

from . import health, products

__all__ = ["health", "products"]
