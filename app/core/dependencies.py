"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency injection for product routes.

This module implements:
- get_product_service: the ProductService owned by the running application
- get_pagination: raw pagination query parameters

Design Pattern: Dependency Injection
-----------------------------------
The store and its service live on ``app.state``, created once per
Application instance. Handlers receive them through ``Depends`` rather than
importing module-level globals, so every Application (and every test) owns
an isolated catalog.

Usage Examples:
--------------
    @router.get("/{product_id}")
    async def get_product(
        product_id: str,
        service: ProductService = Depends(get_product_service)
    ):
        ...

==============================================================================
"""

from __future__ import annotations

from typing import Dict, Optional

from fastapi import Query, Request

from app.services.product_service import ProductService


def get_product_service(request: Request) -> ProductService:
    """FastAPI dependency returning the application's ProductService."""
    return request.app.state.product_service


def get_pagination(
    page: Optional[str] = Query(None, description="Page number (1-indexed)"),
    limit: Optional[str] = Query(None, description="Items per page")
) -> Dict[str, Optional[str]]:
    """
    FastAPI dependency for pagination parameters.

    Values are passed through as raw text: malformed values must reach the
    query pipeline, which degrades them to the fallback page instead of
    failing request validation.

    Returns:
        Dictionary with raw page and limit values (None when absent)
    """
    return {
        "page": page,
        "limit": limit
    }
