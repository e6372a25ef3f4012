"""
==============================================================================
Services Package - Business Logic Layer
==============================================================================

Service classes implementing catalog business logic.

This package provides:
- ProductService: product reads and mutations
- ProductResult / ProductStatus: discriminated operation outcomes

Architecture Pattern: Service Layer
----------------------------------
    ┌─────────────────┐
    │   API Router    │  ← maps results to HTTP responses
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │ ProductService  │  ← validation and merge rules
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │  ProductStore   │  ← ordered in-memory records
    └─────────────────┘

Usage:
------
    from app.services import ProductService

    service = ProductService(store, discounts)
    result = service.get_product("_jappko", discount_code="dupa")
    if result.is_success:
        print(result.product.price)

==============================================================================
"""

from .product_service import ProductService
from .results import ProductResult, ProductStatus

__all__ = [
    "ProductService",
    "ProductResult",
    "ProductStatus",
]
