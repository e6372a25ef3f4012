"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Request and response schemas using Pydantic for validation.

This package provides:
- Product: product payload and creation response schemas

==============================================================================
"""

from .product import ProductFields, ProductCreatedResponse

__all__ = [
    "ProductFields",
    "ProductCreatedResponse",
]
