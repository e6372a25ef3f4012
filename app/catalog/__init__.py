"""
==============================================================================
Catalog Package - Product Data Access
==============================================================================

In-memory product catalog with ordered storage and read-time transforms.

Classes:
--------
- Product: Pydantic model for products
- PagedResult: One page of a filtered collection
- ProductStore: Insertion-ordered product repository
- DiscountCatalog: Discount code to ratio lookup
- QueryPipeline: Filter, discount and paginate
- IdentifierGenerator: Product id source

==============================================================================
"""

from .models import Product, PagedResult, REQUIRED_PRODUCT_FIELDS
from .store import ProductStore
from .discounts import DiscountCatalog, DEFAULT_DISCOUNT_CODES
from .query import QueryPipeline
from .identifiers import IdentifierGenerator, SequenceIdentifierGenerator

__all__ = [
    "Product",
    "PagedResult",
    "REQUIRED_PRODUCT_FIELDS",
    "ProductStore",
    "DiscountCatalog",
    "DEFAULT_DISCOUNT_CODES",
    "QueryPipeline",
    "IdentifierGenerator",
    "SequenceIdentifierGenerator",
]
