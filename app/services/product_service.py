"""
==============================================================================
Product Service Module
==============================================================================

Service layer for the product catalog.

This module implements:
- ProductService: facade over the store, query pipeline and mutations
- Create / replace / partial update / delete rules
- Discriminated results (ProductResult) instead of raised errors

Mutation Rules:
--------------
- create:  category, name and price must all be present (null counts as
           present); a fresh id is assigned
- replace: product must exist; same presence check; the record becomes
           exactly the supplied fields plus the original id
- patch:   product must exist; only category/name/price supplied with a
           truthy value are applied, so {"price": 0} leaves price untouched
- delete:  product must exist

Each read-modify-write runs under the store lock.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Optional

from app.catalog.discounts import DiscountCatalog
from app.catalog.identifiers import IdentifierGenerator
from app.catalog.models import PagedResult, Product
from app.catalog.query import PageParam, QueryPipeline
from app.catalog.store import ProductStore
from app.schemas.product import ProductFields
from app.services.results import ProductResult


# Module logger
logger = logging.getLogger(__name__)


class ProductService:
    """
    Product catalog operations.

    Attributes:
        _store: Product store owning all records
        _discounts: Discount code lookup
        _id_generator: Source of new product ids
        _query: Read pipeline over the store

    Example:
        >>> service = ProductService(ProductStore(), DiscountCatalog())
        >>> result = service.create_product(
        ...     ProductFields(category="FURNITURE", name="Desk", price=5000)
        ... )
        >>> service.get_product(result.product_id).product.name
        'Desk'
    """

    def __init__(
        self,
        store: ProductStore,
        discounts: DiscountCatalog,
        id_generator: Optional[IdentifierGenerator] = None
    ) -> None:
        """
        Initialize the product service.

        Args:
            store: Product store
            discounts: Discount catalog applied on reads
            id_generator: Id source (random uuid-based if None)
        """
        self._store = store
        self._discounts = discounts
        self._id_generator = id_generator or IdentifierGenerator()
        self._query = QueryPipeline(store, discounts)

    @property
    def store(self) -> ProductStore:
        return self._store

    @property
    def id_generator(self) -> IdentifierGenerator:
        return self._id_generator

    # =========================================================================
    # READ OPERATIONS
    # =========================================================================

    def exists(self, product_id: str) -> bool:
        return product_id in self._store

    def get_product(
        self,
        product_id: str,
        discount_code: Optional[str] = None
    ) -> ProductResult:
        """
        Get one product, discounted when the code is known.

        Returns:
            OK with the product view, or NOT_FOUND
        """
        product = self._query.get_product(product_id, discount_code)
        if product is None:
            return ProductResult.not_found(product_id)
        return ProductResult.ok(product)

    def list_products(
        self,
        category: Optional[str] = None,
        discount_code: Optional[str] = None,
        page: PageParam = None,
        limit: PageParam = None
    ) -> PagedResult:
        """List one page of products; malformed paging gives the fallback page."""
        return self._query.list_products(category, discount_code, page, limit)

    # =========================================================================
    # WRITE OPERATIONS
    # =========================================================================

    def create_product(self, fields: ProductFields) -> ProductResult:
        """
        Create a product under a fresh id.

        Returns:
            CREATED with the stored record, or INVALID_INPUT
        """
        missing = fields.missing_required()
        if missing:
            logger.warning(f"Product creation rejected: missing {', '.join(missing)}")
            return ProductResult.invalid_input(missing)

        product_id = self._id_generator.generate()
        product = Product(**fields.supplied_values(), id=product_id)
        self._store.put(product_id, product)

        logger.info(f"✅ Product created: {product_id} ({product.name})")
        return ProductResult.created(product)

    def replace_product(self, product_id: str, fields: ProductFields) -> ProductResult:
        """
        Replace a product with exactly the supplied fields.

        Returns:
            OK with the new record, NOT_FOUND, or INVALID_INPUT
        """
        with self._store.locked() as store:
            if product_id not in store:
                return ProductResult.not_found(product_id)

            missing = fields.missing_required()
            if missing:
                logger.warning(
                    f"Product replace rejected for {product_id}: missing {', '.join(missing)}"
                )
                return ProductResult.invalid_input(missing, product_id)

            product = Product(**fields.supplied_values(), id=product_id)
            store.put(product_id, product)

        logger.info(f"Product replaced: {product_id}")
        return ProductResult.ok(product)

    def patch_product(self, product_id: str, fields: ProductFields) -> ProductResult:
        """
        Merge truthy category/name/price values into an existing product.

        Returns:
            OK with the merged record, or NOT_FOUND
        """
        with self._store.locked() as store:
            existing = store.get(product_id)
            if existing is None:
                return ProductResult.not_found(product_id)

            updates = fields.truthy_updates()
            product = existing.model_copy(update=updates)
            store.put(product_id, product)

        logger.info(f"Product updated: {product_id} ({', '.join(updates) or 'no changes'})")
        return ProductResult.ok(product)

    def delete_product(self, product_id: str) -> ProductResult:
        """
        Delete a product.

        Returns:
            DELETED, or NOT_FOUND
        """
        with self._store.locked() as store:
            if not store.delete(product_id):
                return ProductResult.not_found(product_id)

        logger.info(f"🗑️ Product deleted: {product_id}")
        return ProductResult.deleted(product_id)
