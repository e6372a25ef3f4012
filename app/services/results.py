"""
Product Operation Results

Discriminated outcome of every core product operation. Expected failures
(missing product, missing fields) are reported here instead of raised, and
the API layer maps them to HTTP responses.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from app.catalog.models import Product


class ProductStatus(str, Enum):
    """Outcome of a product operation."""

    OK = "ok"
    CREATED = "created"
    DELETED = "deleted"
    NOT_FOUND = "not_found"
    INVALID_INPUT = "invalid_input"


@dataclass
class ProductResult:
    """
    Result of a product operation.

    Attributes:
        status: Operation outcome
        product_id: Id the operation addressed or assigned
        product: Resulting product record, when there is one
        missing_fields: Required fields absent from an invalid payload
    """

    status: ProductStatus
    product_id: Optional[str] = None
    product: Optional[Product] = None
    missing_fields: List[str] = field(default_factory=list)

    @property
    def is_success(self) -> bool:
        return self.status in (
            ProductStatus.OK,
            ProductStatus.CREATED,
            ProductStatus.DELETED,
        )

    @classmethod
    def ok(cls, product: Product) -> "ProductResult":
        return cls(status=ProductStatus.OK, product_id=product.id, product=product)

    @classmethod
    def created(cls, product: Product) -> "ProductResult":
        return cls(status=ProductStatus.CREATED, product_id=product.id, product=product)

    @classmethod
    def deleted(cls, product_id: str) -> "ProductResult":
        return cls(status=ProductStatus.DELETED, product_id=product_id)

    @classmethod
    def not_found(cls, product_id: str) -> "ProductResult":
        return cls(status=ProductStatus.NOT_FOUND, product_id=product_id)

    @classmethod
    def invalid_input(
        cls,
        missing_fields: List[str],
        product_id: Optional[str] = None
    ) -> "ProductResult":
        return cls(
            status=ProductStatus.INVALID_INPUT,
            product_id=product_id,
            missing_fields=list(missing_fields),
        )
