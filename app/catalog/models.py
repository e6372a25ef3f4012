"""
==============================================================================
Product Models Module
==============================================================================

Pydantic models for catalog records and query results.

==============================================================================
"""

from typing import Annotated, List, Optional, Union
from pydantic import BaseModel, Field, ConfigDict, NonNegativeInt


# Fields every created or replaced product must supply
REQUIRED_PRODUCT_FIELDS = ("category", "name", "price")

# Non-negative and finite; integers stay integers so 2400 is echoed as 2400
Price = Union[NonNegativeInt, Annotated[float, Field(ge=0, allow_inf_nan=False)]]


class Product(BaseModel):
    """
    Product model for catalog items.

    Extra keys supplied by clients are carried on the record unchanged.
    ``category``, ``name`` and ``price`` may be None when a client
    explicitly sent null for them.

    Attributes:
        id: Opaque identifier, also the store key
        category: Category label (matched case-insensitively when filtering)
        name: Product display name
        price: Unit price
    """

    model_config = ConfigDict(
        from_attributes=True,
        extra="allow",
    )

    id: str = Field(..., min_length=1, description="Product identifier")
    category: Optional[str] = Field(default=None, description="Category")
    name: Optional[str] = Field(default=None, description="Product name")
    price: Optional[Price] = Field(default=None, description="Unit price")

    def with_price(self, price: float) -> "Product":
        """Return a copy of this product carrying a different price."""
        return self.model_copy(update={"price": price}, deep=True)


class PagedResult(BaseModel):
    """One page of a filtered product collection."""

    page: int = Field(ge=1)
    limit: int = Field(ge=1)
    next: Optional[int] = None
    results: List[Product] = Field(default_factory=list)

    @classmethod
    def fallback(cls) -> "PagedResult":
        """Result returned for malformed pagination parameters."""
        return cls(page=1, limit=10, next=None, results=[])
