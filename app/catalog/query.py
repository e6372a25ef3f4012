"""
==============================================================================
Query Pipeline Module
==============================================================================

Read-side transforms over the product store.

Collection Pipeline:
-------------------
    store.values()  ->  category filter  ->  discount  ->  paginate

- Category filter: case-insensitive equality, store order preserved
- Discount: applied to view copies, stored prices untouched
- Pagination: ``results = matches[(page-1)*limit : page*limit]`` and
  ``next = page + 1`` while more matches remain beyond this page

Pagination Parameters:
---------------------
``page`` and ``limit`` arrive as raw query text and are parsed by reading
their leading ASCII integer ("10" -> 10, "3.7" -> 3, "5abc" -> 5). An absent
parameter takes its default. Anything that does not come out as a positive
integer degrades to the fixed fallback page instead of raising.

==============================================================================
"""

from __future__ import annotations

import logging
import re
from typing import Callable, List, Optional, Union

from .discounts import DiscountCatalog
from .models import PagedResult, Product
from .store import ProductStore


# Module logger
logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")

PageParam = Union[int, str, None]


def parse_positive_int(raw: PageParam, default: int) -> Optional[int]:
    """
    Parse a pagination parameter.

    Args:
        raw: Raw parameter value (None when absent)
        default: Value used when the parameter is absent

    Returns:
        Positive integer, or None when the value is malformed or not positive
    """
    if raw is None:
        return default

    if isinstance(raw, bool):
        return None

    if isinstance(raw, int):
        value = raw
    else:
        match = _LEADING_INT.match(str(raw))
        if not match:
            return None
        value = int(match.group(1))

    return value if value > 0 else None


def category_filter(category: Optional[str]) -> Callable[[Product], bool]:
    """Build the category predicate; an empty filter keeps everything."""
    if not category:
        return lambda product: True

    wanted = category.upper()
    return lambda product: (
        product.category is not None and product.category.upper() == wanted
    )


class QueryPipeline:
    """
    Filter, discount and paginate products from a store.

    Example:
        >>> pipeline = QueryPipeline(store, DiscountCatalog())
        >>> page = pipeline.list_products(category="food", discount_code="dupa")
        >>> page.page, page.limit
        (1, 10)
    """

    def __init__(self, store: ProductStore, discounts: DiscountCatalog) -> None:
        self._store = store
        self._discounts = discounts

    def get_product(
        self,
        product_id: str,
        discount_code: Optional[str] = None
    ) -> Optional[Product]:
        """
        Fetch one product view.

        Returns:
            Possibly discounted copy of the product, or None if absent
        """
        product = self._store.get(product_id)
        if product is None:
            logger.debug(f"Product not found: {product_id}")
            return None
        return self._discounts.apply(product, discount_code)

    def list_products(
        self,
        category: Optional[str] = None,
        discount_code: Optional[str] = None,
        page: PageParam = None,
        limit: PageParam = None
    ) -> PagedResult:
        """
        Run the collection pipeline.

        Args:
            category: Optional category filter (case-insensitive)
            discount_code: Optional discount code
            page: Page number, 1-indexed (default 1)
            limit: Page size (default 10)

        Returns:
            PagedResult for the requested page, or the fallback page when
            pagination parameters are malformed
        """
        matches: List[Product] = [
            self._discounts.apply(product, discount_code)
            for product in filter(category_filter(category), self._store.values())
        ]
        return self.paginate(matches, page, limit)

    @staticmethod
    def paginate(
        items: List[Product],
        page: PageParam = None,
        limit: PageParam = None
    ) -> PagedResult:
        """Slice one page out of an already filtered list."""
        parsed_limit = parse_positive_int(limit, DEFAULT_LIMIT)
        parsed_page = parse_positive_int(page, DEFAULT_PAGE)

        if parsed_limit is None or parsed_page is None:
            logger.debug(f"Invalid pagination (page={page!r}, limit={limit!r})")
            return PagedResult.fallback()

        start = (parsed_page - 1) * parsed_limit
        end = start + parsed_limit
        next_page = parsed_page + 1 if len(items) > parsed_limit * parsed_page else None

        return PagedResult(
            page=parsed_page,
            limit=parsed_limit,
            next=next_page,
            results=items[start:end],
        )
