"""
==============================================================================
Discount Catalog Module
==============================================================================

Static mapping from discount code to a multiplicative price ratio.

Rules:
------
- Codes are matched case-insensitively (normalized to uppercase)
- Ratios must lie in (0, 1]
- Discounted prices are rounded to 2 decimal places, half away from zero,
  on the decimal representation of ``price * ratio``:

      42.20 * 0.8 = 33.760000000000005  ->  33.76

==============================================================================
"""

from __future__ import annotations

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Mapping, Optional

from .models import Product


# Module logger
logger = logging.getLogger(__name__)

DEFAULT_DISCOUNT_CODES: Dict[str, float] = {
    "DUPA": 0.8,
}

_CENTS = Decimal("0.01")


def round_price(value: float) -> float:
    """Round a price to 2 decimal places, half away from zero."""
    return float(Decimal(repr(value)).quantize(_CENTS, rounding=ROUND_HALF_UP))


class DiscountCatalog:
    """
    Read-only discount code lookup.

    Example:
        >>> discounts = DiscountCatalog({"DUPA": 0.8})
        >>> discounts.ratio_for("dupa")
        0.8
        >>> discounts.ratio_for("abc") is None
        True
    """

    def __init__(self, codes: Optional[Mapping[str, float]] = None) -> None:
        """
        Build the catalog.

        Args:
            codes: Code to ratio mapping (defaults to DEFAULT_DISCOUNT_CODES)

        Raises:
            ValueError: If a ratio lies outside (0, 1]
        """
        source = DEFAULT_DISCOUNT_CODES if codes is None else codes
        self._codes: Dict[str, float] = {}

        for code, ratio in source.items():
            ratio = float(ratio)
            if not 0 < ratio <= 1:
                raise ValueError(
                    f"Discount ratio for '{code}' must be in (0, 1], got {ratio}"
                )
            self._codes[code.upper()] = ratio

        logger.debug(f"Discount catalog ready with {len(self._codes)} code(s)")

    @property
    def codes(self) -> Dict[str, float]:
        return dict(self._codes)

    def ratio_for(self, code: Optional[str]) -> Optional[float]:
        """Look up the ratio for a code; unknown or empty codes give None."""
        if not code:
            return None
        return self._codes.get(code.upper())

    def apply(self, product: Product, code: Optional[str]) -> Product:
        """
        Derive a discounted view of a product.

        The given product is never modified. Without a known code, or when
        the product has no price, an unchanged copy is returned.
        """
        ratio = self.ratio_for(code)
        if ratio is None or product.price is None:
            return product.model_copy(deep=True)
        return product.with_price(round_price(product.price * ratio))
