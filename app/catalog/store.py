"""
==============================================================================
Product Store Module
==============================================================================

Insertion-ordered in-memory repository of products keyed by id.

Storage:
--------
A plain dict gives both O(1) key lookup and stable iteration order:
new keys append, overwriting an existing key keeps its position.

Ownership:
----------
Products are copied on the way in and on the way out, so callers never hold
a reference to a stored record and a values() snapshot never reflects
later writes.

Locking:
--------
Every access takes a re-entrant lock. Callers running a read-modify-write
sequence wrap it in ``store.locked()`` so that it is atomic with respect to
other writers.

==============================================================================
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

from .models import Product


# Module logger
logger = logging.getLogger(__name__)


class ProductStore:
    """
    Ordered key-value store of Product records.

    Example:
        >>> store = ProductStore()
        >>> store.put("_jappko", Product(id="_jappko", name="Apple"))
        >>> store.get("_jappko").name
        'Apple'
        >>> store.delete("_jappko")
        True
    """

    def __init__(self) -> None:
        self._items: Dict[str, Product] = {}
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __contains__(self, product_id: object) -> bool:
        with self._lock:
            return product_id in self._items

    @contextmanager
    def locked(self) -> Iterator["ProductStore"]:
        """Hold the store lock for a multi-step operation."""
        with self._lock:
            yield self

    def get(self, product_id: str) -> Optional[Product]:
        """
        Exact key lookup.

        Returns:
            A copy of the stored product, or None if absent
        """
        with self._lock:
            product = self._items.get(product_id)
            return product.model_copy(deep=True) if product is not None else None

    def put(self, product_id: str, product: Product) -> None:
        """Insert or overwrite the record stored under product_id."""
        with self._lock:
            self._items[product_id] = product.model_copy(deep=True)

    def delete(self, product_id: str) -> bool:
        """
        Remove a record.

        Returns:
            True if the id was present
        """
        with self._lock:
            return self._items.pop(product_id, None) is not None

    def values(self) -> List[Product]:
        """Snapshot of all products in insertion order."""
        with self._lock:
            return [product.model_copy(deep=True) for product in self._items.values()]
