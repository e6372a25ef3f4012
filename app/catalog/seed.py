"""
==============================================================================
Catalog Seed Module
==============================================================================

Initial product data loaded into the store at startup.

Sources (in store order):
------------------------
1. Built-in products (``BUILTIN_PRODUCTS``); Apple keeps the fixed id
   ``_jappko``, the rest get fresh ids
2. External JSON file, a list of product objects:

   [
     {"category": "FOOD", "name": "Pear", "price": 3.5},
     ...
   ]

   Every external entry gets a fresh id. Entries that are not objects or
   lack category/name/price are skipped.

==============================================================================
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from app.schemas.product import ProductFields
from .identifiers import IdentifierGenerator
from .models import Product
from .store import ProductStore


# Module logger
logger = logging.getLogger(__name__)


BUILTIN_PRODUCTS: List[Dict[str, Any]] = [
    {"id": "_jappko", "category": "FOOD", "name": "Apple", "price": 42.20},
    {"category": "FOOD", "name": "Banana", "price": 13.37},
    {"category": "FOOD", "name": "Corn", "price": 0.69},
    {"category": "FURNITURE", "name": "Sofa", "price": 2400},
    {"category": "FURNITURE", "name": "Chair", "price": 1234},
]


def _parse_entry(item: Any, position: int) -> Optional[ProductFields]:
    """Validate one seed entry, returning None when it must be skipped."""
    if not isinstance(item, dict):
        logger.warning(f"Skipping seed entry #{position}: not an object")
        return None

    try:
        fields = ProductFields.model_validate(item)
    except ValidationError as e:
        logger.warning(f"Skipping seed entry #{position}: {e.error_count()} invalid field(s)")
        return None

    missing = fields.missing_required()
    if missing:
        logger.warning(f"Skipping seed entry #{position}: missing {', '.join(missing)}")
        return None

    return fields


def load_seed_file(products_file: Path) -> List[ProductFields]:
    """
    Read the external seed list.

    Args:
        products_file: Path to a JSON array of product objects

    Returns:
        Valid entries in file order

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError: If the file is not valid JSON
        ValueError: If the top-level value is not a list
    """
    with products_file.open("r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"Seed file must contain a JSON array: {products_file}")

    entries = []
    for position, item in enumerate(data):
        fields = _parse_entry(item, position)
        if fields is not None:
            entries.append(fields)

    return entries


def seed_store(
    store: ProductStore,
    id_generator: IdentifierGenerator,
    products_file: Optional[Path] = None
) -> int:
    """
    Load built-in products, then the external file, into the store.

    A missing or unreadable external file is logged and the built-in
    products are kept.

    Returns:
        Number of products added
    """
    added = 0

    for item in BUILTIN_PRODUCTS:
        values = dict(item)
        product_id = values.pop("id", None) or id_generator.generate()
        store.put(product_id, Product(**values, id=product_id))
        added += 1

    if products_file is None:
        return added

    try:
        external = load_seed_file(products_file)
    except FileNotFoundError:
        logger.warning(f"⚠️ Products file not found: {products_file}")
        return added
    except (json.JSONDecodeError, ValueError) as e:
        logger.error(f"❌ Failed to load products file {products_file}: {e}")
        return added

    for fields in external:
        product_id = id_generator.generate()
        store.put(product_id, Product(**fields.supplied_values(), id=product_id))
        added += 1

    logger.info(f"Loaded {len(external)} product(s) from {products_file}")
    return added
