"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides isolated stores, services, settings and API clients.

==============================================================================
"""

import json
import pytest
from pathlib import Path
from typing import Generator
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import Application
from app.catalog.discounts import DiscountCatalog
from app.catalog.identifiers import SequenceIdentifierGenerator
from app.catalog.models import Product
from app.catalog.store import ProductStore
from app.services.product_service import ProductService


# ============================================================================
# SEED DATA
# ============================================================================

EXTERNAL_SEED = [
    {"category": "DRINKS", "name": "Water", "price": 1.5},
    {"category": "food", "name": "Bread", "price": 3.2},
]


# ============================================================================
# CORE FIXTURES
# ============================================================================

@pytest.fixture
def store() -> ProductStore:
    """Store holding three products: two FOOD, one FURNITURE."""
    store = ProductStore()
    for product in [
        Product(id="_a", category="FOOD", name="Apple", price=42.20),
        Product(id="_b", category="FURNITURE", name="Sofa", price=2400),
        Product(id="_c", category="Food", name="Corn", price=0.69),
    ]:
        store.put(product.id, product)
    return store


@pytest.fixture
def discounts() -> DiscountCatalog:
    """Catalog with the default DUPA code."""
    return DiscountCatalog({"DUPA": 0.8})


@pytest.fixture
def service(store: ProductStore, discounts: DiscountCatalog) -> ProductService:
    """Service over the three-product store with sequential ids."""
    return ProductService(store, discounts, SequenceIdentifierGenerator())


# ============================================================================
# API FIXTURES
# ============================================================================

@pytest.fixture
def seed_file(tmp_path: Path) -> Path:
    """External seed list written to a temporary file."""
    path = tmp_path / "products.json"
    path.write_text(json.dumps(EXTERNAL_SEED), encoding="utf-8")
    return path


@pytest.fixture
def settings(seed_file: Path, tmp_path: Path) -> Settings:
    """Settings pointing at the temporary seed file."""
    return Settings(
        _env_file=None,
        debug=False,
        products_file=str(seed_file),
        static_directory=str(tmp_path / "public"),
        discount_codes='{"DUPA": 0.8}',
    )


@pytest.fixture
def application(settings: Settings) -> Application:
    """Fresh application with deterministic product ids."""
    return Application(settings=settings, id_generator=SequenceIdentifierGenerator())


@pytest.fixture
def client(application: Application) -> Generator[TestClient, None, None]:
    """Test client with startup seeding applied."""
    with TestClient(application.app) as test_client:
        yield test_client
