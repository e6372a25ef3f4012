"""
==============================================================================
Catalog Unit Tests
==============================================================================

Tests for the store, discounts, query pipeline, identifiers and seeding.

==============================================================================
"""

import json
import pytest
from pathlib import Path

from app.catalog.discounts import DiscountCatalog, round_price
from app.catalog.identifiers import IdentifierGenerator, SequenceIdentifierGenerator
from app.catalog.models import PagedResult, Product
from app.catalog.query import QueryPipeline, parse_positive_int
from app.catalog.seed import BUILTIN_PRODUCTS, load_seed_file, seed_store
from app.catalog.store import ProductStore


class TestProductStore:
    """Tests for the ordered product store."""

    def test_get_returns_matching_id(self, store: ProductStore):
        """Test lookup by key."""
        assert store.get("_a").id == "_a"
        assert store.get("missing") is None

    def test_values_in_insertion_order(self, store: ProductStore):
        """Test iteration follows insertion order."""
        assert [p.id for p in store.values()] == ["_a", "_b", "_c"]

    def test_overwrite_keeps_position(self, store: ProductStore):
        """Test overwriting an existing key does not move it."""
        store.put("_a", Product(id="_a", category="FOOD", name="Pear", price=1))
        store.put("_d", Product(id="_d", category="FOOD", name="Kiwi", price=2))
        assert [p.name for p in store.values()] == ["Pear", "Sofa", "Corn", "Kiwi"]

    def test_delete(self, store: ProductStore):
        """Test delete reports presence."""
        assert store.delete("_b") is True
        assert store.delete("_b") is False
        assert "_b" not in store
        assert len(store) == 2

    def test_values_is_a_snapshot(self, store: ProductStore):
        """Test later writes do not leak into an earlier snapshot."""
        snapshot = store.values()
        store.put("_a", Product(id="_a", category="FOOD", name="Pear", price=1))
        store.delete("_b")
        assert [p.name for p in snapshot] == ["Apple", "Sofa", "Corn"]

    def test_no_aliasing(self, store: ProductStore):
        """Test callers cannot modify stored records through references."""
        product = store.get("_a")
        product.price = 0
        assert store.get("_a").price == 42.20

        original = Product(id="_e", category="FOOD", name="Lime", price=1)
        store.put("_e", original)
        original.name = "Changed"
        assert store.get("_e").name == "Lime"


class TestDiscountCatalog:
    """Tests for discount lookup and rounding."""

    def test_ratio_lookup_is_case_insensitive(self, discounts: DiscountCatalog):
        """Test code normalization."""
        assert discounts.ratio_for("dupa") == 0.8
        assert discounts.ratio_for("DuPa") == 0.8

    @pytest.mark.parametrize("code", ["abc", "", None])
    def test_unknown_codes(self, discounts: DiscountCatalog, code):
        """Test unknown or empty codes have no ratio."""
        assert discounts.ratio_for(code) is None

    def test_apply_rounds_to_cents(self, discounts: DiscountCatalog):
        """Test 42.20 at 0.8 becomes 33.76."""
        product = Product(id="_a", category="FOOD", name="Apple", price=42.20)
        assert discounts.apply(product, "dupa").price == 33.76
        assert product.price == 42.20

    def test_apply_unknown_code_keeps_price(self, discounts: DiscountCatalog):
        """Test unknown code leaves the price alone."""
        product = Product(id="_a", category="FOOD", name="Apple", price=42.20)
        assert discounts.apply(product, "abc").price == 42.20

    def test_apply_without_price(self, discounts: DiscountCatalog):
        """Test products without a price pass through."""
        product = Product(id="_a", category="FOOD", name="Apple", price=None)
        assert discounts.apply(product, "dupa").price is None

    @pytest.mark.parametrize("value, expected", [
        (0.552, 0.55),
        (10.696, 10.7),
        (1.005, 1.01),
        (2.675, 2.68),
        (33.760000000000005, 33.76),
    ])
    def test_round_price_half_up(self, value: float, expected: float):
        """Test half-away-from-zero rounding on the decimal representation."""
        assert round_price(value) == expected

    @pytest.mark.parametrize("ratio", [0, -0.5, 1.5])
    def test_invalid_ratio_rejected(self, ratio: float):
        """Test ratios outside (0, 1] are refused."""
        with pytest.raises(ValueError):
            DiscountCatalog({"BAD": ratio})

    def test_default_codes(self):
        """Test the built-in code set."""
        assert DiscountCatalog().codes == {"DUPA": 0.8}


class TestPaginationParsing:
    """Tests for pagination parameter parsing."""

    @pytest.mark.parametrize("raw, expected", [
        (None, 7),
        ("10", 10),
        ("3.7", 3),
        (" 5", 5),
        ("5abc", 5),
        (4, 4),
        ("abc", None),
        ("", None),
        ("0", None),
        ("-1", None),
        (0, None),
        (True, None),
        ("٣", None),
        ("５0", None),
        ("1٣", 1),
    ])
    def test_parse_positive_int(self, raw, expected):
        """Test leading-integer parsing with default for absent values."""
        assert parse_positive_int(raw, 7) == expected


class TestQueryPipeline:
    """Tests for filtering, discounting and pagination."""

    def test_get_product_with_discount(self, store: ProductStore, discounts: DiscountCatalog):
        """Test single reads apply the discount to a view."""
        pipeline = QueryPipeline(store, discounts)
        assert pipeline.get_product("_a", "DUPA").price == 33.76
        assert store.get("_a").price == 42.20
        assert pipeline.get_product("missing") is None

    def test_category_filter_preserves_order(self, store: ProductStore, discounts: DiscountCatalog):
        """Test case-insensitive filter keeps store order."""
        pipeline = QueryPipeline(store, discounts)
        result = pipeline.list_products(category="fOoD")
        assert [p.name for p in result.results] == ["Apple", "Corn"]

    def test_empty_category_keeps_everything(self, store: ProductStore, discounts: DiscountCatalog):
        """Test an empty filter string is no filter."""
        pipeline = QueryPipeline(store, discounts)
        assert len(pipeline.list_products(category="").results) == 3

    def test_discount_applies_to_every_match(self, store: ProductStore, discounts: DiscountCatalog):
        """Test collection reads discount each result."""
        pipeline = QueryPipeline(store, discounts)
        result = pipeline.list_products(category="food", discount_code="dupa")
        assert [p.price for p in result.results] == [33.76, 0.55]

    def test_malformed_pagination_gives_fallback(
        self,
        store: ProductStore,
        discounts: DiscountCatalog
    ):
        """Test malformed parameters never raise."""
        pipeline = QueryPipeline(store, discounts)
        assert pipeline.list_products(limit="0") == PagedResult.fallback()
        assert pipeline.list_products(page="abc") == PagedResult.fallback()

    @pytest.mark.parametrize("total", range(0, 8))
    @pytest.mark.parametrize("limit", [1, 2, 3])
    @pytest.mark.parametrize("page", [1, 2, 3])
    def test_next_page_rule(self, total: int, limit: int, page: int):
        """Test next is page + 1 exactly when matches remain past this page."""
        items = [
            Product(id=f"_{i}", category="FOOD", name=f"Item {i}", price=i)
            for i in range(total)
        ]
        result = QueryPipeline.paginate(items, page, limit)

        assert len(result.results) <= limit
        assert result.next == (page + 1 if total > limit * page else None)
        assert [p.id for p in result.results] == [p.id for p in items[(page - 1) * limit:page * limit]]


class TestIdentifiers:
    """Tests for identifier generators."""

    def test_random_ids_are_distinct(self):
        """Test random ids do not repeat."""
        generator = IdentifierGenerator()
        ids = {generator.generate() for _ in range(1000)}
        assert len(ids) == 1000
        assert all(product_id.startswith("_") for product_id in ids)

    def test_sequence_ids(self):
        """Test deterministic sequence."""
        generator = SequenceIdentifierGenerator()
        assert [generator.generate() for _ in range(3)] == ["_seq1", "_seq2", "_seq3"]


class TestSeeding:
    """Tests for startup seed loading."""

    def test_seed_builtin_and_external(self, tmp_path: Path):
        """Test built-in products come first, then the file entries."""
        path = tmp_path / "products.json"
        path.write_text(json.dumps([
            {"category": "DRINKS", "name": "Water", "price": 1.5},
            {"category": "DRINKS", "name": "Broken"},
            "not an object",
            {"category": "FOOD", "name": "Bread", "price": 3.2},
        ]), encoding="utf-8")

        store = ProductStore()
        added = seed_store(store, SequenceIdentifierGenerator(), path)

        assert added == len(BUILTIN_PRODUCTS) + 2
        assert store.get("_jappko").name == "Apple"
        assert [p.name for p in store.values()][-2:] == ["Water", "Bread"]
        assert store.get("_seq6").name == "Bread"

    def test_seed_without_file(self, tmp_path: Path):
        """Test a missing file leaves only the built-in products."""
        store = ProductStore()
        added = seed_store(store, SequenceIdentifierGenerator(), tmp_path / "missing.json")
        assert added == len(BUILTIN_PRODUCTS)
        assert len(store) == len(BUILTIN_PRODUCTS)

    def test_seed_with_invalid_json(self, tmp_path: Path):
        """Test an unparsable file is logged and skipped."""
        path = tmp_path / "products.json"
        path.write_text("{not json", encoding="utf-8")

        store = ProductStore()
        assert seed_store(store, SequenceIdentifierGenerator(), path) == len(BUILTIN_PRODUCTS)

    def test_load_seed_file_requires_list(self, tmp_path: Path):
        """Test the top-level value must be an array."""
        path = tmp_path / "products.json"
        path.write_text(json.dumps({"category": "FOOD"}), encoding="utf-8")

        with pytest.raises(ValueError):
            load_seed_file(path)
