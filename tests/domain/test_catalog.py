"""Unit tests for the Catalog and Product."""

import pytest

from shop.domain.exceptions import ValidationError
from shop.domain.model.catalog import Catalog, default_catalog
from shop.domain.model.product import Product
from shop.domain.model.value_objects import Money


def _product(pid: str = "P1", name: str = "Widget", price: str = "10.00") -> Product:
    return Product(id=pid, name=name, price=Money.of(price))


class TestProduct:

    def test_empty_id_rejected(self):
        with pytest.raises(ValidationError, match="Product ID"):
            _product(pid=" ")

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError, match="Product name"):
            _product(name="")

    def test_free_product_allowed(self):
        assert _product(price="0").price == Money.zero()


class TestCatalogLookup:

    def test_find_by_id(self):
        catalog = Catalog([_product("P1"), _product("P2", "Gadget")])
        assert catalog.find_by_id("P2").name == "Gadget"

    def test_find_ignores_surrounding_whitespace(self):
        catalog = Catalog([_product("P1")])
        assert catalog.find_by_id("  P1 ") is not None

    def test_membership_matches_lookup(self):
        catalog = Catalog([_product("P1")])
        assert " P1 " in catalog
        assert "P2" not in catalog
        assert 1 not in catalog

    def test_unknown_id_returns_none(self):
        catalog = Catalog([_product("P1")])
        assert catalog.find_by_id("P999") is None

    def test_list_all_keeps_insertion_order(self):
        catalog = Catalog([_product("B"), _product("A"), _product("C")])
        assert [p.id for p in catalog.list_all()] == ["B", "A", "C"]

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate product ID 'P1'"):
            Catalog([_product("P1"), _product("P1", "Other")])

    def test_list_all_is_a_copy(self):
        catalog = Catalog([_product("P1")])
        catalog.list_all().clear()
        assert len(catalog) == 1


class TestDefaultCatalog:

    def test_seeded_products(self):
        catalog = default_catalog()
        assert [p.id for p in catalog.list_all()] == ["P100", "P101", "P102", "P103", "P104"]
        assert catalog.find_by_id("P100").price == Money.of("999.99")
        assert "P103" in catalog
