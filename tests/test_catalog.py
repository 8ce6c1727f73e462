"""Unit tests for catalog loading."""

from types import MappingProxyType

import pytest

from print_assessment.catalog import _detect_delimiter, load_catalog
from print_assessment.models import Product
from print_assessment.prompts import ASSESSMENT_SYSTEM_PROMPT, PRODUCT_IDS


class TestLoadCatalog:
    """Test the shipped product table."""

    def test_loads_all_products(self, catalog):
        assert sorted(catalog.ids()) == sorted(PRODUCT_IDS)
        assert len(catalog) == 5
        assert catalog.version == "2025.1"

    def test_product_fields(self, catalog):
        product = catalog.get("hp-e78625dn")

        assert product.model == "E78625dn"
        assert product.format == "A3"
        assert product.color is True
        assert product.speed == 25
        assert product.volume_min == 3000
        assert product.volume_max == 20000
        assert len(product.features) == 6
        assert "1,140-sheet standard input (expandable to 3,140 sheets)" in product.features

    def test_a4_product(self, catalog):
        product = catalog.get("hp-e47528f")
        assert product.format == "A4"
        assert product.speed == 27

    def test_unknown_id_returns_none(self, catalog):
        assert catalog.get("does-not-exist") is None

    def test_products_are_read_only(self, catalog):
        assert isinstance(catalog.products, MappingProxyType)
        with pytest.raises(TypeError):
            catalog.products["new"] = Product.placeholder("new")

    def test_missing_directory_gives_empty_catalog(self, tmp_path):
        empty = load_catalog(tmp_path)
        assert len(empty) == 0
        assert empty.version is None

    def test_semicolon_delimited_file(self, tmp_path):
        (tmp_path / "products.csv").write_text(
            "id;model;name;format;speed;volume_min;volume_max;features\n"
            "x-1;X1;Test Printer;A4;20;100;2000;Duplex|Wi-Fi\n",
            encoding="utf-8",
        )
        loaded = load_catalog(tmp_path)
        product = loaded.get("x-1")

        assert product.name == "Test Printer"
        assert product.features == ["Duplex", "Wi-Fi"]
        assert product.speed == 20

    def test_every_product_is_named_in_system_prompt(self, catalog):
        for product_id in catalog.ids():
            assert f'"{product_id}"' in ASSESSMENT_SYSTEM_PROMPT


class TestDetectDelimiter:
    """Test delimiter sniffing fallbacks."""

    def test_comma(self):
        assert _detect_delimiter("a,b,c\n1,2,3\n") == ","

    def test_semicolon(self):
        assert _detect_delimiter("a;b;c\n1;2;3\n") == ";"
