"""Unit tests for the Product entity."""

import pytest

from estoque.domain.exceptions import ValidationError
from estoque.domain.model.product import Product, new_product_id, require_text


class TestRequireText:

    def test_accepts_non_blank_string(self):
        assert require_text("Caneta", "name") == "Caneta"

    def test_keeps_surrounding_whitespace(self):
        assert require_text("  Caneta ", "name") == "  Caneta "

    @pytest.mark.parametrize("value", ["", "   ", "\t\n", None, 42, ["Caneta"]])
    def test_rejects_missing_blank_or_non_string(self, value):
        with pytest.raises(ValidationError, match="name is required"):
            require_text(value, "name")


class TestProductUpdateDetails:

    def test_replaces_name_and_description(self):
        product = Product(id="abc", name="Caneta", description="Azul")
        product.update_details("Lápis", "Preto")
        assert product == Product(id="abc", name="Lápis", description="Preto")

    def test_invalid_description_leaves_product_untouched(self):
        product = Product(id="abc", name="Caneta", description="Azul")
        with pytest.raises(ValidationError, match="description is required"):
            product.update_details("Lápis", "")
        assert product.name == "Caneta"
        assert product.description == "Azul"


class TestNewProductId:

    def test_ids_are_distinct(self):
        ids = {new_product_id() for _ in range(1000)}
        assert len(ids) == 1000
