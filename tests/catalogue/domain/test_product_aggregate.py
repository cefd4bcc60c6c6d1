"""Domain tests for the Product aggregate: field rules, images and stock."""

import json

import pytest
from catalogue.product.product import Product
from protean.exceptions import ValidationError


class TestProductFields:
    def test_valid_product(self, tote_bag):
        product = Product(**tote_bag)
        assert product.name_ar == "حقيبة يد منسوجة يدوياً"
        assert product.image_urls == ["https://example.com/tote.jpg"]

    def test_defaults(self):
        product = Product(name_en="Coaster", name_ar="قاعدة أكواب", price=40.0)
        assert product.stock == 0
        assert product.featured is False
        assert product.image_urls == []

    @pytest.mark.parametrize("price", [0, -5.0])
    def test_price_must_be_positive(self, tote_bag, price):
        with pytest.raises(ValidationError):
            Product(**{**tote_bag, "price": price})

    def test_both_names_required(self, tote_bag):
        with pytest.raises(ValidationError) as exc:
            Product(**{**tote_bag, "name_ar": None})
        assert "name_ar" in exc.value.messages

    def test_images_must_be_a_json_list(self, tote_bag):
        with pytest.raises(ValidationError) as exc:
            Product(**{**tote_bag, "images": json.dumps({"url": "x"})})
        assert "images" in exc.value.messages

    def test_images_must_be_json(self, tote_bag):
        with pytest.raises(ValidationError):
            Product(**{**tote_bag, "images": "not json"})


class TestStock:
    def test_remove_from_stock(self, tote_bag):
        product = Product(**tote_bag)
        product.remove_from_stock(4)
        assert product.stock == 11

    def test_oversold_stock_floors_at_zero(self, tote_bag):
        product = Product(**{**tote_bag, "stock": 2})
        product.remove_from_stock(5)
        assert product.stock == 0

    def test_remove_requires_positive_quantity(self, tote_bag):
        product = Product(**tote_bag)
        with pytest.raises(ValidationError):
            product.remove_from_stock(0)

    def test_set_stock_rejects_negative(self, tote_bag):
        product = Product(**tote_bag)
        with pytest.raises(ValidationError):
            product.set_stock(-1)


class TestRecord:
    def test_record_uses_storefront_shape(self, tote_bag):
        product = Product(id="1", **tote_bag)
        record = product.to_record()

        assert record["_id"] == "1"
        assert record["images"] == ["https://example.com/tote.jpg"]
        assert record["artisan_id"] == "1"
        assert record["description_en"] == ""
        assert "id" not in record
