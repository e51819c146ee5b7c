"""Tests for request decoding and defaulting rules."""

import math

import pytest
from pydantic import ValidationError

from inventory_app.schemas.product import ProductCreate, parse_number


class TestParseNumber:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (5, 5),
            (2.5, 2.5),
            (3.0, 3),
            ("12", 12),
            (" 7 ", 7),
            ("1.25", 1.25),
            ("-4", -4),
            ("0x10", 16),
            ("0B11", 3),
            ("0o17", 15),
        ],
    )
    def test_numeric_values(self, value, expected):
        assert parse_number(value) == expected

    @pytest.mark.parametrize(
        "value",
        [None, "", "   ", "abc", "inf", "nan", "1_000", "0x", "-0x10", "0xZZ", math.inf, math.nan, True, False, [], {}],
    )
    def test_fallback_to_default(self, value):
        assert parse_number(value) == 0
        assert parse_number(value, default=9) == 9

    def test_integral_result_is_int(self):
        assert isinstance(parse_number("10.0"), int)


class TestProductCreate:
    def test_defaults(self):
        payload = ProductCreate()
        assert payload.product_name is None
        assert payload.sku is None
        assert payload.unit == "pcs"
        assert payload.description == ""
        assert payload.available_qty == 0
        assert payload.min_stock == 0

    def test_camel_case_keys(self):
        payload = ProductCreate.model_validate(
            {"productName": "Mouse", "sku": "SKU-M-1", "availableQty": "3", "minStock": 5}
        )
        assert payload.product_name == "Mouse"
        assert payload.available_qty == 3
        assert payload.min_stock == 5

    def test_null_text_fields_take_defaults(self):
        payload = ProductCreate.model_validate({"unit": None, "notes": None, "location": None})
        assert payload.unit == "pcs"
        assert payload.notes == ""
        assert payload.location == ""

    def test_invalid_numbers_become_zero(self):
        payload = ProductCreate.model_validate({"cost": "free", "mrp": "", "availableQty": None})
        assert payload.cost == 0
        assert payload.mrp == 0
        assert payload.available_qty == 0

    def test_text_field_rejects_non_string(self):
        with pytest.raises(ValidationError):
            ProductCreate.model_validate({"productName": 123})

    def test_separator_and_radix_strings(self):
        payload = ProductCreate.model_validate({"cost": "1_000", "mrp": "0x10"})
        assert payload.cost == 0
        assert payload.mrp == 16

    def test_boolean_quantity_is_not_a_number(self):
        assert ProductCreate.model_validate({"availableQty": True}).available_qty == 0
