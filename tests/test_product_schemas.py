"""Tests for product request/response schemas."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from pydantic import ValidationError

from catalog.schemas.common import DataResponse, MessageResponse
from catalog.schemas.product import ProductCreate, ProductResponse, ProductUpdate


class TestProductCreate:
    """Test create payload rules."""

    def test_coerces_numeric_strings(self):
        product = ProductCreate(name="Cable", price="12.5", quantity="4")

        assert product.price == Decimal("12.50")
        assert product.quantity == 4

    @pytest.mark.parametrize(
        "raw, expected",
        [("1.005", "1.01"), ("1.004", "1.00"), ("0", "0.00"), ("99999999.99", "99999999.99")],
    )
    def test_price_rounded_half_up(self, raw, expected):
        product = ProductCreate(name="A", price=raw, quantity=0)
        assert product.price == Decimal(expected)

    def test_strips_whitespace(self):
        product = ProductCreate(name="  Lamp ", description="  warm  ", price=1, quantity=1)

        assert product.name == "Lamp"
        assert product.description == "warm"

    @pytest.mark.parametrize("description", ["", "   ", None])
    def test_blank_description_becomes_none(self, description):
        product = ProductCreate(name="A", description=description, price=1, quantity=1)
        assert product.description is None

    def test_description_has_no_length_cap(self):
        product = ProductCreate(name="A", description="d" * 10_000, price=1, quantity=1)
        assert len(product.description) == 10_000

    @pytest.mark.parametrize(
        "overrides",
        [
            {"price": "NaN"},
            {"price": "Infinity"},
            {"price": "100000000"},
            {"quantity": 2_147_483_648},
            {"quantity": "three"},
            {"quantity": True},
        ],
    )
    def test_rejects_out_of_range_values(self, overrides):
        data = {"name": "A", "price": 1, "quantity": 1}
        data.update(overrides)

        with pytest.raises(ValidationError):
            ProductCreate(**data)

    def test_collects_every_field_error(self):
        with pytest.raises(ValidationError) as exc_info:
            ProductCreate(name="", price=-1, quantity=-1)

        fields = {error["loc"][0] for error in exc_info.value.errors()}
        assert fields == {"name", "price", "quantity"}


class TestProductUpdate:
    """Test partial update payload rules."""

    def test_changes_only_contains_sent_fields(self):
        update = ProductUpdate(price="9.99")
        assert update.changes() == {"price": Decimal("9.99")}

    def test_empty_update_has_no_changes(self):
        assert ProductUpdate().changes() == {}

    def test_description_may_be_cleared(self):
        update = ProductUpdate(description=None)
        assert update.changes() == {"description": None}

    @pytest.mark.parametrize("field", ["name", "price", "quantity"])
    def test_null_required_field_rejected(self, field):
        with pytest.raises(ValidationError):
            ProductUpdate(**{field: None})

    @pytest.mark.parametrize(
        "data",
        [
            {"name": ""},
            {"name": "x" * 256},
            {"price": -0.01},
            {"quantity": -1},
            {"quantity": False},
        ],
    )
    def test_same_rules_as_create(self, data):
        with pytest.raises(ValidationError):
            ProductUpdate(**data)

    def test_unknown_fields_ignored(self):
        update = ProductUpdate(id=5, created_at="2020-01-01", quantity=3)
        assert update.changes() == {"quantity": 3}


class TestEnvelope:
    """Test response envelope serialization."""

    def test_price_serialized_as_number(self, make_product):
        product = make_product(1, price=Decimal("1299.99"))

        data = DataResponse[ProductResponse](message="ok", data=product).model_dump(mode="json")

        assert data["success"] is True
        assert data["data"]["price"] == 1299.99
        assert data["data"]["description"] is None

    def test_message_response_has_no_data(self):
        data = MessageResponse(success=False, message="Product not found").model_dump()
        assert data == {"success": False, "message": "Product not found"}

    def test_naive_timestamps_serialized_as_utc(self, make_product):
        naive = datetime(2026, 10, 19, 20, 5, 38)
        product = make_product(1, created_at=naive, updated_at=naive)

        data = product.model_dump(mode="json")

        assert data["created_at"] == "2026-10-19T20:05:38+00:00"

    def test_aware_timestamps_converted_to_utc(self, make_product):
        local = datetime(2026, 10, 19, 22, 0, tzinfo=timezone(timedelta(hours=2)))
        product = make_product(1, updated_at=local)

        data = product.model_dump(mode="json")

        assert data["updated_at"] == "2026-10-19T20:00:00+00:00"
