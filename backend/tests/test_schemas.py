"""
OrderDesk Backend - Schema Tests
==================================

What:  Deserialization rules for the POST /orders body and the wire format
       of OrderResponse.
"""

import json
from datetime import datetime
from uuid import uuid4

import pytest
from pydantic import ValidationError

from orderdesk.schemas.order import INT32_MAX, NewOrder, OrderResponse


def _body(**overrides):
    body = {"customer_id": str(uuid4()), "product_id": str(uuid4()), "quantity": 3}
    body.update(overrides)
    return json.dumps(body)


class TestNewOrder:

    def test_valid_body(self):
        order = NewOrder.model_validate_json(_body())
        assert order.quantity == 3

    @pytest.mark.parametrize("quantity", ['"3"', "3.0", "3.5", "true", "null"])
    def test_non_integer_quantity_rejected(self, quantity):
        raw = _body().replace('"quantity": 3', f'"quantity": {quantity}')
        with pytest.raises(ValidationError):
            NewOrder.model_validate_json(raw)

    def test_quantity_outside_int32_rejected(self):
        with pytest.raises(ValidationError):
            NewOrder.model_validate_json(_body(quantity=INT32_MAX + 1))

    def test_malformed_uuid_rejected(self):
        with pytest.raises(ValidationError):
            NewOrder.model_validate_json(_body(customer_id="not-a-uuid"))

    @pytest.mark.parametrize("field", ["customer_id", "product_id", "quantity"])
    def test_missing_field_rejected(self, field):
        body = json.loads(_body())
        del body[field]
        with pytest.raises(ValidationError):
            NewOrder.model_validate(body)

    def test_caller_supplied_order_date_ignored(self):
        order = NewOrder.model_validate_json(_body(order_date="1999-01-01T00:00:00"))
        assert not hasattr(order, "order_date")


class TestOrderResponse:

    def test_order_date_serializes_without_offset(self):
        order = OrderResponse(
            id=uuid4(),
            customer_id=uuid4(),
            product_id=uuid4(),
            quantity=1,
            order_date=datetime(2024, 1, 15, 12, 30, 45, 123456),
        )
        data = json.loads(order.model_dump_json())
        assert data["order_date"] == "2024-01-15T12:30:45.123456"
        assert set(data) == {"id", "customer_id", "product_id", "quantity", "order_date"}
