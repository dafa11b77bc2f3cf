"""Tests for the Order aggregate and its value objects."""

import pytest
from protean.exceptions import ValidationError
from protean.utils.reflection import declared_fields
from sokobo.ordering.order import Order, OrderLine, OrderStatus, ShippingAddress


def _address(**overrides):
    data = {
        "name": "Thandi Mokoena",
        "street": "12 Vilakazi Street",
        "city": "Soweto",
        "postal_code": "1804",
        "phone": "0821234567",
    }
    data.update(overrides)
    return ShippingAddress(**data)


def _line(**overrides):
    data = {
        "product_id": "prod-1",
        "quantity": 2,
        "size": "M",
        "price": "350.00",
        "name": "Sokobo Classic Tee",
        "image": "https://cdn.example.com/tee.jpg",
    }
    data.update(overrides)
    return OrderLine(**data)


class TestOrderConstruction:
    def test_declared_fields(self):
        fields = declared_fields(Order)
        for name in ("id", "user_id", "items", "total", "status", "shipping_address", "created_at"):
            assert name in fields

    def test_defaults(self):
        order = Order(user_id="user-1", items=[_line()], total="700.00", shipping_address=_address())

        assert order.status == OrderStatus.PENDING.value
        assert order.created_at is not None
        assert order.id is not None

    def test_shipping_address_is_required(self):
        with pytest.raises(ValidationError) as exc:
            Order(user_id="user-1", items=[_line()], total="700.00")
        assert "shipping_address" in exc.value.messages

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            Order(user_id="user-1", items=[_line()], total="700.00", shipping_address=_address(), status="lost")


class TestOrderLine:
    def test_quantity_must_be_positive(self):
        with pytest.raises(ValidationError):
            _line(quantity=0)

    def test_line_total(self):
        assert str(_line(quantity=3, price="99.99").line_total) == "299.97"

    def test_image_is_optional(self):
        assert _line(image=None).image is None


class TestOrderBehaviour:
    def test_lines_total_is_independent_of_submitted_total(self):
        order = Order(
            user_id="user-1",
            items=[_line(quantity=2, price="350.00"), _line(product_id="prod-2", quantity=1, price="250.00")],
            total="200.00",
            shipping_address=_address(),
        )

        assert order.total == "200.00"
        assert order.lines_total() == "950.00"

    def test_belongs_to(self):
        order = Order(user_id="user-1", items=[_line()], total="700.00", shipping_address=_address())

        assert order.belongs_to("user-1")
        assert not order.belongs_to("user-2")

    def test_to_dict_nests_lines_and_address(self):
        order = Order(user_id="user-1", items=[_line()], total="700.00", shipping_address=_address())
        data = order.to_dict()

        assert data["items"][0]["name"] == "Sokobo Classic Tee"
        assert data["shipping_address"]["city"] == "Soweto"
