"""Order aggregate.

An order is a historical record of a checkout. Its lines copy the product's
name, image and unit price at the moment of purchase, so later catalogue
edits never change what a past order shows.

``total`` is whatever the client submitted. It is stored verbatim and never
re-derived from the lines; ``lines_total()`` exists for display and
reconciliation only.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum

from protean.fields import DateTime, Identifier, Integer, List, String, ValueObject

from sokobo.domain import sokobo
from sokobo.shared.money import CENTS, parse_price


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


@sokobo.value_object(part_of="Order")
class ShippingAddress:
    """Where the order goes, as entered at checkout."""

    name = String(required=True, max_length=100, sanitize=False)
    street = String(required=True, max_length=255, sanitize=False)
    city = String(required=True, max_length=100, sanitize=False)
    postal_code = String(required=True, max_length=20, sanitize=False)
    phone = String(required=True, max_length=30, sanitize=False)


@sokobo.value_object(part_of="Order")
class OrderLine:
    """One purchased product/size, snapshotted at checkout."""

    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    size = String(required=True, max_length=50, sanitize=False)
    price = String(required=True, max_length=20, sanitize=False)
    name = String(required=True, max_length=200, sanitize=False)
    image = String(max_length=1000, sanitize=False)

    @property
    def line_total(self) -> Decimal:
        return parse_price(self.price) * self.quantity


@sokobo.aggregate
class Order:
    user_id = Identifier(required=True)
    items = List(content_type=ValueObject(OrderLine))
    total = String(required=True, max_length=20, sanitize=False)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value, sanitize=False)
    shipping_address = ValueObject(ShippingAddress, required=True)
    created_at = DateTime(default=datetime.now)

    def lines_total(self) -> str:
        amount = sum((line.line_total for line in self.items), Decimal("0"))
        return str(amount.quantize(CENTS))

    def belongs_to(self, user_id: str) -> bool:
        return self.user_id == user_id
