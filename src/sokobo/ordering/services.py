"""Checkout and order tracking over the order store."""

from protean.exceptions import ObjectNotFoundError, ValidationError

from sokobo.access.gate import Principal
from sokobo.ordering.order import Order, OrderLine, OrderStatus, ShippingAddress
from sokobo.shared.money import format_price, parse_price
from sokobo.store.entity_store import EntityStore
from sokobo.utils.logging import get_logger

logger = get_logger(__name__)

ORDER_STATUSES = [status.value for status in OrderStatus]


def _to_line(line) -> OrderLine:
    if isinstance(line, OrderLine):
        return line
    data = dict(line)
    if data.get("price") is not None:
        data["price"] = format_price(data["price"], field="items")
    return OrderLine(**data)


def _to_address(address) -> ShippingAddress:
    if isinstance(address, ShippingAddress):
        return address
    if address is None:
        raise ValidationError({"shipping_address": ["Shipping address is required"]})
    return ShippingAddress(**dict(address))


class OrderService:
    def __init__(self, orders: EntityStore[Order]) -> None:
        self.orders = orders

    def place(self, user_id: str, items, total, shipping_address, status: str | None = None) -> Order:
        """Record an order exactly as the client priced it.

        Line prices are normalized to two-decimal strings. ``total`` must be a
        well-formed amount but is stored as given: it is not compared with, or
        recomputed from, the lines.
        """
        lines = [_to_line(line) for line in items or []]
        if not lines:
            raise ValidationError({"items": ["An order needs at least one item"]})

        parse_price(total, field="total")

        order = self.orders.create(
            user_id=user_id,
            items=lines,
            total=str(total),
            status=status,
            shipping_address=_to_address(shipping_address),
        )

        logger.info(
            "order_placed",
            order_id=order.id,
            user_id=user_id,
            lines=len(lines),
            total=order.total,
        )
        if order.total != order.lines_total():
            logger.warning(
                "order_total_mismatch",
                order_id=order.id,
                submitted_total=order.total,
                lines_total=order.lines_total(),
            )
        return order

    def get(self, order_id: str) -> Order:
        order = self.orders.get_by_id(order_id)
        if order is None:
            raise ObjectNotFoundError(f"Order with id {order_id} does not exist")
        return order

    def by_user(self, user_id: str) -> list[Order]:
        return self.orders.filter_by(user_id=user_id)

    def all_orders(self) -> list[Order]:
        return self.orders.get_all()

    def visible_to(self, principal: Principal) -> list[Order]:
        if principal.is_admin:
            return self.all_orders()
        return self.by_user(principal.id)

    def get_for(self, principal: Principal, order_id: str) -> Order:
        """Fetch an order the principal may see; others' orders look missing."""
        order = self.get(order_id)
        if not principal.is_admin and not order.belongs_to(principal.id):
            raise ObjectNotFoundError(f"Order with id {order_id} does not exist")
        return order

    def set_status(self, order_id: str, status: str) -> Order:
        """Move an order to any of the five statuses, from any status."""
        if status not in ORDER_STATUSES:
            raise ValidationError({"status": [f"Status must be one of {', '.join(ORDER_STATUSES)}"]})

        order = self.orders.update_by_id(order_id, {"status": status})
        if order is None:
            raise ObjectNotFoundError(f"Order with id {order_id} does not exist")

        logger.info("order_status_changed", order_id=order_id, status=status)
        return order
