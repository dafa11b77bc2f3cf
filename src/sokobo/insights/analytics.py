"""Admin dashboard figures."""

from decimal import Decimal

from sokobo.identity.user import Role
from sokobo.shared.money import CENTS, parse_price


def sales_summary(storage) -> dict:
    """Headline numbers for the admin dashboard.

    ``total_sales`` adds up the stored order totals as submitted.
    """
    orders = storage.orders.get_all()
    total_sales = sum((parse_price(order.total, field="total") for order in orders), Decimal("0"))

    return {
        "total_sales": str(total_sales.quantize(CENTS)),
        "total_products": storage.products.count(),
        "total_orders": len(orders),
        "total_customers": len(storage.users.filter_by(role=Role.CUSTOMER.value)),
    }
