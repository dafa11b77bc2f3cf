"""Decimal-string money helpers.

Prices travel as strings with exactly two decimals ("350.00") so that no value
ever passes through a binary float.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from protean.exceptions import ValidationError

CENTS = Decimal("0.01")
ZERO = Decimal("0.00")


def parse_price(value, field: str = "price") -> Decimal:
    """Parse a price given as string, int, float or Decimal.

    Raises ``ValidationError`` keyed by ``field`` when the value is missing,
    not a finite number, or negative.
    """
    if value is None or isinstance(value, bool):
        raise ValidationError({field: ["Price is required"]})

    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationError({field: [f"'{value}' is not a valid decimal amount"]}) from None

    if not amount.is_finite():
        raise ValidationError({field: [f"'{value}' is not a valid decimal amount"]})
    if amount < 0:
        raise ValidationError({field: ["Price cannot be negative"]})
    return amount


def format_price(value, field: str = "price") -> str:
    """Normalize a price to its two-decimal string form."""
    return str(parse_price(value, field).quantize(CENTS, rounding=ROUND_HALF_UP))


def is_price_string(value: str) -> bool:
    """True when ``value`` is already a canonical two-decimal, non-negative string."""
    if not isinstance(value, str):
        return False
    try:
        return format_price(value) == value
    except ValidationError:
        return False
