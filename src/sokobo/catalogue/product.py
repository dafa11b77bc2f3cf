"""Product aggregate."""

from datetime import datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Integer, List, String, Text

from sokobo.domain import sokobo
from sokobo.shared.money import is_price_string


class ProductCategory(Enum):
    """Enumeration of shop categories."""

    TSHIRTS = "tshirts"
    HOODIES = "hoodies"
    HATS = "hats"


@sokobo.aggregate
class Product:
    """A garment or accessory listed in the shop."""

    name: String(required=True, max_length=200, sanitize=False)
    category: String(required=True, max_length=50, choices=ProductCategory, sanitize=False)
    description: Text(required=True, sanitize=False)
    price: String(required=True, max_length=20, sanitize=False)
    stock: Integer(min_value=0, default=0)
    sizes: List(content_type=str)
    images: List(content_type=str)
    featured: Boolean(default=False)
    created_at: DateTime(default=datetime.now)

    @invariant.post
    def price_must_be_a_two_decimal_amount(self):
        if self.price is not None and not is_price_string(self.price):
            raise ValidationError({"price": [f"Price must be a non-negative amount with two decimals, got '{self.price}'"]})

    @property
    def primary_image(self) -> str | None:
        return self.images[0] if self.images else None

    @property
    def in_stock(self) -> bool:
        return self.stock > 0
