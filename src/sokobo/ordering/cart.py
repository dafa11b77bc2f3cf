"""Client-held shopping cart, expressed as a pure reducer.

``cart_reducer(state, action)`` returns a new ``CartState`` and never mutates
its inputs. Actions form a closed set: ``AddItem``, ``RemoveItem``,
``UpdateQuantity`` and ``ClearCart``. Lines are keyed by (product id, size).

The cart total is derived from the lines on every read. It is never stored,
so no caller can set it out of step with the items.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal

from sokobo.shared.money import CENTS, parse_price


@dataclass(frozen=True)
class ProductSnapshot:
    """The product as it stood when the line was added."""

    id: str
    name: str
    price: str
    images: tuple[str, ...] = ()
    category: str | None = None
    description: str = ""
    stock: int = 0
    sizes: tuple[str, ...] = ()
    featured: bool = False

    @classmethod
    def of(cls, product) -> ProductSnapshot:
        if isinstance(product, cls):
            return product
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            images=tuple(product.images or ()),
            category=getattr(product, "category", None),
            description=getattr(product, "description", None) or "",
            stock=getattr(product, "stock", None) or 0,
            sizes=tuple(getattr(product, "sizes", None) or ()),
            featured=bool(getattr(product, "featured", False)),
        )

    @property
    def primary_image(self) -> str | None:
        return self.images[0] if self.images else None


@dataclass(frozen=True)
class CartItem:
    product: ProductSnapshot
    size: str
    quantity: int = 1

    @property
    def key(self) -> tuple[str, str]:
        return (self.product.id, self.size)

    @property
    def line_total(self) -> Decimal:
        return parse_price(self.product.price) * self.quantity


@dataclass(frozen=True)
class CartState:
    items: tuple[CartItem, ...] = ()

    @property
    def total(self) -> Decimal:
        return calculate_total(self.items)

    @property
    def count(self) -> int:
        """Number of units in the cart (sum of quantities)."""
        return sum(item.quantity for item in self.items)

    @property
    def formatted_total(self) -> str:
        return str(self.total.quantize(CENTS))

    def find(self, product_id: str, size: str) -> CartItem | None:
        for item in self.items:
            if item.key == (product_id, size):
                return item
        return None

    def to_order_lines(self) -> list[dict]:
        """Order-line snapshots for checkout."""
        return [
            {
                "product_id": item.product.id,
                "quantity": item.quantity,
                "size": item.size,
                "price": item.product.price,
                "name": item.product.name,
                "image": item.product.primary_image,
            }
            for item in self.items
        ]


# --- Actions ---


@dataclass(frozen=True)
class AddItem:
    product: ProductSnapshot
    size: str
    quantity: int = 1


@dataclass(frozen=True)
class RemoveItem:
    product_id: str
    size: str


@dataclass(frozen=True)
class UpdateQuantity:
    product_id: str
    size: str
    quantity: int


@dataclass(frozen=True)
class ClearCart:
    pass


CartAction = AddItem | RemoveItem | UpdateQuantity | ClearCart

EMPTY_CART = CartState()


def calculate_total(items: tuple[CartItem, ...]) -> Decimal:
    return sum((item.line_total for item in items), Decimal("0"))


def _with_items(items: tuple[CartItem, ...]) -> CartState:
    return CartState(items=items)


def _add_item(state: CartState, action: AddItem) -> CartState:
    if action.quantity < 1:
        raise ValueError(f"Quantity must be at least 1, got {action.quantity}")

    product = ProductSnapshot.of(action.product)
    key = (product.id, action.size)

    if state.find(*key) is not None:
        items = tuple(
            replace(item, quantity=item.quantity + action.quantity) if item.key == key else item
            for item in state.items
        )
    else:
        items = (*state.items, CartItem(product=product, size=action.size, quantity=action.quantity))

    return _with_items(items)


def _remove_item(state: CartState, action: RemoveItem) -> CartState:
    key = (action.product_id, action.size)
    return _with_items(tuple(item for item in state.items if item.key != key))


def _update_quantity(state: CartState, action: UpdateQuantity) -> CartState:
    if action.quantity <= 0:
        return _remove_item(state, RemoveItem(product_id=action.product_id, size=action.size))

    key = (action.product_id, action.size)
    items = tuple(replace(item, quantity=action.quantity) if item.key == key else item for item in state.items)
    return _with_items(items)


def _clear_cart(state: CartState, action: ClearCart) -> CartState:
    return EMPTY_CART


_TRANSITIONS = {
    AddItem: _add_item,
    RemoveItem: _remove_item,
    UpdateQuantity: _update_quantity,
    ClearCart: _clear_cart,
}


def cart_reducer(state: CartState, action: CartAction) -> CartState:
    """Apply ``action`` to ``state`` and return the resulting cart."""
    transition = _TRANSITIONS.get(type(action))
    if transition is None:
        raise TypeError(f"Unknown cart action: {action!r}")
    return transition(state, action)


def reduce_all(actions, state: CartState = EMPTY_CART) -> CartState:
    for action in actions:
        state = cart_reducer(state, action)
    return state
