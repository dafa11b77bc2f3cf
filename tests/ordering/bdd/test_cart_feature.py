"""BDD tests for the shopping cart."""

import pytest
from pytest_bdd import given, parsers, scenarios, then, when
from sokobo.ordering.cart import EMPTY_CART, AddItem, ClearCart, ProductSnapshot, UpdateQuantity, cart_reducer

scenarios("features/cart.feature")


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def catalogue():
    return {}


@pytest.fixture()
def cart():
    """Mutable holder for the current cart state."""
    return {"state": EMPTY_CART}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a product "{product_id}" named "{name}" priced at "{price}"'))
def a_product(catalogue, product_id, name, price):
    catalogue[product_id] = ProductSnapshot(id=product_id, name=name, price=price)


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('{quantity:d} of "{product_id}" in size "{size}" is added to the cart'))
def add_to_cart(cart, catalogue, quantity, product_id, size):
    action = AddItem(product=catalogue[product_id], size=size, quantity=quantity)
    cart["state"] = cart_reducer(cart["state"], action)


@when(parsers.cfparse('the quantity of "{product_id}" in size "{size}" is set to {quantity:d}'))
def set_quantity(cart, product_id, size, quantity):
    action = UpdateQuantity(product_id=product_id, size=size, quantity=quantity)
    cart["state"] = cart_reducer(cart["state"], action)


@when("the cart is cleared")
def clear_cart(cart):
    cart["state"] = cart_reducer(cart["state"], ClearCart())


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.re(r"the cart has (?P<count>\d+) lines?"), converters={"count": int})
def cart_has_lines(cart, count):
    assert len(cart["state"].items) == count


@then(parsers.cfparse("the cart holds {count:d} items"))
def cart_holds_items(cart, count):
    assert cart["state"].count == count


@then(parsers.cfparse('the cart total is "{total}"'))
def cart_total_is(cart, total):
    assert cart["state"].formatted_total == total
