"""The storefront's four collections, owned by whoever builds the app."""

from protean.domain import Domain

from sokobo.catalogue.product import Product
from sokobo.identity.user import User
from sokobo.ordering.order import Order
from sokobo.portfolio.portfolio import PortfolioItem
from sokobo.store.entity_store import EntityStore


class Storage:
    """Users, products, orders and portfolio items.

    Built explicitly by the composition root (``create_app`` or a test
    fixture) and passed to the services that need it.
    """

    def __init__(self, domain: Domain) -> None:
        self.domain = domain
        self.users: EntityStore[User] = EntityStore(domain, User)
        self.products: EntityStore[Product] = EntityStore(domain, Product)
        self.orders: EntityStore[Order] = EntityStore(domain, Order)
        self.portfolio: EntityStore[PortfolioItem] = EntityStore(domain, PortfolioItem)

    def collections(self) -> dict[str, EntityStore]:
        return {
            "users": self.users,
            "products": self.products,
            "orders": self.orders,
            "portfolio": self.portfolio,
        }
