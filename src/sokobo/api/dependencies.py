"""FastAPI dependencies: settings, storage, services and the access gate.

Routes declare their capability when they are registered, either with
``dependencies=ADMIN_ONLY`` or, when the handler needs the caller, with
``principal: Principal = Depends(authenticated)``. The handler body runs only
after the gate has passed.
"""

from fastapi import Depends, Header, Request

from sokobo.access.gate import AuthenticationError, Principal, require_administrator, require_authenticated
from sokobo.catalogue.services import ProductService
from sokobo.config import Settings
from sokobo.identity.services import UserService
from sokobo.identity.sessions import decode_token
from sokobo.ordering.services import OrderService
from sokobo.portfolio.services import PortfolioService
from sokobo.store.storage import Storage


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_storage(request: Request) -> Storage:
    return request.app.state.storage


def product_service(storage: Storage = Depends(get_storage)) -> ProductService:
    return ProductService(storage.products)


def order_service(storage: Storage = Depends(get_storage)) -> OrderService:
    return OrderService(storage.orders)


def portfolio_service(storage: Storage = Depends(get_storage)) -> PortfolioService:
    return PortfolioService(storage.portfolio)


def user_service(storage: Storage = Depends(get_storage)) -> UserService:
    return UserService(storage.users)


def current_principal(
    authorization: str | None = Header(default=None),
    settings: Settings = Depends(get_settings),
    storage: Storage = Depends(get_storage),
) -> Principal | None:
    """Resolve the bearer token to the user as currently stored.

    No header means an anonymous caller (``None``). A malformed or expired
    token, or one whose user has since been deleted, is an authentication
    failure.
    """
    if not authorization:
        return None
    if not authorization.startswith("Bearer "):
        raise AuthenticationError("Not authenticated")

    payload = decode_token(authorization.split(" ", 1)[1], settings)
    user = storage.users.get_by_id(payload["sub"])
    if user is None:
        raise AuthenticationError("User not found")
    return Principal.for_user(user)


def authenticated(principal: Principal | None = Depends(current_principal)) -> Principal:
    return require_authenticated(principal)


def administrator(principal: Principal | None = Depends(current_principal)) -> Principal:
    return require_administrator(principal)


# Route-level gates, for handlers that don't need the principal itself
ADMIN_ONLY = [Depends(administrator)]
AUTHENTICATED_ONLY = [Depends(authenticated)]
