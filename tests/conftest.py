import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Select the config overlay and initialize the sokobo domain once, before any
    test module imports domain elements.
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env
    os.environ.setdefault("SOKOBO_SEED_DEMO_DATA", "false")

    from sokobo.domain import sokobo

    sokobo.init()


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


def _reset_data(domain):
    for _, provider in domain.providers.items():
        provider._data_reset()
    domain.event_store.store._data_reset()


@pytest.fixture(autouse=True)
def run_around_tests():
    """Push the domain context before each test; start and finish with empty stores."""
    from sokobo.domain import sokobo

    ctx = sokobo.domain_context()
    ctx.push()
    _reset_data(sokobo)

    yield

    _reset_data(sokobo)
    ctx.pop()


@pytest.fixture()
def storage():
    from sokobo.domain import sokobo
    from sokobo.store.storage import Storage

    return Storage(sokobo)


@pytest.fixture()
def product_service(storage):
    from sokobo.catalogue.services import ProductService

    return ProductService(storage.products)


@pytest.fixture()
def order_service(storage):
    from sokobo.ordering.services import OrderService

    return OrderService(storage.orders)


@pytest.fixture()
def portfolio_service(storage):
    from sokobo.portfolio.services import PortfolioService

    return PortfolioService(storage.portfolio)


@pytest.fixture()
def user_service(storage):
    from sokobo.identity.services import UserService

    return UserService(storage.users)


@pytest.fixture()
def tee_fields():
    return {
        "name": "Sokobo Classic Tee",
        "category": "tshirts",
        "description": "Premium cotton streetwear with signature graphics.",
        "price": "350.00",
        "stock": 50,
        "sizes": ["S", "M", "L"],
        "images": ["https://cdn.example.com/tee-front.jpg", "https://cdn.example.com/tee-back.jpg"],
    }
