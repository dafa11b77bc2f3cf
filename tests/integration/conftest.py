"""Shared fixtures for HTTP API tests."""

import pytest
from app import create_app
from fastapi.testclient import TestClient
from sokobo.config import Settings
from sokobo.identity.sessions import issue_token


@pytest.fixture()
def settings():
    return Settings(jwt_secret="integration-secret", seed_demo_data=False, log_dir="logs")


@pytest.fixture()
def client(settings, storage):
    return TestClient(create_app(settings=settings, storage=storage))


@pytest.fixture()
def admin(user_service):
    return user_service.register(name="Store Admin", email="admin@sokobo.test", password="admin-pass", role="admin")


@pytest.fixture()
def customer(user_service):
    return user_service.register(name="Thandi Mokoena", email="thandi@example.com", password="thandi-pass")


@pytest.fixture()
def other_customer(user_service):
    return user_service.register(name="Sipho Zulu", email="sipho@example.com", password="sipho-pass")


def _bearer(user, settings):
    return {"Authorization": f"Bearer {issue_token(user, settings)}"}


@pytest.fixture()
def admin_headers(admin, settings):
    return _bearer(admin, settings)


@pytest.fixture()
def customer_headers(customer, settings):
    return _bearer(customer, settings)


@pytest.fixture()
def other_headers(other_customer, settings):
    return _bearer(other_customer, settings)


@pytest.fixture()
def product(product_service, tee_fields):
    return product_service.create(**tee_fields)
