"""Shared fixtures for the Customer API tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from customer_api.app.core.config import Settings
from customer_api.app.core.mediator import Mediator
from customer_api.app.handlers import register_customer_handlers
from customer_api.app.main import create_app
from customer_api.app.services.customer_store import CustomerStore


@pytest.fixture
def store() -> CustomerStore:
    return CustomerStore.with_seed_data()


@pytest.fixture
def mediator(store: CustomerStore) -> Mediator:
    mediator = Mediator()
    register_customer_handlers(mediator, store)
    return mediator


@pytest.fixture
def settings() -> Settings:
    return Settings(api_prefix="/api", seed_customers=True, log_level="WARNING")


@pytest.fixture
def client(settings: Settings, store: CustomerStore) -> TestClient:
    return TestClient(create_app(settings, store=store))
