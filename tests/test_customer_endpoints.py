"""HTTP tests for the customer routes."""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from customer_api.app.core.config import Settings
from customer_api.app.core.mediator import Mediator
from customer_api.app.main import create_app
from customer_api.app.services.customer_store import CustomerStore

SATYA = {"id": 3, "firstName": "Satya", "lastName": "Nadella", "revenue": 300000}


def test_list_customers(client: TestClient) -> None:
    response = client.get("/api/customer")

    assert response.status_code == 200
    body = response.json()
    assert [c["id"] for c in body] == [1, 2, 3, 4]
    assert body[2] == SATYA


def test_list_customers_is_repeatable(client: TestClient) -> None:
    assert client.get("/api/customer").json() == client.get("/api/customer").json()


def test_get_customer(client: TestClient) -> None:
    response = client.get("/api/customer/3")

    assert response.status_code == 200
    assert response.json() == SATYA


def test_get_unknown_customer_returns_404(client: TestClient) -> None:
    response = client.get("/api/customer/99")

    assert response.status_code == 404
    assert response.json() == {"detail": "Customer not found"}


def test_get_customer_with_non_integer_id_is_rejected(client: TestClient) -> None:
    assert client.get("/api/customer/abc").status_code == 422


def test_add_customer(client: TestClient, store: CustomerStore) -> None:
    payload = {"id": 0, "firstName": "Ada", "lastName": "Lovelace", "revenue": 50000}

    response = client.post("/api/customer", json=payload)

    assert response.status_code == 201
    assert response.json() == {**payload, "id": 5}
    assert store.get_by_id(5).last_name == "Lovelace"


def test_add_customer_ignores_client_id(client: TestClient) -> None:
    response = client.post("/api/customer", json={"id": 2, "firstName": "Copy", "lastName": "Cat"})

    assert response.status_code == 201
    assert response.json()["id"] == 5
    assert client.get("/api/customer/2").json()["firstName"] == "Steve"


def test_add_customer_accepts_snake_case_fields(client: TestClient) -> None:
    response = client.post("/api/customer", json={"first_name": "Grace", "last_name": "Hopper"})

    assert response.json() == {"id": 5, "firstName": "Grace", "lastName": "Hopper", "revenue": 0}


def test_update_customer(client: TestClient) -> None:
    payload = {"id": 4, "firstName": "Dave", "lastName": "Giard", "revenue": 450000}

    response = client.put("/api/customer", json=payload)

    assert response.status_code == 200
    assert response.json() == payload
    assert client.get("/api/customer/4").json() == payload


def test_update_unknown_customer_returns_404(client: TestClient, store: CustomerStore) -> None:
    response = client.put("/api/customer", json={"id": 99, "firstName": "No", "lastName": "One"})

    assert response.status_code == 404
    assert len(store) == 4


def test_update_without_names_clears_them(client: TestClient) -> None:
    response = client.put("/api/customer", json={"id": 1, "revenue": -5})

    assert response.json() == {"id": 1, "firstName": None, "lastName": None, "revenue": -5}


@pytest.mark.parametrize("revenue", ["NaN", "Infinity", "-Infinity"])
def test_non_finite_revenue_is_rejected(client: TestClient, store: CustomerStore, revenue: str) -> None:
    body = '{"firstName": "A", "lastName": "B", "revenue": %s}' % revenue

    response = client.post("/api/customer", content=body, headers={"Content-Type": "application/json"})

    assert response.status_code == 422
    assert len(store) == 4


def test_delete_customer(client: TestClient) -> None:
    response = client.delete("/api/customer/2")

    assert response.status_code == 204
    assert response.content == b""
    remaining = client.get("/api/customer").json()
    assert [c["id"] for c in remaining] == [1, 3, 4]


def test_delete_unknown_customer_is_acknowledged(client: TestClient, store: CustomerStore) -> None:
    response = client.delete("/api/customer/99")

    assert response.status_code == 204
    assert len(store) == 4


def test_end_to_end_flow(client: TestClient) -> None:
    assert client.get("/api/customer/3").json() == SATYA

    added = client.post("/api/customer", json={"id": 0, "firstName": "Ada", "lastName": "Lovelace", "revenue": 50000})
    assert added.json()["id"] == 5

    client.delete("/api/customer/2")
    remaining = client.get("/api/customer").json()
    assert len(remaining) == 4
    assert 2 not in [c["id"] for c in remaining]


def test_routes_follow_api_prefix(store: CustomerStore) -> None:
    client = TestClient(create_app(Settings(api_prefix="", log_level="WARNING"), store=store))

    assert client.get("/customer/1").json()["lastName"] == "Gates"
    assert client.get("/api/customer/1").status_code == 404


def test_unseeded_app_starts_empty_and_assigns_one() -> None:
    client = TestClient(create_app(Settings(seed_customers=False, api_prefix="/api", log_level="WARNING")))

    assert client.get("/api/customer").json() == []
    response = client.post("/api/customer", json={"firstName": "Ada", "lastName": "Lovelace"})
    assert response.json()["id"] == 1


def test_app_state_exposes_store_and_mediator(settings: Settings, store: CustomerStore) -> None:
    app = create_app(settings, store=store)

    assert isinstance(app, FastAPI)
    assert app.state.store is store
    assert isinstance(app.state.mediator, Mediator)


def test_unregistered_request_type_answers_500(settings: Settings, store: CustomerStore) -> None:
    app = create_app(settings, store=store)
    app.state.mediator = Mediator()
    client = TestClient(app, raise_server_exceptions=False)

    response = client.get("/api/customer")

    assert response.status_code == 500
    assert response.json() == {"detail": "No handler registered for GetAllCustomersQuery"}


@pytest.mark.parametrize("path", ["/api/customer/1", "/api/customer"])
def test_responses_use_camel_case(client: TestClient, path: str) -> None:
    body = client.get(path).json()
    first = body[0] if isinstance(body, list) else body

    assert set(first) == {"id", "firstName", "lastName", "revenue"}
