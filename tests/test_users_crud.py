"""CRUD flow through the API against the in-memory user service."""

import pytest
from fastapi.testclient import TestClient


@pytest.mark.unit
def test_crud_flow(memory_client: TestClient, david: dict) -> None:
    assert memory_client.get("/users").status_code == 204

    created = memory_client.post("/users", json=david)
    assert created.status_code == 201
    user_id = created.json()["id"]
    assert created.headers["Location"] == f"/users/{user_id}"

    fetched = memory_client.get(created.headers["Location"])
    assert fetched.status_code == 200
    assert fetched.json() == created.json()

    updated = memory_client.put(f"/users/{user_id}", json={**david, "id": 500, "lastName": "Smith"})
    assert updated.status_code == 200
    assert updated.json()["id"] == user_id
    assert memory_client.get(f"/users/{user_id}").json()["lastName"] == "Smith"
    assert memory_client.get("/users/500").status_code == 404

    listed = memory_client.get("/users")
    assert listed.status_code == 200
    assert [user["id"] for user in listed.json()] == [user_id]

    assert memory_client.delete(f"/users/{user_id}").status_code == 204
    assert memory_client.delete(f"/users/{user_id}").status_code == 404
    assert memory_client.get(f"/users/{user_id}").status_code == 404
    assert memory_client.get("/users").status_code == 204


@pytest.mark.unit
def test_update_unknown_user_returns_404(memory_client: TestClient, david: dict) -> None:
    assert memory_client.put("/users/123", json=david).status_code == 404


@pytest.mark.unit
def test_ids_are_assigned_by_service(memory_client: TestClient, david: dict) -> None:
    first = memory_client.post("/users", json={**david, "id": 11}).json()
    second = memory_client.post("/users", json={**david, "id": 11, "email": "john.doe@gmail.com"}).json()

    assert (first["id"], second["id"]) == (1, 2)


@pytest.mark.unit
def test_reserved_domain_address_is_accepted(memory_client: TestClient, david: dict) -> None:
    created = memory_client.post("/users", json={**david, "email": "a@example.test"})

    assert created.status_code == 201
    assert created.json()["email"] == "a@example.test"
    assert memory_client.get(created.headers["Location"]).json()["email"] == "a@example.test"
