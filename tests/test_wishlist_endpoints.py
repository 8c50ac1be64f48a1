"""Tests for the wishlist endpoints."""

from fastapi.testclient import TestClient

from book_tracker.api.app import create_app
from tests.conftest import FakeSessionStore, bearer


def test_wishlist_crud(container, session_store: FakeSessionStore) -> None:
    session_store.add_user("u1@example.com", "pw", token="u1")
    client = TestClient(create_app(container))

    created = client.post(
        "/wishlist",
        json={"title": "Circe", "author": "Madeline Miller", "note": "paperback"},
        headers=bearer("u1"),
    )
    assert created.status_code == 201
    item = created.json()
    assert item["note"] == "paperback"

    fetched = client.get(f"/wishlist?id={item['id']}", headers=bearer("u1"))
    assert fetched.json() == [item]

    deleted = client.request(
        "DELETE", "/wishlist", json={"id": item["id"]}, headers=bearer("u1")
    )
    assert deleted.json() == {"message": "Item deleted successfully"}
    again = client.request(
        "DELETE", "/wishlist", json={"id": item["id"]}, headers=bearer("u1")
    )
    assert again.status_code == 200
    assert client.get("/wishlist", headers=bearer("u1")).json() == []


def test_wishlist_validation_and_auth(
    container, session_store: FakeSessionStore
) -> None:
    session_store.add_user("u1@example.com", "pw", token="u1")
    client = TestClient(create_app(container))

    assert client.get("/wishlist").status_code == 401
    missing = client.post("/wishlist", json={"title": "Circe"}, headers=bearer("u1"))
    assert missing.status_code == 400
    assert missing.json() == {"error": "Title and author are required"}
    no_id = client.request("DELETE", "/wishlist", json={}, headers=bearer("u1"))
    assert no_id.json() == {"error": "Item ID is required"}


def test_wishlist_rejects_unknown_fields(
    container, session_store: FakeSessionStore, wishlist_repository
) -> None:
    session_store.add_user("u1@example.com", "pw", token="u1")
    client = TestClient(create_app(container))

    response = client.post(
        "/wishlist",
        json={"title": "Circe", "author": "Miller", "priority": "high"},
        headers=bearer("u1"),
    )

    assert response.status_code == 400
    assert "priority" in response.json()["error"]
    assert wishlist_repository.calls == []


def test_malformed_wishlist_body_without_session_is_unauthorized(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/wishlist",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 401
