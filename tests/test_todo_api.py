import sqlite3
from unittest.mock import Mock

import pytest
from fastapi import HTTPException

from todolist_api.app.api.v1.endpoints.users import create_user as create_user_route
from todolist_api.app.schemas.user import UserCreate


def create_user(client, email, full_name=None):
    resp = client.post("/api/v1/users/", json={"email": email, "full_name": full_name})
    assert resp.status_code == 201
    return resp.json()


def create_todo(client, title, owner_id):
    resp = client.post("/api/v1/todos/", json={"title": title, "owner_id": owner_id})
    assert resp.status_code == 201
    return resp.json()


def test_todo_crud_flow(client):
    owner = create_user(client, "owner@example.com", "Owner")

    resp = client.get("/api/v1/todos/")
    assert resp.status_code == 200
    assert resp.json() == []

    todo = create_todo(client, "Plan trip", owner["id"])
    assert todo["title"] == "Plan trip"
    assert todo["owner"]["id"] == owner["id"]
    assert todo["collaborators"] == []

    resp = client.put(f"/api/v1/todos/{todo['id']}", json={"title": "Plan summer trip"})
    assert resp.status_code == 200
    assert resp.json()["title"] == "Plan summer trip"

    resp = client.get(f"/api/v1/users/{owner['id']}/todos")
    assert resp.status_code == 200
    assert [item["id"] for item in resp.json()] == [todo["id"]]

    resp = client.delete(f"/api/v1/todos/{todo['id']}")
    assert resp.status_code == 204

    resp = client.get(f"/api/v1/todos/{todo['id']}")
    assert resp.status_code == 404
    assert resp.json() == {"detail": f"ToDo (id={todo['id']}) was not found"}


def test_collaborator_endpoints(client):
    owner = create_user(client, "owner@example.com")
    friend = create_user(client, "friend@example.com")
    todo = create_todo(client, "Shared list", owner["id"])

    resp = client.post(f"/api/v1/todos/{todo['id']}/collaborators/{friend['id']}")
    assert resp.status_code == 200
    assert [user["id"] for user in resp.json()["collaborators"]] == [friend["id"]]

    resp = client.post(f"/api/v1/todos/{todo['id']}/collaborators/{owner['id']}")
    assert resp.status_code == 409

    resp = client.delete(f"/api/v1/todos/{todo['id']}/collaborators/{owner['id']}")
    assert resp.status_code == 409

    resp = client.delete(f"/api/v1/todos/{todo['id']}/collaborators/{friend['id']}")
    assert resp.status_code == 200
    assert resp.json()["collaborators"] == []

    resp = client.post(f"/api/v1/todos/{todo['id']}/collaborators/999")
    assert resp.status_code == 404


def test_unknown_resources_return_404(client):
    assert client.delete("/api/v1/todos/42").status_code == 404
    assert client.get("/api/v1/users/42").status_code == 404
    assert client.get("/api/v1/users/42/todos").status_code == 404
    resp = client.post("/api/v1/todos/", json={"title": "Orphan", "owner_id": 42})
    assert resp.status_code == 404
    assert resp.json() == {"detail": "User (id=42) was not found"}


def test_duplicate_email_returns_409(client):
    create_user(client, "dup@example.com")

    resp = client.post("/api/v1/users/", json={"email": "dup@example.com"})
    assert resp.status_code == 409


def test_users_listing(client):
    first = create_user(client, "first@example.com")
    second = create_user(client, "second@example.com")

    resp = client.get("/api/v1/users/")
    assert resp.status_code == 200
    assert [user["id"] for user in resp.json()] == [first["id"], second["id"]]


def test_rename_keeps_collaborators(client):
    owner = create_user(client, "owner@example.com")
    friend = create_user(client, "friend@example.com")
    todo = create_todo(client, "Shared list", owner["id"])
    client.post(f"/api/v1/todos/{todo['id']}/collaborators/{friend['id']}")

    resp = client.put(f"/api/v1/todos/{todo['id']}", json={"title": "Renamed list"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["title"] == "Renamed list"
    assert [user["id"] for user in body["collaborators"]] == [friend["id"]]

    resp = client.put("/api/v1/todos/999", json={"title": "Nope"})
    assert resp.status_code == 404


def test_duplicate_email_keeps_integrity_error_as_cause():
    service = Mock()
    service.create.side_effect = sqlite3.IntegrityError("UNIQUE constraint failed: users.email")

    with pytest.raises(HTTPException) as exc_info:
        create_user_route(UserCreate(email="dup@example.com"), service=service)

    assert exc_info.value.status_code == 409
    assert isinstance(exc_info.value.__cause__, sqlite3.IntegrityError)
