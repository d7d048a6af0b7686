"""Shared fixtures: an app over in-memory SQLite and registered users."""

import os

# Must be set before config is imported
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient

from database import Database
from main import create_app


@pytest.fixture
def db():
    """Bare session for exercising the core without HTTP."""
    database = Database("sqlite://")
    database.connect()
    session = database.session()
    try:
        yield session
    finally:
        session.close()
        database.disconnect()


@pytest.fixture
def client():
    app = create_app("sqlite://")
    with TestClient(app) as test_client:
        yield test_client


def _register(client, name, email):
    response = client.post(
        "/api/auth/register",
        json={"name": name, "email": email, "password": "secret123"},
    )
    assert response.status_code == 201, response.text
    token = response.json()["data"]["token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def alice(client):
    return _register(client, "Alice", "alice@kanban.io")


@pytest.fixture
def bob(client):
    return _register(client, "Bob", "bob@kanban.io")


@pytest.fixture
def board(client, alice):
    """A project owned by alice with its three default columns."""
    response = client.post("/api/projects", json={"name": "Sprint 1"}, headers=alice)
    assert response.status_code == 201, response.text
    data = response.json()["data"]
    return {
        "project": data["project"],
        "columns": {c["name"]: c for c in data["columns"]},
    }


@pytest.fixture
def seed(db):
    """Factory helpers that write straight to the session."""
    from models import User, Project, BoardColumn, Task

    class Seed:
        def user(self, email="owner@kanban.io"):
            user = User(name=email.split("@")[0], email=email, hashed_password="x")
            db.add(user)
            db.flush()
            return user

        def project(self, user, name="Board"):
            project = Project(name=name, user_id=user.id)
            db.add(project)
            db.flush()
            return project

        def column(self, project, name="Column", order=0):
            column = BoardColumn(name=name, project_id=project.id, order=order)
            db.add(column)
            db.flush()
            return column

        def task(self, column, title="Task", order=0):
            task = Task(title=title, column_id=column.id, project_id=column.project_id, order=order)
            db.add(task)
            db.flush()
            return task

    return Seed()
