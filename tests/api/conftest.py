# tests/api/conftest.py
import os
import pytest
from fastapi.testclient import TestClient
from pathlib import Path

import collabhub.db as db
from collabhub.api.main import app
from collabhub.api.dependencies import get_db, get_jwt_secret
from collabhub.api.auth.security import create_access_token
from collabhub.services.video_call_store import (
    ParticipantRegistry,
    SignalStore,
    get_participant_registry,
    get_signal_store,
)

TEST_JWT_SECRET = "test-secret-key-for-testing"


@pytest.fixture(autouse=True)
def shared_db(tmp_path, monkeypatch):
    """
    API-safe DB setup:
    - uses an on-disk temp DB (shared by path)
    - each request and each seeding fixture opens its own connection
    """
    db_path = tmp_path / "api.db"
    monkeypatch.setenv("APP_DB_PATH", str(db_path))
    monkeypatch.setenv("JWT_SECRET", TEST_JWT_SECRET)

    conn = db.connect(db_path)
    db.init_schema(conn)
    conn.close()

    yield


@pytest.fixture
def registry():
    return ParticipantRegistry()


@pytest.fixture
def signal_store():
    return SignalStore()


@pytest.fixture
def client(registry, signal_store):
    """
    TestClient with a per-request connection and isolated video-call state.
    """
    db_path = Path(os.environ["APP_DB_PATH"])

    def override_get_db():
        conn = db.connect(db_path)
        try:
            yield conn
        finally:
            conn.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_jwt_secret] = lambda: TEST_JWT_SECRET
    app.dependency_overrides[get_participant_registry] = lambda: registry
    app.dependency_overrides[get_signal_store] = lambda: signal_store

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def seed_conn():
    """Convenience: a connection you can use to seed test data."""
    conn = db.connect(os.environ["APP_DB_PATH"])
    yield conn
    conn.close()


def make_token(user_id: int, username: str) -> str:
    return create_access_token(
        secret=TEST_JWT_SECRET,
        user_id=user_id,
        username=username,
        expires_minutes=60,
    )


@pytest.fixture
def make_user(seed_conn):
    """Create a user and return (user_id, auth headers)."""
    def _make(username: str, name: str | None = None):
        user_id = db.get_or_create_user(seed_conn, username, f"{username}@example.com")
        if name:
            seed_conn.execute("UPDATE users SET name = ? WHERE user_id = ?", (name, user_id))
            seed_conn.commit()
        return user_id, {"Authorization": f"Bearer {make_token(user_id, username)}"}
    return _make


@pytest.fixture
def alice(make_user):
    return make_user("alice", "Alice")


@pytest.fixture
def bob(make_user):
    return make_user("bob", "Bob")


@pytest.fixture
def outsider(make_user):
    return make_user("mallory")


@pytest.fixture
def team_project(client, alice, bob):
    """A project created by alice that bob joined through the invite code."""
    _, alice_headers = alice
    _, bob_headers = bob

    res = client.post("/projects", json={"name": "Hack Week"}, headers=alice_headers)
    assert res.status_code == 201
    project = res.json()

    res = client.post("/projects/join", json={"invite_code": project["invite_code"]}, headers=bob_headers)
    assert res.status_code == 200
    return project
