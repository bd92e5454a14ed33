import sys
import os
import pytest

# Add the project root directory to sys.path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import collabhub.db as db


@pytest.fixture
def conn(tmp_path):
    """
    A schema-initialized SQLite connection on a temporary on-disk database.
    """
    conn = db.connect(tmp_path / "test.db")
    db.init_schema(conn)
    yield conn
    conn.close()


@pytest.fixture
def make_user(conn):
    def _make(username: str, name: str | None = None) -> int:
        cur = conn.execute(
            "INSERT INTO users (username, email, name) VALUES (?, ?, ?)",
            (username, f"{username}@example.com", name),
        )
        conn.commit()
        return int(cur.lastrowid)
    return _make


@pytest.fixture
def project(conn, make_user):
    """A project owned by 'owner' and the owner's user_id."""
    owner_id = make_user("owner", "Project Owner")
    project_id = db.create_project(conn, "Hackathon Team", owner_id, "invite-abc")
    return {"project_id": project_id, "owner_id": owner_id}
