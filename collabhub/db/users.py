"""
collabhub/db/users.py

Handles all database operations related to users:
 - Creating new users (with or without a password)
 - Fetching existing users and their public profile
 - Normalizing usernames for lookups
"""

import sqlite3
from typing import Any, Dict, Optional


def _normalize_username(username: str) -> str:
    """Trim whitespace and prepare username for case-insensitive lookups."""
    return username.strip()


def get_user_by_username(conn: sqlite3.Connection, username: str) -> Optional[Dict[str, Any]]:
    """Case-insensitive lookup."""
    norm = _normalize_username(username)
    row = conn.execute(
        "SELECT user_id, username, email, name FROM users WHERE LOWER(username)=LOWER(?)",
        (norm,),
    ).fetchone()
    return dict(row) if row else None


def get_user_by_id(conn: sqlite3.Connection, user_id: int) -> Optional[Dict[str, Any]]:
    row = conn.execute(
        "SELECT user_id, username, email, name FROM users WHERE user_id = ?",
        (user_id,),
    ).fetchone()
    return dict(row) if row else None


def get_user_auth_by_username(conn: sqlite3.Connection, username: str) -> Optional[Dict[str, Any]]:
    """Like get_user_by_username but includes the stored password hash."""
    norm = _normalize_username(username)
    row = conn.execute(
        "SELECT user_id, username, password_hash FROM users WHERE LOWER(username)=LOWER(?)",
        (norm,),
    ).fetchone()
    return dict(row) if row else None


def create_user_with_password(
    conn: sqlite3.Connection,
    username: str,
    email: Optional[str],
    password_hash: str,
    name: Optional[str] = None,
) -> int:
    cur = conn.execute(
        "INSERT INTO users (username, email, name, password_hash) VALUES (?, ?, ?, ?)",
        (_normalize_username(username), email, name, password_hash),
    )
    conn.commit()
    return int(cur.lastrowid)


def get_or_create_user(conn: sqlite3.Connection, username: str, email: Optional[str] = None) -> int:
    """Return existing user_id or create new user."""
    existing = get_user_by_username(conn, username)
    if existing:
        return existing["user_id"]
    cur = conn.execute(
        "INSERT INTO users (username, email) VALUES (?, ?)",
        (_normalize_username(username), email),
    )
    conn.commit()
    return int(cur.lastrowid)
