"""
collabhub/db/chat.py

Project chat messages (read and write).
"""

import sqlite3
from datetime import datetime, timezone
from typing import Any, Dict, List


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds")


def insert_chat_message(conn: sqlite3.Connection, project_id: int, user_id: int, content: str) -> Dict[str, Any]:
    """Insert a message and return it joined with its author."""
    cur = conn.execute(
        "INSERT INTO chat_messages (project_id, user_id, content, created_at) VALUES (?, ?, ?, ?)",
        (project_id, user_id, content, _utc_now_iso()),
    )
    conn.commit()
    return get_chat_message(conn, int(cur.lastrowid))


def get_chat_message(conn: sqlite3.Connection, message_id: int) -> Dict[str, Any] | None:
    row = conn.execute(
        """
        SELECT m.message_id, m.project_id, m.user_id, m.content, m.created_at,
               u.username, u.name
        FROM chat_messages m
        JOIN users u ON u.user_id = m.user_id
        WHERE m.message_id = ?
        """,
        (message_id,),
    ).fetchone()
    return dict(row) if row else None


def list_chat_messages(conn: sqlite3.Connection, project_id: int, limit: int = 100) -> List[Dict[str, Any]]:
    """
    The `limit` most recent messages for a project, oldest first.
    """
    rows = conn.execute(
        """
        SELECT * FROM (
            SELECT m.message_id, m.project_id, m.user_id, m.content, m.created_at,
                   u.username, u.name
            FROM chat_messages m
            JOIN users u ON u.user_id = m.user_id
            WHERE m.project_id = ?
            ORDER BY m.message_id DESC
            LIMIT ?
        )
        ORDER BY message_id ASC
        """,
        (project_id, limit),
    ).fetchall()
    return [dict(r) for r in rows]
