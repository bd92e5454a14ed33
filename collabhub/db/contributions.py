"""
collabhub/db/contributions.py

Storage for per-member contribution tracking:
 - Cumulative counters on the project_members row (one per project + user)
 - Daily snapshots (one per project + user + day)

The upserts below do not commit. Callers run them inside a transaction
(`with conn:`) so the cumulative row and the snapshot change together.
Increments happen inside SQLite (`col = col + excluded.col`), which keeps
concurrent writers on the same key from losing updates.
"""

import sqlite3
from typing import Any, Dict, List


def upsert_member_contribution(
    conn: sqlite3.Connection,
    project_id: int,
    user_id: int,
    *,
    edits: int,
    chars_added: int,
    chars_removed: int,
    now: str,
) -> None:
    """
    Seed a MEMBER row from this event, or add the deltas to the existing row
    and bump last_active. Role and joined_at are never overwritten.
    """
    conn.execute(
        """
        INSERT INTO project_members (
            project_id, user_id, role, edits_count, characters_added, characters_removed,
            joined_at, last_active
        ) VALUES (?, ?, 'MEMBER', ?, ?, ?, ?, ?)
        ON CONFLICT(project_id, user_id) DO UPDATE SET
            last_active = excluded.last_active,
            edits_count = edits_count + excluded.edits_count,
            characters_added = characters_added + excluded.characters_added,
            characters_removed = characters_removed + excluded.characters_removed
        """,
        (project_id, user_id, edits, chars_added, chars_removed, now, now),
    )


def upsert_daily_snapshot(
    conn: sqlite3.Connection,
    project_id: int,
    user_id: int,
    day: str,
    *,
    documents_edited: int = 0,
    characters_added: int = 0,
    chat_messages: int = 0,
    tasks_completed: int = 0,
) -> None:
    """
    Create the (project, user, day) snapshot seeded with these counts, or add
    them to the existing one. `day` is an ISO date string (YYYY-MM-DD).
    """
    conn.execute(
        """
        INSERT INTO contribution_snapshots (
            project_id, user_id, date, documents_edited, characters_added, chat_messages, tasks_completed
        ) VALUES (?, ?, ?, ?, ?, ?, ?)
        ON CONFLICT(project_id, user_id, date) DO UPDATE SET
            documents_edited = documents_edited + excluded.documents_edited,
            characters_added = characters_added + excluded.characters_added,
            chat_messages = chat_messages + excluded.chat_messages,
            tasks_completed = tasks_completed + excluded.tasks_completed
        """,
        (project_id, user_id, day, documents_edited, characters_added, chat_messages, tasks_completed),
    )


def get_member_contributions(conn: sqlite3.Connection, project_id: int) -> List[Dict[str, Any]]:
    """
    All member rows for a project with the member's user profile attached
    under "user". Rows come back in membership insertion order.
    """
    rows = conn.execute(
        """
        SELECT
            pm.user_id, pm.role, pm.edits_count, pm.characters_added, pm.characters_removed,
            pm.joined_at, pm.last_active,
            u.username, u.email, u.name
        FROM project_members pm
        JOIN users u ON u.user_id = pm.user_id
        WHERE pm.project_id = ?
        ORDER BY pm.member_id
        """,
        (project_id,),
    ).fetchall()

    out = []
    for r in rows:
        out.append({
            "user": {
                "user_id": r["user_id"],
                "username": r["username"],
                "email": r["email"],
                "name": r["name"],
            },
            "role": r["role"],
            "edits_count": r["edits_count"],
            "characters_added": r["characters_added"],
            "characters_removed": r["characters_removed"],
            "joined_at": r["joined_at"],
            "last_active": r["last_active"],
        })
    return out


def get_snapshots_since(
    conn: sqlite3.Connection,
    project_id: int,
    user_id: int,
    start_day: str,
) -> List[Dict[str, Any]]:
    """Snapshots on or after `start_day`, oldest first."""
    rows = conn.execute(
        """
        SELECT project_id, user_id, date, documents_edited, characters_added, chat_messages, tasks_completed
        FROM contribution_snapshots
        WHERE project_id = ? AND user_id = ? AND date >= ?
        ORDER BY date ASC
        """,
        (project_id, user_id, start_day),
    ).fetchall()
    return [dict(r) for r in rows]
