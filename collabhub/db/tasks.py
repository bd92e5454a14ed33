"""
collabhub/db/tasks.py

Project task board rows (read and write).
"""

import sqlite3
from datetime import datetime, timezone
from typing import Any, Dict, Optional

TASK_STATUSES = {"TODO", "IN_PROGRESS", "DONE"}

# Columns a PATCH may change
_UPDATABLE = ("title", "description", "status", "assigned_to")


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


def create_task(
    conn: sqlite3.Connection,
    project_id: int,
    created_by: int,
    title: str,
    description: Optional[str] = None,
    assigned_to: Optional[int] = None,
) -> Dict[str, Any]:
    now = _utc_now_iso()
    cur = conn.execute(
        """
        INSERT INTO tasks (project_id, title, description, status, assigned_to, created_by, created_at, updated_at)
        VALUES (?, ?, ?, 'TODO', ?, ?, ?, ?)
        """,
        (project_id, title, description, assigned_to, created_by, now, now),
    )
    conn.commit()
    return get_task(conn, int(cur.lastrowid))


def get_task(conn: sqlite3.Connection, task_id: int) -> Optional[Dict[str, Any]]:
    row = conn.execute(
        """
        SELECT task_id, project_id, title, description, status, assigned_to, created_by, created_at, updated_at
        FROM tasks
        WHERE task_id = ?
        """,
        (task_id,),
    ).fetchone()
    return dict(row) if row else None


def update_task(conn: sqlite3.Connection, task_id: int, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """
    Apply a partial update. Keys outside the updatable set are ignored.
    """
    if "status" in fields and fields["status"] not in TASK_STATUSES:
        raise ValueError(f"Invalid task status: {fields['status']}")

    updates = {k: v for k, v in fields.items() if k in _UPDATABLE}
    if updates:
        assignments = ", ".join(f"{col} = ?" for col in updates)
        conn.execute(
            f"UPDATE tasks SET {assignments}, updated_at = ? WHERE task_id = ?",
            (*updates.values(), _utc_now_iso(), task_id),
        )
        conn.commit()
    return get_task(conn, task_id)
