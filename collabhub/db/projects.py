"""
collabhub/db/projects.py

Manages project-level database operations:
 - Creating projects and looking them up by id or invite code
 - Project membership rows (which double as the per-member contribution record)
"""

import sqlite3
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


def create_project(
    conn: sqlite3.Connection,
    name: str,
    owner_id: int,
    invite_code: str,
    description: Optional[str] = None,
) -> int:
    """
    Insert a project and its OWNER membership row in one transaction.
    Returns the new project_id.
    """
    now = _utc_now_iso()
    with conn:
        cur = conn.execute(
            """
            INSERT INTO projects (name, description, owner_id, invite_code, created_at)
            VALUES (?, ?, ?, ?, ?)
            """,
            (name, description, owner_id, invite_code, now),
        )
        project_id = int(cur.lastrowid)
        conn.execute(
            """
            INSERT INTO project_members (project_id, user_id, role, joined_at, last_active)
            VALUES (?, ?, 'OWNER', ?, ?)
            """,
            (project_id, owner_id, now, now),
        )
    return project_id


def get_project_by_id(conn: sqlite3.Connection, project_id: int) -> Optional[Dict[str, Any]]:
    row = conn.execute(
        """
        SELECT project_id, name, description, owner_id, invite_code, created_at
        FROM projects
        WHERE project_id = ?
        """,
        (project_id,),
    ).fetchone()
    return dict(row) if row else None


def get_project_by_invite_code(conn: sqlite3.Connection, invite_code: str) -> Optional[Dict[str, Any]]:
    row = conn.execute(
        """
        SELECT project_id, name, description, owner_id, invite_code, created_at
        FROM projects
        WHERE invite_code = ?
        """,
        (invite_code.strip(),),
    ).fetchone()
    return dict(row) if row else None


def get_membership(conn: sqlite3.Connection, project_id: int, user_id: int) -> Optional[Dict[str, Any]]:
    row = conn.execute(
        """
        SELECT member_id, project_id, user_id, role, joined_at, last_active
        FROM project_members
        WHERE project_id = ? AND user_id = ?
        """,
        (project_id, user_id),
    ).fetchone()
    return dict(row) if row else None


def add_member(conn: sqlite3.Connection, project_id: int, user_id: int, role: str = "MEMBER") -> bool:
    """
    Add a membership row. Returns False if the user was already a member.
    """
    now = _utc_now_iso()
    cur = conn.execute(
        """
        INSERT OR IGNORE INTO project_members (project_id, user_id, role, joined_at, last_active)
        VALUES (?, ?, ?, ?, ?)
        """,
        (project_id, user_id, role, now, now),
    )
    conn.commit()
    return cur.rowcount > 0


def list_member_ids(conn: sqlite3.Connection, project_id: int) -> List[int]:
    rows = conn.execute(
        "SELECT user_id FROM project_members WHERE project_id = ? ORDER BY member_id",
        (project_id,),
    ).fetchall()
    return [r["user_id"] for r in rows]


def list_members(conn: sqlite3.Connection, project_id: int) -> List[Dict[str, Any]]:
    rows = conn.execute(
        """
        SELECT u.user_id, u.username, u.name, u.email, pm.role, pm.joined_at
        FROM project_members pm
        JOIN users u ON u.user_id = pm.user_id
        WHERE pm.project_id = ?
        ORDER BY pm.member_id
        """,
        (project_id,),
    ).fetchall()
    return [dict(r) for r in rows]


def remove_member(conn: sqlite3.Connection, project_id: int, user_id: int) -> bool:
    """
    Delete a membership row together with its contribution counters.
    Daily snapshots are kept. Returns False if there was no such row.
    """
    cur = conn.execute(
        "DELETE FROM project_members WHERE project_id = ? AND user_id = ?",
        (project_id, user_id),
    )
    conn.commit()
    return cur.rowcount > 0
