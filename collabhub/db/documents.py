"""
collabhub/db/documents.py

Shared project documents (read and write).
"""

import sqlite3
from datetime import datetime, timezone
from typing import Any, Dict, Optional


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


def create_document(
    conn: sqlite3.Connection,
    project_id: int,
    created_by: int,
    title: str,
    content: str = "",
) -> Dict[str, Any]:
    now = _utc_now_iso()
    cur = conn.execute(
        """
        INSERT INTO documents (project_id, title, content, created_by, created_at, updated_at)
        VALUES (?, ?, ?, ?, ?, ?)
        """,
        (project_id, title, content, created_by, now, now),
    )
    conn.commit()
    return get_document(conn, int(cur.lastrowid))


def get_document(conn: sqlite3.Connection, document_id: int) -> Optional[Dict[str, Any]]:
    row = conn.execute(
        """
        SELECT document_id, project_id, title, content, created_by, created_at, updated_at
        FROM documents
        WHERE document_id = ?
        """,
        (document_id,),
    ).fetchone()
    return dict(row) if row else None

