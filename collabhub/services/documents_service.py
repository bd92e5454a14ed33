from typing import Any, Dict

from fastapi import HTTPException

from collabhub.db.documents import create_document as db_create_document, get_document as db_get_document
from collabhub.services.contributions_service import track_contribution
from collabhub.services.projects_service import require_membership


def create_document(conn, user_id: int, project_id: int, title: str, content: str = "") -> Dict[str, Any]:
    require_membership(conn, project_id, user_id)
    return db_create_document(conn, project_id, user_id, title.strip(), content)


def get_document(conn, user_id: int, document_id: int) -> Dict[str, Any]:
    document = db_get_document(conn, document_id)
    if document is None:
        raise HTTPException(status_code=404, detail="Document not found")
    require_membership(conn, document["project_id"], user_id)
    return document


def record_document_edit(conn, user_id: int, document_id: int, changes: int) -> None:
    """
    Count an editing session on a document. `changes` is the net character
    delta reported by the editor: positive means added, negative means removed.
    """
    document = get_document(conn, user_id, document_id)
    track_contribution(
        conn,
        user_id,
        document["project_id"],
        "edit",
        {
            "chars_added": changes if changes > 0 else 0,
            "chars_removed": -changes if changes < 0 else 0,
        },
    )
