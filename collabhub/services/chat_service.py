from typing import Any, Dict, List

from fastapi import HTTPException

from collabhub.db.chat import insert_chat_message, list_chat_messages
from collabhub.services.contributions_service import track_contribution
from collabhub.services.projects_service import require_membership

CHAT_HISTORY_LIMIT = 100


def get_messages(conn, user_id: int, project_id: int) -> List[Dict[str, Any]]:
    require_membership(conn, project_id, user_id)
    return list_chat_messages(conn, project_id, limit=CHAT_HISTORY_LIMIT)


def post_message(conn, user_id: int, project_id: int, content: str) -> Dict[str, Any]:
    """
    Store a chat message and count it toward the author's contributions.
    """
    if not content or not content.strip():
        raise HTTPException(status_code=400, detail="Message content is required")

    require_membership(conn, project_id, user_id)
    message = insert_chat_message(conn, project_id, user_id, content.strip())
    track_contribution(conn, user_id, project_id, "chat")
    return message
