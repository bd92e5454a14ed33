import logging
import secrets
from typing import Any, Dict, List, Optional

from fastapi import HTTPException

from collabhub.db.projects import (
    add_member,
    create_project as db_create_project,
    get_membership,
    get_project_by_id,
    get_project_by_invite_code,
    list_member_ids,
    list_members as db_list_members,
    remove_member,
)

logger = logging.getLogger(__name__)


def _new_invite_code() -> str:
    return secrets.token_urlsafe(6)


def require_membership(conn, project_id: int, user_id: int) -> Dict[str, Any]:
    """
    Return the caller's membership row.
    404 if the project does not exist, 403 if the caller is not a member.
    """
    if get_project_by_id(conn, project_id) is None:
        raise HTTPException(status_code=404, detail="Project not found")

    membership = get_membership(conn, project_id, user_id)
    if membership is None:
        raise HTTPException(status_code=403, detail="Forbidden")
    return membership


def create_project(conn, user_id: int, name: str, description: Optional[str] = None) -> Dict[str, Any]:
    project_id = db_create_project(
        conn,
        name=name.strip(),
        owner_id=user_id,
        invite_code=_new_invite_code(),
        description=description,
    )
    logger.info("User %s created project %s", user_id, project_id)
    return get_project_detail(conn, user_id, project_id)


def get_project_detail(conn, user_id: int, project_id: int) -> Dict[str, Any]:
    require_membership(conn, project_id, user_id)
    project = get_project_by_id(conn, project_id)
    return {**project, "member_ids": list_member_ids(conn, project_id)}


def join_project(conn, user_id: int, invite_code: str) -> Dict[str, Any]:
    """
    Join the project behind an invite code. Joining a project the user already
    belongs to is not an error.
    """
    project = get_project_by_invite_code(conn, invite_code)
    if project is None:
        raise HTTPException(status_code=404, detail="Invalid invite code")

    if add_member(conn, project["project_id"], user_id):
        logger.info("User %s joined project %s", user_id, project["project_id"])
    return get_project_detail(conn, user_id, project["project_id"])


def list_members(conn, user_id: int, project_id: int) -> List[Dict[str, Any]]:
    require_membership(conn, project_id, user_id)
    return db_list_members(conn, project_id)


def leave_project(conn, user_id: int, project_id: int) -> None:
    """
    Remove the caller from a project. Owners cannot leave; leaving a project
    the caller does not belong to is a bad request.
    """
    if get_project_by_id(conn, project_id) is None:
        raise HTTPException(status_code=404, detail="Project not found")

    membership = get_membership(conn, project_id, user_id)
    if membership is None:
        raise HTTPException(status_code=400, detail="You are not a member of this project")
    if membership["role"] == "OWNER":
        raise HTTPException(
            status_code=400,
            detail="Project owners cannot leave. Transfer ownership or delete the project instead.",
        )

    remove_member(conn, project_id, user_id)
    logger.info("User %s left project %s", user_id, project_id)
