import logging
import sqlite3
from typing import Any, Dict, Optional

from fastapi import HTTPException

from collabhub.db.tasks import create_task as db_create_task, get_task, update_task as db_update_task
from collabhub.services.contributions_service import track_contribution
from collabhub.services.projects_service import require_membership

logger = logging.getLogger(__name__)


def create_task(
    conn,
    user_id: int,
    project_id: int,
    title: str,
    description: Optional[str] = None,
    assigned_to: Optional[int] = None,
) -> Dict[str, Any]:
    require_membership(conn, project_id, user_id)
    task = db_create_task(conn, project_id, user_id, title.strip(), description, assigned_to)

    try:
        track_contribution(conn, user_id, project_id, "task")
    except sqlite3.Error:
        logger.exception("Contribution tracking failed for new task %s", task["task_id"])

    return task


def update_task(conn, user_id: int, task_id: int, fields: Dict[str, Any]) -> Dict[str, Any]:
    """
    Apply a partial update to a task. Moving a task into DONE counts as a
    completed task for the member who moved it; a failure to record that is
    logged and does not undo the update.
    """
    task = get_task(conn, task_id)
    if task is None:
        raise HTTPException(status_code=404, detail="Task not found")
    require_membership(conn, task["project_id"], user_id)

    updated = db_update_task(conn, task_id, fields)

    if fields.get("status") == "DONE" and task["status"] != "DONE":
        try:
            track_contribution(conn, user_id, task["project_id"], "task")
        except sqlite3.Error:
            logger.exception("Contribution tracking failed for task %s", task_id)

    return updated
