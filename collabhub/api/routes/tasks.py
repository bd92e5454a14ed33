from fastapi import APIRouter, Depends
from sqlite3 import Connection

from collabhub.api.dependencies import get_db, get_current_user_id
from collabhub.api.schemas.tasks import TaskCreateDTO, TaskDTO, TaskUpdateDTO
from collabhub.services.tasks_service import create_task, update_task

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.post("", response_model=TaskDTO, status_code=201)
def post_task(
    body: TaskCreateDTO,
    user_id: int = Depends(get_current_user_id),
    conn: Connection = Depends(get_db),
):
    return create_task(conn, user_id, body.project_id, body.title, body.description, body.assigned_to)


@router.patch("/{task_id}", response_model=TaskDTO)
def patch_task(
    task_id: int,
    body: TaskUpdateDTO,
    user_id: int = Depends(get_current_user_id),
    conn: Connection = Depends(get_db),
):
    # only fields the client sent; null is meaningful for assigned_to alone
    fields = {
        k: v for k, v in body.model_dump(exclude_unset=True).items()
        if v is not None or k == "assigned_to"
    }
    return update_task(conn, user_id, task_id, fields)
