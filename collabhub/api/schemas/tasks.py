from pydantic import BaseModel, Field
from typing import Literal, Optional

TaskStatus = Literal["TODO", "IN_PROGRESS", "DONE"]


class TaskCreateDTO(BaseModel):
    project_id: int
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    assigned_to: Optional[int] = None


class TaskUpdateDTO(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    assigned_to: Optional[int] = None


class TaskDTO(BaseModel):
    task_id: int
    project_id: int
    title: str
    description: Optional[str] = None
    status: TaskStatus
    assigned_to: Optional[int] = None
    created_by: int
    created_at: str
    updated_at: str
