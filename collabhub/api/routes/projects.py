from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlite3 import Connection

from collabhub.api.dependencies import get_db, get_current_user_id
from collabhub.api.schemas.contributions import ContributionSnapshotDTO, MemberContributionDTO
from collabhub.api.schemas.projects import (
    JoinProjectDTO,
    LeaveProjectDTO,
    ProjectCreateDTO,
    ProjectDTO,
    ProjectMembersDTO,
)
from collabhub.services.contributions_service import (
    get_contribution_breakdown,
    get_contribution_history,
)
from collabhub.services.projects_service import (
    create_project,
    get_project_detail,
    join_project,
    leave_project,
    list_members,
    require_membership,
)

router = APIRouter(prefix="/projects", tags=["projects"])


@router.post("", response_model=ProjectDTO, status_code=201)
def post_project(
    body: ProjectCreateDTO,
    user_id: int = Depends(get_current_user_id),
    conn: Connection = Depends(get_db),
):
    return create_project(conn, user_id, body.name, body.description)


@router.post("/join", response_model=ProjectDTO)
def post_join_project(
    body: JoinProjectDTO,
    user_id: int = Depends(get_current_user_id),
    conn: Connection = Depends(get_db),
):
    return join_project(conn, user_id, body.invite_code)


@router.get("/{project_id}", response_model=ProjectDTO)
def get_project(
    project_id: int,
    user_id: int = Depends(get_current_user_id),
    conn: Connection = Depends(get_db),
):
    return get_project_detail(conn, user_id, project_id)


@router.get("/{project_id}/members", response_model=ProjectMembersDTO)
def get_project_members(
    project_id: int,
    user_id: int = Depends(get_current_user_id),
    conn: Connection = Depends(get_db),
):
    return ProjectMembersDTO(members=list_members(conn, user_id, project_id))


@router.post("/{project_id}/leave", response_model=LeaveProjectDTO)
def post_leave_project(
    project_id: int,
    user_id: int = Depends(get_current_user_id),
    conn: Connection = Depends(get_db),
):
    leave_project(conn, user_id, project_id)
    return LeaveProjectDTO(message="You have left the project")


@router.get("/{project_id}/contributions", response_model=List[MemberContributionDTO])
def get_project_contributions(
    project_id: int,
    user_id: int = Depends(get_current_user_id),
    conn: Connection = Depends(get_db),
):
    require_membership(conn, project_id, user_id)
    return get_contribution_breakdown(conn, project_id)


@router.get("/{project_id}/contributions/history", response_model=List[ContributionSnapshotDTO])
def get_project_contribution_history(
    project_id: int,
    target_user_id: Optional[int] = Query(default=None, alias="user_id"),
    days: int = Query(default=7, ge=1),
    user_id: int = Depends(get_current_user_id),
    conn: Connection = Depends(get_db),
):
    """
    Daily activity for one member (the caller unless `user_id` is given).
    """
    require_membership(conn, project_id, user_id)
    return get_contribution_history(conn, project_id, target_user_id or user_id, days)
