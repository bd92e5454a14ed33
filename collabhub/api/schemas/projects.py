from pydantic import BaseModel, Field, field_validator
from typing import List, Optional


class ProjectCreateDTO(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def validate_name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Project name cannot be empty")
        return v.strip()


class JoinProjectDTO(BaseModel):
    invite_code: str = Field(..., min_length=1)


class ProjectDTO(BaseModel):
    project_id: int
    name: str
    description: Optional[str] = None
    owner_id: int
    invite_code: str
    created_at: str
    member_ids: List[int] = []


class ProjectMemberDTO(BaseModel):
    user_id: int
    username: str
    name: Optional[str] = None
    email: Optional[str] = None
    role: str
    joined_at: str


class ProjectMembersDTO(BaseModel):
    members: List[ProjectMemberDTO]


class LeaveProjectDTO(BaseModel):
    message: str
