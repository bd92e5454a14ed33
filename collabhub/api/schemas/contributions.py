from pydantic import BaseModel
from typing import Optional


class UserProfileDTO(BaseModel):
    user_id: int
    username: str
    email: Optional[str] = None
    name: Optional[str] = None


class MemberContributionDTO(BaseModel):
    user: UserProfileDTO
    edits_count: int
    characters_added: int
    characters_removed: int
    contribution_percentage: int
    character_percentage: int


class ContributionSnapshotDTO(BaseModel):
    project_id: int
    user_id: int
    date: str
    documents_edited: int
    characters_added: int
    chat_messages: int
    tasks_completed: int
