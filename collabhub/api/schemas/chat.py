from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional


class ChatMessageCreateDTO(BaseModel):
    content: str


class ChatMessageDTO(BaseModel):
    message_id: int
    project_id: int
    user_id: int
    content: str
    created_at: str
    username: str
    name: Optional[str] = None


class ParticipantDTO(BaseModel):
    user_id: str
    user_name: str
    peer_id: Optional[str] = None
    joined_at: int


class ParticipantListDTO(BaseModel):
    participants: List[ParticipantDTO]


class SignalMessageDTO(BaseModel):
    type: str
    data: Dict[str, Any] = {}
    timestamp: int


class SignalPollDTO(BaseModel):
    messages: List[SignalMessageDTO]
    timestamp: int


class SignalRequestDTO(BaseModel):
    """
    A signaling event. Everything besides `type` is passed through to other
    participants as the event payload.
    """
    model_config = {"extra": "allow"}

    type: str = Field(..., min_length=1)
