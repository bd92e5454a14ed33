import logging
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlite3 import Connection

from collabhub.api.dependencies import get_db, get_current_user_id
from collabhub.api.schemas.chat import (
    ChatMessageCreateDTO,
    ChatMessageDTO,
    ParticipantListDTO,
    SignalPollDTO,
    SignalRequestDTO,
)
from collabhub.api.schemas.common import SuccessDTO
from collabhub.services.chat_service import get_messages, post_message
from collabhub.services.projects_service import require_membership
from collabhub.services.video_call_store import (
    ParticipantRegistry,
    SignalStore,
    get_participant_registry,
    get_signal_store,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


@router.get("/{project_id}", response_model=List[ChatMessageDTO])
def get_chat_messages(
    project_id: int,
    user_id: int = Depends(get_current_user_id),
    conn: Connection = Depends(get_db),
):
    return get_messages(conn, user_id, project_id)


@router.post("/{project_id}", response_model=ChatMessageDTO, status_code=201)
def post_chat_message(
    project_id: int,
    body: ChatMessageCreateDTO,
    user_id: int = Depends(get_current_user_id),
    conn: Connection = Depends(get_db),
):
    return post_message(conn, user_id, project_id, body.content)


@router.get("/{project_id}/participants", response_model=ParticipantListDTO)
def get_call_participants(
    project_id: int,
    user_id: int = Depends(get_current_user_id),
    conn: Connection = Depends(get_db),
    registry: ParticipantRegistry = Depends(get_participant_registry),
):
    require_membership(conn, project_id, user_id)
    participants = registry.list_participants(str(project_id))
    return ParticipantListDTO(participants=[p.to_dict() for p in participants])


@router.post("/{project_id}/signal", response_model=SuccessDTO)
def post_signal(
    project_id: int,
    body: SignalRequestDTO,
    user_id: int = Depends(get_current_user_id),
    conn: Connection = Depends(get_db),
    registry: ParticipantRegistry = Depends(get_participant_registry),
    signals: SignalStore = Depends(get_signal_store),
):
    """
    Relay a video-call signaling event and keep the participant list in step:
    user-joined adds the actor, user-left removes them, anything else refreshes
    an actor who is already in the call.
    """
    require_membership(conn, project_id, user_id)

    key = str(project_id)
    data = dict(body.model_extra or {})
    actor_id = data.get("userId") or data.get("from")
    actor_name = str(data.get("userName") or data.get("fromName") or "Participant")
    peer = data.get("peerId")
    actor_peer_id = str(peer) if peer is not None else None

    if actor_id and body.type == "user-joined":
        registry.add_participant(key, str(actor_id), actor_name, actor_peer_id)
        logger.info("User %s joined video call in project %s", actor_id, project_id)
    elif actor_id and body.type == "user-left":
        registry.remove_participant(key, str(actor_id))
        logger.info("User %s left video call in project %s", actor_id, project_id)
    elif actor_id:
        registry.touch_participant(key, str(actor_id), actor_name, actor_peer_id)

    signals.append(key, body.type, data)
    return SuccessDTO()


@router.get("/{project_id}/signal", response_model=SignalPollDTO)
def get_signals(
    project_id: int,
    since: int = Query(default=0),
    user_id: int = Depends(get_current_user_id),
    conn: Connection = Depends(get_db),
    signals: SignalStore = Depends(get_signal_store),
):
    require_membership(conn, project_id, user_id)
    return SignalPollDTO(messages=signals.since(str(project_id), since), timestamp=signals.now())
