"""
In-memory presence for project video calls.

ParticipantRegistry keeps project_id -> {user_id -> VideoCallParticipant}.
Nothing is persisted: a restart empties every call. Entries leave only through
remove_participant.

SignalStore keeps a short per-project log of signaling messages so clients that
cannot receive pushed events can poll for them.
"""

import threading
import time
from collections import deque
from dataclasses import asdict, dataclass, replace
from typing import Any, Callable, Deque, Dict, List, Optional

MAX_SIGNAL_MESSAGES = 100


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class VideoCallParticipant:
    user_id: str
    user_name: str
    peer_id: Optional[str]
    joined_at: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class ParticipantRegistry:
    """
    Who is currently in each project's video call.

    Every operation holds one lock for its whole duration, so the registry can
    be shared across FastAPI's worker threads.
    """

    def __init__(self, clock: Callable[[], int] = _now_ms):
        self._clock = clock
        self._lock = threading.Lock()
        self._by_project: Dict[str, Dict[str, VideoCallParticipant]] = {}

    def _project(self, project_id: str) -> Dict[str, VideoCallParticipant]:
        return self._by_project.setdefault(project_id, {})

    def add_participant(
        self,
        project_id: str,
        user_id: str,
        user_name: str,
        peer_id: Optional[str] = None,
    ) -> VideoCallParticipant:
        """Insert or replace a participant. A rejoin keeps the original joined_at."""
        with self._lock:
            participants = self._project(project_id)
            existing = participants.get(user_id)
            participant = VideoCallParticipant(
                user_id=user_id,
                user_name=user_name,
                peer_id=peer_id,
                joined_at=existing.joined_at if existing else self._clock(),
            )
            participants[user_id] = participant
            return participant

    def touch_participant(
        self,
        project_id: str,
        user_id: str,
        user_name: Optional[str] = None,
        peer_id: Optional[str] = None,
    ) -> Optional[VideoCallParticipant]:
        """
        Refresh name/peer id of someone already in the call. Empty values keep
        the current ones. Does nothing (returns None) for users not present.
        """
        with self._lock:
            participants = self._project(project_id)
            existing = participants.get(user_id)
            if existing is None:
                return None
            updated = replace(
                existing,
                user_name=user_name or existing.user_name,
                peer_id=peer_id or existing.peer_id,
            )
            participants[user_id] = updated
            return updated

    def remove_participant(self, project_id: str, user_id: str) -> None:
        with self._lock:
            self._project(project_id).pop(user_id, None)

    def list_participants(self, project_id: str) -> List[VideoCallParticipant]:
        """Participants in join order (earliest first)."""
        with self._lock:
            participants = list(self._project(project_id).values())
        return sorted(participants, key=lambda p: p.joined_at)


class SignalStore:
    """Bounded per-project log of signaling messages for polling clients."""

    def __init__(self, max_messages: int = MAX_SIGNAL_MESSAGES, clock: Callable[[], int] = _now_ms):
        self._max_messages = max_messages
        self._clock = clock
        self._lock = threading.Lock()
        self._by_project: Dict[str, Deque[Dict[str, Any]]] = {}

    def append(self, project_id: str, signal_type: str, data: Dict[str, Any]) -> Dict[str, Any]:
        message = {"type": signal_type, "data": data, "timestamp": self._clock()}
        with self._lock:
            log = self._by_project.setdefault(project_id, deque(maxlen=self._max_messages))
            log.append(message)
        return message

    def since(self, project_id: str, timestamp: int = 0) -> List[Dict[str, Any]]:
        """Messages strictly newer than `timestamp`, oldest first."""
        with self._lock:
            log = list(self._by_project.get(project_id, ()))
        return [m for m in log if m["timestamp"] > timestamp]

    def now(self) -> int:
        return self._clock()


# Process-wide instances handed to routes through FastAPI dependencies
participant_registry = ParticipantRegistry()
signal_store = SignalStore()


def get_participant_registry() -> ParticipantRegistry:
    return participant_registry


def get_signal_store() -> SignalStore:
    return signal_store
