"""Domain models for photo sessions."""

from dataclasses import dataclass
from datetime import datetime

SESSION_ACTIVE = "active"
SESSION_COMPLETED = "completed"
SESSION_ARCHIVED = "archived"

ACCESS_CODE_LENGTH = 6

SESSION_TRANSITIONS: dict[str, frozenset[str]] = {
    SESSION_ACTIVE: frozenset({SESSION_COMPLETED, SESSION_ARCHIVED}),
    SESSION_COMPLETED: frozenset({SESSION_ARCHIVED}),
    SESSION_ARCHIVED: frozenset(),
}


@dataclass(frozen=True)
class SessionSettings:
    """Client selection rules for a session."""

    allow_album_selection: bool = True
    allow_editing_selection: bool = True
    max_album_selections: int | None = None
    max_editing_selections: int | None = None


@dataclass(frozen=True)
class SessionRecord:
    """Represents a photo session shared with a client by access code."""

    id: int
    photographer_id: int
    name: str
    description: str | None
    client_name: str
    client_email: str
    session_date: datetime
    access_code: str
    status: str
    settings: SessionSettings
    created_at: datetime
    updated_at: datetime

    @property
    def is_active(self) -> bool:
        return self.status == SESSION_ACTIVE


def can_transition_session(current: str, requested: str) -> bool:
    """Return True when the session FSM allows the status change."""
    return requested in SESSION_TRANSITIONS.get(current, frozenset())
