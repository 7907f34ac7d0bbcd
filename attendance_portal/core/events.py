"""
Session event definitions.

Every session mutation is announced to subscribers as an EventEnvelope so
that feature stores and the application shell can react (for example by
dropping cached data on logout) without the session knowing about them.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable
from uuid import uuid4

from pydantic import BaseModel, Field


class EventType(str, Enum):
    """All event types emitted by the session store."""

    SESSION_LOGIN = "session.login"
    SESSION_LOGOUT = "session.logout"
    SESSION_COMPANY_SWITCHED = "session.company.switched"
    SESSION_USER_UPDATED = "session.user.updated"
    SESSION_REHYDRATED = "session.rehydrated"


class EventEnvelope(BaseModel):
    """
    Standard envelope for all session events.
    Provides a consistent structure for listeners.
    """

    event_id: str = Field(default_factory=lambda: str(uuid4()))
    event_type: EventType
    timestamp: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
    data: dict[str, Any] = Field(default_factory=dict)


SessionListener = Callable[[EventEnvelope], None]
