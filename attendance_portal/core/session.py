"""
Session store for the Attendance Portal client.

Holds the authenticated user, the selected company (tenant) and the bearer
token. One instance is created at application start and passed explicitly to
the API gateway, the stores and the guards. Every mutation is written to
durable storage and announced to subscribers.
"""

from typing import Any, Optional

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from attendance_portal.core.config import settings
from attendance_portal.core.events import EventEnvelope, EventType, SessionListener
from attendance_portal.core.logging import get_logger
from attendance_portal.core.permissions import (
    Permission,
    has_permission,
    resolve_permissions,
)
from attendance_portal.core.storage import SessionStorage
from attendance_portal.models.user import Company, Role, User

logger = get_logger(__name__)


class PersistedSession(BaseModel):
    """Shape of the session blob kept in storage."""

    user: Optional[User] = None
    company: Optional[Company] = None
    token: Optional[str] = None
    isAuthenticated: bool = False


class SessionStore:
    """
    Client-held authentication context.

    is_authenticated is derived from user and token so the two can never
    disagree. Authorization for company switching is not checked here; the
    backend and AuthService.switch_company enforce it.
    """

    def __init__(
        self,
        storage: Optional[SessionStorage] = None,
        storage_key: str = settings.SESSION_STORAGE_KEY,
    ):
        self.storage = storage
        self.storage_key = storage_key

        self.user: Optional[User] = None
        self.company: Optional[Company] = None
        self.token: Optional[str] = None
        self.is_loading: bool = False
        self.error: Optional[str] = None

        self._listeners: list[SessionListener] = []

    # State

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None and self.token is not None

    def is_super_admin(self) -> bool:
        return self.user is not None and self.user.role == Role.SUPER_ADMIN

    def permissions(self) -> frozenset[Permission]:
        return resolve_permissions(self.user.role if self.user else None)

    def has_permission(self, permission: Permission) -> bool:
        return has_permission(self.user, permission)

    def snapshot(self) -> dict[str, Any]:
        """Persistable view of the session (camelCase, JSON-ready)."""
        return PersistedSession(
            user=self.user,
            company=self.company,
            token=self.token,
            isAuthenticated=self.is_authenticated,
        ).model_dump(mode="json", by_alias=True)

    # Actions

    def login(self, user: User, company: Optional[Company], token: str) -> None:
        """Overwrite the session with a freshly authenticated user."""
        self.user = user
        self.company = company
        self.token = token
        self.error = None
        self._commit(
            EventType.SESSION_LOGIN,
            {
                "user_id": user.id,
                "role": user.role.value,
                "company_id": company.id if company else None,
            },
        )
        logger.info(f"User {user.email} logged in (role: {user.role.value})")

    def logout(self) -> None:
        """Clear user, company and token. Safe to call on an empty session."""
        was_authenticated = self.is_authenticated
        self.user = None
        self.company = None
        self.token = None
        self._commit(EventType.SESSION_LOGOUT, {"was_authenticated": was_authenticated})
        if was_authenticated:
            logger.info("Session cleared")

    def switch_company(self, company: Company) -> None:
        """Select another tenant; the user and token are untouched."""
        self.company = company
        self._commit(
            EventType.SESSION_COMPANY_SWITCHED,
            {"company_id": company.id, "public_id": company.public_id},
        )
        logger.info(f"Switched company to {company.name} ({company.public_id})")

    def set_user(self, user: Optional[User]) -> None:
        """Replace the cached user (profile update or current-user refresh)."""
        self.user = user
        self._commit(EventType.SESSION_USER_UPDATED, {"user_id": user.id if user else None})

    def set_company(self, company: Optional[Company]) -> None:
        self.company = company
        self._persist()

    def set_error(self, error: Optional[str]) -> None:
        self.error = error

    def set_loading(self, is_loading: bool) -> None:
        self.is_loading = is_loading

    # Subscription

    def subscribe(self, listener: SessionListener):
        """Register a listener for session events; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # Persistence

    def rehydrate(self) -> bool:
        """
        Load the persisted session once at startup.

        Returns:
            True if an authenticated session was restored
        """
        if self.storage is None:
            return False

        state = self.storage.get_item(self.storage_key)
        if not state:
            logger.info("No persisted session found")
            return False

        try:
            persisted = PersistedSession.model_validate(state)
        except PydanticValidationError as e:
            logger.warning(f"Discarding invalid persisted session: {e}")
            return False

        self.user = persisted.user
        self.company = persisted.company
        self.token = persisted.token
        self._emit(EventType.SESSION_REHYDRATED, {"authenticated": self.is_authenticated})

        if self.is_authenticated:
            logger.info(f"Restored session for {self.user.email}")
        return self.is_authenticated

    def _persist(self) -> None:
        if self.storage is None:
            return
        try:
            self.storage.set_item(self.storage_key, self.snapshot())
        except OSError as e:
            logger.error(f"Failed to persist session: {e}")

    def _commit(self, event_type: EventType, data: dict[str, Any]) -> None:
        self._persist()
        self._emit(event_type, data)

    def _emit(self, event_type: EventType, data: dict[str, Any]) -> None:
        event = EventEnvelope(event_type=event_type, data=data)
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception as e:
                logger.error(
                    f"Session listener failed on {event_type.value}: {e}", exc_info=True
                )
