"""
Attendance Portal - Application Entry Point.

Wires the client together:
- Session store persisted to local storage
- API gateway attaching auth and tenant headers
- Feature stores for attendance, leave, reports, users and companies
- Authentication flows and route guards
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Callable, Optional

import httpx

from attendance_portal.api.clients import (
    AdminApi,
    AttendanceApi,
    AuthApi,
    CompanyApi,
    LeaveApi,
    ReportApi,
)
from attendance_portal.api.gateway import ApiGateway
from attendance_portal.core.config import settings
from attendance_portal.core.events import EventEnvelope, EventType
from attendance_portal.core.guards import RouteDecision, resolve_route
from attendance_portal.core.logging import get_logger, setup_logging
from attendance_portal.core.session import SessionStore
from attendance_portal.core.storage import SessionStorage
from attendance_portal.services.auth import AuthService
from attendance_portal.stores import (
    AttendanceStore,
    CompanyStore,
    LeaveStore,
    ReportStore,
    UserAdminStore,
)
from attendance_portal.stores.base import BaseStore

logger = get_logger(__name__)


class PortalApp:
    """
    Composition root.

    One instance per running client; everything that reads the session gets
    this instance's SessionStore passed in explicitly.
    """

    def __init__(
        self,
        storage_path: Optional[Path] = None,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        opener: Optional[Callable[[str], object]] = None,
    ):
        self.storage = SessionStorage(storage_path or settings.SESSION_STORAGE_PATH)
        self.session = SessionStore(self.storage)
        self.gateway = ApiGateway(
            self.session,
            base_url=base_url or settings.API_BASE_URL,
            transport=transport,
        )

        self.auth_api = AuthApi(self.gateway)
        self.attendance_api = AttendanceApi(self.gateway)
        self.leave_api = LeaveApi(self.gateway)
        self.report_api = ReportApi(self.gateway)
        self.admin_api = AdminApi(self.gateway)
        self.company_api = CompanyApi(self.gateway)

        self.auth = AuthService(self.session, self.auth_api, self.company_api, self.admin_api)
        self.attendance = AttendanceStore(self.attendance_api)
        self.leave = LeaveStore(self.leave_api)
        self.reports = (
            ReportStore(self.report_api, opener=opener) if opener else ReportStore(self.report_api)
        )
        self.users = UserAdminStore(self.admin_api)
        self.companies = CompanyStore(self.company_api)

        self._unsubscribe: Optional[Callable[[], None]] = None

    @property
    def feature_stores(self) -> list[BaseStore]:
        return [self.attendance, self.leave, self.reports, self.users, self.companies]

    def _on_session_event(self, event: EventEnvelope) -> None:
        if event.event_type == EventType.SESSION_LOGOUT:
            for store in self.feature_stores:
                store.reset()
            logger.debug("Feature stores reset after logout")

    def start(self) -> bool:
        """
        Restore the persisted session and start listening for logout.

        Returns:
            True if an authenticated session was restored
        """
        logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}...")
        if self._unsubscribe is None:
            self._unsubscribe = self.session.subscribe(self._on_session_event)
        restored = self.session.rehydrate()
        logger.info(f"Backend: {self.gateway.base_url}")
        return restored

    def shutdown(self) -> None:
        logger.info(f"Shutting down {settings.APP_NAME}...")
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        logger.info(f"{settings.APP_NAME} shutdown complete")

    def navigate(self, path: str) -> RouteDecision:
        return resolve_route(self.session, path)


@asynccontextmanager
async def lifespan(app: PortalApp):
    """
    Application lifespan manager.
    Restores the session on entry and detaches listeners on exit.
    """
    setup_logging()
    app.start()
    try:
        yield app
    finally:
        app.shutdown()
