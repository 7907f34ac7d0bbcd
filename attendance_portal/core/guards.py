"""
Route guards.

Guards are pure functions of the session evaluated on every navigation:
an anonymous visitor is sent to /login and an authenticated user without
the required capability is sent to /dashboard. The requested location is
carried along so the login flow can return to it.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from attendance_portal.core.permissions import Permission
from attendance_portal.core.session import SessionStore

LOGIN_PATH = "/login"
DASHBOARD_PATH = "/dashboard"


@dataclass(frozen=True)
class RouteDecision:
    """Outcome of a guard: render the page or redirect."""

    allowed: bool
    redirect_to: Optional[str] = None
    from_location: Optional[str] = None

    @classmethod
    def allow(cls) -> "RouteDecision":
        return cls(allowed=True)

    @classmethod
    def redirect(cls, path: str, from_location: Optional[str] = None) -> "RouteDecision":
        return cls(allowed=False, redirect_to=path, from_location=from_location)


Guard = Callable[[SessionStore, str], RouteDecision]


def _check(
    session: SessionStore, location: str, permission: Optional[Permission] = None
) -> RouteDecision:
    if not session.is_authenticated or not session.token:
        return RouteDecision.redirect(LOGIN_PATH, location)
    if permission is not None and not session.has_permission(permission):
        return RouteDecision.redirect(DASHBOARD_PATH, location)
    return RouteDecision.allow()


def public_route(session: SessionStore, location: str) -> RouteDecision:
    return RouteDecision.allow()


def protected_route(session: SessionStore, location: str) -> RouteDecision:
    """Any authenticated user."""
    return _check(session, location)


def admin_protected_route(session: SessionStore, location: str) -> RouteDecision:
    """Administrators (super administrators included)."""
    return _check(session, location, Permission.VIEW_ADMIN_DASHBOARD)


def super_admin_protected_route(session: SessionStore, location: str) -> RouteDecision:
    return _check(session, location, Permission.MANAGE_COMPANIES)


def compliance_report_route(session: SessionStore, location: str) -> RouteDecision:
    return _check(session, location, Permission.VIEW_COMPLIANCE_REPORT)


ROUTES: dict[str, Guard] = {
    "/login": public_route,
    "/setup": public_route,
    "/verify-email": public_route,
    "/dashboard": protected_route,
    "/attendance": protected_route,
    "/leave": protected_route,
    "/reports": protected_route,
    "/profile": protected_route,
    "/reports/company": compliance_report_route,
    "/admin": admin_protected_route,
    "/admin/users": admin_protected_route,
    "/admin/companies": super_admin_protected_route,
}


def resolve_route(session: SessionStore, path: str) -> RouteDecision:
    """
    Decide what happens when navigating to path.

    "/" goes to the dashboard and unknown paths go to the login page.
    """
    route = path.split("?", 1)[0].rstrip("/") or "/"
    if route == "/":
        return RouteDecision.redirect(DASHBOARD_PATH)

    guard = ROUTES.get(route)
    if guard is None:
        return RouteDecision.redirect(LOGIN_PATH)
    return guard(session, path)
