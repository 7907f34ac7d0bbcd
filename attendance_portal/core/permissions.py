"""
Role-based capabilities.

A single table maps each role to a closed set of permissions. Guards,
services and stores ask this module instead of comparing role strings.
"""

from enum import Enum
from typing import Optional

from attendance_portal.models.user import Role, User


class Permission(str, Enum):
    """Closed set of client-side capabilities."""

    # Self-service
    CLOCK_IN_OUT = "attendance.clock"
    VIEW_OWN_ATTENDANCE = "attendance.view_own"
    REQUEST_LEAVE = "leave.request"
    VIEW_OWN_REPORT = "report.view_own"
    EXPORT_REPORT = "report.export"
    EDIT_PROFILE = "profile.edit"

    # Administration
    VIEW_ADMIN_DASHBOARD = "admin.dashboard"
    REVIEW_LEAVE = "leave.review"
    VIEW_ALL_LEAVE = "leave.view_all"
    VIEW_USER_REPORTS = "report.view_users"
    VIEW_DEPARTMENT_REPORT = "report.view_department"
    VIEW_COMPLIANCE_REPORT = "report.view_compliance"
    MANAGE_USERS = "users.manage"
    UPDATE_COMPANY_SETTINGS = "company.update_settings"

    # Platform (cross-tenant)
    MANAGE_COMPANIES = "companies.manage"
    SWITCH_COMPANY = "companies.switch"
    ASSIGN_COMPANY = "companies.assign"
    CREATE_SUPER_ADMIN = "users.create_super_admin"


_EMPLOYEE_PERMISSIONS = frozenset(
    {
        Permission.CLOCK_IN_OUT,
        Permission.VIEW_OWN_ATTENDANCE,
        Permission.REQUEST_LEAVE,
        Permission.VIEW_OWN_REPORT,
        Permission.EXPORT_REPORT,
        Permission.EDIT_PROFILE,
    }
)

_ADMIN_PERMISSIONS = _EMPLOYEE_PERMISSIONS | frozenset(
    {
        Permission.VIEW_ADMIN_DASHBOARD,
        Permission.REVIEW_LEAVE,
        Permission.VIEW_ALL_LEAVE,
        Permission.VIEW_USER_REPORTS,
        Permission.VIEW_DEPARTMENT_REPORT,
        Permission.VIEW_COMPLIANCE_REPORT,
        Permission.MANAGE_USERS,
        Permission.UPDATE_COMPANY_SETTINGS,
    }
)

_SUPER_ADMIN_PERMISSIONS = _ADMIN_PERMISSIONS | frozenset(
    {
        Permission.MANAGE_COMPANIES,
        Permission.SWITCH_COMPANY,
        Permission.ASSIGN_COMPANY,
        Permission.CREATE_SUPER_ADMIN,
    }
)

ROLE_PERMISSIONS: dict[Role, frozenset[Permission]] = {
    Role.EMPLOYEE: _EMPLOYEE_PERMISSIONS,
    Role.ADMIN: _ADMIN_PERMISSIONS,
    Role.SUPER_ADMIN: _SUPER_ADMIN_PERMISSIONS,
}


def resolve_permissions(role: Optional[Role]) -> frozenset[Permission]:
    """Return the permissions granted to a role (empty for no role)."""
    if role is None:
        return frozenset()
    return ROLE_PERMISSIONS.get(Role(role), frozenset())


def has_permission(user: Optional[User], permission: Permission) -> bool:
    """Check a capability for a (possibly anonymous) user."""
    if user is None:
        return False
    return permission in resolve_permissions(user.role)
