"""
Typed API clients, one per backend path prefix.
"""

from attendance_portal.api.clients.admin import AdminApi
from attendance_portal.api.clients.attendance import AttendanceApi
from attendance_portal.api.clients.auth import AuthApi
from attendance_portal.api.clients.companies import CompanyApi
from attendance_portal.api.clients.leave import LeaveApi
from attendance_portal.api.clients.reports import ReportApi

__all__ = [
    "AdminApi",
    "AttendanceApi",
    "AuthApi",
    "CompanyApi",
    "LeaveApi",
    "ReportApi",
]
