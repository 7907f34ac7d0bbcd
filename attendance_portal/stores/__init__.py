"""
Feature stores: cached server state plus loading/error flags per area.
"""

from attendance_portal.stores.attendance import AttendanceStore
from attendance_portal.stores.company import CompanyStore
from attendance_portal.stores.leave import LeaveStore
from attendance_portal.stores.report import ReportStore
from attendance_portal.stores.users import UserAdminStore

__all__ = [
    "AttendanceStore",
    "CompanyStore",
    "LeaveStore",
    "ReportStore",
    "UserAdminStore",
]
