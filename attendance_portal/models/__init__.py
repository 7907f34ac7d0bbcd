"""
Wire schemas module.
Contains the pydantic models exchanged with the backend.
"""

from attendance_portal.models.attendance import (
    AttendanceRecord,
    AttendanceRecordsPage,
    AttendanceStatus,
    AttendanceSummary,
    ClockRequest,
)
from attendance_portal.models.common import ApiResponse, Pagination
from attendance_portal.models.leave import (
    LeaveCreate,
    LeaveRequest,
    LeaveRequestsPage,
    LeaveStatus,
    LeaveStatusUpdate,
    LeaveType,
    LeaveUpdate,
)
from attendance_portal.models.report import (
    CompanyComplianceReport,
    DepartmentReport,
    ExportType,
    UserReport,
)
from attendance_portal.models.user import (
    AdminUser,
    AuthResponse,
    Company,
    Role,
    User,
)

__all__ = [
    "ApiResponse",
    "Pagination",
    "Role",
    "User",
    "AdminUser",
    "Company",
    "AuthResponse",
    "AttendanceRecord",
    "AttendanceRecordsPage",
    "AttendanceStatus",
    "AttendanceSummary",
    "ClockRequest",
    "LeaveType",
    "LeaveStatus",
    "LeaveRequest",
    "LeaveRequestsPage",
    "LeaveCreate",
    "LeaveUpdate",
    "LeaveStatusUpdate",
    "ExportType",
    "UserReport",
    "DepartmentReport",
    "CompanyComplianceReport",
]
