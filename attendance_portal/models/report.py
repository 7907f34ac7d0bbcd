"""
Report schemas.

All figures are computed by the backend; the client only caches and
displays them.
"""

from enum import Enum
from typing import Optional

from attendance_portal.models.attendance import AttendanceRecord, DailyWorkingHours
from attendance_portal.models.common import CamelModel
from attendance_portal.models.leave import LeaveRequest
from attendance_portal.models.user import UserSummary


class ExportType(str, Enum):
    ATTENDANCE = "attendance"
    LEAVE = "leave"


class ReportPeriod(CamelModel):
    year: int
    month: int
    start_date: str
    end_date: str


class LeaveCountByType(CamelModel):
    # keys match LeaveType values on the wire
    PAID: int = 0
    UNPAID: int = 0
    SICK: int = 0
    OTHER: int = 0


# User Report


class UserAttendanceStats(CamelModel):
    total_working_days: int = 0
    total_working_hours: float = 0.0
    average_working_hours: float = 0.0
    daily_working_hours: list[DailyWorkingHours] = []
    records: list[AttendanceRecord] = []


class UserLeaveStats(CamelModel):
    total_leave_days: float = 0
    leave_count_by_type: LeaveCountByType = LeaveCountByType()
    requests: list[LeaveRequest] = []


class UserReport(CamelModel):
    user: UserSummary
    period: ReportPeriod
    attendance: UserAttendanceStats
    leave: UserLeaveStats


# Department Report


class DepartmentSummary(CamelModel):
    total_users: int = 0
    total_working_days: int = 0
    total_working_hours: float = 0.0
    average_working_hours_per_user: float = 0.0
    total_leave_days: float = 0
    leave_count_by_type: LeaveCountByType = LeaveCountByType()


class DepartmentUserAttendance(CamelModel):
    total_working_days: int = 0
    total_working_hours: float = 0.0
    records: list[AttendanceRecord] = []


class DepartmentUserReport(CamelModel):
    user: UserSummary
    attendance: DepartmentUserAttendance
    leave: UserLeaveStats


class DepartmentReport(CamelModel):
    period: ReportPeriod
    department_summary: DepartmentSummary
    user_reports: list[DepartmentUserReport] = []


# Company Compliance Report


class ComplianceUser(CamelModel):
    """User row in a compliance ranking; metric fields depend on the section."""

    user_id: str
    name: str
    email: str
    role: Optional[str] = None
    overtime_hours: Optional[float] = None
    excess_days: Optional[int] = None
    working_days: Optional[int] = None
    insufficient_break_days: Optional[int] = None
    break_compliance_rate: Optional[float] = None
    holiday_work_days: Optional[int] = None
    holiday_work_hours: Optional[float] = None
    night_work_days: Optional[int] = None
    night_work_hours: Optional[float] = None
    paid_leave_days: Optional[float] = None
    paid_leave_target: Optional[float] = None
    remaining_days: Optional[float] = None
    paid_leave_rate: Optional[float] = None


class OvertimeStatus(CamelModel):
    total_overtime_hours: float = 0.0
    average_overtime_hours: float = 0.0
    excessive_overtime_count: int = 0
    excessive_overtime_rate: float = 0.0
    top_overtime_users: list[ComplianceUser] = []


class BreakTimeStatus(CamelModel):
    total_working_days: int = 0
    insufficient_break_days: int = 0
    break_compliance_rate: float = 0.0
    insufficient_break_users: list[ComplianceUser] = []


class HolidayWorkStatus(CamelModel):
    total_holiday_work_days: int = 0
    total_holiday_work_hours: float = 0.0
    holiday_work_users: int = 0
    holiday_work_rate: float = 0.0
    top_holiday_work_users: list[ComplianceUser] = []


class NightWorkStatus(CamelModel):
    total_night_work_days: int = 0
    total_night_work_hours: float = 0.0
    night_work_users: int = 0
    night_work_rate: float = 0.0
    top_night_work_users: list[ComplianceUser] = []


class PaidLeaveStatus(CamelModel):
    total_paid_leave_days: float = 0
    average_paid_leave_days: float = 0.0
    target_achieved_users: int = 0
    target_achieved_rate: float = 0.0
    overall_paid_leave_rate: float = 0.0
    low_paid_leave_users: list[ComplianceUser] = []


class ComplianceSections(CamelModel):
    overtime_status: OvertimeStatus = OvertimeStatus()
    break_time_status: BreakTimeStatus = BreakTimeStatus()
    holiday_work_status: HolidayWorkStatus = HolidayWorkStatus()
    night_work_status: NightWorkStatus = NightWorkStatus()
    paid_leave_status: PaidLeaveStatus = PaidLeaveStatus()


class CompanySummary(CamelModel):
    total_users: int = 0
    active_users: int = 0


class CompanyComplianceReport(CamelModel):
    period: ReportPeriod
    company_summary: CompanySummary
    compliance_report: ComplianceSections
