"""
Display helpers shared by the attendance, leave and report views.
"""

import calendar
import re
from datetime import date, datetime
from typing import Optional, Union

from attendance_portal.core.validators import parse_iso_date
from attendance_portal.models.attendance import AttendanceRecord
from attendance_portal.models.leave import LeaveStatus, LeaveType
from attendance_portal.models.user import Role

TIME_PLACEHOLDER = "--:--"

LEAVE_TYPE_LABELS = {
    LeaveType.PAID: "Paid leave",
    LeaveType.UNPAID: "Unpaid leave",
    LeaveType.SICK: "Sick leave",
    LeaveType.OTHER: "Other",
}

LEAVE_STATUS_LABELS = {
    LeaveStatus.PENDING: "Pending",
    LeaveStatus.APPROVED: "Approved",
    LeaveStatus.REJECTED: "Rejected",
}

ROLE_LABELS = {
    Role.EMPLOYEE: "Employee",
    Role.ADMIN: "Administrator",
    Role.SUPER_ADMIN: "Super administrator",
}


def format_time(value: Optional[datetime]) -> str:
    """HH:MM in local time, or the placeholder when there is no time."""
    if value is None:
        return TIME_PLACEHOLDER
    if value.tzinfo is not None:
        value = value.astimezone()
    return value.strftime("%H:%M")


def format_date(value: Union[str, date]) -> str:
    return parse_iso_date(value).strftime("%Y/%m/%d")


def calculate_working_hours(record: Optional[AttendanceRecord]) -> str:
    """
    Working time of a record as "{h}h {m}m".

    Open records (no clock-out) and inconsistent ones (clock-out before
    clock-in) show the placeholder instead of a duration.
    """
    if record is None or record.clock_in_time is None or record.clock_out_time is None:
        return TIME_PLACEHOLDER

    try:
        elapsed = record.clock_out_time - record.clock_in_time
    except TypeError:
        # naive and aware datetimes cannot be compared
        return TIME_PLACEHOLDER

    total_minutes = int(elapsed.total_seconds() // 60)
    if total_minutes < 0:
        return TIME_PLACEHOLDER

    hours, minutes = divmod(total_minutes, 60)
    return f"{hours}h {minutes}m"


def calculate_days(start_date: Union[str, date], end_date: Union[str, date]) -> int:
    """Inclusive number of calendar days between two dates."""
    start = parse_iso_date(start_date)
    end = parse_iso_date(end_date)
    return abs((end - start).days) + 1


def month_bounds(year: int, month: int) -> tuple[str, str]:
    """First and last day of a month as YYYY-MM-DD strings."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1).isoformat(), date(year, month, last_day).isoformat()


def leave_type_label(leave_type: Union[LeaveType, str]) -> str:
    try:
        return LEAVE_TYPE_LABELS[LeaveType(leave_type)]
    except ValueError:
        return str(leave_type)


def leave_status_label(status: Union[LeaveStatus, str]) -> str:
    try:
        return LEAVE_STATUS_LABELS[LeaveStatus(status)]
    except ValueError:
        return str(status)


def role_label(role: Union[Role, str]) -> str:
    try:
        return ROLE_LABELS[Role(role)]
    except ValueError:
        return str(role)


def password_strength(password: str) -> int:
    """Score 0-5: length >= 8, uppercase, lowercase, digit, special character."""
    checks = [
        len(password) >= 8,
        bool(re.search(r"[A-Z]", password)),
        bool(re.search(r"[a-z]", password)),
        bool(re.search(r"[0-9]", password)),
        bool(re.search(r"[^A-Za-z0-9]", password)),
    ]
    return sum(checks)


def password_strength_feedback(password: str) -> str:
    strength = password_strength(password)
    if strength == 0:
        return ""
    if strength <= 2:
        return "Weak password"
    if strength <= 4:
        return "Fair password"
    return "Strong password"
