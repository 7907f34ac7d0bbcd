"""
Attendance schemas for the Attendance Portal client.

Includes:
- Attendance records (clock-in/clock-out times per day)
- Today's status view derived by the backend
- Working-hours summary for a date range
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from attendance_portal.models.common import CamelModel, Pagination


class AttendanceRecord(CamelModel):
    """
    One attendance day for a user.

    clock_out_time stays None while the record is open; only one open record
    exists per user per day.
    """

    id: str
    user_id: str
    date: str  # YYYY-MM-DD (or ISO datetime as sent by the backend)
    clock_in_time: datetime
    clock_out_time: Optional[datetime] = None
    location: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        return self.clock_out_time is None


class AttendanceStatus(CamelModel):
    """Today's clock-in/clock-out state (a view, not persisted)."""

    is_clocked_in: bool = False
    is_clocked_out: bool = False
    record: Optional[AttendanceRecord] = None


class DailyWorkingHours(CamelModel):
    date: str
    hours: float


class AttendanceSummary(CamelModel):
    """Working-hours summary over a date range."""

    total_working_hours: float = 0.0
    total_working_days: int = 0
    average_working_hours: float = 0.0
    daily_working_hours: list[DailyWorkingHours] = []


class AttendanceRecordsPage(CamelModel):
    """Paginated attendance list response."""

    records: list[AttendanceRecord] = []
    pagination: Optional[Pagination] = None


# Request Schemas


class ClockRequest(CamelModel):
    """Schema for clock-in and clock-out requests."""

    location: Optional[str] = Field(default=None, max_length=255)
    notes: Optional[str] = Field(default=None, max_length=500)
