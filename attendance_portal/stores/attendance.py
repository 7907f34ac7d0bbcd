"""
Attendance store.

Caches today's status, the attendance list and the working-hours summary.
"""

from typing import Optional

from attendance_portal.api.clients.attendance import AttendanceApi
from attendance_portal.core.logging import get_logger
from attendance_portal.models.attendance import (
    AttendanceRecord,
    AttendanceStatus,
    AttendanceSummary,
)
from attendance_portal.models.common import Pagination
from attendance_portal.stores.base import BaseStore

logger = get_logger(__name__)


class AttendanceStore(BaseStore):
    """Clock-in/clock-out actions and attendance history."""

    def __init__(self, api: AttendanceApi):
        super().__init__()
        self.api = api
        self.today_status: Optional[AttendanceStatus] = None
        self.records: list[AttendanceRecord] = []
        self.pagination: Optional[Pagination] = None
        self.summary: Optional[AttendanceSummary] = None

    async def fetch_today_status(self) -> Optional[AttendanceStatus]:
        key = "today_status"
        ticket = self._begin(key)
        try:
            response = await self.api.get_today_status()
            if self._is_stale(ticket):
                return None
            if response.is_success:
                self.today_status = response.data
                return self.today_status
            self._fail(response.message, "Failed to fetch attendance status")
        except Exception as e:
            if not self._is_stale(ticket):
                self._fail_with(
                    e, "An error occurred while fetching attendance status", "fetch_today_status"
                )
        finally:
            self._finish(ticket)
        return None

    async def clock_in(self, location: Optional[str] = None, notes: Optional[str] = None) -> bool:
        ticket = self._begin()
        try:
            response = await self.api.clock_in(location=location, notes=notes)
            if self._is_stale(ticket):
                return False
            if response.is_success:
                self.today_status = AttendanceStatus(
                    is_clocked_in=True, is_clocked_out=False, record=response.data
                )
                logger.info("Clocked in")
                return True
            self._fail(response.message, "Failed to clock in")
            return False
        except Exception as e:
            if not self._is_stale(ticket):
                self._fail_with(e, "An error occurred while clocking in", "clock_in")
            return False
        finally:
            self._finish(ticket)

    async def clock_out(self, location: Optional[str] = None, notes: Optional[str] = None) -> bool:
        ticket = self._begin()
        try:
            response = await self.api.clock_out(location=location, notes=notes)
            if self._is_stale(ticket):
                return False
            if response.is_success:
                self.today_status = AttendanceStatus(
                    is_clocked_in=True, is_clocked_out=True, record=response.data
                )
                logger.info("Clocked out")
                return True
            self._fail(response.message, "Failed to clock out")
            return False
        except Exception as e:
            if not self._is_stale(ticket):
                self._fail_with(e, "An error occurred while clocking out", "clock_out")
            return False
        finally:
            self._finish(ticket)

    async def fetch_records(
        self,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Optional[list[AttendanceRecord]]:
        key = "records"
        ticket = self._begin(key)
        try:
            response = await self.api.get_records(
                start_date=start_date, end_date=end_date, page=page, limit=limit
            )
            if self._is_stale(ticket):
                return None
            if response.is_success and response.data is not None:
                self.records = response.data.records
                self.pagination = response.data.pagination
                return self.records
            self._fail(response.message, "Failed to fetch attendance records")
        except Exception as e:
            if not self._is_stale(ticket):
                self._fail_with(
                    e, "An error occurred while fetching attendance records", "fetch_records"
                )
        finally:
            self._finish(ticket)
        return None

    async def fetch_summary(self, start_date: str, end_date: str) -> Optional[AttendanceSummary]:
        key = "summary"
        ticket = self._begin(key)
        try:
            response = await self.api.get_summary(start_date=start_date, end_date=end_date)
            if self._is_stale(ticket):
                return None
            if response.is_success:
                self.summary = response.data
                return self.summary
            self._fail(response.message, "Failed to fetch working-hours summary")
        except Exception as e:
            if not self._is_stale(ticket):
                self._fail_with(
                    e, "An error occurred while fetching the working-hours summary", "fetch_summary"
                )
        finally:
            self._finish(ticket)
        return None

    def reset(self) -> None:
        super().reset()
        self.today_status = None
        self.records = []
        self.pagination = None
        self.summary = None
