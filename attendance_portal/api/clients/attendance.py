"""
Outline
get_today_status()
clock_in()
clock_out()
get_records()
get_summary()
"""

from typing import Optional

from attendance_portal.api.gateway import ApiGateway
from attendance_portal.models.attendance import (
    AttendanceRecord,
    AttendanceRecordsPage,
    AttendanceStatus,
    AttendanceSummary,
    ClockRequest,
)
from attendance_portal.models.common import ApiResponse


class AttendanceApi:
    """Client for /api/attendance endpoints."""

    def __init__(self, gateway: ApiGateway):
        self.gateway = gateway

    async def get_today_status(self) -> ApiResponse[AttendanceStatus]:
        return await self.gateway.get("/api/attendance/today", data_model=AttendanceStatus)

    async def clock_in(
        self, location: Optional[str] = None, notes: Optional[str] = None
    ) -> ApiResponse[AttendanceRecord]:
        body = ClockRequest(location=location, notes=notes).to_payload()
        return await self.gateway.post("/api/attendance/clock-in", body, data_model=AttendanceRecord)

    async def clock_out(
        self, location: Optional[str] = None, notes: Optional[str] = None
    ) -> ApiResponse[AttendanceRecord]:
        body = ClockRequest(location=location, notes=notes).to_payload()
        return await self.gateway.post("/api/attendance/clock-out", body, data_model=AttendanceRecord)

    async def get_records(
        self,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> ApiResponse[AttendanceRecordsPage]:
        query = {"startDate": start_date, "endDate": end_date, "page": page, "limit": limit}
        return await self.gateway.get(
            "/api/attendance/records", query=query, data_model=AttendanceRecordsPage
        )

    async def get_summary(self, start_date: str, end_date: str) -> ApiResponse[AttendanceSummary]:
        query = {"startDate": start_date, "endDate": end_date}
        return await self.gateway.get(
            "/api/attendance/summary", query=query, data_model=AttendanceSummary
        )
