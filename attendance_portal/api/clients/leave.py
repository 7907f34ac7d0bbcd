"""
Outline
get_leaves()
get_leave()
create_leave()
update_leave()
update_status()
"""

from typing import Optional

from attendance_portal.api.gateway import ApiGateway
from attendance_portal.models.common import ApiResponse
from attendance_portal.models.leave import (
    LeaveCreate,
    LeaveRequest,
    LeaveRequestsPage,
    LeaveStatus,
    LeaveStatusUpdate,
    LeaveUpdate,
)


class LeaveApi:
    """Client for /api/leave endpoints."""

    def __init__(self, gateway: ApiGateway):
        self.gateway = gateway

    async def get_leaves(
        self,
        status: Optional[LeaveStatus] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> ApiResponse[LeaveRequestsPage]:
        query = {
            "status": status,
            "startDate": start_date,
            "endDate": end_date,
            "page": page,
            "limit": limit,
        }
        return await self.gateway.get("/api/leave", query=query, data_model=LeaveRequestsPage)

    async def get_leave(self, leave_id: str) -> ApiResponse[LeaveRequest]:
        return await self.gateway.get(f"/api/leave/{leave_id}", data_model=LeaveRequest)

    async def create_leave(self, data: LeaveCreate) -> ApiResponse[LeaveRequest]:
        return await self.gateway.post("/api/leave", data.to_payload(), data_model=LeaveRequest)

    async def update_leave(self, leave_id: str, data: LeaveUpdate) -> ApiResponse[LeaveRequest]:
        return await self.gateway.put(
            f"/api/leave/{leave_id}", data.to_payload(), data_model=LeaveRequest
        )

    async def update_status(self, leave_id: str, data: LeaveStatusUpdate) -> ApiResponse[LeaveRequest]:
        """Approve or reject a leave request (admin only on the backend)."""
        return await self.gateway.put(
            f"/api/leave/{leave_id}/status", data.to_payload(), data_model=LeaveRequest
        )
