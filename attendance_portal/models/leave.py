"""
Leave request schemas and the leave status transition table.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from attendance_portal.models.common import CamelModel, Pagination
from attendance_portal.models.user import UserSummary


class LeaveType(str, Enum):
    """Type of leave."""

    PAID = "PAID"
    UNPAID = "UNPAID"
    SICK = "SICK"
    OTHER = "OTHER"


class LeaveStatus(str, Enum):
    """Review state of a leave request."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"

    def can_transition_to(self, target: "LeaveStatus") -> bool:
        return target in LEAVE_STATUS_TRANSITIONS[self]

    @property
    def is_final(self) -> bool:
        return not LEAVE_STATUS_TRANSITIONS[self]


# PENDING is the only state a review can move out of
LEAVE_STATUS_TRANSITIONS: dict[LeaveStatus, frozenset[LeaveStatus]] = {
    LeaveStatus.PENDING: frozenset({LeaveStatus.APPROVED, LeaveStatus.REJECTED}),
    LeaveStatus.APPROVED: frozenset(),
    LeaveStatus.REJECTED: frozenset(),
}


class LeaveRequest(CamelModel):
    """Leave request as returned by the backend."""

    id: str
    user_id: str
    start_date: str
    end_date: str
    leave_type: LeaveType
    reason: str
    status: LeaveStatus = LeaveStatus.PENDING
    comment: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    user: Optional[UserSummary] = None

    @property
    def is_editable(self) -> bool:
        """The requester may change dates and reason only while pending."""
        return self.status == LeaveStatus.PENDING


class LeaveRequestsPage(CamelModel):
    """Paginated leave list response."""

    leaves: list[LeaveRequest] = []
    pagination: Optional[Pagination] = None


# Request Schemas


class LeaveCreate(CamelModel):
    start_date: str
    end_date: str
    leave_type: LeaveType
    reason: str


class LeaveUpdate(CamelModel):
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    leave_type: Optional[LeaveType] = None
    reason: Optional[str] = None


class LeaveStatusUpdate(CamelModel):
    status: LeaveStatus
    comment: Optional[str] = None
