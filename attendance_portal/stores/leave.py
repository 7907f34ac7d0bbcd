"""
Leave store.

Caches the leave request list and the request currently open in the detail
view. Mutations patch the cached copies by id after the backend accepts them.
"""

from typing import Optional, Union

from attendance_portal.api.clients.leave import LeaveApi
from attendance_portal.core.exceptions import ValidationError
from attendance_portal.core.logging import get_logger
from attendance_portal.core.permissions import Permission
from attendance_portal.core.session import SessionStore
from attendance_portal.core.validators import require_non_empty, validate_date_range
from attendance_portal.models.common import Pagination
from attendance_portal.models.leave import (
    LeaveCreate,
    LeaveRequest,
    LeaveStatus,
    LeaveStatusUpdate,
    LeaveType,
    LeaveUpdate,
)
from attendance_portal.stores.base import BaseStore

logger = get_logger(__name__)


def can_review(session: SessionStore, request: LeaveRequest) -> bool:
    """Whether approve/reject controls should be offered for a request."""
    return session.has_permission(Permission.REVIEW_LEAVE) and not request.status.is_final


class LeaveStore(BaseStore):
    """Leave request listing, creation, editing and review."""

    def __init__(self, api: LeaveApi):
        super().__init__()
        self.api = api
        self.requests: list[LeaveRequest] = []
        self.current_request: Optional[LeaveRequest] = None
        self.pagination: Optional[Pagination] = None

    def _find(self, leave_id: str) -> Optional[LeaveRequest]:
        if self.current_request is not None and self.current_request.id == leave_id:
            return self.current_request
        return next((r for r in self.requests if r.id == leave_id), None)

    def _replace(self, updated: LeaveRequest) -> None:
        self.requests = [updated if r.id == updated.id else r for r in self.requests]
        if self.current_request is not None and self.current_request.id == updated.id:
            self.current_request = updated

    async def fetch_requests(
        self,
        status: Optional[LeaveStatus] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Optional[list[LeaveRequest]]:
        key = "requests"
        ticket = self._begin(key)
        try:
            response = await self.api.get_leaves(
                status=status, start_date=start_date, end_date=end_date, page=page, limit=limit
            )
            if self._is_stale(ticket):
                return None
            if response.is_success and response.data is not None:
                self.requests = response.data.leaves
                self.pagination = response.data.pagination
                return self.requests
            self._fail(response.message, "Failed to fetch leave requests")
        except Exception as e:
            if not self._is_stale(ticket):
                self._fail_with(
                    e, "An error occurred while fetching leave requests", "fetch_requests"
                )
        finally:
            self._finish(ticket)
        return None

    async def fetch_request(self, leave_id: str) -> Optional[LeaveRequest]:
        key = "current_request"
        ticket = self._begin(key)
        try:
            response = await self.api.get_leave(leave_id)
            if self._is_stale(ticket):
                return None
            if response.is_success:
                self.current_request = response.data
                return self.current_request
            self._fail(response.message, "Failed to fetch the leave request")
        except Exception as e:
            if not self._is_stale(ticket):
                self._fail_with(
                    e, "An error occurred while fetching the leave request", "fetch_request"
                )
        finally:
            self._finish(ticket)
        return None

    async def create_request(
        self,
        start_date: str,
        end_date: str,
        leave_type: Union[LeaveType, str],
        reason: str,
    ) -> bool:
        """
        Submit a new leave request.

        The range and required fields are checked first; an invalid request
        sets `error` and never reaches the backend. A single-day leave
        (start_date == end_date) is valid.
        """
        try:
            validate_date_range(start_date, end_date)
            reason = require_non_empty(reason, "reason")
            data = LeaveCreate(
                start_date=start_date,
                end_date=end_date,
                leave_type=LeaveType(leave_type),
                reason=reason,
            )
        except ValidationError as e:
            self.error = e.message
            return False
        except ValueError:
            self.error = f"Unknown leave type: {leave_type}"
            return False

        ticket = self._begin()
        try:
            response = await self.api.create_leave(data)
            if self._is_stale(ticket):
                return False
            if response.is_success and response.data is not None:
                self.requests = [response.data, *self.requests]
                self.current_request = response.data
                logger.info(f"Created leave request {response.data.id}")
                return True
            self._fail(response.message, "Failed to create the leave request")
            return False
        except Exception as e:
            if not self._is_stale(ticket):
                self._fail_with(
                    e, "An error occurred while creating the leave request", "create_request"
                )
            return False
        finally:
            self._finish(ticket)

    async def update_request(
        self,
        leave_id: str,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        leave_type: Optional[Union[LeaveType, str]] = None,
        reason: Optional[str] = None,
    ) -> bool:
        """
        Edit a request. A single-date edit is checked against the other date
        of the cached copy, when there is one.
        """
        try:
            if start_date is not None or end_date is not None:
                cached = self._find(leave_id)
                start = start_date if start_date is not None else cached and cached.start_date
                end = end_date if end_date is not None else cached and cached.end_date
                if start is not None and end is not None:
                    validate_date_range(start, end)
            data = LeaveUpdate(
                start_date=start_date,
                end_date=end_date,
                leave_type=LeaveType(leave_type) if leave_type is not None else None,
                reason=reason,
            )
        except ValidationError as e:
            self.error = e.message
            return False
        except ValueError:
            self.error = f"Unknown leave type: {leave_type}"
            return False

        ticket = self._begin()
        try:
            response = await self.api.update_leave(leave_id, data)
            if self._is_stale(ticket):
                return False
            if response.is_success and response.data is not None:
                self._replace(response.data)
                return True
            self._fail(response.message, "Failed to update the leave request")
            return False
        except Exception as e:
            if not self._is_stale(ticket):
                self._fail_with(
                    e, "An error occurred while updating the leave request", "update_request"
                )
            return False
        finally:
            self._finish(ticket)

    async def update_status(
        self,
        leave_id: str,
        status: Union[LeaveStatus, str],
        comment: Optional[str] = None,
    ) -> bool:
        """
        Approve or reject a request.

        The backend decides whether the transition is legal; a transition the
        cached copy says is illegal is still forwarded and only logged.
        """
        try:
            target = LeaveStatus(status)
        except ValueError:
            self.error = f"Unknown leave status: {status}"
            return False

        cached = self._find(leave_id)
        if cached is not None and not cached.status.can_transition_to(target):
            logger.warning(
                f"Forwarding {cached.status.value} -> {target.value} for leave {leave_id}; "
                "the backend decides"
            )

        ticket = self._begin()
        try:
            response = await self.api.update_status(
                leave_id, LeaveStatusUpdate(status=target, comment=comment)
            )
            if self._is_stale(ticket):
                return False
            if response.is_success and response.data is not None:
                self._replace(response.data)
                logger.info(f"Leave {leave_id} set to {target.value}")
                return True
            self._fail(response.message, "Failed to update the leave request status")
            return False
        except Exception as e:
            if not self._is_stale(ticket):
                self._fail_with(
                    e, "An error occurred while updating the leave request status", "update_status"
                )
            return False
        finally:
            self._finish(ticket)

    def reset(self) -> None:
        super().reset()
        self.requests = []
        self.current_request = None
        self.pagination = None
