"""
Tests for the leave store.
"""

import pytest
from conftest import error, make_company, make_user, request_json, success

from attendance_portal.api.clients.leave import LeaveApi
from attendance_portal.models.leave import LeaveRequest, LeaveStatus, LeaveType
from attendance_portal.models.user import Role
from attendance_portal.stores.leave import LeaveStore, can_review


def leave_payload(leave_id="l1", status="PENDING", start="2024-05-01", end="2024-05-03", **extra):
    return {
        "id": leave_id,
        "userId": "u1",
        "startDate": start,
        "endDate": end,
        "leaveType": "PAID",
        "reason": "Family trip",
        "status": status,
        "user": {"id": "u1", "name": "User u1", "email": "u1@example.com"},
        **extra,
    }


@pytest.fixture
def store(gateway):
    return LeaveStore(LeaveApi(gateway))


@pytest.mark.asyncio
async def test_start_after_end_is_rejected_without_request(logged_in, store, backend):
    """Test that an inverted range never reaches the backend."""
    # Act
    result = await store.create_request("2024-05-10", "2024-05-01", LeaveType.PAID, "Trip")

    # Assert
    assert result is False
    assert store.error == "Start date must be on or before the end date"
    assert backend.requests == []


@pytest.mark.asyncio
async def test_single_day_leave_is_accepted(logged_in, store, backend):
    """Test that start == end is a valid one-day request."""
    # Arrange
    backend.add(
        "POST", "/api/leave", success(leave_payload(start="2024-05-01", end="2024-05-01")), 201
    )

    # Act
    result = await store.create_request("2024-05-01", "2024-05-01", "PAID", "Doctor")

    # Assert
    assert result is True
    assert request_json(backend.last_request) == {
        "startDate": "2024-05-01",
        "endDate": "2024-05-01",
        "leaveType": "PAID",
        "reason": "Doctor",
    }
    assert store.requests[0].id == "l1"
    assert store.current_request.id == "l1"


@pytest.mark.asyncio
async def test_missing_reason_is_rejected(logged_in, store, backend):
    # Act
    result = await store.create_request("2024-05-01", "2024-05-02", LeaveType.SICK, "  ")

    # Assert
    assert result is False
    assert store.error == "reason is required"
    assert backend.requests == []


@pytest.mark.asyncio
async def test_unknown_leave_type_is_rejected(logged_in, store, backend):
    # Act
    result = await store.create_request("2024-05-01", "2024-05-02", "HOLIDAY", "Trip")

    # Assert
    assert result is False
    assert store.error == "Unknown leave type: HOLIDAY"
    assert backend.requests == []


@pytest.mark.asyncio
async def test_fetch_requests(logged_in, store, backend):
    # Arrange
    backend.add(
        "GET",
        "/api/leave",
        success(
            {
                "leaves": [leave_payload("l1"), leave_payload("l2", status="APPROVED")],
                "pagination": {"page": 1, "limit": 10, "total": 2, "totalPages": 1},
            }
        ),
    )

    # Act
    requests = await store.fetch_requests(status=LeaveStatus.PENDING)

    # Assert
    assert [r.id for r in requests] == ["l1", "l2"]
    assert requests[1].status == LeaveStatus.APPROVED
    assert store.pagination.total == 2
    assert backend.last_request.url.params["status"] == "PENDING"


@pytest.mark.asyncio
async def test_update_status_replaces_cached_copies(logged_in, store, backend):
    """Test that the list entry and the detail view are both updated by id."""
    # Arrange
    store.requests = [
        LeaveRequest.model_validate(leave_payload("l1")),
        LeaveRequest.model_validate(leave_payload("l2")),
    ]
    store.current_request = store.requests[1]
    backend.add(
        "PUT",
        "/api/leave/l2/status",
        success(leave_payload("l2", status="APPROVED", comment="Enjoy")),
    )

    # Act
    result = await store.update_status("l2", LeaveStatus.APPROVED, comment="Enjoy")

    # Assert
    assert result is True
    assert store.requests[0].status == LeaveStatus.PENDING
    assert store.requests[1].status == LeaveStatus.APPROVED
    assert store.current_request.comment == "Enjoy"
    assert request_json(backend.last_request) == {"status": "APPROVED", "comment": "Enjoy"}


@pytest.mark.asyncio
async def test_update_status_on_approved_request_is_still_sent(logged_in, store, backend):
    """Test that the backend decides on transitions the cache considers final."""
    # Arrange
    store.requests = [LeaveRequest.model_validate(leave_payload("l1", status="APPROVED"))]
    backend.add(
        "PUT",
        "/api/leave/l1/status",
        error("This leave request has already been processed"),
        400,
    )

    # Act
    result = await store.update_status("l1", "APPROVED")

    # Assert
    assert len(backend.calls("PUT", "/api/leave/l1/status")) == 1
    assert result is False
    assert store.error == "This leave request has already been processed"


@pytest.mark.asyncio
async def test_update_status_rejects_unknown_status(logged_in, store, backend):
    # Act
    result = await store.update_status("l1", "CANCELLED")

    # Assert
    assert result is False
    assert store.error == "Unknown leave status: CANCELLED"
    assert backend.requests == []


@pytest.mark.asyncio
async def test_update_request_validates_range(logged_in, store, backend):
    # Act
    result = await store.update_request("l1", start_date="2024-06-05", end_date="2024-06-01")

    # Assert
    assert result is False
    assert backend.requests == []


@pytest.mark.asyncio
async def test_update_request_sends_only_changed_fields(logged_in, store, backend):
    # Arrange
    store.requests = [LeaveRequest.model_validate(leave_payload("l1"))]
    backend.add("PUT", "/api/leave/l1", success(leave_payload("l1", reason="Changed plans")))

    # Act
    result = await store.update_request("l1", reason="Changed plans")

    # Assert
    assert result is True
    assert request_json(backend.last_request) == {"reason": "Changed plans"}
    assert store.requests[0].reason == "Changed plans"


@pytest.mark.asyncio
async def test_update_request_checks_single_date_against_cached_copy(logged_in, store, backend):
    """Test that moving only the start past the cached end date is rejected locally."""
    # Arrange
    store.requests = [LeaveRequest.model_validate(leave_payload("l1"))]

    # Act
    result = await store.update_request("l1", start_date="2024-05-10")

    # Assert
    assert result is False
    assert store.error == "Start date must be on or before the end date"
    assert backend.requests == []


@pytest.mark.asyncio
async def test_update_request_single_date_within_cached_range(logged_in, store, backend):
    # Arrange
    store.requests = [LeaveRequest.model_validate(leave_payload("l1"))]
    backend.add("PUT", "/api/leave/l1", success(leave_payload("l1", end="2024-05-05")))

    # Act
    result = await store.update_request("l1", end_date="2024-05-05")

    # Assert
    assert result is True
    assert request_json(backend.last_request) == {"endDate": "2024-05-05"}
    assert store.requests[0].end_date == "2024-05-05"


@pytest.mark.asyncio
async def test_fetch_request_error_fallback(logged_in, store, backend):
    # Arrange
    backend.add("GET", "/api/leave/l9", {"status": "error"}, 500)

    # Act
    result = await store.fetch_request("l9")

    # Assert
    assert result is None
    assert store.error == "An error occurred while fetching the leave request"


def test_can_review(session):
    """Test that only pending requests are reviewable, and only by admins."""
    # Arrange
    pending = LeaveRequest.model_validate(leave_payload("l1"))
    approved = LeaveRequest.model_validate(leave_payload("l2", status="APPROVED"))

    # Act
    session.login(make_user(role=Role.EMPLOYEE), make_company(), "t")
    employee_view = can_review(session, pending)
    session.login(make_user(role=Role.ADMIN), make_company(), "t")

    # Assert
    assert employee_view is False
    assert can_review(session, pending) is True
    assert can_review(session, approved) is False
