"""
Tests for form objects.
"""

import pytest
from conftest import error, make_company, make_user, success, user_payload

from attendance_portal.api.clients import AdminApi, AuthApi, CompanyApi, LeaveApi
from attendance_portal.forms import (
    REQUIRED_FIELDS_MESSAGE,
    CreateSuperAdminForm,
    LeaveRequestForm,
    PasswordChangeForm,
    ProfileForm,
    RegisterForm,
)
from attendance_portal.models.leave import LeaveType
from attendance_portal.models.user import Role
from attendance_portal.services.auth import AuthService
from attendance_portal.stores.leave import LeaveStore
from attendance_portal.stores.users import UserAdminStore


@pytest.fixture
def auth(session, gateway):
    return AuthService(session, AuthApi(gateway), CompanyApi(gateway), AdminApi(gateway))


@pytest.mark.asyncio
async def test_leave_form_requires_all_fields(logged_in, gateway, backend):
    # Arrange
    form = LeaveRequestForm(LeaveStore(LeaveApi(gateway)))
    form.start_date = "2024-05-01"

    # Act
    result = await form.submit()

    # Assert
    assert result is False
    assert form.field_error == REQUIRED_FIELDS_MESSAGE
    assert form.start_date == "2024-05-01"
    assert backend.requests == []


@pytest.mark.asyncio
async def test_leave_form_keeps_values_on_inverted_range(logged_in, gateway, backend):
    # Arrange
    form = LeaveRequestForm(LeaveStore(LeaveApi(gateway)))
    form.start_date, form.end_date, form.reason = "2024-05-10", "2024-05-01", "Trip"

    # Act
    result = await form.submit()

    # Assert
    assert result is False
    assert form.error_field == "start_date"
    assert form.reason == "Trip"
    assert backend.requests == []


@pytest.mark.asyncio
async def test_leave_form_clears_after_success(logged_in, gateway, backend):
    # Arrange
    backend.add(
        "POST",
        "/api/leave",
        success(
            {
                "id": "l1",
                "userId": "u1",
                "startDate": "2024-05-01",
                "endDate": "2024-05-02",
                "leaveType": "SICK",
                "reason": "Flu",
                "status": "PENDING",
            }
        ),
        201,
    )
    form = LeaveRequestForm(LeaveStore(LeaveApi(gateway)))
    form.start_date, form.end_date, form.reason = "2024-05-01", "2024-05-02", "Flu"
    form.leave_type = LeaveType.SICK

    # Act
    result = await form.submit()

    # Assert
    assert result is True
    assert form.start_date == ""
    assert form.leave_type == LeaveType.PAID


@pytest.mark.asyncio
async def test_register_form_uses_registration_policy(auth, backend):
    # Arrange
    form = RegisterForm(auth)
    form.name, form.email = "Jane", "jane@example.com"
    form.password = form.confirm_password = "Password1"

    # Act
    result = await form.submit()

    # Assert
    assert result is False
    assert form.field_error == "Password must contain at least one special character"
    assert form.strength == 4
    assert backend.requests == []


@pytest.mark.asyncio
async def test_register_form_shows_backend_error(auth, backend):
    # Arrange
    backend.add("POST", "/api/auth/register", error("Email already registered"), 400)
    form = RegisterForm(auth)
    form.name, form.email = "Jane", "jane@example.com"
    form.password = form.confirm_password = "Pa$$word123"

    # Act
    result = await form.submit()

    # Assert
    assert result is False
    assert form.field_error == "Email already registered"
    assert form.email == "jane@example.com"


@pytest.mark.asyncio
async def test_password_change_form_clears_on_success(auth, logged_in, backend):
    # Arrange
    backend.add("PUT", "/api/auth/password", success(None))
    form = PasswordChangeForm(auth)
    form.current_password = "Old12345"
    form.new_password = form.confirm_password = "NewPass123"

    # Act
    result = await form.submit()

    # Assert
    assert result is True
    assert form.new_password == ""
    assert form.success_message == "Password changed successfully"


@pytest.mark.asyncio
async def test_profile_form_prefills_from_session(auth, logged_in, backend):
    # Arrange
    backend.add("PUT", "/api/auth/profile", success({**user_payload(), "name": "Renamed"}))
    form = ProfileForm(auth, logged_in)

    # Act
    prefilled = (form.name, form.email)
    form.name = "Renamed"
    result = await form.submit()

    # Assert
    assert prefilled == ("User u1", "u1@example.com")
    assert result is True
    assert logged_in.user.name == "Renamed"


@pytest.mark.asyncio
async def test_create_super_admin_form_requires_super_admin(logged_in, gateway, backend):
    # Arrange
    form = CreateSuperAdminForm(UserAdminStore(AdminApi(gateway)), logged_in)
    form.email, form.password, form.name = "root2@example.com", "Secret123", "Root Two"

    # Act
    result = await form.submit()

    # Assert
    assert form.is_available is False
    assert result is False
    assert backend.requests == []


@pytest.mark.asyncio
async def test_create_super_admin_form_keeps_values_until_success(session, gateway, backend):
    # Arrange
    session.login(make_user("root", role=Role.SUPER_ADMIN), make_company(), "t")
    backend.add("POST", "/api/admin/super-admins", error("Email already registered"), 400)
    form = CreateSuperAdminForm(UserAdminStore(AdminApi(gateway)), session)
    form.email, form.password, form.name = "root2@example.com", "Secret123", "Root Two"

    # Act
    failed = await form.submit()
    backend.add(
        "POST",
        "/api/admin/super-admins",
        success(user_payload("root2", role="SUPER_ADMIN", company_id=None)),
        201,
    )
    succeeded = await form.submit()

    # Assert
    assert failed is False
    assert succeeded is True
    assert form.email == ""
    assert form.name == ""
    assert form.success_message == "Super administrator User root2 created"
