"""
Tests for client-side validation and display helpers.
"""

from datetime import datetime, timezone

import pytest

from attendance_portal.core.exceptions import ValidationError
from attendance_portal.core.formatting import (
    TIME_PLACEHOLDER,
    calculate_days,
    calculate_working_hours,
    leave_status_label,
    month_bounds,
    password_strength,
    password_strength_feedback,
)
from attendance_portal.core.validators import (
    validate_date_range,
    validate_email,
    validate_password,
)
from attendance_portal.models.attendance import AttendanceRecord


@pytest.mark.parametrize(
    "password,confirm,message",
    [
        ("Secret123", "Secret124", "Passwords do not match"),
        ("Sec12", None, "Password must be at least 8 characters long"),
        ("secret123", None, "Password must contain at least one uppercase letter"),
        ("SECRET123", None, "Password must contain at least one lowercase letter"),
        ("SecretPass", None, "Password must contain at least one number"),
    ],
)
def test_password_rules(password, confirm, message):
    # Act
    with pytest.raises(ValidationError) as exc_info:
        validate_password(password, confirm)

    # Assert
    assert exc_info.value.message == message


def test_registration_policy_requires_special_character():
    # Act
    with pytest.raises(ValidationError) as exc_info:
        validate_password("Secret123", require_special=True)

    # Assert
    assert exc_info.value.message == "Password must contain at least one special character"
    assert validate_password("Secret123") == "Secret123"
    assert validate_password("Secret#123", require_special=True) == "Secret#123"


def test_validate_email():
    # Assert
    assert validate_email("  jane@example.com ") == "jane@example.com"
    with pytest.raises(ValidationError):
        validate_email("jane@")


def test_date_range():
    # Act
    start, end = validate_date_range("2024-05-01", "2024-05-01")

    # Assert
    assert start == end
    with pytest.raises(ValidationError):
        validate_date_range("2024-05-02", "2024-05-01")
    with pytest.raises(ValidationError):
        validate_date_range("05/01/2024", "2024-05-01")


def test_working_hours():
    # Arrange
    clock_in = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)
    open_record = AttendanceRecord(id="a1", user_id="u1", date="2024-05-01", clock_in_time=clock_in)
    closed = open_record.model_copy(
        update={"clock_out_time": datetime(2024, 5, 1, 18, 15, tzinfo=timezone.utc)}
    )
    inverted = open_record.model_copy(
        update={"clock_out_time": datetime(2024, 5, 1, 8, 0, tzinfo=timezone.utc)}
    )

    # Assert
    assert calculate_working_hours(open_record) == TIME_PLACEHOLDER
    assert calculate_working_hours(closed) == "9h 15m"
    assert calculate_working_hours(inverted) == TIME_PLACEHOLDER
    assert calculate_working_hours(None) == TIME_PLACEHOLDER


def test_date_helpers():
    # Assert
    assert calculate_days("2024-05-01", "2024-05-01") == 1
    assert calculate_days("2024-05-01", "2024-05-03") == 3
    assert month_bounds(2024, 2) == ("2024-02-01", "2024-02-29")
    assert leave_status_label("APPROVED") == "Approved"
    assert leave_status_label("UNKNOWN") == "UNKNOWN"


def test_password_strength():
    # Assert
    assert password_strength("") == 0
    assert password_strength_feedback("") == ""
    assert password_strength_feedback("abc") == "Weak password"
    assert password_strength_feedback("Secret123") == "Fair password"
    assert password_strength("Secret#123") == 5
    assert password_strength_feedback("Secret#123") == "Strong password"
