"""
Client-side input validation.

Each check raises ValidationError with the offending field so forms can show
the message next to it. Nothing here touches the network.
"""

import re
from datetime import date
from typing import Optional, Union

from attendance_portal.core.exceptions import ValidationError

EMAIL_REGEX = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")

MIN_PASSWORD_LENGTH = 8

COMMON_PASSWORDS = frozenset(
    {
        "password", "password123", "123456", "qwerty", "admin", "welcome",
        "letmein", "monkey", "abc123", "111111", "12345678", "dragon",
        "baseball", "football", "soccer", "hockey", "master", "sunshine",
        "iloveyou", "trustno1", "princess", "admin123", "welcome123", "login",
        "admin1234", "access", "flower", "passw0rd", "shadow", "superman",
        "hello123", "charlie", "michael", "michelle", "jennifer", "daniel",
        "maggie", "qwerty123", "hunter", "buster", "soccer123", "football123",
        "liverpool", "barcelona", "pokemon", "starwars",
    }
)


def require_non_empty(value: Optional[str], field_name: str, message: Optional[str] = None) -> str:
    if value is None or not value.strip():
        raise ValidationError(message or f"{field_name} is required", field=field_name)
    return value.strip()


def validate_email(value: Optional[str], field_name: str = "email") -> str:
    email = (value or "").strip()
    if not email or not EMAIL_REGEX.match(email):
        raise ValidationError("Please enter a valid email address", field=field_name)
    return email


def validate_password(
    password: Optional[str],
    confirm_password: Optional[str] = None,
    require_special: bool = False,
    field_name: str = "password",
) -> str:
    """
    Check a new password against the password policy.

    Rules are checked in order and the first failure is reported:
    confirmation match, length >= 8, uppercase, lowercase, digit, and when
    require_special is set, a special character and the common-password list.
    """
    password = password or ""

    if confirm_password is not None and password != confirm_password:
        raise ValidationError("Passwords do not match", field="confirm_password")

    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
            field=field_name,
        )
    if not re.search(r"[A-Z]", password):
        raise ValidationError(
            "Password must contain at least one uppercase letter", field=field_name
        )
    if not re.search(r"[a-z]", password):
        raise ValidationError(
            "Password must contain at least one lowercase letter", field=field_name
        )
    if not re.search(r"[0-9]", password):
        raise ValidationError("Password must contain at least one number", field=field_name)

    if require_special:
        if not re.search(r"[^A-Za-z0-9]", password):
            raise ValidationError(
                "Password must contain at least one special character", field=field_name
            )
        if password.lower() in COMMON_PASSWORDS:
            raise ValidationError(
                "This password is too common. Please choose a more secure one",
                field=field_name,
            )

    return password


def parse_iso_date(value: Union[str, date]) -> date:
    """Parse YYYY-MM-DD (or an ISO datetime string) into a date."""
    if isinstance(value, date):
        return value
    return date.fromisoformat(value[:10])


def validate_date_range(
    start_date: Optional[str],
    end_date: Optional[str],
    start_field: str = "start_date",
) -> tuple[date, date]:
    """
    Validate an inclusive date range; a single day (start == end) is allowed.
    """
    start_text = require_non_empty(start_date, "start_date")
    end_text = require_non_empty(end_date, "end_date")
    try:
        start = parse_iso_date(start_text)
        end = parse_iso_date(end_text)
    except ValueError:
        raise ValidationError("Dates must use the YYYY-MM-DD format", field=start_field)

    if start > end:
        raise ValidationError("Start date must be on or before the end date", field=start_field)
    return start, end
