"""
User, company and authentication schemas.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import Field

from attendance_portal.models.common import CamelModel


class Role(str, Enum):
    """Role of a user account."""

    EMPLOYEE = "EMPLOYEE"
    ADMIN = "ADMIN"
    SUPER_ADMIN = "SUPER_ADMIN"


class Company(CamelModel):
    """
    Tenant (company).

    public_id is the shareable identifier sent as X-Company-ID; id is internal.
    """

    id: str
    public_id: str
    name: str
    logo_url: Optional[str] = None
    settings: Optional[dict[str, Any]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class User(CamelModel):
    """Authenticated user as cached by the client."""

    id: str
    email: str
    name: str
    role: Role = Role.EMPLOYEE
    company_id: Optional[str] = None


class AdminUser(User):
    """User as returned by the admin endpoints (includes timestamps)."""

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserSummary(CamelModel):
    """Minimal user reference embedded in leave requests and reports."""

    id: str
    name: str
    email: str
    role: Optional[Role] = None


class AuthResponse(CamelModel):
    """Payload of login, registration and email verification."""

    user: User
    token: str
    company: Optional[Company] = None


# Request Schemas


class LoginRequest(CamelModel):
    email: str
    password: str


class RegisterRequest(CamelModel):
    email: str
    password: str
    name: str


class ProfileUpdate(CamelModel):
    name: str
    email: str


class PasswordChange(CamelModel):
    current_password: str
    new_password: str


class VerifyEmailRequest(CamelModel):
    token: str
    user_id: str


class UserCreate(CamelModel):
    """Schema for creating a user from the admin screens."""

    email: str
    password: str
    name: str
    role: Optional[Role] = None
    company_id: Optional[str] = None


class UserUpdate(CamelModel):
    """Schema for updating a user from the admin screens."""

    email: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None
    role: Optional[Role] = None
    company_id: Optional[str] = None


class CompanyCreate(CamelModel):
    name: str = Field(min_length=1)
    logo_url: Optional[str] = None
    settings: Optional[dict[str, Any]] = None


class CompanyUpdate(CamelModel):
    name: Optional[str] = None
    logo_url: Optional[str] = None
    settings: Optional[dict[str, Any]] = None
