"""
Form objects.

A form holds the values the user typed, checks them before anything is sent,
and reports the first problem in `field_error` (with the offending field in
`error_field`). Entered values survive a failed submit.
"""

from typing import Optional, Union

from attendance_portal.core.exceptions import ValidationError
from attendance_portal.core.formatting import password_strength, password_strength_feedback
from attendance_portal.core.logging import get_logger
from attendance_portal.core.permissions import Permission
from attendance_portal.core.session import SessionStore
from attendance_portal.core.validators import (
    require_non_empty,
    validate_date_range,
    validate_email,
    validate_password,
)
from attendance_portal.models.leave import LeaveType
from attendance_portal.services.auth import AuthService
from attendance_portal.stores.leave import LeaveStore
from attendance_portal.stores.users import UserAdminStore

logger = get_logger(__name__)

REQUIRED_FIELDS_MESSAGE = "Please fill in all required fields"


class BaseForm:
    def __init__(self):
        self.field_error: Optional[str] = None
        self.error_field: Optional[str] = None
        self.success_message: Optional[str] = None
        self.is_submitting: bool = False

    def _clear_messages(self) -> None:
        self.field_error = None
        self.error_field = None
        self.success_message = None

    def _reject(self, error: ValidationError) -> bool:
        self.field_error = error.message
        self.error_field = error.field
        return False


class LeaveRequestForm(BaseForm):
    """New leave request; cleared after the request is accepted."""

    def __init__(self, store: LeaveStore):
        super().__init__()
        self.store = store
        self.reset()

    def reset(self) -> None:
        self.start_date: str = ""
        self.end_date: str = ""
        self.leave_type: Union[LeaveType, str] = LeaveType.PAID
        self.reason: str = ""

    async def submit(self) -> bool:
        self._clear_messages()
        if not self.start_date or not self.end_date or not self.reason.strip():
            return self._reject(ValidationError(REQUIRED_FIELDS_MESSAGE))
        try:
            validate_date_range(self.start_date, self.end_date)
        except ValidationError as e:
            return self._reject(e)

        self.is_submitting = True
        try:
            success = await self.store.create_request(
                self.start_date, self.end_date, self.leave_type, self.reason
            )
        finally:
            self.is_submitting = False

        if not success:
            self.field_error = self.store.error
            return False
        self.reset()
        self.success_message = "Leave request submitted"
        return True


class RegisterForm(BaseForm):
    """
    Registration form.

    Applies the stricter registration policy (special character and the
    common-password list). With as_admin the form creates an employee account
    and is cleared afterwards; self-registration logs the new user in.
    """

    def __init__(self, auth: AuthService, as_admin: bool = False):
        super().__init__()
        self.auth = auth
        self.as_admin = as_admin
        self.reset()

    def reset(self) -> None:
        self.name: str = ""
        self.email: str = ""
        self.password: str = ""
        self.confirm_password: str = ""

    @property
    def strength(self) -> int:
        return password_strength(self.password)

    @property
    def strength_feedback(self) -> str:
        return password_strength_feedback(self.password)

    async def submit(self) -> bool:
        self._clear_messages()
        try:
            require_non_empty(self.name, "name", "Name is required")
            validate_email(self.email)
            validate_password(self.password, self.confirm_password, require_special=True)
        except ValidationError as e:
            return self._reject(e)

        self.is_submitting = True
        try:
            success = await self.auth.register(
                self.name,
                self.email,
                self.password,
                self.confirm_password,
                as_admin=self.as_admin,
            )
        finally:
            self.is_submitting = False

        if not success:
            self.field_error = self.auth.session.error
            return False
        if self.as_admin:
            self.success_message = f"User {self.email} created"
            self.reset()
        return True


class PasswordChangeForm(BaseForm):
    def __init__(self, auth: AuthService):
        super().__init__()
        self.auth = auth
        self.reset()

    def reset(self) -> None:
        self.current_password: str = ""
        self.new_password: str = ""
        self.confirm_password: str = ""

    async def submit(self) -> bool:
        self._clear_messages()
        if not self.current_password or not self.new_password or not self.confirm_password:
            return self._reject(ValidationError(REQUIRED_FIELDS_MESSAGE))
        try:
            validate_password(self.new_password, self.confirm_password, field_name="new_password")
        except ValidationError as e:
            return self._reject(e)

        self.is_submitting = True
        try:
            success = await self.auth.change_password(
                self.current_password, self.new_password, self.confirm_password
            )
        finally:
            self.is_submitting = False

        if not success:
            self.field_error = self.auth.session.error
            return False
        self.reset()
        self.success_message = "Password changed successfully"
        return True


class ProfileForm(BaseForm):
    """Name and email of the logged-in user, prefilled from the session."""

    def __init__(self, auth: AuthService, session: SessionStore):
        super().__init__()
        self.auth = auth
        self.session = session
        self.name: str = session.user.name if session.user else ""
        self.email: str = session.user.email if session.user else ""

    async def submit(self) -> bool:
        self._clear_messages()
        try:
            require_non_empty(self.name, "name", "Name is required")
            validate_email(self.email)
        except ValidationError as e:
            return self._reject(e)

        self.is_submitting = True
        try:
            success = await self.auth.update_profile(self.name, self.email)
        finally:
            self.is_submitting = False

        if not success:
            self.field_error = self.auth.session.error
            return False
        self.success_message = "Profile updated"
        return True


class CreateSuperAdminForm(BaseForm):
    """Creates another super administrator; only offered to super administrators."""

    def __init__(self, store: UserAdminStore, session: SessionStore):
        super().__init__()
        self.store = store
        self.session = session
        self.reset()

    def reset(self) -> None:
        self.email: str = ""
        self.password: str = ""
        self.name: str = ""

    @property
    def is_available(self) -> bool:
        return self.session.has_permission(Permission.CREATE_SUPER_ADMIN)

    async def submit(self) -> bool:
        self._clear_messages()
        if not self.is_available:
            return self._reject(
                ValidationError("This feature is available to super administrators only")
            )
        try:
            validate_email(self.email)
            validate_password(self.password)
            require_non_empty(self.name, "name", "Name is required")
        except ValidationError as e:
            return self._reject(e)

        self.is_submitting = True
        try:
            created = await self.store.create_super_admin(
                email=self.email.strip(), password=self.password, name=self.name.strip()
            )
        finally:
            self.is_submitting = False

        if created is None:
            self.field_error = self.store.error
            return False
        logger.info(f"Super administrator form submitted for {created.email}")
        self.success_message = f"Super administrator {created.name} created"
        self.reset()
        return True
