"""
Authentication flows.

Login, registration, email verification, first-run setup, profile and
password changes, and company switching. Results land in the session store;
failures are reported through session.error and a False/None return value.
"""

from typing import Optional

from attendance_portal.api.clients.admin import AdminApi
from attendance_portal.api.clients.auth import AuthApi
from attendance_portal.api.clients.companies import CompanyApi
from attendance_portal.core.exceptions import ApiError, AuthorizationError, ValidationError
from attendance_portal.core.logging import get_logger
from attendance_portal.core.permissions import Permission
from attendance_portal.core.session import SessionStore
from attendance_portal.core.validators import (
    require_non_empty,
    validate_email,
    validate_password,
)
from attendance_portal.models.user import AuthResponse, Company, Role, User, UserCreate

logger = get_logger(__name__)


class AuthService:
    """
    Authentication use cases on top of the session store.

    Client-side validation always runs before any request; a rejected input
    never reaches the backend.
    """

    def __init__(
        self,
        session: SessionStore,
        auth_api: AuthApi,
        company_api: CompanyApi,
        admin_api: AdminApi,
    ):
        self.session = session
        self.auth_api = auth_api
        self.company_api = company_api
        self.admin_api = admin_api
        self.is_submitting: bool = False
        self.pending_verification_email: Optional[str] = None

    # Helpers

    def _start(self) -> None:
        self.is_submitting = True
        self.session.set_error(None)

    def _reject(self, error: ValidationError) -> bool:
        self.session.set_error(error.message)
        return False

    def _fail_with(self, exc: Exception, fallback: str, action: str) -> None:
        if isinstance(exc, ApiError):
            logger.warning(f"{action} failed (status: {exc.status_code}): {exc.message}")
            self.session.set_error(exc.message or fallback)
        else:
            logger.error(f"Unexpected error during {action}: {exc}", exc_info=True)
            self.session.set_error(fallback)

    async def _establish(self, auth: AuthResponse) -> bool:
        """
        Log the user in, then resolve the company when the backend did not
        send one along with the credentials.

        Returns whether the session is still authenticated afterwards; a 401
        on the company lookup ends it.
        """
        self.session.login(auth.user, auth.company, auth.token)
        company_id = auth.user.company_id
        if auth.company is not None or not company_id:
            return self.session.is_authenticated

        try:
            response = await self.company_api.get_company(company_id)
            if response.is_success and response.data is not None:
                self.session.set_company(response.data)
            else:
                logger.warning(f"Company lookup for {company_id} returned no data")
        except ApiError as e:
            if e.is_unauthorized:
                logger.warning(f"Company lookup for {company_id} was rejected; session ended")
                self.session.set_error(e.message or "Your session has expired")
                return False
            logger.warning(f"Company lookup for {company_id} failed: {e}")
        except Exception as e:
            logger.warning(f"Company lookup for {company_id} failed: {e}")
        return self.session.is_authenticated

    # Flows

    async def login(self, email: str, password: str) -> bool:
        try:
            email = validate_email(email)
            require_non_empty(password, "password", "Password is required")
        except ValidationError as e:
            return self._reject(e)

        self._start()
        self.pending_verification_email = None
        try:
            response = await self.auth_api.login(email, password)
            if response.is_success and response.data is not None:
                return await self._establish(response.data)
            self.session.set_error(response.message or "Login failed")
            return False
        except ApiError as e:
            if e.data.get("needsVerification"):
                self.pending_verification_email = e.data.get("email") or email
                logger.info(f"Login for {self.pending_verification_email} needs email verification")
            self._fail_with(e, "An error occurred while logging in", "login")
            return False
        except Exception as e:
            self._fail_with(e, "An error occurred while logging in", "login")
            return False
        finally:
            self.is_submitting = False

    async def register(
        self,
        name: str,
        email: str,
        password: str,
        confirm_password: Optional[str] = None,
        as_admin: bool = False,
    ) -> bool:
        """
        Register a user.

        Self-registration logs the new user in. When as_admin is set an
        administrator creates an EMPLOYEE account and the session is left alone.
        """
        try:
            name = require_non_empty(name, "name", "Name is required")
            email = validate_email(email)
            validate_password(password, confirm_password)
        except ValidationError as e:
            return self._reject(e)

        self._start()
        try:
            if as_admin:
                response = await self.admin_api.create_user(
                    UserCreate(email=email, password=password, name=name, role=Role.EMPLOYEE)
                )
                if response.is_success:
                    logger.info(f"Administrator created user {email}")
                    return True
            else:
                response = await self.auth_api.register(email, password, name)
                if response.is_success and response.data is not None:
                    return await self._establish(response.data)
            self.session.set_error(response.message or "Registration failed")
            return False
        except Exception as e:
            self._fail_with(e, "An error occurred during registration", "register")
            return False
        finally:
            self.is_submitting = False

    async def verify_email(self, token: Optional[str], user_id: Optional[str]) -> bool:
        if not token or not user_id:
            self.session.set_error("Invalid verification link")
            return False

        self._start()
        try:
            response = await self.auth_api.verify_email(token, user_id)
            if response.is_success and response.data is not None:
                self.session.login(response.data.user, None, response.data.token)
                self.pending_verification_email = None
                return True
            self.session.set_error(response.message or "Email verification failed")
            return False
        except Exception as e:
            self._fail_with(e, "An error occurred during email verification", "verify_email")
            return False
        finally:
            self.is_submitting = False

    async def resend_verification(self, email: Optional[str] = None) -> bool:
        try:
            email = validate_email(email or self.pending_verification_email)
        except ValidationError as e:
            return self._reject(e)

        self._start()
        try:
            response = await self.auth_api.resend_verification(email)
            if response.is_success:
                logger.info(f"Verification email re-sent to {email}")
                return True
            self.session.set_error(response.message or "Failed to resend the verification email")
            return False
        except Exception as e:
            self._fail_with(
                e, "An error occurred while resending the verification email", "resend_verification"
            )
            return False
        finally:
            self.is_submitting = False

    async def setup(
        self, name: str, email: str, password: str, confirm_password: Optional[str] = None
    ) -> bool:
        """Create the first administrator of a fresh installation."""
        try:
            name = require_non_empty(name, "name", "Name is required")
            email = validate_email(email)
            validate_password(password, confirm_password)
        except ValidationError as e:
            return self._reject(e)

        self._start()
        try:
            response = await self.auth_api.setup(email, password, name)
            if response.is_success:
                logger.info(f"Initial administrator {email} created")
                return True
            self.session.set_error(response.message or "Setup failed")
            return False
        except Exception as e:
            self._fail_with(e, "An error occurred during setup", "setup")
            return False
        finally:
            self.is_submitting = False

    def logout(self) -> None:
        self.pending_verification_email = None
        self.session.logout()

    async def fetch_current_user(self) -> Optional[User]:
        """
        Refresh the cached user.

        A failed call ends the session. A non-success envelope only sets
        session.error and keeps the session.
        """
        self.session.set_loading(True)
        try:
            response = await self.auth_api.get_current_user()
            if response.is_success and response.data is not None:
                self.session.set_user(response.data)
                return response.data
            logger.warning(f"Current user refresh returned no data: {response.message}")
            self.session.set_error(response.message or "Failed to fetch the current user")
            return None
        except Exception as e:
            logger.warning(f"Current user refresh failed; logging out: {e}")
            self.session.logout()
            return None
        finally:
            self.session.set_loading(False)

    async def update_profile(self, name: str, email: str) -> bool:
        try:
            name = require_non_empty(name, "name", "Name is required")
            email = validate_email(email)
        except ValidationError as e:
            return self._reject(e)

        self._start()
        try:
            response = await self.auth_api.update_profile(name=name, email=email)
            if response.is_success and response.data is not None:
                self.session.set_user(response.data)
                return True
            self.session.set_error(response.message or "Failed to update the profile")
            return False
        except Exception as e:
            self._fail_with(e, "An error occurred while updating the profile", "update_profile")
            return False
        finally:
            self.is_submitting = False

    async def change_password(
        self, current_password: str, new_password: str, confirm_password: str
    ) -> bool:
        try:
            require_non_empty(
                current_password, "current_password", "Current password is required"
            )
            require_non_empty(new_password, "new_password", "New password is required")
            validate_password(new_password, confirm_password, field_name="new_password")
        except ValidationError as e:
            return self._reject(e)

        self._start()
        try:
            response = await self.auth_api.change_password(current_password, new_password)
            if response.is_success:
                logger.info("Password changed")
                return True
            self.session.set_error(response.message or "Failed to change the password")
            return False
        except Exception as e:
            self._fail_with(e, "An error occurred while changing the password", "change_password")
            return False
        finally:
            self.is_submitting = False

    def switch_company(self, company: Company) -> None:
        """
        Select another tenant for subsequent requests.

        Raises:
            AuthorizationError: If the current user may not switch companies
        """
        if not self.session.has_permission(Permission.SWITCH_COMPANY):
            raise AuthorizationError("Only super administrators can switch companies")
        self.session.switch_company(company)
