"""
Outline
register()
login()
get_current_user()
update_profile()
change_password()
verify_email()
resend_verification()
setup()
"""

from attendance_portal.api.gateway import ApiGateway
from attendance_portal.models.common import ApiResponse
from attendance_portal.models.user import (
    AuthResponse,
    LoginRequest,
    PasswordChange,
    ProfileUpdate,
    RegisterRequest,
    User,
    VerifyEmailRequest,
)


class AuthApi:
    """Client for /api/auth endpoints."""

    def __init__(self, gateway: ApiGateway):
        self.gateway = gateway

    async def register(self, email: str, password: str, name: str) -> ApiResponse[AuthResponse]:
        body = RegisterRequest(email=email, password=password, name=name).to_payload()
        return await self.gateway.post("/api/auth/register", body, data_model=AuthResponse)

    async def login(self, email: str, password: str) -> ApiResponse[AuthResponse]:
        body = LoginRequest(email=email, password=password).to_payload()
        return await self.gateway.post("/api/auth/login", body, data_model=AuthResponse)

    async def get_current_user(self) -> ApiResponse[User]:
        return await self.gateway.get("/api/auth/me", data_model=User)

    async def update_profile(self, name: str, email: str) -> ApiResponse[User]:
        body = ProfileUpdate(name=name, email=email).to_payload()
        return await self.gateway.put("/api/auth/profile", body, data_model=User)

    async def change_password(self, current_password: str, new_password: str) -> ApiResponse:
        body = PasswordChange(
            current_password=current_password, new_password=new_password
        ).to_payload()
        return await self.gateway.put("/api/auth/password", body)

    async def verify_email(self, token: str, user_id: str) -> ApiResponse[AuthResponse]:
        body = VerifyEmailRequest(token=token, user_id=user_id).to_payload()
        return await self.gateway.post("/api/auth/verify-email", body, data_model=AuthResponse)

    async def resend_verification(self, email: str) -> ApiResponse:
        return await self.gateway.post("/api/auth/resend-verification", {"email": email})

    async def setup(self, email: str, password: str, name: str) -> ApiResponse:
        """Create the first administrator account of a fresh installation."""
        body = RegisterRequest(email=email, password=password, name=name).to_payload()
        return await self.gateway.post("/api/auth/setup", body)
