"""
Outline
get_users()
get_user()
create_user()
update_user()
delete_user()
create_super_admin()
"""

from typing import Optional

from attendance_portal.api.gateway import ApiGateway
from attendance_portal.models.common import ApiResponse
from attendance_portal.models.user import (
    AdminUser,
    RegisterRequest,
    User,
    UserCreate,
    UserUpdate,
)


class AdminApi:
    """Client for /api/admin endpoints."""

    def __init__(self, gateway: ApiGateway):
        self.gateway = gateway

    async def get_users(
        self, page: Optional[int] = None, limit: Optional[int] = None
    ) -> ApiResponse[list[AdminUser]]:
        return await self.gateway.get(
            "/api/admin/users",
            query={"page": page, "limit": limit},
            data_model=list[AdminUser],
        )

    async def get_user(self, user_id: str) -> ApiResponse[AdminUser]:
        return await self.gateway.get(f"/api/admin/users/{user_id}", data_model=AdminUser)

    async def create_user(self, data: UserCreate) -> ApiResponse[User]:
        return await self.gateway.post("/api/admin/users", data.to_payload(), data_model=User)

    async def update_user(self, user_id: str, data: UserUpdate) -> ApiResponse[User]:
        return await self.gateway.put(
            f"/api/admin/users/{user_id}", data.to_payload(), data_model=User
        )

    async def delete_user(self, user_id: str) -> ApiResponse:
        return await self.gateway.delete(f"/api/admin/users/{user_id}")

    async def create_super_admin(self, email: str, password: str, name: str) -> ApiResponse[User]:
        body = RegisterRequest(email=email, password=password, name=name).to_payload()
        return await self.gateway.post("/api/admin/super-admins", body, data_model=User)
