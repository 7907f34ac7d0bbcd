"""
User administration store.
"""

from typing import Optional

from attendance_portal.api.clients.admin import AdminApi
from attendance_portal.core.logging import get_logger
from attendance_portal.models.common import Pagination
from attendance_portal.models.user import AdminUser, Role, User, UserCreate, UserUpdate
from attendance_portal.stores.base import BaseStore

logger = get_logger(__name__)


class UserAdminStore(BaseStore):
    """User listing and management for administrators."""

    def __init__(self, api: AdminApi):
        super().__init__()
        self.api = api
        self.users: list[AdminUser] = []
        self.pagination: Optional[Pagination] = None
        self.selected_user: Optional[AdminUser] = None

    async def fetch_users(
        self, page: Optional[int] = None, limit: Optional[int] = None
    ) -> Optional[list[AdminUser]]:
        key = "users"
        ticket = self._begin(key)
        try:
            response = await self.api.get_users(page=page, limit=limit)
            if self._is_stale(ticket):
                return None
            if response.is_success and response.data is not None:
                self.users = response.data
                self.pagination = response.pagination
                return self.users
            self._fail(response.message, "Failed to fetch users")
        except Exception as e:
            if not self._is_stale(ticket):
                self._fail_with(e, "An error occurred while fetching users", "fetch_users")
        finally:
            self._finish(ticket)
        return None

    async def fetch_user(self, user_id: str) -> Optional[AdminUser]:
        key = "selected_user"
        ticket = self._begin(key)
        try:
            response = await self.api.get_user(user_id)
            if self._is_stale(ticket):
                return None
            if response.is_success:
                self.selected_user = response.data
                return self.selected_user
            self._fail(response.message, "Failed to fetch the user")
        except Exception as e:
            if not self._is_stale(ticket):
                self._fail_with(e, "An error occurred while fetching the user", "fetch_user")
        finally:
            self._finish(ticket)
        return None

    async def create_user(
        self,
        email: str,
        password: str,
        name: str,
        role: Optional[Role] = Role.EMPLOYEE,
        company_id: Optional[str] = None,
    ) -> Optional[User]:
        ticket = self._begin()
        try:
            response = await self.api.create_user(
                UserCreate(email=email, password=password, name=name, role=role, company_id=company_id)
            )
            if self._is_stale(ticket):
                return None
            if response.is_success and response.data is not None:
                logger.info(f"Created user {response.data.email} ({response.data.role.value})")
                return response.data
            self._fail(response.message, "Failed to create the user")
        except Exception as e:
            if not self._is_stale(ticket):
                self._fail_with(e, "An error occurred while creating the user", "create_user")
        finally:
            self._finish(ticket)
        return None

    async def update_user(self, user_id: str, data: UserUpdate) -> bool:
        ticket = self._begin()
        try:
            response = await self.api.update_user(user_id, data)
            if self._is_stale(ticket):
                return False
            if response.is_success and response.data is not None:
                updated = response.data
                self.users = [
                    AdminUser.model_validate(
                        {**u.model_dump(), **updated.model_dump()}
                    )
                    if u.id == user_id
                    else u
                    for u in self.users
                ]
                return True
            self._fail(response.message, "Failed to update the user")
            return False
        except Exception as e:
            if not self._is_stale(ticket):
                self._fail_with(e, "An error occurred while updating the user", "update_user")
            return False
        finally:
            self._finish(ticket)

    async def delete_user(self, user_id: str) -> bool:
        ticket = self._begin()
        try:
            response = await self.api.delete_user(user_id)
            if self._is_stale(ticket):
                return False
            if response.is_success:
                self.users = [u for u in self.users if u.id != user_id]
                logger.info(f"Deleted user {user_id}")
                return True
            self._fail(response.message, "Failed to delete the user")
            return False
        except Exception as e:
            if not self._is_stale(ticket):
                self._fail_with(e, "An error occurred while deleting the user", "delete_user")
            return False
        finally:
            self._finish(ticket)

    async def create_super_admin(self, email: str, password: str, name: str) -> Optional[User]:
        ticket = self._begin()
        try:
            response = await self.api.create_super_admin(email=email, password=password, name=name)
            if self._is_stale(ticket):
                return None
            if response.is_success and response.data is not None:
                logger.info(f"Created super administrator {response.data.email}")
                return response.data
            self._fail(response.message, "Failed to create the super administrator")
        except Exception as e:
            if not self._is_stale(ticket):
                self._fail_with(
                    e, "An error occurred while creating the super administrator", 
                    "create_super_admin"
                )
        finally:
            self._finish(ticket)
        return None

    def reset(self) -> None:
        super().reset()
        self.users = []
        self.pagination = None
        self.selected_user = None
