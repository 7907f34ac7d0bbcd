"""
Company store (tenant administration, super administrators only on the backend).
"""

from typing import Any, Optional

from attendance_portal.api.clients.companies import CompanyApi
from attendance_portal.core.exceptions import ValidationError
from attendance_portal.core.logging import get_logger
from attendance_portal.core.validators import require_non_empty
from attendance_portal.models.common import Pagination
from attendance_portal.models.user import Company, CompanyCreate, CompanyUpdate
from attendance_portal.stores.base import BaseStore

logger = get_logger(__name__)


class CompanyStore(BaseStore):
    """Company listing, creation, editing, deletion and settings."""

    def __init__(self, api: CompanyApi):
        super().__init__()
        self.api = api
        self.companies: list[Company] = []
        self.pagination: Optional[Pagination] = None
        self.current_settings: Optional[dict[str, Any]] = None

    async def fetch_companies(
        self, page: Optional[int] = None, limit: Optional[int] = None
    ) -> Optional[list[Company]]:
        key = "companies"
        ticket = self._begin(key)
        try:
            response = await self.api.get_companies(page=page, limit=limit)
            if self._is_stale(ticket):
                return None
            if response.is_success and response.data is not None:
                self.companies = response.data
                self.pagination = response.pagination
                return self.companies
            self._fail(response.message, "Failed to fetch companies")
        except Exception as e:
            if not self._is_stale(ticket):
                self._fail_with(e, "An error occurred while fetching companies", "fetch_companies")
        finally:
            self._finish(ticket)
        return None

    async def create_company(
        self,
        name: str,
        logo_url: Optional[str] = None,
        settings: Optional[dict[str, Any]] = None,
    ) -> Optional[Company]:
        try:
            name = require_non_empty(name, "name", "Company name is required")
        except ValidationError as e:
            self.error = e.message
            return None

        ticket = self._begin()
        try:
            response = await self.api.create_company(
                CompanyCreate(name=name, logo_url=logo_url or None, settings=settings)
            )
            if self._is_stale(ticket):
                return None
            if response.is_success and response.data is not None:
                self.companies = [*self.companies, response.data]
                logger.info(f"Created company {response.data.name} ({response.data.public_id})")
                return response.data
            self._fail(response.message, "Failed to create the company")
        except Exception as e:
            if not self._is_stale(ticket):
                self._fail_with(e, "An error occurred while creating the company", "create_company")
        finally:
            self._finish(ticket)
        return None

    async def update_company(
        self,
        company_id: str,
        name: Optional[str] = None,
        logo_url: Optional[str] = None,
        settings: Optional[dict[str, Any]] = None,
    ) -> bool:
        ticket = self._begin()
        try:
            response = await self.api.update_company(
                company_id, CompanyUpdate(name=name, logo_url=logo_url, settings=settings)
            )
            if self._is_stale(ticket):
                return False
            if response.is_success and response.data is not None:
                updated = response.data
                self.companies = [updated if c.id == company_id else c for c in self.companies]
                return True
            self._fail(response.message, "Failed to update the company")
            return False
        except Exception as e:
            if not self._is_stale(ticket):
                self._fail_with(e, "An error occurred while updating the company", "update_company")
            return False
        finally:
            self._finish(ticket)

    async def delete_company(self, company_id: str) -> bool:
        ticket = self._begin()
        try:
            response = await self.api.delete_company(company_id)
            if self._is_stale(ticket):
                return False
            if response.is_success:
                self.companies = [c for c in self.companies if c.id != company_id]
                logger.info(f"Deleted company {company_id}")
                return True
            self._fail(response.message, "Failed to delete the company")
            return False
        except Exception as e:
            if not self._is_stale(ticket):
                self._fail_with(e, "An error occurred while deleting the company", "delete_company")
            return False
        finally:
            self._finish(ticket)

    async def fetch_settings(self, company_id: str) -> Optional[dict[str, Any]]:
        key = "settings"
        ticket = self._begin(key)
        try:
            response = await self.api.get_company_settings(company_id)
            if self._is_stale(ticket):
                return None
            if response.is_success:
                self.current_settings = response.data or {}
                return self.current_settings
            self._fail(response.message, "Failed to fetch company settings")
        except Exception as e:
            if not self._is_stale(ticket):
                self._fail_with(
                    e, "An error occurred while fetching company settings", "fetch_settings"
                )
        finally:
            self._finish(ticket)
        return None

    async def update_settings(self, company_id: str, settings: dict[str, Any]) -> bool:
        ticket = self._begin()
        try:
            response = await self.api.update_company_settings(company_id, settings)
            if self._is_stale(ticket):
                return False
            if response.is_success:
                self.current_settings = response.data or settings
                return True
            self._fail(response.message, "Failed to update company settings")
            return False
        except Exception as e:
            if not self._is_stale(ticket):
                self._fail_with(
                    e, "An error occurred while updating company settings", "update_settings"
                )
            return False
        finally:
            self._finish(ticket)

    def reset(self) -> None:
        super().reset()
        self.companies = []
        self.pagination = None
        self.current_settings = None
