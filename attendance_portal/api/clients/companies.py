"""
Outline
get_companies()
get_company()
create_company()
update_company()
delete_company()
get_company_settings()
update_company_settings()
"""

from typing import Any, Optional

from attendance_portal.api.gateway import ApiGateway
from attendance_portal.models.common import ApiResponse
from attendance_portal.models.user import Company, CompanyCreate, CompanyUpdate


class CompanyApi:
    """Client for /api/companies endpoints."""

    def __init__(self, gateway: ApiGateway):
        self.gateway = gateway

    async def get_companies(
        self, page: Optional[int] = None, limit: Optional[int] = None
    ) -> ApiResponse[list[Company]]:
        return await self.gateway.get(
            "/api/companies",
            query={"page": page, "limit": limit},
            data_model=list[Company],
        )

    async def get_company(self, company_id: str) -> ApiResponse[Company]:
        """Look up a company by internal id or public id."""
        return await self.gateway.get(f"/api/companies/{company_id}", data_model=Company)

    async def create_company(self, data: CompanyCreate) -> ApiResponse[Company]:
        return await self.gateway.post("/api/companies", data.to_payload(), data_model=Company)

    async def update_company(self, company_id: str, data: CompanyUpdate) -> ApiResponse[Company]:
        return await self.gateway.put(
            f"/api/companies/{company_id}", data.to_payload(), data_model=Company
        )

    async def delete_company(self, company_id: str) -> ApiResponse:
        return await self.gateway.delete(f"/api/companies/{company_id}")

    async def get_company_settings(self, company_id: str) -> ApiResponse[dict[str, Any]]:
        return await self.gateway.get(
            f"/api/companies/{company_id}/settings", data_model=dict[str, Any]
        )

    async def update_company_settings(
        self, company_id: str, settings: dict[str, Any]
    ) -> ApiResponse[dict[str, Any]]:
        return await self.gateway.put(
            f"/api/companies/{company_id}/settings", settings, data_model=dict[str, Any]
        )
