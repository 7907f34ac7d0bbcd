"""
Outline
get_user_report()
get_department_report()
get_company_compliance_report()
export_url()
"""

from attendance_portal.api.gateway import ApiGateway
from attendance_portal.models.common import ApiResponse
from attendance_portal.models.report import (
    CompanyComplianceReport,
    DepartmentReport,
    ExportType,
    UserReport,
)


class ReportApi:
    """Client for /api/reports endpoints."""

    def __init__(self, gateway: ApiGateway):
        self.gateway = gateway

    async def get_user_report(self, user_id: str, year: int, month: int) -> ApiResponse[UserReport]:
        return await self.gateway.get(
            f"/api/reports/user/{user_id}",
            query={"year": year, "month": month},
            data_model=UserReport,
        )

    async def get_department_report(self, year: int, month: int) -> ApiResponse[DepartmentReport]:
        return await self.gateway.get(
            "/api/reports/department",
            query={"year": year, "month": month},
            data_model=DepartmentReport,
        )

    async def get_company_compliance_report(
        self, year: int, month: int
    ) -> ApiResponse[CompanyComplianceReport]:
        return await self.gateway.get(
            "/api/reports/company/compliance",
            query={"year": year, "month": month},
            data_model=CompanyComplianceReport,
        )

    def export_url(self, user_id: str, year: int, month: int, export_type: ExportType) -> str:
        """URL of the backend-generated export file; the response is never parsed."""
        return self.gateway.build_url(
            "/api/reports/export",
            {"userId": user_id, "year": year, "month": month, "type": ExportType(export_type)},
        )
