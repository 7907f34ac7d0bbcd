"""
Report store.

Holds the last fetched user, department and compliance reports. All figures
come precomputed from the backend.
"""

import webbrowser
from typing import Callable, Optional, Union

from attendance_portal.api.clients.reports import ReportApi
from attendance_portal.core.logging import get_logger
from attendance_portal.models.report import (
    CompanyComplianceReport,
    DepartmentReport,
    ExportType,
    UserReport,
)
from attendance_portal.stores.base import BaseStore

logger = get_logger(__name__)

UrlOpener = Callable[[str], object]


class ReportStore(BaseStore):
    """Monthly reports and exports."""

    def __init__(self, api: ReportApi, opener: UrlOpener = webbrowser.open):
        super().__init__()
        self.api = api
        self.opener = opener
        self.user_report: Optional[UserReport] = None
        self.department_report: Optional[DepartmentReport] = None
        self.company_compliance_report: Optional[CompanyComplianceReport] = None

    async def fetch_user_report(self, user_id: str, year: int, month: int) -> Optional[UserReport]:
        key = "user_report"
        ticket = self._begin(key)
        try:
            response = await self.api.get_user_report(user_id, year=year, month=month)
            if self._is_stale(ticket):
                return None
            if response.is_success:
                self.user_report = response.data
                return self.user_report
            self._fail(response.message, "Failed to fetch the report")
        except Exception as e:
            if not self._is_stale(ticket):
                self._fail_with(e, "An error occurred while fetching the report", "fetch_user_report")
        finally:
            self._finish(ticket)
        return None

    async def fetch_department_report(self, year: int, month: int) -> Optional[DepartmentReport]:
        key = "department_report"
        ticket = self._begin(key)
        try:
            response = await self.api.get_department_report(year=year, month=month)
            if self._is_stale(ticket):
                return None
            if response.is_success:
                self.department_report = response.data
                return self.department_report
            self._fail(response.message, "Failed to fetch the department report")
        except Exception as e:
            if not self._is_stale(ticket):
                self._fail_with(
                    e,
                    "An error occurred while fetching the department report",
                    "fetch_department_report",
                )
        finally:
            self._finish(ticket)
        return None

    async def fetch_company_compliance_report(
        self, year: int, month: int
    ) -> Optional[CompanyComplianceReport]:
        key = "company_compliance_report"
        ticket = self._begin(key)
        try:
            response = await self.api.get_company_compliance_report(year=year, month=month)
            if self._is_stale(ticket):
                return None
            if response.is_success:
                self.company_compliance_report = response.data
                return self.company_compliance_report
            self._fail(response.message, "Failed to fetch the company compliance report")
        except Exception as e:
            if not self._is_stale(ticket):
                self._fail_with(
                    e,
                    "An error occurred while fetching the company compliance report",
                    "fetch_company_compliance_report",
                )
        finally:
            self._finish(ticket)
        return None

    async def export_report(
        self,
        user_id: str,
        year: int,
        month: int,
        export_type: Union[ExportType, str] = ExportType.ATTENDANCE,
    ) -> bool:
        """Open the backend export file URL; the download itself is not inspected."""
        ticket = self._begin()
        try:
            url = self.api.export_url(user_id, year, month, ExportType(export_type))
            self.opener(url)
            logger.info(f"Opened report export for user {user_id} ({year}-{month:02d})")
            return True
        except Exception as e:
            self._fail_with(e, "An error occurred while exporting the report", "export_report")
            return False
        finally:
            self._finish(ticket)

    def reset(self) -> None:
        super().reset()
        self.user_report = None
        self.department_report = None
        self.company_compliance_report = None
