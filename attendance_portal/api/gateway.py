"""
API gateway for the attendance backend.

Every request goes through ApiGateway.request(), which attaches the bearer
token and the selected tenant from the session, and clears the session when
the backend answers 401.
"""

from enum import Enum
from typing import Any, Optional
from urllib.parse import urlencode

import httpx

from attendance_portal.core.config import settings
from attendance_portal.core.exceptions import ApiError
from attendance_portal.core.logging import get_logger
from attendance_portal.core.session import SessionStore
from attendance_portal.models.common import ApiResponse

logger = get_logger(__name__)

COMPANY_HEADER = "X-Company-ID"


def _clean_query(query: Optional[dict[str, Any]]) -> dict[str, Any]:
    """Drop unset parameters and send enum members as their value."""
    if not query:
        return {}
    return {
        key: value.value if isinstance(value, Enum) else value
        for key, value in query.items()
        if value is not None
    }


def _error_body(response: httpx.Response) -> dict[str, Any]:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        return body
    return {"status": "error", "message": response.reason_phrase or None}


class ApiGateway:
    """
    Single HTTP entry point shared by all API clients.
    """

    def __init__(
        self,
        session: SessionStore,
        base_url: str = settings.API_BASE_URL,
        timeout: float = settings.REQUEST_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the gateway.

        Args:
            session: Session providing the token and selected company
            base_url: Base URL of the backend
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.session = session
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def auth_headers(self) -> dict[str, str]:
        """Headers derived from the current session state."""
        headers = {}
        if self.session.token:
            headers["Authorization"] = f"Bearer {self.session.token}"
        if self.session.company is not None and self.session.company.public_id:
            headers[COMPANY_HEADER] = self.session.company.public_id
        return headers

    async def _attach_auth(self, request: httpx.Request) -> None:
        request.headers.update(self.auth_headers())

    async def _handle_unauthorized(self, response: httpx.Response) -> None:
        if response.status_code == 401:
            logger.warning(
                f"401 from {response.request.method} {response.request.url.path}, clearing session"
            )
            self.session.logout()

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self.transport,
            headers={"Content-Type": "application/json"},
            event_hooks={
                "request": [self._attach_auth],
                "response": [self._handle_unauthorized],
            },
        )

    async def request(
        self,
        method: str,
        path: str,
        body: Optional[Any] = None,
        query: Optional[dict[str, Any]] = None,
        data_model: Optional[Any] = None,
    ) -> ApiResponse:
        """
        Send a request and parse the response envelope.

        Args:
            method: HTTP method
            path: Path under the base URL, e.g. /api/leave
            body: JSON body (dict or list)
            query: Query parameters; None values are dropped
            data_model: Type used to validate the envelope's data field

        Returns:
            Parsed ApiResponse

        Raises:
            ApiError: on any non-2xx response or transport failure
        """
        try:
            async with self._client() as client:
                response = await client.request(
                    method,
                    path,
                    json=body,
                    params=_clean_query(query),
                )
        except httpx.RequestError as e:
            logger.error(f"Error calling {method} {path}: {str(e)}")
            raise ApiError(None, {"status": "error", "message": None}) from e

        if response.is_error:
            data = _error_body(response)
            logger.warning(
                f"{method} {path} failed (status: {response.status_code}): {data.get('message')}"
            )
            raise ApiError(response.status_code, data)

        payload = response.json()
        envelope = ApiResponse[data_model] if data_model is not None else ApiResponse
        return envelope.model_validate(payload)

    async def get(self, path: str, query: Optional[dict[str, Any]] = None, data_model=None) -> ApiResponse:
        return await self.request("GET", path, query=query, data_model=data_model)

    async def post(self, path: str, body: Optional[Any] = None, data_model=None) -> ApiResponse:
        return await self.request("POST", path, body=body, data_model=data_model)

    async def put(self, path: str, body: Optional[Any] = None, data_model=None) -> ApiResponse:
        return await self.request("PUT", path, body=body, data_model=data_model)

    async def delete(self, path: str, data_model=None) -> ApiResponse:
        return await self.request("DELETE", path, data_model=data_model)

    def build_url(self, path: str, query: Optional[dict[str, Any]] = None) -> str:
        """Absolute URL for a backend path (used for file downloads)."""
        params = _clean_query(query)
        url = f"{self.base_url}{path}"
        return f"{url}?{urlencode(params)}" if params else url
