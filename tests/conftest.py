"""
Shared fixtures.

The backend is replaced by FakeBackend served through httpx.MockTransport;
every request the client sends is recorded for assertions.
"""

import json
from typing import Any, Callable, Optional, Union

import httpx
import pytest

from attendance_portal.api.gateway import ApiGateway
from attendance_portal.core.session import SessionStore
from attendance_portal.core.storage import SessionStorage
from attendance_portal.models.user import Company, Role, User

BASE_URL = "http://testserver"

Handler = Callable[[httpx.Request], httpx.Response]


class FakeBackend:
    """Route table keyed by (method, path) that records incoming requests."""

    def __init__(self):
        self.routes: dict[tuple[str, str], Union[Handler, tuple[int, Any]]] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        body: Any = None,
        status_code: int = 200,
        handler: Optional[Handler] = None,
    ) -> None:
        self.routes[(method, path)] = handler or (status_code, body)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"status": "error", "message": "Not found"})
        if callable(route):
            return route(request)
        status_code, body = route
        return httpx.Response(status_code, json=body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]


def success(data: Any = None, **extra) -> dict[str, Any]:
    return {"status": "success", "data": data, **extra}


def error(message: str) -> dict[str, Any]:
    return {"status": "error", "message": message}


def request_json(request: httpx.Request) -> Any:
    return json.loads(request.content)


def make_user(
    user_id: str = "u1",
    role: Role = Role.EMPLOYEE,
    company_id: Optional[str] = "c1",
) -> User:
    return User(
        id=user_id,
        email=f"{user_id}@example.com",
        name=f"User {user_id}",
        role=role,
        company_id=company_id,
    )


def make_company(company_id: str = "c1", public_id: str = "pub-c1", name: str = "Initech") -> Company:
    return Company(id=company_id, public_id=public_id, name=name)


def user_payload(
    user_id: str = "u1", role: str = "EMPLOYEE", company_id: Optional[str] = "c1"
) -> dict[str, Any]:
    return {
        "id": user_id,
        "email": f"{user_id}@example.com",
        "name": f"User {user_id}",
        "role": role,
        "companyId": company_id,
    }


def company_payload(
    company_id: str = "c1", public_id: str = "pub-c1", name: str = "Initech"
) -> dict[str, Any]:
    return {
        "id": company_id,
        "publicId": public_id,
        "name": name,
        "createdAt": "2024-01-01T00:00:00Z",
        "updatedAt": "2024-01-01T00:00:00Z",
    }


@pytest.fixture
def storage(tmp_path):
    """Session storage in a temporary file."""
    return SessionStorage(tmp_path / "storage.json")


@pytest.fixture
def session(storage):
    return SessionStore(storage)


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def gateway(session, backend):
    return ApiGateway(session, base_url=BASE_URL, transport=httpx.MockTransport(backend))


@pytest.fixture
def logged_in(session):
    """Session of an employee belonging to company c1."""
    session.login(make_user(), make_company(), "token-123")
    return session
