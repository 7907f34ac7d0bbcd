"""
Tests for the company and user administration stores.
"""

import asyncio

import httpx
import pytest
from conftest import company_payload, error, request_json, success, user_payload

from attendance_portal.api.clients.admin import AdminApi
from attendance_portal.api.clients.companies import CompanyApi
from attendance_portal.models.user import Role, UserUpdate
from attendance_portal.stores.company import CompanyStore
from attendance_portal.stores.users import UserAdminStore

PAGINATION = {"page": 1, "limit": 10, "total": 2, "totalPages": 1}


@pytest.fixture
def companies(gateway):
    return CompanyStore(CompanyApi(gateway))


@pytest.fixture
def users(gateway):
    return UserAdminStore(AdminApi(gateway))


@pytest.mark.asyncio
async def test_fetch_companies(logged_in, companies, backend):
    # Arrange
    backend.add(
        "GET",
        "/api/companies",
        success(
            [company_payload(), company_payload("c2", "pub-c2", "Acme")],
            pagination=PAGINATION,
        ),
    )

    # Act
    result = await companies.fetch_companies(page=1)

    # Assert
    assert [c.public_id for c in result] == ["pub-c1", "pub-c2"]
    assert companies.pagination.total == 2


@pytest.mark.asyncio
async def test_create_company_requires_name(logged_in, companies, backend):
    # Act
    result = await companies.create_company("   ")

    # Assert
    assert result is None
    assert companies.error == "Company name is required"
    assert backend.requests == []


@pytest.mark.asyncio
async def test_create_and_delete_company(logged_in, companies, backend):
    # Arrange
    backend.add("POST", "/api/companies", success(company_payload("c3", "pub-c3", "Globex")), 201)
    backend.add("DELETE", "/api/companies/c3", success(None, message="Company deleted"))

    # Act
    created = await companies.create_company("Globex")
    deleted = await companies.delete_company("c3")

    # Assert
    assert created.name == "Globex"
    assert request_json(backend.calls("POST", "/api/companies")[0]) == {"name": "Globex"}
    assert deleted is True
    assert companies.companies == []


@pytest.mark.asyncio
async def test_company_created_after_reset_is_not_cached(logged_in, companies, backend):
    """Test that a creation resolving after reset leaves the list empty."""
    # Arrange
    release = asyncio.Event()
    calls = []

    async def respond(request):
        calls.append(request)
        await release.wait()
        return httpx.Response(201, json=success(company_payload("c3", "pub-c3", "Globex")))

    backend.add("POST", "/api/companies", handler=respond)

    # Act
    pending = asyncio.create_task(companies.create_company("Globex"))
    while not calls:
        await asyncio.sleep(0)
    companies.reset()
    release.set()
    result = await pending

    # Assert
    assert result is None
    assert companies.companies == []
    assert companies.is_loading is False


@pytest.mark.asyncio
async def test_update_settings(logged_in, companies, backend):
    # Arrange
    backend.add(
        "PUT", "/api/companies/c1/settings", success({"workStartTime": "09:00"})
    )

    # Act
    result = await companies.update_settings("c1", {"workStartTime": "09:00"})

    # Assert
    assert result is True
    assert companies.current_settings == {"workStartTime": "09:00"}


@pytest.mark.asyncio
async def test_fetch_users(logged_in, users, backend):
    # Arrange
    backend.add(
        "GET",
        "/api/admin/users",
        success([user_payload("u1"), user_payload("u2", role="ADMIN")], pagination=PAGINATION),
    )

    # Act
    result = await users.fetch_users()

    # Assert
    assert [u.role for u in result] == [Role.EMPLOYEE, Role.ADMIN]
    assert users.pagination.total_pages == 1


@pytest.mark.asyncio
async def test_update_user_patches_cached_list(logged_in, users, backend):
    # Arrange
    backend.add("GET", "/api/admin/users", success([user_payload("u1"), user_payload("u2")]))
    backend.add("PUT", "/api/admin/users/u2", success(user_payload("u2", role="ADMIN")))
    await users.fetch_users()

    # Act
    result = await users.update_user("u2", UserUpdate(role=Role.ADMIN))

    # Assert
    assert result is True
    assert request_json(backend.last_request) == {"role": "ADMIN"}
    assert users.users[0].role == Role.EMPLOYEE
    assert users.users[1].role == Role.ADMIN


@pytest.mark.asyncio
async def test_create_super_admin_error(logged_in, users, backend):
    # Arrange
    backend.add("POST", "/api/admin/super-admins", error("Super admin access required"), 403)

    # Act
    result = await users.create_super_admin("root@example.com", "Secret123", "Root")

    # Assert
    assert result is None
    assert users.error == "Super admin access required"
