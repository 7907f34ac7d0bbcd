"""
Shared wire schemas.

The backend speaks camelCase JSON; models expose snake_case attributes and
accept either spelling when validating.
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base model mapping snake_case fields to camelCase JSON keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_payload(self) -> dict:
        """Serialize for a request body, dropping unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Pagination(CamelModel):
    """Pagination block returned with list endpoints."""

    page: int
    limit: int
    total: int
    total_pages: int


class ApiResponse(CamelModel, Generic[T]):
    """Standard response envelope: {status, data?, message?, pagination?}."""

    status: str
    data: Optional[T] = None
    message: Optional[str] = None
    pagination: Optional[Pagination] = None

    @property
    def is_success(self) -> bool:
        return self.status == "success"
