# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Common schema types."""
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys.

    Input accepts both the camelCase alias and the snake_case field name.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiResponse(BaseModel, Generic[T]):
    """Envelope wrapping every API response."""

    success: bool = True
    data: T | None = None
    message: str | None = None
    error: str | None = None


class PaginationMeta(CamelModel):
    """Pagination metadata."""

    total: int
    page: int
    per_page: int
    pages: int


class PaginatedResponse(BaseModel, Generic[T]):
    """Envelope for paginated list responses."""

    success: bool = True
    data: list[T]
    pagination: PaginationMeta


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
