# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authentication schemas."""
import datetime

from pydantic import EmailStr, Field

from hrms.schemas.common import CamelModel


class LoginRequest(CamelModel):
    """Credentials for logging in."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class ChangePasswordRequest(CamelModel):
    """Request to change the caller's own password."""

    old_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=8)


class ResetPasswordRequest(CamelModel):
    """Request to set a new password for another employee's account."""

    new_password: str = Field(..., min_length=8)


class IdentityResponse(CamelModel):
    """The authenticated principal with its resolved permissions."""

    id: str
    employee_id: str
    email: str
    role: str
    permissions: list[str]
    first_name: str | None = None
    last_name: str | None = None


class LoginResponse(CamelModel):
    """Result of a successful login."""

    user: IdentityResponse
    token: str


class ProfileResponse(CamelModel):
    """The caller's account joined with its employee record."""

    id: str
    employee_id: str
    email: str
    first_name: str
    last_name: str
    position: str
    department: str | None = None
    role: str
    status: str
    last_login: datetime.datetime | None = None
