# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authentication API endpoints."""

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from hrms.api.deps import (
    get_current_identity,
    get_current_user,
    get_db,
    get_session_token,
    require_permission,
)
from hrms.config import settings
from hrms.models import User
from hrms.rbac.guard import Identity
from hrms.schemas.auth import (
    ChangePasswordRequest,
    IdentityResponse,
    LoginRequest,
    LoginResponse,
    ProfileResponse,
    ResetPasswordRequest,
)
from hrms.schemas.common import ApiResponse
from hrms.services import auth_service

router = APIRouter()


def build_identity_response(user: User, identity: Identity) -> IdentityResponse:
    """Build IdentityResponse from a user and its resolved identity."""
    return IdentityResponse(
        id=str(user.id),
        employee_id=user.employee_id,
        email=user.email,
        role=identity.role,
        permissions=sorted(identity.permissions),
        first_name=user.employee.first_name if user.employee else None,
        last_name=user.employee.last_name if user.employee else None,
    )


@router.post("/login", response_model=ApiResponse[LoginResponse])
def login(
    data: LoginRequest,
    response: Response,
    db: Session = Depends(get_db),
) -> ApiResponse[LoginResponse]:
    """Login with email and password.

    The token is returned in the body for bearer use and also set as cookie.
    """
    user = auth_service.authenticate(db, data.email, data.password)
    identity = auth_service.build_identity(db, user)
    token = auth_service.create_session(db, user)

    response.set_cookie(
        key="session",
        value=token,
        httponly=True,
        secure=False,  # Set to True in production
        samesite="lax",
        max_age=86400 * settings.session_expiry_days,
    )

    return ApiResponse(
        data=LoginResponse(user=build_identity_response(user, identity), token=token),
        message="Login successful",
    )


@router.post("/logout", response_model=ApiResponse[None])
def logout(
    response: Response,
    db: Session = Depends(get_db),
    token: str | None = Depends(get_session_token),
    current_user: User = Depends(get_current_user),
) -> ApiResponse[None]:
    """Logout current session."""
    if token:
        auth_service.delete_session(db, token)
    response.delete_cookie(key="session")
    return ApiResponse(message="Logged out")


@router.get("/me", response_model=ApiResponse[ProfileResponse])
def get_current_user_info(
    current_user: User = Depends(get_current_user),
    identity: Identity = Depends(get_current_identity),
) -> ApiResponse[ProfileResponse]:
    """Get current authenticated user with its employee record."""
    employee = current_user.employee
    return ApiResponse(
        data=ProfileResponse(
            id=str(current_user.id),
            employee_id=current_user.employee_id,
            email=current_user.email,
            first_name=employee.first_name,
            last_name=employee.last_name,
            position=employee.position,
            department=employee.department.name if employee.department else None,
            role=identity.role,
            status=employee.status.value,
            last_login=current_user.last_login,
        )
    )


@router.post("/change-password", response_model=ApiResponse[None])
def change_password(
    data: ChangePasswordRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ApiResponse[None]:
    """Change the current user's password."""
    auth_service.change_password(db, current_user, data.old_password, data.new_password)
    return ApiResponse(message="Password changed successfully")


@router.post("/reset-password/{employee_id}", response_model=ApiResponse[None])
def reset_password(
    employee_id: str,
    data: ResetPasswordRequest,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_permission("users.manage")),
) -> ApiResponse[None]:
    """Set a new password for an employee's account.

    Requires users.manage permission.
    """
    auth_service.reset_password(db, employee_id, data.new_password)
    return ApiResponse(message="Password reset successfully")
