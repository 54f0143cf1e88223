# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API dependencies for dependency injection."""

from fastapi import Cookie, Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from hrms.database import get_db
from hrms.exceptions import AuthenticationError
from hrms.models import User
from hrms.rbac.guard import Identity, authorize, enforce
from hrms.services import auth_service

bearer_scheme = HTTPBearer(auto_error=False)

__all__ = [
    "get_current_identity",
    "get_current_user",
    "get_db",
    "get_session_token",
    "require_permission",
]


def get_session_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    session: str | None = Cookie(default=None),
) -> str | None:
    """Session token from the bearer header, falling back to the session cookie."""
    if credentials and credentials.credentials:
        return credentials.credentials
    return session


def get_current_user(
    db: Session = Depends(get_db),
    token: str | None = Depends(get_session_token),
) -> User:
    """Get current authenticated user from the session token."""
    if not token:
        raise AuthenticationError("Authentication required.")

    session_obj = auth_service.get_session(db, token)
    if not session_obj:
        raise AuthenticationError("Invalid or expired session")

    user = session_obj.user
    if not user or not user.is_active:
        raise AuthenticationError("User not found or inactive")

    return user


def get_current_identity(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Identity:
    """Resolve the current user into an identity with effective permissions."""
    return auth_service.build_identity(db, current_user)


def require_permission(*permission_codes: str):
    """Dependency for permission-based authorization.

    The caller passes if it holds any one of ``permission_codes``, directly or
    through a wildcard. Scope checks on individual records happen in services.
    """
    if not permission_codes:
        raise ValueError("require_permission needs at least one permission code")

    def dependency(identity: Identity = Depends(get_current_identity)) -> Identity:
        enforce(authorize(identity, permission_codes))
        return identity

    return dependency
