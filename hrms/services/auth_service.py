# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authentication service."""

import logging
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from hrms.config import settings
from hrms.exceptions import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    RoleNotFoundError,
    ValidationError,
)
from hrms.models import Employee, EmployeeStatus, User
from hrms.models.session import Session as SessionModel
from hrms.rbac.guard import Identity
from hrms.rbac.roles import EMPLOYEE_ROLE
from hrms.security import generate_session_token, get_password_hash, verify_password

from . import rbac_service

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


def authenticate(db: Session, email: str, password: str) -> User:
    """Authenticate a user by email and password.

    Raises:
        AuthenticationError: On unknown email, wrong password, a deactivated
            account or an employee that is not Active
    """
    user = get_user_by_email(db, email)
    if not user or not verify_password(password, user.hashed_password):
        logger.info(f"Failed login attempt for {email}")
        raise AuthenticationError(INVALID_CREDENTIALS)
    if not user.is_active:
        raise AuthenticationError("Account is deactivated")
    if user.employee is None or user.employee.status != EmployeeStatus.ACTIVE:
        raise AuthenticationError("Employee account is not active")

    user.last_login = datetime.utcnow()
    db.commit()
    return user


def build_identity(db: Session, user: User) -> Identity:
    """Resolve a user's role into the identity used for the rest of the request.

    Raises:
        AuthenticationError: If the user's role no longer exists
    """
    try:
        permissions = rbac_service.effective_permissions(db, user.role_id)
    except RoleNotFoundError as e:
        logger.error(f"User {user.email} holds unknown role '{user.role_id}'")
        raise AuthenticationError("Account role is not configured") from e

    return Identity(
        user_id=user.id,
        employee_id=user.employee_id,
        email=user.email,
        role=user.role_id,
        permissions=frozenset(permissions),
    )


def create_session(db: Session, user: User) -> str:
    """Create a new session for a user and return its token."""
    token = generate_session_token()
    expires_at = datetime.utcnow() + timedelta(days=settings.session_expiry_days)

    db.add(SessionModel(user_id=user.id, token=token, expires_at=expires_at))
    db.commit()
    logger.info(f"User {user.email} logged in")
    return token


def get_session(db: Session, token: str) -> SessionModel | None:
    """Get a valid session by token."""
    session = db.query(SessionModel).filter(SessionModel.token == token).first()
    if not session:
        return None
    if session.is_expired():
        db.delete(session)
        db.commit()
        return None
    return session


def delete_session(db: Session, token: str) -> bool:
    """Delete a session by token."""
    session = db.query(SessionModel).filter(SessionModel.token == token).first()
    if session:
        db.delete(session)
        db.commit()
        return True
    return False


def delete_user_sessions(db: Session, user: User) -> int:
    """Log a user out everywhere."""
    count = db.query(SessionModel).filter(SessionModel.user_id == user.id).delete()
    db.commit()
    return count


def cleanup_expired_sessions(db: Session) -> int:
    """Delete all expired sessions. Returns count of deleted sessions."""
    count = (
        db.query(SessionModel)
        .filter(SessionModel.expires_at < datetime.utcnow())
        .delete()
    )
    db.commit()
    return count


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email.lower()).first()


def get_user_by_employee_id(db: Session, employee_id: str) -> User | None:
    """Get the login account of an employee."""
    return db.query(User).filter(User.employee_id == employee_id).first()


def create_user(
    db: Session, employee: Employee, password: str, role_id: str | None = None
) -> User:
    """Create the login account for an employee.

    The account takes the employee's email and, unless given, the employee's
    role. Does not commit.
    """
    if get_user_by_employee_id(db, employee.id):
        raise ConflictError(f"Employee {employee.id} already has an account")
    if get_user_by_email(db, employee.email):
        raise ConflictError(f"An account for {employee.email} already exists")

    role_id = role_id or employee.role_id or EMPLOYEE_ROLE
    rbac_service.get_role_or_raise(db, role_id)

    user = User(
        employee_id=employee.id,
        email=employee.email.lower(),
        hashed_password=get_password_hash(password),
        role_id=role_id,
        is_active=True,
    )
    db.add(user)
    db.flush()
    return user


def change_password(db: Session, user: User, old_password: str, new_password: str) -> None:
    """Change a user's own password after checking the current one."""
    if not verify_password(old_password, user.hashed_password):
        raise ValidationError("Current password is incorrect")
    user.hashed_password = get_password_hash(new_password)
    db.commit()
    logger.info(f"User {user.email} changed their password")


def reset_password(db: Session, employee_id: str, new_password: str) -> User:
    """Set a new password for an employee's account and end its sessions."""
    user = get_user_by_employee_id(db, employee_id)
    if not user:
        raise NotFoundError(f"No account for employee {employee_id}")

    user.hashed_password = get_password_hash(new_password)
    db.query(SessionModel).filter(SessionModel.user_id == user.id).delete()
    db.commit()
    logger.info(f"Password reset for account of employee {employee_id}")
    return user
