# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for auth_service."""

from datetime import datetime, timedelta

import pytest

from hrms.exceptions import AuthenticationError, ConflictError, NotFoundError, ValidationError
from hrms.models import EmployeeStatus, User
from hrms.models.session import Session as SessionModel
from hrms.security import verify_password
from hrms.services import auth_service

PASSWORD = "password123"


def user_of(db_session, employee_id: str) -> User:
    return db_session.query(User).filter(User.employee_id == employee_id).one()


class TestAuthenticate:
    """Tests for authenticate()."""

    def test_success_records_last_login(self, org, seeded_db):
        user = auth_service.authenticate(seeded_db, org["EMP006"].email, PASSWORD)
        assert user.employee_id == "EMP006"
        assert user.last_login is not None

    def test_email_is_case_insensitive(self, org, seeded_db):
        user = auth_service.authenticate(seeded_db, "EVE.LUND@example.com", PASSWORD)
        assert user.employee_id == "EMP006"

    def test_wrong_password(self, org, seeded_db):
        with pytest.raises(AuthenticationError, match="Invalid email or password"):
            auth_service.authenticate(seeded_db, org["EMP006"].email, "wrong-password")

    def test_unknown_email(self, org, seeded_db):
        with pytest.raises(AuthenticationError, match="Invalid email or password"):
            auth_service.authenticate(seeded_db, "nobody@example.com", PASSWORD)

    def test_deactivated_account(self, org, seeded_db):
        user_of(seeded_db, "EMP006").is_active = False
        seeded_db.commit()
        with pytest.raises(AuthenticationError, match="deactivated"):
            auth_service.authenticate(seeded_db, org["EMP006"].email, PASSWORD)

    def test_employee_not_active(self, org, seeded_db):
        org["EMP006"].status = EmployeeStatus.ON_LEAVE
        seeded_db.commit()
        with pytest.raises(AuthenticationError, match="not active"):
            auth_service.authenticate(seeded_db, org["EMP006"].email, PASSWORD)


class TestBuildIdentity:
    """Tests for build_identity()."""

    def test_resolves_effective_permissions(self, org, seeded_db):
        identity = auth_service.build_identity(seeded_db, user_of(seeded_db, "EMP005"))
        assert identity.role == "manager"
        assert identity.employee_id == "EMP005"
        assert "employees.view.team" in identity.permissions
        assert "employees.view.self" in identity.permissions

    def test_unknown_role_fails_authentication(self, org, seeded_db):
        user = user_of(seeded_db, "EMP006")
        user.role_id = "ghost"
        seeded_db.commit()
        with pytest.raises(AuthenticationError):
            auth_service.build_identity(seeded_db, user)


class TestSessions:
    """Tests for session handling."""

    def test_create_and_get_session(self, org, seeded_db):
        token = auth_service.create_session(seeded_db, user_of(seeded_db, "EMP006"))
        session = auth_service.get_session(seeded_db, token)
        assert session is not None
        assert session.user.employee_id == "EMP006"

    def test_expired_session_is_removed(self, org, seeded_db):
        user = user_of(seeded_db, "EMP006")
        seeded_db.add(
            SessionModel(
                user_id=user.id,
                token="expired-token",
                expires_at=datetime.utcnow() - timedelta(minutes=1),
            )
        )
        seeded_db.commit()

        assert auth_service.get_session(seeded_db, "expired-token") is None
        assert seeded_db.query(SessionModel).count() == 0

    def test_delete_session(self, org, seeded_db):
        token = auth_service.create_session(seeded_db, user_of(seeded_db, "EMP006"))
        assert auth_service.delete_session(seeded_db, token) is True
        assert auth_service.delete_session(seeded_db, token) is False

    def test_cleanup_expired_sessions(self, org, seeded_db):
        user = user_of(seeded_db, "EMP006")
        auth_service.create_session(seeded_db, user)
        seeded_db.add(
            SessionModel(
                user_id=user.id,
                token="old",
                expires_at=datetime.utcnow() - timedelta(days=1),
            )
        )
        seeded_db.commit()
        assert auth_service.cleanup_expired_sessions(seeded_db) == 1

    def test_is_expired(self):
        now = datetime(2026, 1, 1, 12, 0)
        session = SessionModel(token="t", expires_at=now)
        assert session.is_expired(now + timedelta(seconds=1)) is True
        assert session.is_expired(now - timedelta(seconds=1)) is False

    def test_lookup_columns_are_indexed(self):
        columns = SessionModel.__table__.c
        assert columns.user_id.index is True
        assert columns.expires_at.index is True


class TestPasswords:
    """Tests for password changes and resets."""

    def test_change_password(self, org, seeded_db):
        user = user_of(seeded_db, "EMP006")
        auth_service.change_password(seeded_db, user, PASSWORD, "new-password-1")
        assert verify_password("new-password-1", user.hashed_password)

    def test_change_password_checks_current(self, org, seeded_db):
        with pytest.raises(ValidationError):
            auth_service.change_password(
                seeded_db, user_of(seeded_db, "EMP006"), "wrong", "new-password-1"
            )

    def test_reset_password_ends_sessions(self, org, seeded_db):
        user = user_of(seeded_db, "EMP006")
        token = auth_service.create_session(seeded_db, user)

        auth_service.reset_password(seeded_db, "EMP006", "reset-password-1")

        assert verify_password("reset-password-1", user.hashed_password)
        assert auth_service.get_session(seeded_db, token) is None

    def test_reset_password_without_account(self, org, seeded_db):
        with pytest.raises(NotFoundError):
            auth_service.reset_password(seeded_db, "EMP999", "reset-password-1")


def test_create_user(org, seeded_db, employee_factory):
    employee = employee_factory("EMP050", "Nia", "Cole", role_id="manager", with_user=False)
    user = auth_service.create_user(seeded_db, employee, "first-password")
    seeded_db.commit()
    assert user.role_id == "manager"
    assert user.email == "nia.cole@example.com"


def test_create_user_twice(org, seeded_db):
    with pytest.raises(ConflictError):
        auth_service.create_user(seeded_db, org["EMP006"], "another-password")
