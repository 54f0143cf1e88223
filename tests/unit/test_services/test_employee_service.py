# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for employee_service."""

from datetime import date

import pytest

from hrms.exceptions import (
    AuthorizationError,
    ConflictError,
    HierarchyCycleError,
    NoEditableFieldsError,
    NotFoundError,
    ValidationError,
)
from hrms.models import EmployeeDocument, EmployeeStatus, OnboardingTask, User
from hrms.models.enums import DocumentType
from hrms.services import employee_service


def listed_ids(db_session, identity, **filters) -> list[str]:
    employees, _ = employee_service.list_employees(db_session, identity, limit=100, **filters)
    return sorted(e["id"] for e in employees)


class TestListEmployees:
    """Tests for role-scoped listing."""

    @pytest.mark.parametrize("viewer", ["EMP001", "EMP002", "EMP003"])
    def test_unrestricted_viewers_see_everyone(self, seeded_db, identities, viewer):
        assert len(listed_ids(seeded_db, identities(viewer))) == 8

    def test_manager_sees_self_and_direct_reports(self, seeded_db, identities):
        assert listed_ids(seeded_db, identities("EMP005")) == ["EMP005", "EMP006"]

    def test_department_head_sees_department(self, seeded_db, identities):
        assert listed_ids(seeded_db, identities("EMP004")) == [
            "EMP004",
            "EMP005",
            "EMP006",
            "EMP007",
        ]

    def test_employee_sees_only_self(self, seeded_db, identities):
        assert listed_ids(seeded_db, identities("EMP006")) == ["EMP006"]

    def test_filters(self, seeded_db, identities):
        admin = identities("EMP002")
        assert listed_ids(seeded_db, admin, department="finance") == ["EMP008"]
        assert listed_ids(seeded_db, admin, search="lund") == ["EMP006"]
        assert listed_ids(seeded_db, admin, search="TC003") == ["EMP003"]
        assert listed_ids(seeded_db, admin, status=EmployeeStatus.INACTIVE) == []

    def test_pagination(self, seeded_db, identities):
        page, meta = employee_service.list_employees(
            seeded_db, identities("EMP002"), page=3, limit=3
        )
        assert meta == {"total": 8, "page": 3, "per_page": 3, "pages": 3}
        assert len(page) == 2

    def test_rows_carry_department_and_manager_names(self, seeded_db, identities):
        rows, _ = employee_service.list_employees(
            seeded_db, identities("EMP006"), limit=10
        )
        assert rows[0]["department"] == "Engineering"
        assert rows[0]["manager_name"] == "Max Berg"


class TestViewEmployee:
    """Tests for single-record access."""

    def test_manager_views_direct_report(self, seeded_db, identities):
        employee = employee_service.view_employee(seeded_db, identities("EMP005"), "EMP006")
        assert employee.id == "EMP006"

    def test_manager_cannot_view_peer(self, seeded_db, identities):
        with pytest.raises(AuthorizationError, match="team members"):
            employee_service.view_employee(seeded_db, identities("EMP005"), "EMP007")

    def test_department_head_cannot_view_other_department(self, seeded_db, identities):
        with pytest.raises(AuthorizationError, match="department members"):
            employee_service.view_employee(seeded_db, identities("EMP004"), "EMP008")

    def test_missing_employee(self, seeded_db, identities):
        with pytest.raises(NotFoundError):
            employee_service.view_employee(seeded_db, identities("EMP002"), "EMP999")


class TestUpdateEmployee:
    """Tests for scoped updates."""

    def test_manager_change_is_trimmed(self, seeded_db, identities):
        employee = employee_service.update_employee(
            seeded_db,
            identities("EMP005"),
            "EMP006",
            {"phone": "555-0199", "salary": 120000},
        )
        assert employee.phone == "555-0199"
        assert employee.salary == 50000

    def test_manager_salary_change_is_rejected(self, seeded_db, identities):
        with pytest.raises(NoEditableFieldsError, match="No editable fields provided"):
            employee_service.update_employee(
                seeded_db, identities("EMP005"), "EMP006", {"salary": 120000}
            )

    def test_employee_cannot_edit_others(self, seeded_db, identities):
        with pytest.raises(AuthorizationError):
            employee_service.update_employee(
                seeded_db, identities("EMP006"), "EMP007", {"phone": "1"}
            )

    def test_hr_admin_moves_employee(self, seeded_db, identities):
        employee = employee_service.update_employee(
            seeded_db,
            identities("EMP002"),
            "EMP007",
            {"manager_id": "EMP005", "salary": 65000, "position": "Senior Engineer"},
        )
        assert employee.manager_id == "EMP005"
        assert employee.salary == 65000
        assert employee.manager.full_name == "Max Berg"

    def test_manager_cycle_is_rejected(self, seeded_db, identities):
        with pytest.raises(HierarchyCycleError):
            employee_service.update_employee(
                seeded_db, identities("EMP002"), "EMP004", {"manager_id": "EMP006"}
            )

    def test_unknown_manager(self, seeded_db, identities):
        with pytest.raises(ValidationError, match="does not exist"):
            employee_service.update_employee(
                seeded_db, identities("EMP002"), "EMP006", {"manager_id": "EMP999"}
            )

    def test_email_clash(self, seeded_db, identities, org):
        with pytest.raises(ConflictError):
            employee_service.update_employee(
                seeded_db, identities("EMP002"), "EMP006", {"email": org["EMP007"].email}
            )

    def test_required_field_cannot_be_cleared(self, seeded_db, identities):
        with pytest.raises(ValidationError, match="cannot be empty"):
            employee_service.update_employee(
                seeded_db, identities("EMP002"), "EMP006", {"first_name": None}
            )

    @pytest.mark.parametrize("field", ["manager_id", "department_id", "role_id"])
    def test_blank_reference_is_rejected(self, seeded_db, identities, field):
        with pytest.raises(ValidationError, match="does not exist"):
            employee_service.update_employee(
                seeded_db, identities("EMP002"), "EMP006", {field: ""}
            )

    def test_clearing_manager_makes_a_root(self, seeded_db, identities):
        employee = employee_service.update_employee(
            seeded_db, identities("EMP002"), "EMP008", {"manager_id": None}
        )
        assert employee.manager_id is None

    def test_status_change_disables_account(self, seeded_db, identities):
        employee_service.update_employee(
            seeded_db, identities("EMP002"), "EMP006", {"status": EmployeeStatus.TERMINATED}
        )
        user = seeded_db.query(User).filter(User.employee_id == "EMP006").one()
        assert user.is_active is False

    def test_reactivation_restores_account(self, seeded_db, identities):
        employee_service.deactivate_employee(seeded_db, identities("EMP002"), "EMP006")
        employee = employee_service.update_employee(
            seeded_db, identities("EMP002"), "EMP006", {"status": EmployeeStatus.ACTIVE}
        )
        assert employee.status == EmployeeStatus.ACTIVE
        assert employee.user.is_active is True

    def test_on_leave_keeps_account_state(self, seeded_db, identities):
        employee_service.deactivate_employee(seeded_db, identities("EMP002"), "EMP006")
        employee = employee_service.update_employee(
            seeded_db, identities("EMP002"), "EMP006", {"status": EmployeeStatus.ON_LEAVE}
        )
        assert employee.user.is_active is False


class TestCreateEmployee:
    """Tests for employee creation."""

    def new_hire(self, **overrides):
        data = {
            "first_name": "Lena",
            "last_name": "Park",
            "email": "Lena.Park@example.com",
            "position": "Software Engineer",
            "department_id": "engineering",
            "manager_id": "EMP005",
            "hire_date": date(2026, 11, 2),
            "status": EmployeeStatus.PENDING_ONBOARDING,
        }
        data.update(overrides)
        return data

    def test_ids_follow_the_highest_existing(self, seeded_db, identities):
        employee = employee_service.create_employee(
            seeded_db, identities("EMP003"), self.new_hire()
        )
        assert employee.id == "EMP009"
        assert employee.employee_code == "TC009"
        assert employee.email == "lena.park@example.com"
        assert employee.role_id == "employee"

    def test_pending_onboarding_gets_checklist(self, seeded_db, identities):
        employee = employee_service.create_employee(
            seeded_db, identities("EMP003"), self.new_hire()
        )
        tasks = seeded_db.query(OnboardingTask).filter(OnboardingTask.employee_id == employee.id)
        assert tasks.count() == 5
        assert {t.task_name for t in tasks} >= {"Upload ID Proof", "Submit Bank Details"}

    def test_active_hire_gets_no_checklist(self, seeded_db, identities):
        employee_service.create_employee(
            seeded_db, identities("EMP003"), self.new_hire(status=EmployeeStatus.ACTIVE)
        )
        assert seeded_db.query(OnboardingTask).count() == 0

    def test_password_creates_account(self, seeded_db, identities):
        employee = employee_service.create_employee(
            seeded_db, identities("EMP003"), self.new_hire(password="welcome-123")
        )
        assert employee.user is not None
        assert employee.user.role_id == "employee"

    def test_duplicate_email(self, seeded_db, identities, org):
        with pytest.raises(ConflictError):
            employee_service.create_employee(
                seeded_db, identities("EMP003"), self.new_hire(email=org["EMP006"].email)
            )

    def test_unknown_department(self, seeded_db, identities):
        with pytest.raises(ValidationError):
            employee_service.create_employee(
                seeded_db, identities("EMP003"), self.new_hire(department_id="space")
            )


class TestDeactivateEmployee:
    """Tests for deactivation."""

    def test_deactivate(self, seeded_db, identities):
        employee = employee_service.deactivate_employee(seeded_db, identities("EMP002"), "EMP007")
        assert employee.status == EmployeeStatus.INACTIVE
        assert employee.user.is_active is False

    def test_cannot_deactivate_self(self, seeded_db, identities):
        with pytest.raises(ValidationError):
            employee_service.deactivate_employee(seeded_db, identities("EMP002"), "EMP002")


class TestManagers:
    """Tests for manager candidates per department."""

    def test_ordered_by_seniority(self, seeded_db, org, employee_factory):
        employee_factory(
            "EMP020", "Tom", "Lead", position="Team Lead", department_id="engineering"
        )
        employee_factory(
            "EMP021", "Vera", "Vance", position="VP Engineering", department_id="engineering"
        )
        managers = employee_service.list_managers(seeded_db, "engineering")
        assert [m["id"] for m in managers] == ["EMP021", "EMP004", "EMP005", "EMP020"]

    def test_inactive_managers_are_left_out(self, seeded_db, org):
        org["EMP005"].status = EmployeeStatus.INACTIVE
        seeded_db.commit()
        assert [m["id"] for m in employee_service.list_managers(seeded_db, "engineering")] == [
            "EMP004"
        ]

    def test_unknown_department(self, seeded_db, org):
        with pytest.raises(NotFoundError):
            employee_service.list_managers(seeded_db, "space")


@pytest.mark.parametrize(
    ("position", "rank"),
    [
        ("CEO", 1),
        ("VP Sales", 2),
        ("Engineering Director", 3),
        ("Product Manager", 4),
        ("Team Lead", 5),
        ("Accountant", 6),
    ],
)
def test_position_rank(position, rank):
    assert employee_service.position_rank(position) == rank


def test_documents_follow_view_scope(seeded_db, identities):
    seeded_db.add(
        EmployeeDocument(
            employee_id="EMP006",
            document_type=DocumentType.RESUME,
            file_name="eve-cv.pdf",
            original_name="cv.pdf",
            mime_type="application/pdf",
            file_size=1024,
            file_path="/uploads/eve-cv.pdf",
        )
    )
    seeded_db.commit()

    assert len(employee_service.list_documents(seeded_db, identities("EMP006"), "EMP006")) == 1
    assert len(employee_service.list_documents(seeded_db, identities("EMP005"), "EMP006")) == 1
    with pytest.raises(AuthorizationError):
        employee_service.list_documents(seeded_db, identities("EMP007"), "EMP006")
