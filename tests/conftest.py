# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Set test environment before importing app
os.environ["SECRET_KEY"] = "test-secret-key-for-testing-only-32chars!"  # noqa: S105
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["SEED_ON_STARTUP"] = "false"

from hrms.database import get_db
from hrms.main import app
from hrms.models import Department, Employee, EmployeeStatus, User
from hrms.models.base import Base
from hrms.rbac.guard import Identity
from hrms.security import get_password_hash
from hrms.services import rbac_service
from hrms.services.rbac_seed_service import seed_rbac_data

# Test database setup
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

PASSWORD = "password123"

# id, first, last, position, role, department, manager, hire date
ORG_CHART = [
    ("EMP001", "Ada", "Root", "CEO", "super-admin", "executive", None, date(2018, 1, 8)),
    ("EMP002", "Hana", "Reyes", "HR Director", "hr-admin", "hr", "EMP001", date(2018, 3, 1)),
    ("EMP003", "Sam", "Ortiz", "HR Specialist", "hr-specialist", "hr", "EMP002", date(2019, 5, 6)),
    (
        "EMP004",
        "Dana",
        "Kim",
        "Engineering Director",
        "department-head",
        "engineering",
        "EMP001",
        date(2018, 6, 4),
    ),
    (
        "EMP005",
        "Max",
        "Berg",
        "Engineering Manager",
        "manager",
        "engineering",
        "EMP004",
        date(2019, 2, 11),
    ),
    (
        "EMP006",
        "Eve",
        "Lund",
        "Software Engineer",
        "employee",
        "engineering",
        "EMP005",
        date(2020, 9, 14),
    ),
    (
        "EMP007",
        "Olly",
        "Shaw",
        "Software Engineer",
        "employee",
        "engineering",
        "EMP004",
        date(2021, 4, 19),
    ),
    ("EMP008", "Finn", "Hale", "Accountant", "employee", "finance", "EMP001", date(2020, 1, 6)),
]

DEPARTMENTS = [
    ("executive", "Executive", "CEO", "EMP001"),
    ("hr", "Human Resources", "HR Director", "EMP002"),
    ("engineering", "Engineering", "Engineering Director", "EMP004"),
    ("finance", "Finance", "Finance Manager", None),
]


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def seeded_db(db_session):
    """Database with the permission catalogue and default roles."""
    seed_rbac_data(db_session)
    return db_session


def make_employee(
    db_session,
    employee_id: str,
    first_name: str,
    last_name: str,
    position: str = "Software Engineer",
    role_id: str | None = "employee",
    department_id: str | None = None,
    manager_id: str | None = None,
    hire_date: date = date(2022, 1, 3),
    status: EmployeeStatus = EmployeeStatus.ACTIVE,
    with_user: bool = True,
) -> Employee:
    """Helper to create a persisted employee, optionally with a login account."""
    number = employee_id[len("EMP"):]
    employee = Employee(
        id=employee_id,
        employee_code=f"TC{number}",
        first_name=first_name,
        last_name=last_name,
        email=f"{first_name.lower()}.{last_name.lower()}@example.com",
        position=position,
        role_id=role_id,
        department_id=department_id,
        manager_id=manager_id,
        hire_date=hire_date,
        status=status,
        salary=50000,
    )
    db_session.add(employee)
    db_session.flush()
    if with_user:
        db_session.add(
            User(
                employee_id=employee.id,
                email=employee.email,
                hashed_password=get_password_hash(PASSWORD),
                role_id=role_id or "employee",
                is_active=True,
            )
        )
    db_session.commit()
    return employee


@pytest.fixture
def org(seeded_db) -> dict[str, Employee]:
    """A small company with one employee per default role.

    EMP001 CEO (super-admin)
    ├── EMP002 HR Director (hr-admin)
    │   └── EMP003 HR Specialist (hr-specialist)
    ├── EMP004 Engineering Director (department-head of engineering)
    │   ├── EMP005 Engineering Manager (manager)
    │   │   └── EMP006 Software Engineer
    │   └── EMP007 Software Engineer
    └── EMP008 Accountant (finance)
    """
    for dept_id, name, head_role, _head in DEPARTMENTS:
        seeded_db.add(Department(id=dept_id, name=name, head_role=head_role, functions=[]))
    seeded_db.commit()

    employees = {}
    for row in ORG_CHART:
        employee_id, first, last, position, role, dept, manager, hired = row
        employees[employee_id] = make_employee(
            seeded_db,
            employee_id,
            first,
            last,
            position=position,
            role_id=role,
            department_id=dept,
            manager_id=manager,
            hire_date=hired,
        )

    for dept_id, _name, _head_role, head in DEPARTMENTS:
        seeded_db.get(Department, dept_id).head_employee_id = head
    seeded_db.commit()
    return employees


def identity_for(db_session, employee_id: str) -> Identity:
    """Build the request identity of an employee's account."""
    user = db_session.query(User).filter(User.employee_id == employee_id).one()
    return Identity(
        user_id=user.id,
        employee_id=user.employee_id,
        email=user.email,
        role=user.role_id,
        permissions=frozenset(rbac_service.effective_permissions(db_session, user.role_id)),
    )


@pytest.fixture
def identities(org, seeded_db):
    """Identity lookup by employee id."""
    return lambda employee_id: identity_for(seeded_db, employee_id)


@pytest.fixture
def login(client, org):
    """Log an employee in and return bearer headers for its session."""

    def _login(employee_id: str) -> dict[str, str]:
        response = client.post(
            "/api/v1/auth/login",
            json={"email": org[employee_id].email, "password": PASSWORD},
        )
        assert response.status_code == 200, response.text
        token = response.json()["data"]["token"]
        return {"Authorization": f"Bearer {token}"}

    return _login


@pytest.fixture
def employee_factory(seeded_db):
    """Factory creating extra employees in the seeded database."""

    def _make(employee_id: str, first_name: str, last_name: str, **kwargs) -> Employee:
        return make_employee(seeded_db, employee_id, first_name, last_name, **kwargs)

    return _make
