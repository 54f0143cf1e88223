# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Request-time authorization decisions.

``authorize`` combines the caller's resolved permissions with the scope rules
that bind employee records to the caller's role:

    super-admin, hr-admin   any employee, view and edit
    hr-specialist           view any employee, edit only self
    manager                 self + direct reports
    department-head         self + employees of the same department
    everyone else           self only

The identity is always passed in explicitly; nothing here reads ambient state.
"""

import logging
import uuid
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from hrms.exceptions import AuthenticationError, AuthorizationError, NoEditableFieldsError
from hrms.rbac.permissions import SUPER_ADMIN_ROLE, covers, covers_any, has_universal_access
from hrms.rbac.roles import DEPARTMENT_HEAD_ROLE, HR_ADMIN_ROLE, HR_SPECIALIST_ROLE, MANAGER_ROLE

logger = logging.getLogger(__name__)

UNRESTRICTED_ROLES = frozenset({SUPER_ADMIN_ROLE, HR_ADMIN_ROLE})

# Every employee column a PUT may touch
EMPLOYEE_UPDATABLE_FIELDS = frozenset(
    {
        "first_name",
        "last_name",
        "email",
        "phone",
        "date_of_birth",
        "gender",
        "address",
        "department_id",
        "position",
        "role_id",
        "manager_id",
        "hire_date",
        "employment_type",
        "salary",
        "status",
        "emergency_contact",
        "bank_details",
        "skills",
        "education",
        "certifications",
    }
)
TEAM_EDITABLE_FIELDS = frozenset(
    {"phone", "address", "emergency_contact", "skills", "education", "certifications"}
)
SELF_EDITABLE_FIELDS = TEAM_EDITABLE_FIELDS | {"bank_details"}


class DenyReason(str, Enum):
    """Why an authorization check failed."""

    UNAUTHENTICATED = "unauthenticated"
    INSUFFICIENT_PERMISSIONS = "insufficient permissions"
    OUT_OF_SCOPE = "out of scope"


class Action(str, Enum):
    """What the caller wants to do with the target record."""

    VIEW = "view"
    EDIT = "edit"


class EditTier(str, Enum):
    """Which set of employee fields a caller may change."""

    FULL = "full"
    TEAM = "team"
    SELF = "self"


TIER_FIELDS = {
    EditTier.FULL: EMPLOYEE_UPDATABLE_FIELDS,
    EditTier.TEAM: TEAM_EDITABLE_FIELDS,
    EditTier.SELF: SELF_EDITABLE_FIELDS,
}


@dataclass(frozen=True)
class Identity:
    """The authenticated principal of one request.

    ``permissions`` is resolved once at authentication time and not re-read for
    the rest of the request.
    """

    user_id: uuid.UUID | str
    employee_id: str
    email: str
    role: str
    permissions: frozenset[str] = field(default_factory=frozenset)

    def can(self, permission: str) -> bool:
        """Check a single permission against this identity."""
        return covers(self.permissions, permission, self.role)


@dataclass(frozen=True)
class EmployeeTarget:
    """The parts of an employee record that scope rules look at."""

    id: str
    manager_id: str | None = None
    department_id: str | None = None

    @classmethod
    def from_employee(cls, employee: Any) -> "EmployeeTarget":
        """Build a target from any object with id/manager_id/department_id."""
        return cls(
            id=employee.id,
            manager_id=employee.manager_id,
            department_id=employee.department_id,
        )


@dataclass(frozen=True)
class Decision:
    """Outcome of an authorization check."""

    allowed: bool
    reason: DenyReason | None = None
    message: str | None = None

    def __bool__(self) -> bool:
        return self.allowed

    @classmethod
    def allow(cls) -> "Decision":
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: DenyReason, message: str) -> "Decision":
        return cls(allowed=False, reason=reason, message=message)


def authorize(
    identity: Identity | None,
    required: str | Iterable[str],
    target: EmployeeTarget | None = None,
    action: Action = Action.VIEW,
    actor_department_id: str | None = None,
) -> Decision:
    """Decide whether ``identity`` may perform ``action`` on ``target``.

    Args:
        identity: The caller, or None when the request carried no credential
        required: Permission(s) of which at least one must be held
        target: Employee record the request is about, if any
        action: View or edit, selects the scope rules that apply
        actor_department_id: The caller's own department, needed only for the
            department-head scope

    Returns:
        An allow decision, or a deny decision carrying the reason
    """
    if identity is None:
        return Decision.deny(DenyReason.UNAUTHENTICATED, "Authentication required.")

    if has_universal_access(identity.permissions, identity.role):
        return Decision.allow()

    required = [required] if isinstance(required, str) else list(required)
    if not covers_any(identity.permissions, required, identity.role):
        return Decision.deny(
            DenyReason.INSUFFICIENT_PERMISSIONS,
            "Access denied. Insufficient permissions.",
        )

    if target is None:
        return Decision.allow()
    return check_scope(identity, target, action, actor_department_id)


def check_scope(
    identity: Identity,
    target: EmployeeTarget,
    action: Action = Action.VIEW,
    actor_department_id: str | None = None,
) -> Decision:
    """Apply the role/scope matrix to a single employee record."""
    if identity.role in UNRESTRICTED_ROLES:
        return Decision.allow()
    if target.id == identity.employee_id:
        return Decision.allow()

    if identity.role == HR_SPECIALIST_ROLE and action is Action.VIEW:
        return Decision.allow()

    if identity.role == MANAGER_ROLE:
        if target.manager_id is not None and target.manager_id == identity.employee_id:
            return Decision.allow()
        return Decision.deny(
            DenyReason.OUT_OF_SCOPE,
            f"Access denied. Can only {action.value} team members.",
        )

    if identity.role == DEPARTMENT_HEAD_ROLE:
        if actor_department_id is not None and target.department_id == actor_department_id:
            return Decision.allow()
        return Decision.deny(
            DenyReason.OUT_OF_SCOPE,
            f"Access denied. Can only {action.value} department members.",
        )

    return Decision.deny(
        DenyReason.OUT_OF_SCOPE,
        f"Access denied. Can only {action.value} own profile.",
    )


def enforce(decision: Decision) -> None:
    """Raise the exception matching a deny decision; do nothing on allow."""
    if decision.allowed:
        return
    logger.warning(f"Authorization denied ({decision.reason}): {decision.message}")
    if decision.reason is DenyReason.UNAUTHENTICATED:
        raise AuthenticationError(decision.message or "Authentication required.")
    raise AuthorizationError(
        decision.message or "Access denied.",
        reason=decision.reason.value if decision.reason else None,
    )


def edit_tier(identity: Identity, target: EmployeeTarget) -> EditTier:
    """Return the field tier ``identity`` may edit on ``target``.

    Managers are held to the team tier even on their own profile.
    """
    if has_universal_access(identity.permissions, identity.role):
        return EditTier.FULL
    if identity.role in UNRESTRICTED_ROLES:
        return EditTier.FULL
    if identity.role == MANAGER_ROLE:
        return EditTier.TEAM
    if identity.role == DEPARTMENT_HEAD_ROLE and target.id != identity.employee_id:
        return EditTier.TEAM
    return EditTier.SELF


def editable_fields_for(identity: Identity, target: EmployeeTarget) -> frozenset[str]:
    """Return the employee fields ``identity`` may change on ``target``."""
    return TIER_FIELDS[edit_tier(identity, target)]


def filter_updates(
    identity: Identity, target: EmployeeTarget, updates: Mapping[str, Any]
) -> dict[str, Any]:
    """Strip fields outside the caller's tier from a partial update.

    Raises:
        NoEditableFieldsError: If the update is empty, or nothing is left
            after stripping
    """
    if not updates:
        raise NoEditableFieldsError("No valid fields to update")

    allowed = editable_fields_for(identity, target)
    filtered = {key: value for key, value in updates.items() if key in allowed}
    stripped = sorted(set(updates) - set(filtered))
    if stripped:
        logger.info(
            f"Dropped fields {stripped} from update of {target.id} by {identity.employee_id}"
        )
    if not filtered:
        raise NoEditableFieldsError()
    return filtered
