# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Domain exceptions.

Services raise these; the handlers registered in ``hrms.main`` turn them into
the ``{"success": false, "error": ...}`` envelope with the matching status code.
"""


class HRMSError(Exception):
    """Base class for all expected application errors."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class AuthenticationError(HRMSError):
    """No credential, or a credential that does not resolve to a usable identity."""

    status_code = 401


class AuthorizationError(HRMSError):
    """Authenticated, but lacking permission or outside the allowed scope."""

    status_code = 403

    def __init__(self, message: str, reason: str | None = None) -> None:
        super().__init__(message)
        self.reason = reason


class NotFoundError(HRMSError):
    """A referenced role, employee or department does not exist."""

    status_code = 404


class RoleNotFoundError(NotFoundError):
    """A role id could not be resolved."""

    def __init__(self, role_id: str) -> None:
        super().__init__(f"Role '{role_id}' not found")
        self.role_id = role_id


class ValidationError(HRMSError):
    """Malformed input or a reference that fails a domain rule."""

    status_code = 400


class HierarchyCycleError(ValidationError):
    """A manager link would make the reporting structure cyclic."""

    def __init__(self, employee_ids: list[str]) -> None:
        chain = " -> ".join(employee_ids)
        super().__init__(f"Reporting cycle detected: {chain}")
        self.employee_ids = employee_ids


class NoEditableFieldsError(HRMSError):
    """Every requested field was removed by the caller's edit scope."""

    status_code = 400

    def __init__(self, message: str = "No editable fields provided") -> None:
        super().__init__(message)


class ConflictError(HRMSError):
    """The write would violate a uniqueness rule."""

    status_code = 409
