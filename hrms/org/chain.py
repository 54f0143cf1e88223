# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Reporting-chain walkers.

Both walkers take lookup callables so each hop is one storage round trip and
the algorithms stay independent of the query layer.
"""

from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from hrms.exceptions import HierarchyCycleError
from hrms.org.snapshot import EmployeeSnapshot

FetchEmployee = Callable[[str], EmployeeSnapshot | None]
FetchReports = Callable[[str], list[EmployeeSnapshot]]


@dataclass(frozen=True)
class ChainEntry:
    """One employee in a reporting chain.

    ``manager_id`` is only set on downward entries.
    """

    id: str
    name: str
    position: str
    department: str | None
    role: str | None
    manager_id: str | None = None

    @classmethod
    def from_snapshot(
        cls, snapshot: EmployeeSnapshot, manager_id: str | None = None
    ) -> "ChainEntry":
        return cls(
            id=snapshot.id,
            name=snapshot.full_name,
            position=snapshot.position,
            department=snapshot.department_name,
            role=snapshot.role_id,
            manager_id=manager_id,
        )

    def to_dict(self) -> dict[str, Any]:
        data = {
            "id": self.id,
            "name": self.name,
            "position": self.position,
            "department": self.department,
            "role": self.role,
        }
        if self.manager_id is not None:
            data["manager_id"] = self.manager_id
        return data


def upward(employee_id: str, fetch_employee: FetchEmployee) -> list[ChainEntry]:
    """Return the chain from the top of the organization down to ``employee_id``.

    The walk stops at an employee without a manager or at a manager id that no
    longer resolves. An unknown ``employee_id`` yields an empty list.

    Raises:
        HierarchyCycleError: If the same employee is reached twice
    """
    chain: deque[ChainEntry] = deque()
    visited: list[str] = []
    current: str | None = employee_id

    while current:
        if current in visited:
            raise HierarchyCycleError(visited[visited.index(current):] + [current])
        visited.append(current)

        snapshot = fetch_employee(current)
        if snapshot is None:
            break
        chain.appendleft(ChainEntry.from_snapshot(snapshot))
        current = snapshot.manager_id

    return list(chain)


def downward(employee_id: str, fetch_reports: FetchReports) -> list[ChainEntry]:
    """Return every transitive report of ``employee_id``, breadth-first.

    ``fetch_reports`` decides which direct reports count (the service passes
    only Active and Pending Onboarding employees). Each employee appears once.
    """
    chain: list[ChainEntry] = []
    queue: deque[str] = deque([employee_id])
    visited = {employee_id}

    while queue:
        current = queue.popleft()
        for report in fetch_reports(current):
            if report.id in visited:
                continue
            visited.add(report.id)
            chain.append(ChainEntry.from_snapshot(report, manager_id=current))
            queue.append(report.id)

    return chain
