# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Build the reporting forest from a flat list of employees.

Nodes are rebuilt for every request from current snapshots and never stored.
Cycle checks live next to the builder but run when manager links are written,
so ``build_forest`` itself assumes the links form a forest.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from hrms.exceptions import HierarchyCycleError
from hrms.org.snapshot import EmployeeSnapshot

_IN_PROGRESS = 1
_DONE = 2


@dataclass(frozen=True)
class ManagerSummary:
    """Who a node reports to."""

    id: str
    name: str
    position: str


@dataclass
class HierarchyNode:
    """An employee with its direct reports and a summary of its manager."""

    employee: EmployeeSnapshot
    children: list["HierarchyNode"] = field(default_factory=list)
    manager: ManagerSummary | None = None

    @property
    def id(self) -> str:
        return self.employee.id

    def to_dict(self) -> dict[str, Any]:
        data = self.employee.to_dict()
        data["manager"] = (
            {
                "id": self.manager.id,
                "name": self.manager.name,
                "position": self.manager.position,
            }
            if self.manager
            else None
        )
        data["children"] = [child.to_dict() for child in self.children]
        return data


def build_forest(employees: Iterable[EmployeeSnapshot]) -> list[HierarchyNode]:
    """Link employees to their managers and return the root nodes.

    Roots are employees without a manager, and employees whose manager is not
    part of the input (filtered out or inactive). Roots and children keep the
    input order.
    """
    nodes: dict[str, HierarchyNode] = {}
    for employee in employees:
        nodes[employee.id] = HierarchyNode(employee=employee)

    roots: list[HierarchyNode] = []
    for node in nodes.values():
        manager_id = node.employee.manager_id
        manager_node = nodes.get(manager_id) if manager_id else None
        if manager_node is None:
            roots.append(node)
            continue

        manager_node.children.append(node)
        node.manager = ManagerSummary(
            id=manager_node.employee.id,
            name=manager_node.employee.full_name,
            position=manager_node.employee.position,
        )
    return roots


def find_manager_cycles(employees: Iterable[EmployeeSnapshot]) -> list[list[str]]:
    """Return every manager cycle present in ``employees``.

    Each cycle is listed once, starting at the first member reached.
    """
    manager_of = {employee.id: employee.manager_id for employee in employees}
    state: dict[str, int] = {}
    cycles: list[list[str]] = []

    for start in manager_of:
        if start in state:
            continue
        path: list[str] = []
        index: dict[str, int] = {}
        current: str | None = start
        while current is not None and current in manager_of and current not in state:
            state[current] = _IN_PROGRESS
            index[current] = len(path)
            path.append(current)
            current = manager_of[current]

        if current is not None and state.get(current) == _IN_PROGRESS:
            cycles.append(path[index[current]:])
        for employee_id in path:
            state[employee_id] = _DONE

    return cycles


def assert_no_cycle(
    employee_id: str,
    manager_id: str | None,
    get_manager_id: Callable[[str], str | None],
) -> None:
    """Reject a manager link that would put ``employee_id`` above itself.

    Walks up from ``manager_id`` using ``get_manager_id`` (one lookup per hop).

    Raises:
        HierarchyCycleError: If ``employee_id`` is reached on the way up
    """
    if manager_id is None:
        return

    path = [employee_id]
    seen = {employee_id}
    current: str | None = manager_id
    while current is not None:
        path.append(current)
        if current == employee_id:
            raise HierarchyCycleError(path)
        if current in seen:
            # Pre-existing loop above that does not involve employee_id
            raise HierarchyCycleError(path[path.index(current):])
        seen.add(current)
        current = get_manager_id(current)
