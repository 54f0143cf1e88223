# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for the upward and downward reporting-chain walkers."""

import pytest

from hrms.exceptions import HierarchyCycleError
from hrms.org import ChainEntry, EmployeeSnapshot, downward, upward


def snap(employee_id: str, manager_id: str | None = None) -> EmployeeSnapshot:
    return EmployeeSnapshot(
        id=employee_id,
        employee_code=f"TC{employee_id}",
        first_name="First",
        last_name=employee_id,
        position="Engineer",
        role_id="employee",
        manager_id=manager_id,
        department_name="Engineering",
    )


class FakeDirectory:
    """In-memory employee lookups that count their calls."""

    def __init__(self, employees):
        self.employees = {e.id: e for e in employees}
        self.calls = 0

    def fetch(self, employee_id):
        self.calls += 1
        return self.employees.get(employee_id)

    def reports(self, manager_id):
        self.calls += 1
        return [e for e in self.employees.values() if e.manager_id == manager_id]


class TestUpward:
    """Tests for upward()."""

    def test_chain_is_ordered_from_the_top(self):
        directory = FakeDirectory([snap("1"), snap("2", "1"), snap("3", "2")])
        chain = upward("3", directory.fetch)
        assert [entry.id for entry in chain] == ["1", "2", "3"]

    def test_one_lookup_per_hop(self):
        directory = FakeDirectory([snap("1"), snap("2", "1"), snap("3", "2")])
        upward("3", directory.fetch)
        assert directory.calls == 3

    def test_root_employee(self):
        chain = upward("1", FakeDirectory([snap("1")]).fetch)
        assert [entry.id for entry in chain] == ["1"]

    def test_unknown_employee(self):
        assert upward("42", FakeDirectory([]).fetch) == []

    def test_stops_at_a_dangling_manager(self):
        chain = upward("2", FakeDirectory([snap("2", "99")]).fetch)
        assert [entry.id for entry in chain] == ["2"]

    def test_entries_carry_no_manager_id(self):
        chain = upward("2", FakeDirectory([snap("1"), snap("2", "1")]).fetch)
        assert all(entry.manager_id is None for entry in chain)
        assert "manager_id" not in chain[0].to_dict()
        assert chain[1].to_dict() == {
            "id": "2",
            "name": "First 2",
            "position": "Engineer",
            "department": "Engineering",
            "role": "employee",
        }

    def test_cycle_raises(self):
        directory = FakeDirectory([snap("1", "2"), snap("2", "1")])
        with pytest.raises(HierarchyCycleError) as excinfo:
            upward("1", directory.fetch)
        assert excinfo.value.employee_ids == ["1", "2", "1"]


class TestDownward:
    """Tests for downward()."""

    def test_breadth_first_with_manager_ids(self):
        directory = FakeDirectory(
            [snap("1"), snap("2", "1"), snap("3", "1"), snap("4", "2"), snap("5", "3")]
        )
        chain = downward("1", directory.reports)
        assert [(entry.id, entry.manager_id) for entry in chain] == [
            ("2", "1"),
            ("3", "1"),
            ("4", "2"),
            ("5", "3"),
        ]
        assert chain[0].to_dict()["manager_id"] == "1"

    def test_leaf_has_no_reports(self):
        directory = FakeDirectory([snap("1"), snap("2", "1")])
        assert downward("2", directory.reports) == []

    def test_excludes_the_start_employee(self):
        directory = FakeDirectory([snap("1"), snap("2", "1")])
        assert [entry.id for entry in downward("1", directory.reports)] == ["2"]

    def test_cycle_does_not_repeat_employees(self):
        directory = FakeDirectory([snap("1", "2"), snap("2", "1")])
        chain = downward("1", directory.reports)
        assert [entry.id for entry in chain] == ["2"]

    def test_reports_filter_is_respected(self):
        directory = FakeDirectory([snap("1"), snap("2", "1"), snap("3", "2")])

        def only_even(manager_id):
            return [e for e in directory.reports(manager_id) if int(e.id) % 2 == 0]

        assert [entry.id for entry in downward("1", only_even)] == ["2"]


def test_chain_entry_from_snapshot():
    entry = ChainEntry.from_snapshot(snap("7", "3"), manager_id="3")
    assert entry.name == "First 7"
    assert entry.department == "Engineering"
    assert entry.role == "employee"
    assert entry.manager_id == "3"
