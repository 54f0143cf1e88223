# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Organization hierarchy: forest building and reporting-chain traversal."""

from hrms.org.chain import ChainEntry, downward, upward
from hrms.org.hierarchy import (
    HierarchyNode,
    ManagerSummary,
    assert_no_cycle,
    build_forest,
    find_manager_cycles,
)
from hrms.org.snapshot import EmployeeSnapshot

__all__ = [
    "ChainEntry",
    "EmployeeSnapshot",
    "HierarchyNode",
    "ManagerSummary",
    "assert_no_cycle",
    "build_forest",
    "downward",
    "find_manager_cycles",
    "upward",
]
