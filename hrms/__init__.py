# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""HR management backend: employees, organization hierarchy and access control."""

__version__ = "0.1.0"
