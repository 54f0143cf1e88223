# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Services package.

Services are plain modules of functions that take the SQLAlchemy session as
their first argument and raise ``hrms.exceptions`` errors.
"""
