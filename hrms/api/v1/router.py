# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Main API router for v1 endpoints."""

from fastapi import APIRouter

from hrms.api.v1 import auth, employees, organization, rbac

api_router = APIRouter()

# Auth routes
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])

# Employee routes
api_router.include_router(employees.router, prefix="/employees", tags=["employees"])

# Organization and department routes
api_router.include_router(
    organization.router, prefix="/organization", tags=["organization"]
)

# RBAC routes
api_router.include_router(rbac.router, prefix="/rbac", tags=["rbac"])
