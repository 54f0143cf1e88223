# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for RBAC API endpoints."""


class TestRolesEndpoints:
    """Tests for reading roles and permissions."""

    def test_hr_admin_lists_roles(self, client, login):
        response = client.get("/api/v1/rbac/roles", headers=login("EMP002"))
        assert response.status_code == 200
        roles = response.json()["data"]
        assert len(roles) == 6
        assert roles[0]["id"] == "super-admin"

    def test_employee_cannot_list_roles(self, client, login):
        response = client.get("/api/v1/rbac/roles", headers=login("EMP006"))
        assert response.status_code == 403

    def test_role_detail_with_effective_permissions(self, client, login):
        response = client.get("/api/v1/rbac/roles/manager", headers=login("EMP002"))
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["inheritsFrom"] == ["employee"]
        assert "employees.view.team" in data["permissions"]
        assert "employees.view.self" not in data["permissions"]
        assert "employees.view.self" in data["effectivePermissions"]

    def test_unknown_role(self, client, login):
        response = client.get("/api/v1/rbac/roles/ghost", headers=login("EMP002"))
        assert response.status_code == 404

    def test_list_permissions(self, client, login):
        response = client.get("/api/v1/rbac/permissions", headers=login("EMP002"))
        assert response.status_code == 200
        codes = {p["code"] for p in response.json()["data"]}
        assert {"employees.view.all", "system.*"} <= codes


class TestRoleManagement:
    """Tests for creating, updating and deleting roles."""

    payload = {
        "id": "payroll-clerk",
        "name": "Payroll Clerk",
        "permissions": ["payroll.*"],
        "inheritsFrom": ["employee"],
    }

    def test_super_admin_creates_role(self, client, login):
        response = client.post("/api/v1/rbac/roles", json=self.payload, headers=login("EMP001"))
        assert response.status_code == 201
        data = response.json()["data"]
        assert data["id"] == "payroll-clerk"
        assert data["isSystem"] is False

    def test_hr_admin_cannot_create_role(self, client, login):
        response = client.post("/api/v1/rbac/roles", json=self.payload, headers=login("EMP002"))
        assert response.status_code == 403

    def test_unknown_permission(self, client, login):
        payload = {**self.payload, "permissions": ["payroll.approve"]}
        response = client.post("/api/v1/rbac/roles", json=payload, headers=login("EMP001"))
        assert response.status_code == 400
        assert "payroll.approve" in response.json()["error"]

    def test_cyclic_inheritance(self, client, login):
        response = client.put(
            "/api/v1/rbac/roles/employee",
            json={"inheritsFrom": ["manager"]},
            headers=login("EMP001"),
        )
        assert response.status_code == 400
        assert "cyclic" in response.json()["error"]

    def test_system_role_cannot_be_deleted(self, client, login):
        response = client.delete("/api/v1/rbac/roles/super-admin", headers=login("EMP001"))
        assert response.status_code == 400

    def test_assigned_role_cannot_be_deleted(self, client, login):
        response = client.delete("/api/v1/rbac/roles/manager", headers=login("EMP001"))
        assert response.status_code == 400
        assert "still assigned" in response.json()["error"]

    def test_delete_unused_role(self, client, login):
        headers = login("EMP001")
        client.post("/api/v1/rbac/roles", json=self.payload, headers=headers)
        response = client.delete("/api/v1/rbac/roles/payroll-clerk", headers=headers)
        assert response.status_code == 200
        assert client.get("/api/v1/rbac/roles/payroll-clerk", headers=headers).status_code == 404


class TestMyPermissions:
    """Tests for GET /api/v1/rbac/me/permissions."""

    def test_employee_permissions(self, client, login):
        response = client.get("/api/v1/rbac/me/permissions", headers=login("EMP006"))
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["role"] == "employee"
        assert data["permissions"] == sorted(data["permissions"])
        assert "employees.edit.self" in data["permissions"]
        assert "employees.view.team" not in data["permissions"]
