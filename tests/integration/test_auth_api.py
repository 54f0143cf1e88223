# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for auth API endpoints."""

PASSWORD = "password123"


class TestLoginEndpoint:
    """Tests for POST /api/v1/auth/login."""

    def test_login_returns_identity_and_token(self, client, org):
        response = client.post(
            "/api/v1/auth/login",
            json={"email": org["EMP005"].email, "password": PASSWORD},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        user = body["data"]["user"]
        assert user["employeeId"] == "EMP005"
        assert user["role"] == "manager"
        assert "employees.view.team" in user["permissions"]
        assert body["data"]["token"]
        assert "session" in response.cookies

    def test_wrong_password(self, client, org):
        response = client.post(
            "/api/v1/auth/login",
            json={"email": org["EMP005"].email, "password": "not-the-password"},
        )
        assert response.status_code == 401
        assert response.json() == {"success": False, "error": "Invalid email or password"}

    def test_missing_fields(self, client, org):
        response = client.post("/api/v1/auth/login", json={"email": org["EMP005"].email})
        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error"].startswith("Validation error")


class TestMeEndpoint:
    """Tests for GET /api/v1/auth/me."""

    def test_requires_authentication(self, client, org):
        response = client.get("/api/v1/auth/me")
        assert response.status_code == 401
        assert response.json()["error"] == "Authentication required."

    def test_bearer_token(self, client, login):
        response = client.get("/api/v1/auth/me", headers=login("EMP006"))
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["employeeId"] == "EMP006"
        assert data["department"] == "Engineering"
        assert data["status"] == "Active"

    def test_session_cookie(self, client, login):
        login("EMP004")
        response = client.get("/api/v1/auth/me")
        assert response.status_code == 200
        assert response.json()["data"]["employeeId"] == "EMP004"

    def test_invalid_token(self, client, org):
        response = client.get("/api/v1/auth/me", headers={"Authorization": "Bearer nope"})
        assert response.status_code == 401


class TestLogoutEndpoint:
    """Tests for POST /api/v1/auth/logout."""

    def test_logout_ends_session(self, client, login):
        headers = login("EMP006")
        assert client.post("/api/v1/auth/logout", headers=headers).status_code == 200
        client.cookies.clear()
        assert client.get("/api/v1/auth/me", headers=headers).status_code == 401


class TestPasswordEndpoints:
    """Tests for password change and reset."""

    def test_change_password(self, client, login, org):
        headers = login("EMP006")
        response = client.post(
            "/api/v1/auth/change-password",
            json={"oldPassword": PASSWORD, "newPassword": "better-password"},
            headers=headers,
        )
        assert response.status_code == 200

        response = client.post(
            "/api/v1/auth/login",
            json={"email": org["EMP006"].email, "password": "better-password"},
        )
        assert response.status_code == 200

    def test_reset_requires_users_manage(self, client, login):
        response = client.post(
            "/api/v1/auth/reset-password/EMP006",
            json={"newPassword": "reset-password"},
            headers=login("EMP005"),
        )
        assert response.status_code == 403
        assert response.json()["error"] == "Access denied. Insufficient permissions."

    def test_hr_admin_resets_password(self, client, login):
        response = client.post(
            "/api/v1/auth/reset-password/EMP006",
            json={"newPassword": "reset-password"},
            headers=login("EMP002"),
        )
        assert response.status_code == 200
        assert response.json()["message"] == "Password reset successfully"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}
