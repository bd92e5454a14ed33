"""Tests for auth endpoints (/auth/register, /auth/login)."""
import jwt

from .conftest import TEST_JWT_SECRET


class TestRegister:
    def test_register_success(self, client):
        res = client.post("/auth/register", json={
            "username": "newuser",
            "password": "SecurePass123",
            "name": "New User",
        })
        assert res.status_code == 201
        data = res.json()
        assert isinstance(data["user_id"], int)
        assert data["username"] == "newuser"

    def test_register_duplicate_username_case_insensitive(self, client):
        client.post("/auth/register", json={"username": "TestUser", "password": "SecurePass123"})

        res = client.post("/auth/register", json={"username": "testuser", "password": "OtherPass123"})
        assert res.status_code == 400
        assert "already taken" in res.json()["error"].lower()

    def test_register_weak_password_is_bad_request(self, client):
        res = client.post("/auth/register", json={"username": "weak", "password": "alllowercase"})
        assert res.status_code == 400
        assert "password" in res.json()["error"].lower()

    def test_register_blank_username(self, client):
        res = client.post("/auth/register", json={"username": "   ", "password": "SecurePass123"})
        assert res.status_code == 400


class TestLogin:
    def test_login_returns_token_for_user(self, client):
        reg = client.post("/auth/register", json={"username": "loginuser", "password": "SecurePass123"})
        user_id = reg.json()["user_id"]

        res = client.post("/auth/login", json={"username": "loginuser", "password": "SecurePass123"})
        assert res.status_code == 200
        body = res.json()
        assert body["token_type"] == "bearer"
        payload = jwt.decode(body["access_token"], TEST_JWT_SECRET, algorithms=["HS256"])
        assert payload["sub"] == str(user_id)

    def test_login_wrong_password(self, client):
        client.post("/auth/register", json={"username": "loginuser", "password": "SecurePass123"})

        res = client.post("/auth/login", json={"username": "loginuser", "password": "WrongPass123"})
        assert res.status_code == 401
        assert res.json() == {"error": "Invalid credentials"}

    def test_login_unknown_user(self, client):
        res = client.post("/auth/login", json={"username": "ghost", "password": "SecurePass123"})
        assert res.status_code == 401

    def test_login_token_works_on_protected_route(self, client):
        client.post("/auth/register", json={"username": "flow", "password": "SecurePass123"})
        token = client.post(
            "/auth/login", json={"username": "flow", "password": "SecurePass123"}
        ).json()["access_token"]

        res = client.post("/projects", json={"name": "Flow"}, headers={"Authorization": f"Bearer {token}"})
        assert res.status_code == 201
