"""Tests for the HTTP API."""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from auth_gateway.api import create_app
from auth_gateway.auth import TokenIssuer
from auth_gateway.credentials import get_credential_service


@pytest.fixture
def client(test_settings):
    """Create a test client with the application lifespan running."""
    with TestClient(create_app(test_settings)) as test_client:
        yield test_client


def _register(client, uuid="alice", secret_key="s3cr3t"):
    return client.post("/register", json={"uuid": uuid, "secretKey": secret_key})


class TestRoot:
    """Tests for the greeting and health endpoints."""

    def test_root(self, client):
        """Test the root endpoint returns the greeting string."""
        response = client.get("/")

        assert response.status_code == 200
        assert response.json() == "HELLO TO AUTH ROXS"

    def test_health(self, client):
        """Test the health endpoint."""
        assert client.get("/health").json() == {"status": "healthy"}


class TestRegister:
    """Tests for POST /register."""

    def test_register(self, client):
        """Test registering returns 201 with a token."""
        response = _register(client)

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "UUID registered successfully"
        assert body["uuid"] == "alice"
        assert body["token"]

    def test_register_duplicate(self, client):
        """Test registering the same uuid twice returns 409."""
        assert _register(client).status_code == 201

        response = _register(client, secret_key="different")

        assert response.status_code == 409
        assert response.json()["message"] == "UUID already registered"

    @pytest.mark.parametrize("body", [{}, {"uuid": "x"}, {"secretKey": "s3cr3t"}])
    def test_register_missing_fields(self, client, body):
        """Test missing fields return 400."""
        response = client.post("/register", json=body)

        assert response.status_code == 400
        assert response.json()["message"] == "Please provide UUID and secretKey"

    def test_register_store_failure(self, client):
        """Test a store failure surfaces as 500 with the error detail."""
        failing_service = AsyncMock()
        failing_service.register.side_effect = OperationalError("INSERT", {}, Exception("db down"))
        client.app.dependency_overrides[get_credential_service] = lambda: failing_service

        response = _register(client)

        assert response.status_code == 500
        body = response.json()
        assert body["message"] == "Server Error"
        assert "db down" in body["error"]

    def test_register_store_unreachable(self, client):
        """Test a raw connection error from the driver still renders JSON 500."""
        failing_service = AsyncMock()
        failing_service.register.side_effect = ConnectionRefusedError(
            111, "Connect call failed"
        )
        client.app.dependency_overrides[get_credential_service] = lambda: failing_service

        response = _register(client)

        assert response.status_code == 500
        assert response.headers["content-type"].startswith("application/json")
        body = response.json()
        assert body["message"] == "Server Error"
        assert "Connect call failed" in body["error"]

    def test_register_without_body(self, client):
        """Test a request with no body returns 400."""
        response = client.post("/register")

        assert response.status_code == 400
        assert response.json()["message"] == "Please provide UUID and secretKey"

    def test_register_form_body(self, client):
        """Test a form-encoded body is read as empty and returns 400."""
        response = client.post("/register", data={"uuid": "alice", "secretKey": "s3cr3t"})

        assert response.status_code == 400

    def test_register_non_object_body(self, client):
        """Test a JSON body that is not an object returns 400."""
        response = client.post("/register", json=["alice", "s3cr3t"])

        assert response.status_code == 400


class TestLogin:
    """Tests for POST /login."""

    def test_login(self, client):
        """Test login with the registered secret returns 200 with a token."""
        _register(client)

        response = client.post("/login", json={"uuid": "alice", "secretKey": "s3cr3t"})

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Logged in"
        assert body["uuid"] == "alice"
        assert body["token"]

    def test_login_wrong_secret(self, client):
        """Test login with a wrong secret returns 400."""
        _register(client)

        response = client.post("/login", json={"uuid": "alice", "secretKey": "wrong"})

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid Credentials"

    def test_login_unknown_uuid(self, client):
        """Test login for an unknown uuid returns 404."""
        response = client.post("/login", json={"uuid": "nobody", "secretKey": "s3cr3t"})

        assert response.status_code == 404
        assert response.json()["message"] == "UUID not found"

    def test_login_missing_fields(self, client):
        """Test login without a secret returns 400."""
        response = client.post("/login", json={"uuid": "alice"})

        assert response.status_code == 400
        assert response.json()["message"] == "Please provide"

    def test_login_wrong_field_type(self, client):
        """Test a non-string uuid returns 400."""
        response = client.post("/login", json={"uuid": 5, "secretKey": "s3cr3t"})

        assert response.status_code == 400

    def test_login_store_unreachable(self, client):
        """Test a raw OSError during login renders JSON 500."""
        failing_service = AsyncMock()
        failing_service.login.side_effect = OSError("Connect call failed")
        client.app.dependency_overrides[get_credential_service] = lambda: failing_service

        response = client.post("/login", json={"uuid": "alice", "secretKey": "s3cr3t"})

        assert response.status_code == 500
        assert response.json() == {
            "message": "Server error while login.",
            "error": "Connect call failed",
        }

    def test_login_gateway_error_passes_through(self, client):
        """Test service errors keep their own status."""
        response = client.post("/login", json={"uuid": "nobody", "secretKey": "s3cr3t"})

        assert response.status_code == 404


class TestProtected:
    """Tests for GET /protected."""

    def test_protected_without_token(self, client):
        """Test the protected route requires a token."""
        response = client.get("/protected")

        assert response.status_code == 401
        assert response.json()["message"] == "No token provided"

    def test_protected_with_garbage_token(self, client):
        """Test the protected route rejects an invalid token."""
        response = client.get("/protected", headers={"Authorization": "Bearer garbage"})

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid token"

    def test_protected_with_token_for_missing_record(self, client, test_settings):
        """Test a validly signed token whose record does not exist returns 404."""
        token = TokenIssuer(test_settings).issue("0" * 32, "ghost")

        response = client.get("/protected", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 404
        assert response.json()["message"] == "UUID not found"

    def test_protected_store_unreachable(self, client, test_settings):
        """Test a raw OSError while loading the record renders JSON 500."""
        failing_service = AsyncMock()
        failing_service.get_protected_profile.side_effect = OSError("Connect call failed")
        client.app.dependency_overrides[get_credential_service] = lambda: failing_service
        token = TokenIssuer(test_settings).issue("0" * 32, "ghost")

        response = client.get("/protected", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 500
        assert response.json()["message"] == "Server error"


class TestEndToEnd:
    """Full register, protected access and login scenario."""

    def test_register_access_login(self, client):
        """Test the credential lifecycle across endpoints."""
        register = _register(client, uuid="alice", secret_key="s3cr3t")
        assert register.status_code == 201
        token = register.json()["token"]

        protected = client.get("/protected", headers={"Authorization": f"Bearer {token}"})
        assert protected.status_code == 200
        assert protected.json() == {
            "message": "Protected route accessed successfully",
            "uuid": "alice",
        }

        login = client.post("/login", json={"uuid": "alice", "secretKey": "s3cr3t"})
        assert login.status_code == 200
        new_token = login.json()["token"]

        protected = client.get("/protected", headers={"Authorization": f"Bearer {new_token}"})
        assert protected.status_code == 200
        assert protected.json()["uuid"] == "alice"

        wrong = client.post("/login", json={"uuid": "alice", "secretKey": "wrong"})
        assert wrong.status_code == 400
        assert wrong.json()["message"] == "Invalid Credentials"
