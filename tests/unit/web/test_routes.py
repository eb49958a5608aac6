"""HTTP tests for the authentication and session routes."""

from datetime import timedelta

import jwt
import pytest
from fastapi.testclient import TestClient

from sessionauth.app import App
from sessionauth.web.server import create_fastapi_app

JOHN_PASSWORD = "5f4dcc3b5aa765d61d8327deb882cf99"
SESSION_KEYS = {"id", "created_at", "last_online", "user", "one_time", "api_hash", "jwt_token"}


@pytest.fixture
def login(client):
    """Log JohnDoe in and return the session JSON."""
    response = client.post("/api/auth", json={"username": "JohnDoe", "password": JOHN_PASSWORD})
    assert response.status_code == 200
    return response.json()


def test_only_api_routes_are_served(client):
    schema = client.get("/openapi.json").json()

    assert set(schema["paths"]) == {
        "/api/auth",
        "/api/session/{session_id}",
        "/api/validate-jwt",
        "/api/regenerate-api-hash/{session_id}",
    }
    assert client.get("/health").status_code == 404


class TestAuth:
    """Tests for POST /api/auth."""

    def test_success(self, login, config):
        assert set(login) == SESSION_KEYS
        assert login["user"] == {"name": "JohnDoe"}
        assert login["one_time"] is True
        assert len(login["id"]) == config.id_size
        assert len(login["api_hash"]) == config.id_size
        assert login["jwt_token"].count(".") == 2
        assert login["created_at"] == login["last_online"]

    @pytest.mark.parametrize(
        "body",
        [
            {"username": "JohnDoe", "password": "password"},
            {"username": "nobody", "password": JOHN_PASSWORD},
        ],
    )
    def test_bad_credentials(self, client, body):
        response = client.post("/api/auth", json=body)

        assert response.status_code == 401
        assert response.json() == {"message": "Unauthorized", "type": "authentication_error"}

    def test_malformed_json(self, client):
        response = client.post("/api/auth", content=b"{not json", headers={"Content-Type": "application/json"})

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid request", "type": "validation_error"}

    @pytest.mark.parametrize("body", [{}, {"username": "JohnDoe"}, {"username": 1, "password": ["x"]}])
    def test_incomplete_body(self, client, body):
        response = client.post("/api/auth", json=body)

        assert response.status_code == 400


class TestSession:
    """Tests for GET /api/session/{session_id}."""

    def test_live_session(self, client, login, clock):
        clock.advance(timedelta(seconds=30))

        response = client.get(f"/api/session/{login['id']}")

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == login["id"]
        assert body["created_at"] == login["created_at"]
        assert body["api_hash"] == login["api_hash"]
        assert body["last_online"] != login["last_online"]

    def test_unknown_session(self, client):
        response = client.get("/api/session/deadbeef")

        assert response.status_code == 404
        assert response.json() == {"message": "Session not found", "type": "not_found"}

    def test_expired_session(self, client, login, clock):
        clock.advance(timedelta(days=30, seconds=1))

        response = client.get(f"/api/session/{login['id']}")

        assert response.status_code == 401
        assert response.json()["message"] == "Session expired"


class TestValidateJwt:
    """Tests for POST /api/validate-jwt."""

    def test_raw_token(self, client, login, clock):
        response = client.post(
            "/api/validate-jwt",
            headers={"Authorization": login["jwt_token"], "Session-ID": login["id"]},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["username"] == "JohnDoe"
        assert body["exp"] == int((clock() + timedelta(minutes=5)).timestamp())

    def test_bearer_token(self, client, login):
        response = client.post(
            "/api/validate-jwt",
            headers={"Authorization": f"Bearer {login['jwt_token']}", "Session-ID": login["id"]},
        )

        assert response.status_code == 200

    def test_missing_token(self, client, login):
        response = client.post("/api/validate-jwt", headers={"Session-ID": login["id"]})

        assert response.status_code == 401

    def test_expired_token(self, client, login, clock):
        clock.advance(timedelta(minutes=5, seconds=1))

        response = client.post(
            "/api/validate-jwt",
            headers={"Authorization": login["jwt_token"], "Session-ID": login["id"]},
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Unauthorized"

    def test_unknown_session(self, client, login):
        response = client.post(
            "/api/validate-jwt",
            headers={"Authorization": login["jwt_token"], "Session-ID": "deadbeef"},
        )

        assert response.status_code == 404

    def test_missing_session_header(self, client, login):
        response = client.post("/api/validate-jwt", headers={"Authorization": login["jwt_token"]})

        assert response.status_code == 404


class TestRegenerateApiHash:
    """Tests for POST /api/regenerate-api-hash/{session_id}."""

    def test_rotate(self, client, login):
        response = client.post(f"/api/regenerate-api-hash/{login['id']}")

        assert response.status_code == 200
        body = response.json()
        assert body["api_hash"] != login["api_hash"]
        assert body["id"] == login["id"]
        assert body["user"] == login["user"]
        assert body["created_at"] == login["created_at"]

    def test_unknown_session(self, client):
        response = client.post("/api/regenerate-api-hash/deadbeef")

        assert response.status_code == 404

    def test_expired_session(self, client, login, clock):
        clock.advance(timedelta(days=31))

        response = client.post(f"/api/regenerate-api-hash/{login['id']}")

        assert response.status_code == 401


class TestInternalErrors:
    """Tests for unexpected failures."""

    def test_signing_failure_is_generic_500(self, config, clock, monkeypatch):
        def broken_encode(*args, **kwargs):
            raise jwt.InvalidKeyError("unusable key")

        monkeypatch.setattr(jwt, "encode", broken_encode)
        with TestClient(create_fastapi_app(App(config, clock)), raise_server_exceptions=False) as client:
            response = client.post("/api/auth", json={"username": "JohnDoe", "password": JOHN_PASSWORD})

        assert response.status_code == 500
        assert response.json() == {"message": "Internal Server Error", "type": "internal_server_error"}


def test_openapi_schema(client):
    schema = client.get("/openapi.json").json()

    assert "/api/auth" in schema["paths"]
    assert schema["paths"]["/api/validate-jwt"]["post"]["security"] == [{"SignedToken": [], "SessionId": []}]
