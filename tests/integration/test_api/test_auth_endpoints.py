import pytest


@pytest.mark.integration
class TestAuthEndpoints:
    """Integration tests for /api/v1/auth"""

    def test_login_success(self, client, rossi):
        response = client.post("/api/v1/auth/login", json={"username": "Rossi"})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"]["token_type"] == "bearer"
        assert body["data"]["family"]["username"] == "rossi"
        assert body["data"]["family"]["is_admin"] is False

    def test_login_unknown_family(self, client, rossi):
        response = client.post("/api/v1/auth/login", json={"username": "neri"})

        assert response.status_code == 404
        body = response.json()
        assert body["success"] is False
        assert body["error"]["category"] == "Not Found"

    def test_login_blank_name(self, client):
        response = client.post("/api/v1/auth/login", json={"username": ""})

        assert response.status_code == 422
        assert response.json()["error"]["category"] == "Validation"

    def test_me_restores_session(self, client, auth_headers):
        response = client.get("/api/v1/auth/me", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["data"]["display_name"] == "Rossi"

    def test_me_without_token(self, client):
        response = client.get("/api/v1/auth/me")

        assert response.status_code == 401
        assert response.json()["error"]["category"] == "Authentication"

    def test_me_with_bad_token(self, client):
        response = client.get("/api/v1/auth/me", headers={"Authorization": "Bearer nope"})

        assert response.status_code == 401
        assert response.json()["success"] is False

    def test_token_for_removed_family(self, client, db_session, rossi, auth_headers):
        db_session.delete(rossi)
        db_session.commit()

        response = client.get("/api/v1/tasks", headers=auth_headers)

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        error = response.json()["error"]
        assert error["category"] == "Authentication"
        assert error["message"] == "Family not found"

    def test_logout(self, client, auth_headers):
        response = client.post("/api/v1/auth/logout", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["data"]["message"] == "Successfully logged out"


@pytest.mark.integration
class TestServiceEndpoints:

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["data"]["status"] == "online"

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["data"]["database"] == "connected"
