"""Integration tests for the user registration endpoint via TestClient."""

import pytest


class TestCreateUserAPI:
    def test_numeric_user_id_is_accepted_as_text(self, client, identity_service):
        response = client.post("/auth/users", json={"userId": 123})
        assert response.status_code == 201
        assert identity_service.calls == [{"method": "create_user", "user_id": "123"}]

    def test_create_returns_201(self, client, identity_service):
        response = client.post("/auth/users", json={"userId": "reviewer-42"})
        assert response.status_code == 201
        assert response.text == "User created"
        assert response.headers["content-type"].startswith("text/plain")

    def test_duplicate_returns_409(self, client, identity_service):
        client.post("/auth/users", json={"userId": "reviewer-dup"})
        response = client.post("/auth/users", json={"userId": "reviewer-dup"})
        assert response.status_code == 409
        assert response.text == "This user ID is already taken. Please choose another."

    def test_invalid_id_returns_400(self, client, identity_service):
        response = client.post("/auth/users", json={"userId": "bad id"})
        assert response.status_code == 400
        assert response.text == "Invalid userId. Please try a different value."

    def test_upstream_failure_returns_500(self, client, identity_service):
        identity_service.configure(forced_status=503, message="Service Unavailable")
        response = client.post("/auth/users", json={"userId": "reviewer-42"})
        assert response.status_code == 500
        assert response.text == "Failed to create user: Service Unavailable"

    def test_unreachable_upstream_returns_500(self, client, identity_service):
        identity_service.configure(unreachable=True)
        response = client.post("/auth/users", json={"userId": "reviewer-42"})
        assert response.status_code == 500
        assert response.text.startswith("Failed to create user: ")


class TestCreateUserValidationAPI:
    @pytest.mark.parametrize("payload", [{}, {"userId": None}, {"userId": ""}, {"userId": "   "}])
    def test_blank_user_id_returns_400(self, client, identity_service, payload):
        response = client.post("/auth/users", json=payload)
        assert response.status_code == 400
        assert response.text == "Please provide a non-empty userId in the body"
        assert identity_service.calls == []

    def test_missing_body_returns_400(self, client, identity_service):
        response = client.post("/auth/users")
        assert response.status_code == 400
        assert response.text == "Please provide a non-empty userId in the body"
        assert identity_service.calls == []

    def test_caller_identity_header_not_required(self, client, identity_service):
        response = client.post("/auth/users", json={"userId": "reviewer-no-header"})
        assert response.status_code == 201
