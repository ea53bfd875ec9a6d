"""API tests for the auth endpoints."""

import pytest

pytestmark = pytest.mark.api

SIGNUP = "/api/v1/auth/signup"
SIGNIN = "/api/v1/auth/signin"
REFRESH = "/api/v1/auth/refresh"
SIGNOUT = "/api/v1/auth/signout"

USER = {"name": "Ada", "email": "ada@example.com", "password": "Secret123!"}


async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


async def test_signup_returns_token_pair(client):
    response = await client.post(SIGNUP, json=USER)

    assert response.status_code == 201
    data = response.json()["data"]
    assert set(data) == {"accessToken", "refreshToken"}
    assert response.headers["X-Trace-Id"]


async def test_signup_duplicate_email(client, tokens):
    response = await client.post(SIGNUP, json={**USER, "email": "ADA@example.com"})

    assert response.status_code == 400
    body = response.json()
    assert body["code"] == "EMAIL_ALREADY_EXISTS"
    assert "details" not in body


async def test_signup_validation_error(client):
    response = await client.post(
        SIGNUP, json={"name": "", "email": "not-an-email", "password": "short"}
    )

    assert response.status_code == 400
    body = response.json()
    assert body["code"] == "VALIDATION_ERROR"
    assert set(body["details"]) == {"name", "email", "password"}


async def test_signin(client, tokens):
    response = await client.post(
        SIGNIN, json={"email": USER["email"], "password": USER["password"]}
    )

    assert response.status_code == 200
    assert set(response.json()["data"]) == {"accessToken", "refreshToken"}


@pytest.mark.parametrize(
    "credentials",
    [
        {"email": "ada@example.com", "password": "WrongPass1!"},
        {"email": "nobody@example.com", "password": "Secret123!"},
    ],
)
async def test_signin_rejects_bad_credentials(client, tokens, credentials):
    response = await client.post(SIGNIN, json=credentials)

    assert response.status_code == 400
    assert response.json() == {
        "code": "INVALID_CREDENTIALS",
        "message": "Invalid email or password",
    }


async def test_refresh_rotates_token(client, tokens):
    first = await client.post(REFRESH, json={"refreshToken": tokens["refreshToken"]})
    replay = await client.post(REFRESH, json={"refreshToken": tokens["refreshToken"]})

    assert first.status_code == 200
    assert first.json()["data"]["refreshToken"] != tokens["refreshToken"]
    assert replay.status_code == 401
    assert replay.json()["code"] == "INVALID_TOKEN"


async def test_refresh_rejects_access_token(client, tokens):
    response = await client.post(REFRESH, json={"refreshToken": tokens["accessToken"]})

    assert response.status_code == 401
    assert response.json()["code"] == "INVALID_TOKEN"


async def test_signout_revokes_refresh_token(client, tokens):
    response = await client.post(SIGNOUT, json={"refreshToken": tokens["refreshToken"]})
    after = await client.post(REFRESH, json={"refreshToken": tokens["refreshToken"]})

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Successfully signed out"}
    assert after.status_code == 401


async def test_users_me(client, auth_headers):
    response = await client.get("/api/v1/users/me", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["email"] == "ada@example.com"
    assert data["name"] == "Ada"
    assert "passwordHash" not in data
    assert "createdAt" in data


async def test_users_me_requires_token(client):
    response = await client.get("/api/v1/users/me")

    assert response.status_code == 401
    assert response.json()["code"] == "UNAUTHORIZED"
    assert response.headers["WWW-Authenticate"] == "Bearer"


async def test_incoming_trace_id_echoed(client):
    response = await client.get("/health", headers={"X-Trace-Id": "trace-123"})

    assert response.headers["X-Trace-Id"] == "trace-123"


async def test_malformed_json_body_reported_at_root(client):
    response = await client.post(
        SIGNUP,
        content=b'{"name": "Ada", "email": ',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    body = response.json()
    assert body["code"] == "VALIDATION_ERROR"
    assert list(body["details"]) == ["_root"]
