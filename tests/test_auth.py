from __future__ import annotations

from datetime import datetime, timedelta, timezone

from jose import jwt

from conftest import auth, register


def test_register_returns_token_user_and_company(client):
    data = register(client, "owner@acme.io", company="Acme Supplies")
    assert data["token"]
    assert data["user"]["email"] == "owner@acme.io"
    assert data["user"]["role"] == "organization_owner"
    assert "password_hash" not in data["user"]
    assert data["company"]["name"] == "Acme Supplies"


def test_register_duplicate_email_is_conflict(client):
    register(client, "owner@acme.io")
    r = client.post(
        "/v1/auth/register",
        json={"email": "owner@acme.io", "password": "another-pass", "companyName": "Other", "industry": "IT"},
    )
    assert r.status_code == 409
    assert r.json() == {"success": False, "error": {"message": "User with this email already exists"}}


def test_register_validation_error_is_400_envelope(client):
    r = client.post(
        "/v1/auth/register",
        json={"email": "owner@acme.io", "password": "short", "companyName": "Acme", "industry": "IT"},
    )
    assert r.status_code == 400
    body = r.json()
    assert body["success"] is False
    assert "password" in body["error"]["message"]


def test_login_and_profile(client):
    register(client, "owner@acme.io", company="Acme Supplies")

    r = client.post("/v1/auth/login", json={"email": "owner@acme.io", "password": "s3cret-pass"})
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["company"]["name"] == "Acme Supplies"

    r = client.get("/v1/auth/profile", headers=auth(data["token"]))
    assert r.status_code == 200
    profile = r.json()["data"]
    assert profile["user"]["email"] == "owner@acme.io"
    assert profile["company"]["industry"] == "Construction"


def test_login_bad_password_is_401(client):
    register(client, "owner@acme.io")
    r = client.post("/v1/auth/login", json={"email": "owner@acme.io", "password": "wrong-pass"})
    assert r.status_code == 401
    assert r.json()["error"]["message"] == "Invalid email or password"


def test_login_unknown_email_is_401(client):
    r = client.post("/v1/auth/login", json={"email": "ghost@acme.io", "password": "whatever1"})
    assert r.status_code == 401


def test_missing_token_is_401(client):
    r = client.get("/v1/auth/profile")
    assert r.status_code == 401
    assert r.json() == {"success": False, "error": {"message": "Access token required"}}


def test_garbage_token_is_403(client):
    r = client.get("/v1/auth/profile", headers=auth("not-a-jwt"))
    assert r.status_code == 403
    assert r.json()["error"]["message"] == "Invalid or expired token"


def test_expired_token_is_403(client):
    data = register(client, "owner@acme.io")
    expired = jwt.encode(
        {
            "sub": data["user"]["id"],
            "email": "owner@acme.io",
            "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
        },
        "test-secret",
        algorithm="HS256",
    )
    r = client.get("/v1/auth/profile", headers=auth(expired))
    assert r.status_code == 403


def test_token_signed_with_other_secret_is_403(client):
    data = register(client, "owner@acme.io")
    forged = jwt.encode({"sub": data["user"]["id"]}, "other-secret", algorithm="HS256")
    r = client.get("/v1/auth/profile", headers=auth(forged))
    assert r.status_code == 403
