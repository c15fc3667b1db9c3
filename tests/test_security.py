from datetime import timedelta

import jwt
import pytest
from fastapi import HTTPException

from app.core.config import settings
from app.core.security import ALGORITHM, create_jwt, create_session_token, decode_jwt


def test_session_token_round_trip():
    payload = decode_jwt(create_session_token("user-1"))
    assert payload["sub"] == "user-1"
    assert "exp" in payload


def test_decode_rejects_foreign_signature():
    token = jwt.encode({"sub": "user-1"}, "not-the-secret", algorithm=ALGORITHM)
    with pytest.raises(HTTPException) as exc_info:
        decode_jwt(token)
    assert exc_info.value.status_code == 401


def test_expired_session_is_unauthorized(make_user, client):
    user = make_user(name="Ada")
    client.cookies.set(settings.SESSION_COOKIE_NAME, create_session_token(user.id, timedelta(seconds=-5)))

    response = client.get("/api/teams")

    assert response.status_code == 401
    assert response.json() == {"detail": "Unauthorized"}


def test_garbage_cookie_is_unauthorized(client):
    client.cookies.set(settings.SESSION_COOKIE_NAME, "not-a-jwt")

    assert client.get("/api/teams").status_code == 401


def test_token_without_subject_is_unauthorized(client):
    client.cookies.set(settings.SESSION_COOKIE_NAME, create_jwt({"email": "ada@example.com"}))

    assert client.get("/api/teams").status_code == 401


def test_unknown_user_is_unauthorized(client):
    client.cookies.set(settings.SESSION_COOKIE_NAME, create_session_token("ghost"))

    assert client.get("/api/teams").status_code == 401


def test_bearer_header_is_accepted(make_user, client):
    user = make_user(name="Ada")
    token = create_session_token(user.id)

    response = client.get("/api/teams", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    assert response.json()[0]["name"] == "Ada's Team"


def test_non_bearer_authorization_is_ignored(make_user, client):
    user = make_user(name="Ada")
    token = create_session_token(user.id)

    response = client.get("/api/teams", headers={"Authorization": f"Basic {token}"})

    assert response.status_code == 401
