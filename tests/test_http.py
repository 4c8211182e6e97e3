from typing import Annotated

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

from tagvalid import Response, Rules, ValidationError
from tagvalid.http import install, validate_payload


class SignUp(BaseModel):
    email: Annotated[str, Rules("required|email")] = ""
    password: Annotated[str, Rules("required|gte:7")] = ""

    def validation_messages(self) -> dict[str, str]:
        return {"password.gte": "more length please"}


class Login(BaseModel):
    email: Annotated[str, Rules("required|email")] = ""

    def validate_request(self) -> Response:
        r = Response()
        if self.email.endswith("@blocked.com"):
            r.failure("email.blocked", "this domain is blocked")
        return r


@pytest.fixture()
def client():
    app = install(FastAPI())

    @app.post("/signup")
    async def signup(payload: SignUp):
        validate_payload(payload)
        return {"ok": True}

    @app.post("/login")
    async def login(payload: Login):
        validate_payload(payload)
        return {"ok": True}

    return TestClient(app)


def test_valid_payload_passes_through(client):
    res = client.post("/signup", json={"email": "foo@bar.com", "password": "long enough"})
    assert res.status_code == 200
    assert res.json() == {"ok": True}


def test_invalid_payload_is_422(client):
    res = client.post("/signup", json={"email": "invalid.com", "password": "ab"})
    assert res.status_code == 422
    body = res.json()
    assert body["error"] == "validation_error"
    assert body["errors"] == {
        "email": "The email must be a valid email address",
        "password": "more length please",
    }


def test_self_check_reaches_the_client(client):
    res = client.post("/login", json={"email": "john@blocked.com"})
    assert res.status_code == 422
    assert res.json()["errors"] == {"email": "this domain is blocked"}


def test_validate_payload_returns_value():
    payload = SignUp(email="foo@bar.com", password="long enough")
    assert validate_payload(payload) is payload


def test_validate_payload_raises():
    with pytest.raises(ValidationError) as exc:
        validate_payload(SignUp())
    assert exc.value.errors == {
        "email": "The email field is required",
        "password": "The password field is required",
    }


def test_validate_payload_rejects_non_structs():
    with pytest.raises(ValidationError) as exc:
        validate_payload("not a payload")
    assert exc.value.errors == {}
    assert str(exc.value) == "validation failed"
