from __future__ import annotations

from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from taskapi.application.use_cases.users.login_user import LoginUserUseCase
from taskapi.application.use_cases.users.register_user import RegisterUserUseCase
from taskapi.domain.results import Err, Ok
from taskapi.domain.users.entities import AuthSuccess
from taskapi.domain.users.exceptions import AuthFailure
from taskapi.interfaces.http.controllers.auth_controller import AuthController
from taskapi.shared.middleware.error_handler import configure_error_handling

VALID_REGISTRATION = {
    "username": "alice",
    "email": "alice@example.com",
    "password": "secret123",
}


def _app(register=None, login=None) -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    controller = AuthController(
        register_use_case=cast(RegisterUserUseCase, register or MagicMock()),
        login_use_case=cast(LoginUserUseCase, login or MagicMock()),
    )
    app.register_blueprint(controller.as_blueprint())
    return app


def test_register_returns_201_with_token() -> None:
    register = MagicMock()
    register.execute.return_value = Ok(AuthSuccess(token="tok", username="alice"))

    response = _app(register=register).test_client().post(
        "/api/auth/register", json=VALID_REGISTRATION
    )

    assert response.status_code == 201
    assert response.get_json() == {"token": "tok", "type": "Bearer", "username": "alice"}
    register.execute.assert_called_once_with("alice", "alice@example.com", "secret123")


@pytest.mark.parametrize(
    ("failure", "field", "message"),
    [
        (AuthFailure.DUPLICATE_USERNAME, "username", "Username already exists"),
        (AuthFailure.DUPLICATE_EMAIL, "email", "Email already exists"),
    ],
)
def test_register_duplicate_maps_to_conflict(failure, field, message) -> None:
    register = MagicMock()
    register.execute.return_value = Err(failure)

    response = _app(register=register).test_client().post(
        "/api/auth/register", json=VALID_REGISTRATION
    )

    body = response.get_json()
    assert response.status_code == 409
    assert body["error"] == "Conflict"
    assert body["message"] == message
    assert body["errors"] == {field: message}


@pytest.mark.parametrize(
    ("payload", "field"),
    [
        ({**VALID_REGISTRATION, "username": "al"}, "username"),
        ({**VALID_REGISTRATION, "username": "x" * 51}, "username"),
        ({**VALID_REGISTRATION, "email": "not-an-email"}, "email"),
        ({**VALID_REGISTRATION, "password": "12345"}, "password"),
        ({"email": "alice@example.com", "password": "secret123"}, "username"),
    ],
)
def test_register_validation_errors(payload, field) -> None:
    register = MagicMock()

    response = _app(register=register).test_client().post("/api/auth/register", json=payload)

    body = response.get_json()
    assert response.status_code == 400
    assert body["message"] == "Validation failed"
    assert field in body["errors"]
    register.execute.assert_not_called()


def test_login_invalid_credentials_is_401() -> None:
    login = MagicMock()
    login.execute.return_value = Err(AuthFailure.INVALID_CREDENTIALS)

    response = _app(login=login).test_client().post(
        "/api/auth/login", json={"username": "alice", "password": "wrong"}
    )

    assert response.status_code == 401
    assert response.get_json()["message"] == "Invalid username or password"


def test_login_blank_fields_are_rejected() -> None:
    login = MagicMock()

    response = _app(login=login).test_client().post(
        "/api/auth/login", json={"username": "  ", "password": ""}
    )

    body = response.get_json()
    assert response.status_code == 400
    assert set(body["errors"]) == {"username", "password"}
    login.execute.assert_not_called()


def test_login_success_is_200() -> None:
    login = MagicMock()
    login.execute.return_value = Ok(AuthSuccess(token="tok2", username="alice"))

    response = _app(login=login).test_client().post(
        "/api/auth/login", json={"username": "alice", "password": "secret123"}
    )

    assert response.status_code == 200
    assert response.get_json()["token"] == "tok2"
