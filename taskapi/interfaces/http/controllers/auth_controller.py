# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from taskapi.application.use_cases.users.login_user import LoginUserUseCase
from taskapi.application.use_cases.users.register_user import RegisterUserUseCase
from taskapi.domain.results import Err
from taskapi.domain.users.entities import AuthSuccess
from taskapi.domain.users.exceptions import AuthFailure
from taskapi.interfaces.http.dto.auth import (
    AuthResponseDTO,
    LoginRequestDTO,
    RegisterRequestDTO,
)
from taskapi.shared.errors import (
    AppError,
    DuplicateEmailError,
    DuplicateUsernameError,
    InvalidCredentialsError,
)
from taskapi.shared.errors.validation import raise_validation_error
from taskapi.shared.logging import logger


def _failure_to_error(failure: AuthFailure) -> AppError:
    match failure:
        case AuthFailure.DUPLICATE_USERNAME:
            return DuplicateUsernameError()
        case AuthFailure.DUPLICATE_EMAIL:
            return DuplicateEmailError()
        case _:
            return InvalidCredentialsError()


def _auth_response(success: AuthSuccess) -> Response:
    dto = AuthResponseDTO(
        token=success.token, type=success.token_type, username=success.username
    )
    return jsonify(dto.model_dump())


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        result = self._register_use_case.execute(dto.username, dto.email, dto.password)
        if isinstance(result, Err):
            logger.info(f"auth.register: rejected username={dto.username} ({result.error})")
            raise _failure_to_error(result.error)

        logger.info(f"auth.register: ok username={result.value.username}")
        return _auth_response(result.value), 201

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        result = self._login_use_case.execute(dto.username, dto.password)
        if isinstance(result, Err):
            logger.info(f"auth.login: failed username={dto.username}")
            raise _failure_to_error(result.error)

        logger.info(f"auth.login: ok username={result.value.username}")
        return _auth_response(result.value), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        return bp
