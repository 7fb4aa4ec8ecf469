# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from http import HTTPStatus
from typing import Any, cast


@dataclass(slots=True, eq=False)
class AppError(Exception):
    code: str
    status: HTTPStatus
    message: str | None = None
    errors: Mapping[str, str] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message or self.code)

    def to_dict(self, path: str) -> dict[str, Any]:
        return error_body(self.status, self.message, path, self.errors)


def error_body(
    status: HTTPStatus,
    message: str | None,
    path: str,
    errors: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "timestamp": datetime.now(UTC).isoformat(),
        "status": int(status),
        "error": status.phrase,
        "message": message or status.phrase,
        "path": path,
    }
    if errors:
        payload["errors"] = dict(errors)
    return payload


class DomainError(AppError):
    def __init__(
        self,
        message: str | None = None,
        *,
        code: str | None = None,
        status: HTTPStatus | None = None,
        errors: Mapping[str, str] | None = None,
    ) -> None:
        resolved_code = code or cast(str, getattr(self, "code", "domain_error"))
        resolved_status = status or cast(
            HTTPStatus, getattr(self, "status", HTTPStatus.BAD_REQUEST)
        )
        super().__init__(
            code=resolved_code, status=resolved_status, message=message, errors=errors
        )


class InfrastructureError(AppError):
    def __init__(
        self,
        code: str = "infrastructure_error",
        *,
        status: HTTPStatus | None = None,
    ) -> None:
        resolved_status = status or HTTPStatus.INTERNAL_SERVER_ERROR
        super().__init__(
            code=code, status=resolved_status, message="An unexpected error occurred"
        )


class ValidationError(AppError):
    def __init__(
        self,
        code: str = "validation_error",
        *,
        errors: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(
            code=code,
            status=HTTPStatus.BAD_REQUEST,
            message="Validation failed",
            errors=errors,
        )


class UnauthorizedError(AppError):
    def __init__(
        self, message: str = "Full authentication is required to access this resource"
    ) -> None:
        super().__init__(
            code="unauthorized",
            status=HTTPStatus.UNAUTHORIZED,
            message=message,
        )


class InvalidCredentialsError(AppError):
    def __init__(self) -> None:
        super().__init__(
            code="invalid_credentials",
            status=HTTPStatus.UNAUTHORIZED,
            message="Invalid username or password",
        )


class DuplicateUsernameError(AppError):
    def __init__(self) -> None:
        super().__init__(
            code="duplicate_username",
            status=HTTPStatus.CONFLICT,
            message="Username already exists",
            errors={"username": "Username already exists"},
        )


class DuplicateEmailError(AppError):
    def __init__(self) -> None:
        super().__init__(
            code="duplicate_email",
            status=HTTPStatus.CONFLICT,
            message="Email already exists",
            errors={"email": "Email already exists"},
        )
