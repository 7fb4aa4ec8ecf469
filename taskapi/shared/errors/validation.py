# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import NoReturn

from pydantic import ValidationError as PydanticValidationError

from .base import ValidationError


def format_pydantic_errors(exc: PydanticValidationError) -> dict[str, str]:
    errors: dict[str, str] = {}

    for error in exc.errors():
        loc = error.get("loc", ())
        field_path = ".".join(str(part) for part in loc if part is not None) or "body"
        # first message per field wins
        errors.setdefault(field_path, error.get("msg", "Invalid value"))

    return errors


def raise_validation_error(exc: PydanticValidationError) -> NoReturn:
    raise ValidationError(errors=format_pydantic_errors(exc)) from exc


__all__ = [
    "format_pydantic_errors",
    "raise_validation_error",
]
