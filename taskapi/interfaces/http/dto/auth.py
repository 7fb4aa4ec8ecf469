# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic_core import PydanticCustomError


class RegisterRequestDTO(BaseModel):
    username: str = Field(min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(min_length=6, max_length=128)

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        if not value.strip():
            raise PydanticCustomError("blank", "Username is required", {})
        return value


class LoginRequestDTO(BaseModel):
    username: str
    password: str

    @field_validator("username", "password")
    @classmethod
    def validate_not_blank(cls, value: str, info) -> str:
        if not value.strip():
            raise PydanticCustomError(
                "blank", "{field} is required", {"field": info.field_name.capitalize()}
            )
        return value


class AuthResponseDTO(BaseModel):
    token: str
    type: str = "Bearer"
    username: str

    model_config = ConfigDict(from_attributes=True)


__all__ = ["AuthResponseDTO", "LoginRequestDTO", "RegisterRequestDTO"]
