# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import AuthSuccess, User
from .exceptions import AuthFailure, DuplicateUserError, TokenError
from .repositories import PasswordHasher, TokenCodec, UserRepository

__all__ = [
    "AuthFailure",
    "AuthSuccess",
    "DuplicateUserError",
    "PasswordHasher",
    "TokenCodec",
    "TokenError",
    "User",
    "UserRepository",
]
