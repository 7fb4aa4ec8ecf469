# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from taskapi.domain.results import Err, Ok, Result
from taskapi.domain.users.entities import AuthSuccess, User
from taskapi.domain.users.exceptions import AuthFailure, DuplicateUserError
from taskapi.domain.users.repositories import PasswordHasher, TokenCodec, UserRepository
from taskapi.shared.logging import logger


def _utcnow() -> datetime:
    return datetime.now(UTC)


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenCodec,
        password_hasher: PasswordHasher,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher
        self._clock = clock

    def execute(
        self, username: str, email: str, password: str
    ) -> Result[AuthSuccess, AuthFailure]:
        if self._users.find_by_username(username):
            return Err(AuthFailure.DUPLICATE_USERNAME)
        if self._users.find_by_email(email):
            return Err(AuthFailure.DUPLICATE_EMAIL)

        now = self._clock()
        hashed = self._password_hasher.hash(password)
        user = User(id=0, username=username, email=email, password_hash=hashed, created_at=now)
        try:
            persisted = self._users.add(user)
        except DuplicateUserError as exc:
            # lost a race against a concurrent registration
            logger.info(f"auth.register: unique constraint hit ({exc.failure})")
            return Err(exc.failure)

        token = self._tokens.issue(persisted.username, now)
        return Ok(AuthSuccess(token=token, username=persisted.username))
