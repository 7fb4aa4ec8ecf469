# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from taskapi.domain.results import Err, Ok, Result
from taskapi.domain.users.entities import AuthSuccess
from taskapi.domain.users.exceptions import AuthFailure
from taskapi.domain.users.repositories import PasswordHasher, TokenCodec, UserRepository


def _utcnow() -> datetime:
    return datetime.now(UTC)


class LoginUserUseCase:
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
        self._dummy_hash: str | None = None

    def execute(self, username: str, password: str) -> Result[AuthSuccess, AuthFailure]:
        user = self._users.find_by_username(username)

        if user is None:
            # Same hashing work as a real check, so timing does not reveal unknown users.
            self._password_hasher.verify(password, self._get_dummy_hash())
            return Err(AuthFailure.INVALID_CREDENTIALS)

        if not self._password_hasher.verify(password, user.password_hash):
            return Err(AuthFailure.INVALID_CREDENTIALS)

        token = self._tokens.issue(user.username, self._clock())
        return Ok(AuthSuccess(token=token, username=user.username))

    def _get_dummy_hash(self) -> str:
        if self._dummy_hash is None:
            self._dummy_hash = self._password_hasher.hash("not-a-real-password")
        return self._dummy_hash
