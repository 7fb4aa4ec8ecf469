# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Per-request identity resolution for bearer tokens.

Every non-public request ends up in exactly one of three states:

* ``UNAUTHENTICATED``: no usable ``Authorization: Bearer`` header. The
  request continues without an identity; protected handlers refuse it.
* ``AUTHENTICATED``: the token verified and its subject still exists.
* ``REJECTED``: a token was presented but failed verification, or names a
  user that is gone. The request is stopped with a 401.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum
from functools import wraps
from typing import Any

from flask import Flask, g, request

from taskapi.domain.results import Err
from taskapi.domain.users.entities import User
from taskapi.domain.users.repositories import TokenCodec, UserRepository
from taskapi.shared.errors import UnauthorizedError
from taskapi.shared.logging import logger

BEARER_PREFIX = "Bearer "
PUBLIC_PATHS = frozenset({"/api/auth/register", "/api/auth/login", "/api/health"})
REJECTED_MESSAGE = "Invalid or expired token"


class IdentityState(StrEnum):
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"
    REJECTED = "rejected"


@dataclass(slots=True, frozen=True)
class RequestIdentity:
    state: IdentityState
    user: User | None = None
    reason: str | None = None


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _bearer_token(header: str | None) -> str | None:
    if not header or not header.startswith(BEARER_PREFIX):
        return None
    token = header[len(BEARER_PREFIX):].strip()
    return token or None


class RequestIdentityMiddleware:
    def __init__(
        self,
        *,
        tokens: TokenCodec,
        users: UserRepository,
        public_paths: Iterable[str] = PUBLIC_PATHS,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._tokens = tokens
        self._users = users
        self._public_paths = frozenset(public_paths)
        self._clock = clock

    def is_public(self, path: str) -> bool:
        return path in self._public_paths

    def resolve(self, authorization_header: str | None) -> RequestIdentity:
        """Run the state machine for one ``Authorization`` header value."""

        token = _bearer_token(authorization_header)
        if token is None:
            return RequestIdentity(IdentityState.UNAUTHENTICATED)

        verified = self._tokens.verify(token, self._clock())
        if isinstance(verified, Err):
            return RequestIdentity(IdentityState.REJECTED, reason=f"token {verified.error}")

        user = self._users.find_by_username(verified.value)
        if user is None:
            return RequestIdentity(IdentityState.REJECTED, reason="subject not found")
        return RequestIdentity(IdentityState.AUTHENTICATED, user=user)

    def install(self, app: Flask) -> None:
        @app.before_request
        def _bind_identity() -> None:
            if self.is_public(request.path):
                return

            identity = self.resolve(request.headers.get("Authorization"))
            g.identity = identity
            if identity.state is IdentityState.REJECTED:
                logger.warning(
                    f"auth.identity: rejected on {request.method} {request.path} "
                    f"({identity.reason})"
                )
                raise UnauthorizedError(REJECTED_MESSAGE)
            if identity.user is not None:
                g.user_id = identity.user.id


def current_user() -> User:
    identity: RequestIdentity | None = g.get("identity")
    if identity is None or identity.user is None:
        raise UnauthorizedError()
    return identity.user


def auth_required(handler: Callable[..., Any]) -> Callable[..., Any]:
    """Pass the bound user to ``handler`` as ``user=``; 401 when there is none."""

    @wraps(handler)
    def inner(*args: Any, **kwargs: Any) -> Any:
        return handler(*args, user=current_user(), **kwargs)

    return inner


__all__ = [
    "IdentityState",
    "PUBLIC_PATHS",
    "RequestIdentity",
    "RequestIdentityMiddleware",
    "auth_required",
    "current_user",
]
