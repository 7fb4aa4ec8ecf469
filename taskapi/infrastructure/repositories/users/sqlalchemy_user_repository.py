# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from taskapi.domain.users.entities import User as DomainUser
from taskapi.domain.users.exceptions import AuthFailure, DuplicateUserError
from taskapi.domain.users.repositories import UserRepository
from taskapi.infrastructure.db.models import User
from taskapi.infrastructure.repositories._time import as_utc
from taskapi.infrastructure.unit_of_work import unit_of_work_scope
from taskapi.shared.logging import logger


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        email=row.email,
        password_hash=row.password_hash,
        created_at=as_utc(row.created_at),
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_username(self, username: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.scalars(select(User).where(User.username == username)).first()
            return _to_domain(row) if row else None

    def find_by_email(self, email: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.scalars(select(User).where(User.email == email)).first()
            return _to_domain(row) if row else None

    def find_by_id(self, user_id: int) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(User, user_id)
            return _to_domain(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = User(
                    username=user.username,
                    email=user.email,
                    password_hash=user.password_hash,
                    created_at=user.created_at,
                )
                session.add(row)
                session.flush()
                return _to_domain(row)
        except IntegrityError as exc:
            failure = self._classify_conflict(user)
            if failure is None:
                raise
            logger.info(f"users: insert rejected by unique constraint ({failure})")
            raise DuplicateUserError(failure) from exc

    def _classify_conflict(self, user: DomainUser) -> AuthFailure | None:
        # username is checked first so the result matches the pre-insert checks
        if self.find_by_username(user.username) is not None:
            return AuthFailure.DUPLICATE_USERNAME
        if self.find_by_email(user.email) is not None:
            return AuthFailure.DUPLICATE_EMAIL
        return None


__all__ = ["SqlAlchemyUserRepository"]
