# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Transaction boundary shared by the SQLAlchemy repositories."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Self

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from taskapi.shared.errors import InfrastructureError
from taskapi.shared.logging import logger


class SqlAlchemyUnitOfWork:
    """Commits on a clean exit, rolls back on any exception, always closes."""

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory
        self._session: Session | None = None

    def __enter__(self) -> Self:
        self._session = self._session_factory()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        session = self.session
        try:
            if exc_type is None:
                session.commit()
            else:
                logger.debug(f"uow: rolling back after {exc_type.__name__}")
                session.rollback()
        except Exception:
            logger.exception("uow: commit failed")
            session.rollback()
            raise
        finally:
            session.close()
            self._session = None

    @property
    def session(self) -> Session:
        if self._session is None:
            raise RuntimeError("Unit of work used outside of its context")
        return self._session


@contextmanager
def unit_of_work_scope(factory: Callable[[], Session]) -> Iterator[Session]:
    """Yield a session; driver failures surface as ``InfrastructureError``.

    ``IntegrityError`` passes through untouched so repositories can map
    constraint violations to domain outcomes.
    """

    try:
        with SqlAlchemyUnitOfWork(factory) as uow:
            yield uow.session
    except IntegrityError:
        raise
    except SQLAlchemyError as exc:
        logger.error(f"uow: database failure ({type(exc).__name__})")
        raise InfrastructureError("database_error") from exc


__all__ = ["SqlAlchemyUnitOfWork", "unit_of_work_scope"]
