# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import UTC, datetime

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from taskapi.domain.tasks.entities import Task as DomainTask
from taskapi.domain.tasks.repositories import TaskRepository
from taskapi.infrastructure.db.models import Task
from taskapi.infrastructure.repositories._time import as_utc
from taskapi.infrastructure.unit_of_work import unit_of_work_scope


def _to_domain(row: Task) -> DomainTask:
    return DomainTask(
        id=row.id,
        user_id=row.user_id,
        title=row.title,
        description=row.description,
        completed=bool(row.completed),
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


class SqlAlchemyTaskRepository(TaskRepository):
    def __init__(
        self,
        session_factory: Callable[[], Session],
        clock: Callable[[], datetime] = lambda: datetime.now(UTC),
    ):
        self._session_factory = session_factory
        self._clock = clock

    def list_for_user(self, user_id: int) -> Sequence[DomainTask]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = session.scalars(
                select(Task).where(Task.user_id == user_id).order_by(Task.id.asc())
            ).all()
            return [_to_domain(row) for row in rows]

    def find_for_user(self, task_id: int, user_id: int) -> DomainTask | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.scalars(
                select(Task).where(Task.id == task_id, Task.user_id == user_id)
            ).first()
            return _to_domain(row) if row else None

    def add(self, task: DomainTask) -> DomainTask:
        with unit_of_work_scope(self._session_factory) as session:
            row = Task(
                user_id=task.user_id,
                title=task.title,
                description=task.description,
                completed=task.completed,
                created_at=task.created_at,
                updated_at=task.updated_at,
            )
            session.add(row)
            session.flush()
            return _to_domain(row)

    def save(self, task: DomainTask) -> DomainTask | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.scalars(
                select(Task).where(Task.id == task.id, Task.user_id == task.user_id)
            ).first()
            if row is None:
                return None
            row.title = task.title
            row.description = task.description
            row.completed = task.completed
            row.updated_at = self._clock()
            session.flush()
            return _to_domain(row)

    def delete_for_user(self, task_id: int, user_id: int) -> bool:
        with unit_of_work_scope(self._session_factory) as session:
            result = session.execute(
                delete(Task).where(Task.id == task_id, Task.user_id == user_id)
            )
            return result.rowcount > 0


__all__ = ["SqlAlchemyTaskRepository"]
