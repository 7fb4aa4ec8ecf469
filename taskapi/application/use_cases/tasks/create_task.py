# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from taskapi.domain.tasks import Task, TaskRepository


def _utcnow() -> datetime:
    return datetime.now(UTC)


class CreateTaskUseCase:
    def __init__(
        self, *, tasks: TaskRepository, clock: Callable[[], datetime] = _utcnow
    ) -> None:
        self._tasks = tasks
        self._clock = clock

    def execute(
        self,
        user_id: int,
        title: str,
        description: str | None = None,
        completed: bool | None = None,
    ) -> Task:
        now = self._clock()
        task = Task(
            id=0,
            user_id=user_id,
            title=title,
            description=description,
            completed=bool(completed),
            created_at=now,
            updated_at=now,
        )
        return self._tasks.add(task)
