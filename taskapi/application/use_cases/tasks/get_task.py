# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from taskapi.domain.tasks import Task, TaskNotFoundError, TaskRepository


class GetTaskUseCase:
    def __init__(self, *, tasks: TaskRepository) -> None:
        self._tasks = tasks

    def execute(self, user_id: int, task_id: int) -> Task:
        task = self._tasks.find_for_user(task_id, user_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task
