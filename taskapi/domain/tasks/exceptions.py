# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from taskapi.shared.errors.base import DomainError


class TaskNotFoundError(DomainError):
    code = "task_not_found"
    status = HTTPStatus.NOT_FOUND

    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task not found with id: {task_id}")
        self.task_id = task_id
