# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Task


class TaskRepository(Protocol):
    def list_for_user(self, user_id: int) -> Sequence[Task]: ...
    def find_for_user(self, task_id: int, user_id: int) -> Task | None: ...
    def add(self, task: Task) -> Task: ...
    def save(self, task: Task) -> Task | None: ...
    def delete_for_user(self, task_id: int, user_id: int) -> bool: ...
