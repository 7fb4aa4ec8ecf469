# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import TITLE_MAX_LENGTH, Task
from .exceptions import TaskNotFoundError
from .repositories import TaskRepository

__all__ = ["TITLE_MAX_LENGTH", "Task", "TaskNotFoundError", "TaskRepository"]
