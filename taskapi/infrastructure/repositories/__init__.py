# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .tasks.sqlalchemy_task_repository import SqlAlchemyTaskRepository
from .users.sqlalchemy_user_repository import SqlAlchemyUserRepository

__all__ = ["SqlAlchemyTaskRepository", "SqlAlchemyUserRepository"]
