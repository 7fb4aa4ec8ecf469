from __future__ import annotations

import os
import tempfile
from collections.abc import Iterator, Sequence
from dataclasses import replace
from pathlib import Path

_TMP = Path(tempfile.mkdtemp(prefix="taskapi-tests-"))

os.environ["JWT_SECRET"] = "test-secret-key-that-is-long-enough-for-hs256"
os.environ["JWT_EXPIRATION"] = "3600000"
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP / 'default.db'}"
os.environ["LOG_FILE"] = str(_TMP / "app.log")
os.environ["PASSWORD_HASH_METHOD"] = "pbkdf2:sha256:1000"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest  # noqa: E402
from flask import Flask  # noqa: E402
from flask.testing import FlaskClient  # noqa: E402

from taskapi.app import create_app  # noqa: E402
from taskapi.domain.tasks import Task  # noqa: E402
from taskapi.domain.users.entities import User  # noqa: E402
from taskapi.infrastructure.container import Container  # noqa: E402
from taskapi.infrastructure.db import build_engine, build_session_factory, init_db  # noqa: E402
from taskapi.shared.config import DatabaseConfig, load_config  # noqa: E402


class InMemoryUserRepository:
    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._seq = 1

    def find_by_username(self, username: str) -> User | None:
        return next((u for u in self._users.values() if u.username == username), None)

    def find_by_email(self, email: str) -> User | None:
        return next((u for u in self._users.values() if u.email == email), None)

    def find_by_id(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def add(self, user: User) -> User:
        stored = replace(user, id=self._seq)
        self._seq += 1
        self._users[stored.id] = stored
        return stored

    def remove(self, username: str) -> None:
        user = self.find_by_username(username)
        if user is not None:
            del self._users[user.id]


class InMemoryTaskRepository:
    def __init__(self) -> None:
        self._tasks: dict[int, Task] = {}
        self._seq = 1

    def list_for_user(self, user_id: int) -> Sequence[Task]:
        return [t for _, t in sorted(self._tasks.items()) if t.user_id == user_id]

    def find_for_user(self, task_id: int, user_id: int) -> Task | None:
        task = self._tasks.get(task_id)
        return task if task is not None and task.user_id == user_id else None

    def add(self, task: Task) -> Task:
        stored = replace(task, id=self._seq)
        self._seq += 1
        self._tasks[stored.id] = stored
        return stored

    def save(self, task: Task) -> Task | None:
        if self.find_for_user(task.id, task.user_id) is None:
            return None
        self._tasks[task.id] = task
        return task

    def delete_for_user(self, task_id: int, user_id: int) -> bool:
        if self.find_for_user(task_id, user_id) is None:
            return False
        del self._tasks[task_id]
        return True


class DeterministicHasher:
    def __init__(self) -> None:
        self.verify_calls = 0

    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        self.verify_calls += 1
        return hashed == f"hashed:{password}"


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def tasks() -> InMemoryTaskRepository:
    return InMemoryTaskRepository()


@pytest.fixture()
def hasher() -> DeterministicHasher:
    return DeterministicHasher()


@pytest.fixture()
def db_url(tmp_path: Path) -> str:
    return f"sqlite:///{tmp_path / 'taskapi.db'}"


@pytest.fixture()
def engine(db_url: str):
    engine = build_engine(DatabaseConfig(url=db_url))
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    factory = build_session_factory(engine)
    yield factory
    factory.remove()


@pytest.fixture()
def container(engine, session_factory) -> Container:
    return Container(load_config(), engine=engine, session_factory=session_factory)


@pytest.fixture()
def app(container: Container) -> Flask:
    return create_app(container)


@pytest.fixture()
def client(app: Flask) -> Iterator[FlaskClient]:
    with app.test_client() as test_client:
        yield test_client
