# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import cached_property, partial

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from taskapi.application import (
    CreateTaskUseCase,
    DeleteTaskUseCase,
    GetTaskUseCase,
    ListTasksUseCase,
    LoginUserUseCase,
    RegisterUserUseCase,
    ToggleTaskUseCase,
    UpdateTaskUseCase,
    WerkzeugPasswordHasher,
)
from taskapi.infrastructure.auth import JwtTokenCodec, RequestIdentityMiddleware
from taskapi.infrastructure.db import ENGINE, SessionLocal
from taskapi.infrastructure.health import check_database
from taskapi.infrastructure.repositories import (
    SqlAlchemyTaskRepository,
    SqlAlchemyUserRepository,
)
from taskapi.interfaces.http.controllers import (
    AuthController,
    MiscController,
    TasksController,
)
from taskapi.shared.config import AppConfig, load_config


class Container:
    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        engine: Engine | None = None,
        session_factory: Callable[[], Session] | None = None,
    ) -> None:
        self.config = config or load_config()
        self.engine = engine or ENGINE
        self.session_factory = session_factory or SessionLocal

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(method=self.config.security.password_hash_method)

    @cached_property
    def token_codec(self) -> JwtTokenCodec:
        jwt_config = self.config.jwt
        return JwtTokenCodec(
            jwt_config.secret,
            jwt_config.expiration_seconds,
            algorithm=jwt_config.algorithm,
        )

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.session_factory)

    @cached_property
    def task_repository(self) -> SqlAlchemyTaskRepository:
        return SqlAlchemyTaskRepository(self.session_factory)

    @cached_property
    def identity_middleware(self) -> RequestIdentityMiddleware:
        return RequestIdentityMiddleware(
            tokens=self.token_codec, users=self.user_repository
        )

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            tokens=self.token_codec,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_codec,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
        )

    @cached_property
    def tasks_controller(self) -> TasksController:
        tasks = self.task_repository
        return TasksController(
            list_use_case=ListTasksUseCase(tasks=tasks),
            get_use_case=GetTaskUseCase(tasks=tasks),
            create_use_case=CreateTaskUseCase(tasks=tasks),
            update_use_case=UpdateTaskUseCase(tasks=tasks),
            delete_use_case=DeleteTaskUseCase(tasks=tasks),
            toggle_use_case=ToggleTaskUseCase(tasks=tasks),
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(database_check=partial(check_database, self.engine))
