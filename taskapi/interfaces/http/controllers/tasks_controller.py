# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from taskapi.application.use_cases.tasks import (
    CreateTaskUseCase,
    DeleteTaskUseCase,
    GetTaskUseCase,
    ListTasksUseCase,
    ToggleTaskUseCase,
    UpdateTaskUseCase,
)
from taskapi.domain.tasks import Task
from taskapi.domain.users.entities import User
from taskapi.infrastructure.auth import auth_required
from taskapi.interfaces.http.dto.tasks import TaskRequestDTO, TaskResponseDTO
from taskapi.shared.errors.validation import raise_validation_error
from taskapi.shared.logging import logger

# largest id a signed 64-bit INTEGER column can hold; anything above is a 404
MAX_TASK_ID = 2**63 - 1
TASK_ID = f"<int(max={MAX_TASK_ID}):task_id>"


def _serialize(task: Task) -> dict:
    return TaskResponseDTO.model_validate(task).to_json()


def _parse_body() -> TaskRequestDTO:
    try:
        return TaskRequestDTO.model_validate(request.get_json(silent=True) or {})
    except ValidationError as exc:
        raise_validation_error(exc)


class TasksController:
    def __init__(
        self,
        *,
        list_use_case: ListTasksUseCase,
        get_use_case: GetTaskUseCase,
        create_use_case: CreateTaskUseCase,
        update_use_case: UpdateTaskUseCase,
        delete_use_case: DeleteTaskUseCase,
        toggle_use_case: ToggleTaskUseCase,
    ) -> None:
        self._list = list_use_case
        self._get = get_use_case
        self._create = create_use_case
        self._update = update_use_case
        self._delete = delete_use_case
        self._toggle = toggle_use_case

    @auth_required
    def list_tasks(self, user: User) -> Response:
        tasks = self._list.execute(user.id)
        logger.debug(f"tasks.list: ok n={len(tasks)}")
        return jsonify([_serialize(task) for task in tasks])

    @auth_required
    def get_task(self, task_id: int, user: User) -> Response:
        return jsonify(_serialize(self._get.execute(user.id, task_id)))

    @auth_required
    def create_task(self, user: User) -> tuple[Response, int]:
        dto = _parse_body()
        task = self._create.execute(user.id, dto.title, dto.description, dto.completed)
        logger.info(f"tasks.create: ok task_id={task.id}")
        return jsonify(_serialize(task)), 201

    @auth_required
    def update_task(self, task_id: int, user: User) -> Response:
        dto = _parse_body()
        task = self._update.execute(
            user.id, task_id, dto.title, dto.description, dto.completed
        )
        logger.info(f"tasks.update: ok task_id={task.id}")
        return jsonify(_serialize(task))

    @auth_required
    def delete_task(self, task_id: int, user: User) -> tuple[str, int]:
        self._delete.execute(user.id, task_id)
        logger.info(f"tasks.delete: ok task_id={task_id}")
        return "", 204

    @auth_required
    def toggle_task(self, task_id: int, user: User) -> Response:
        task = self._toggle.execute(user.id, task_id)
        logger.info(f"tasks.toggle: ok task_id={task.id} completed={task.completed}")
        return jsonify(_serialize(task))

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("tasks", __name__, url_prefix="/api/tasks")
        bp.add_url_rule("", view_func=self.list_tasks, methods=["GET"])
        bp.add_url_rule("", view_func=self.create_task, methods=["POST"])
        bp.add_url_rule(f"/{TASK_ID}", view_func=self.get_task, methods=["GET"])
        bp.add_url_rule(f"/{TASK_ID}", view_func=self.update_task, methods=["PUT"])
        bp.add_url_rule(f"/{TASK_ID}", view_func=self.delete_task, methods=["DELETE"])
        bp.add_url_rule(
            f"/{TASK_ID}/complete", view_func=self.toggle_task, methods=["PATCH"]
        )
        return bp
