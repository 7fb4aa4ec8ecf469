# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .auth import AuthResponseDTO, LoginRequestDTO, RegisterRequestDTO
from .tasks import TaskRequestDTO, TaskResponseDTO

__all__ = [
    "AuthResponseDTO",
    "LoginRequestDTO",
    "RegisterRequestDTO",
    "TaskRequestDTO",
    "TaskResponseDTO",
]
