# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime

from pydantic import AliasGenerator, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from taskapi.domain.tasks.entities import TITLE_MAX_LENGTH


class TaskRequestDTO(BaseModel):
    title: str = Field(max_length=TITLE_MAX_LENGTH)
    description: str | None = None
    completed: bool | None = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, value: str) -> str:
        if not value.strip():
            raise PydanticCustomError("blank", "Title is required", {})
        return value


class TaskResponseDTO(BaseModel):
    id: int
    title: str
    description: str | None
    completed: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=AliasGenerator(serialization_alias=to_camel),
    )

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


__all__ = ["TaskRequestDTO", "TaskResponseDTO"]
