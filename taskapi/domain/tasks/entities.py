# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Task entity and the rules every persisted task satisfies."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

from taskapi.domain.exceptions import InvariantViolation

TITLE_MAX_LENGTH = 200


@dataclass(slots=True, frozen=True)
class Task:
    """A unit of work owned by exactly one user."""

    id: int
    user_id: int
    title: str
    description: str | None
    completed: bool
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise InvariantViolation("Title is required", field="title")
        if len(self.title) > TITLE_MAX_LENGTH:
            raise InvariantViolation(
                f"Title must not exceed {TITLE_MAX_LENGTH} characters", field="title"
            )

    def edited(
        self, *, title: str, description: str | None, completed: bool | None = None
    ) -> Task:
        """Return a copy with title and description replaced.

        ``completed`` is only changed when explicitly given.
        """

        return replace(
            self,
            title=title,
            description=description,
            completed=self.completed if completed is None else completed,
        )

    def toggled(self) -> Task:
        return replace(self, completed=not self.completed)
