# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Tagged result values returned by operations whose failures are expected.

Callers branch on ``isinstance(result, Ok)`` instead of catching exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(slots=True, frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(slots=True, frozen=True)
class Err(Generic[E]):
    error: E


Result: TypeAlias = Union[Ok[T], Err[E]]
