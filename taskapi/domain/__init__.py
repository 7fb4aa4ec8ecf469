# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .exceptions import InvariantViolation, InvariantViolationError
from .results import Err, Ok, Result

__all__ = [
    "Err",
    "InvariantViolation",
    "InvariantViolationError",
    "Ok",
    "Result",
]
