# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .identity import (
    PUBLIC_PATHS,
    IdentityState,
    RequestIdentity,
    RequestIdentityMiddleware,
    auth_required,
    current_user,
)
from .token_codec import JwtTokenCodec

__all__ = [
    "IdentityState",
    "JwtTokenCodec",
    "PUBLIC_PATHS",
    "RequestIdentity",
    "RequestIdentityMiddleware",
    "auth_required",
    "current_user",
]
