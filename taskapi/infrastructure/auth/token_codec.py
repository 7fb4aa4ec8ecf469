# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""HMAC-signed bearer tokens binding a username to a validity window."""

from __future__ import annotations

import json
import math
import secrets
from datetime import datetime
from typing import Any

import jwt
from jwt.utils import base64url_decode

from taskapi.domain.results import Err, Ok, Result
from taskapi.domain.users.exceptions import TokenError
from taskapi.domain.users.repositories import TokenCodec

MIN_SECRET_BYTES = 32
REQUIRED_CLAIMS = ("sub", "iat", "exp")


class JwtTokenCodec(TokenCodec):
    """Issues and verifies compact JWS tokens with claims ``sub``/``iat``/``exp``/``jti``.

    Expiry is evaluated against the ``now`` passed by the caller, never the
    wall clock.
    """

    def __init__(
        self, secret: str, lifetime_seconds: float, algorithm: str = "HS256"
    ) -> None:
        if len(secret.encode("utf-8")) < MIN_SECRET_BYTES:
            raise ValueError(
                f"Token secret must be at least {MIN_SECRET_BYTES} bytes"
            )
        if lifetime_seconds < 1:
            raise ValueError("Token lifetime must be at least one second")
        self._secret = secret
        self._lifetime = lifetime_seconds
        self._algorithm = algorithm

    def issue(self, subject: str, now: datetime) -> str:
        issued_at = now.timestamp()
        payload = {
            "sub": subject,
            "iat": math.floor(issued_at),
            "exp": math.floor(issued_at + self._lifetime),
            "jti": secrets.token_hex(16),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str, now: datetime) -> Result[str, TokenError]:
        if not token or not token.strip():
            return Err(TokenError.MALFORMED)

        header = self._peek_header(token)
        if header is None:
            return Err(TokenError.MALFORMED)
        if header.get("alg") != self._algorithm:
            return Err(TokenError.UNSUPPORTED)
        if not self._signature_is_decodable(token):
            return Err(TokenError.BAD_SIGNATURE)

        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "verify_nbf": False,
                    "require": list(REQUIRED_CLAIMS),
                },
            )
        except jwt.InvalidAlgorithmError:
            return Err(TokenError.UNSUPPORTED)
        except jwt.InvalidSignatureError:
            return Err(TokenError.BAD_SIGNATURE)
        except jwt.InvalidTokenError:
            return Err(TokenError.MALFORMED)

        subject = claims.get("sub")
        expires_at = claims.get("exp")
        if not isinstance(subject, str) or not subject:
            return Err(TokenError.MALFORMED)
        if isinstance(expires_at, bool) or not isinstance(expires_at, (int, float)):
            return Err(TokenError.MALFORMED)
        if now.timestamp() >= expires_at:
            return Err(TokenError.EXPIRED)
        return Ok(subject)

    @staticmethod
    def _peek_header(token: str) -> dict[str, Any] | None:
        """Header and payload must both be base64url JSON objects."""

        segments = token.split(".")
        if len(segments) != 3:
            return None
        try:
            header = json.loads(base64url_decode(segments[0]))
            payload = json.loads(base64url_decode(segments[1]))
        except ValueError:
            return None
        if not isinstance(header, dict) or not isinstance(payload, dict):
            return None
        return header

    @staticmethod
    def _signature_is_decodable(token: str) -> bool:
        try:
            base64url_decode(token.rsplit(".", 1)[1])
        except ValueError:
            return False
        return True


__all__ = ["JwtTokenCodec", "MIN_SECRET_BYTES"]
