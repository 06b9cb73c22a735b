# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Stateless signed session tokens.

Tokens are HMAC-signed JWTs carrying ``username``, ``iat`` and ``exp``.
Nothing is persisted: verification needs only the process-wide secret.
The signature is always checked before any timestamp, so a forged token
is reported as invalid even when its ``exp`` lies in the past.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from reviewhub.domain.users.entities import SessionClaims
from reviewhub.domain.users.exceptions import ExpiredSessionError, InvalidSessionError
from reviewhub.domain.users.repositories import SessionTokenService

DEFAULT_SESSION_TTL = timedelta(hours=1)

_REQUIRED_CLAIMS = ("username", "iat", "exp")


def utc_now() -> datetime:
    return datetime.now(UTC)


class JwtSessionTokenService(SessionTokenService):
    def __init__(
        self,
        secret: str,
        *,
        ttl: timedelta = DEFAULT_SESSION_TTL,
        algorithm: str = "HS256",
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        if not secret:
            raise ValueError("session secret must not be empty")
        if ttl <= timedelta(0):
            raise ValueError("session ttl must be positive")
        self._secret = secret
        self._ttl = ttl
        self._algorithm = algorithm
        self._clock = clock

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def issue(self, username: str) -> str:
        now = self._clock()
        payload = {
            "sub": username,
            "username": username,
            # whole seconds, rounded outward so the lifetime never falls short of ttl
            "iat": math.floor(now.timestamp()),
            "exp": math.ceil((now + self._ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> SessionClaims:
        payload = self._decode_signed(token)
        claims = _parse_claims(payload)

        now = self._clock()
        if claims.issued_at > now:
            raise InvalidSessionError()
        nbf = payload.get("nbf")
        if nbf is not None and _timestamp(nbf) > now:
            raise InvalidSessionError()
        if now > claims.expires_at:
            raise ExpiredSessionError()
        return claims

    def _decode_signed(self, token: str) -> dict[str, Any]:
        if not isinstance(token, str) or not token:
            raise InvalidSessionError()
        try:
            # time claims are checked against the injected clock instead
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={
                    "verify_signature": True,
                    "verify_exp": False,
                    "verify_iat": False,
                    "verify_nbf": False,
                    "require": list(_REQUIRED_CLAIMS),
                },
            )
        except jwt.InvalidTokenError as exc:
            raise InvalidSessionError() from exc
        if not isinstance(payload, dict):
            raise InvalidSessionError()
        return payload


def _timestamp(value: Any) -> datetime:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise InvalidSessionError()
    try:
        return datetime.fromtimestamp(value, tz=UTC)
    except (OverflowError, OSError, ValueError) as exc:
        raise InvalidSessionError() from exc


def _parse_claims(payload: dict[str, Any]) -> SessionClaims:
    username = payload.get("username")
    if not isinstance(username, str) or not username:
        raise InvalidSessionError()
    return SessionClaims(
        username=username,
        issued_at=_timestamp(payload.get("iat")),
        expires_at=_timestamp(payload.get("exp")),
    )
