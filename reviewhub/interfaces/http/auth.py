# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Bearer-token authentication for Flask views.

The resolved identity is handed to the view as the ``identity`` keyword
argument; nothing is stored on the request or on ``flask.g``.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, Protocol, TypeVar

from flask import Request, request

from reviewhub.application.use_cases.users.verify_session import VerifySessionUseCase
from reviewhub.domain.users.entities import AuthenticatedIdentity
from reviewhub.domain.users.exceptions import InvalidSessionError, SessionError
from reviewhub.shared.logging import logger

_BEARER = "bearer"

F = TypeVar("F", bound=Callable[..., Any])


def bearer_token(req: Request) -> str:
    """Extract the token from ``Authorization: Bearer <token>``.

    A missing header, another scheme or an empty token is an invalid session.
    """
    header = req.headers.get("Authorization", "")
    parts = header.split()
    if len(parts) != 2 or parts[0].lower() != _BEARER:
        raise InvalidSessionError()
    return parts[1]


class SessionAuthenticator:
    def __init__(self, *, verify_session: VerifySessionUseCase) -> None:
        self._verify_session = verify_session

    def authenticate(self, req: Request) -> AuthenticatedIdentity:
        try:
            return self._verify_session.execute(bearer_token(req))
        except SessionError as exc:
            logger.warning(f"auth.session: rejected reason={exc.code} on {req.method} {req.path}")
            raise


class _HasAuthenticator(Protocol):
    _authenticator: SessionAuthenticator


def identity_required(view: F) -> F:
    """Authenticate the request and pass the acting identity to the view."""

    @wraps(view)
    def inner(self: _HasAuthenticator, *args: Any, **kwargs: Any) -> Any:
        kwargs["identity"] = self._authenticator.authenticate(request)
        return view(self, *args, **kwargs)

    return inner  # type: ignore[return-value]


__all__ = ["SessionAuthenticator", "bearer_token", "identity_required"]
