# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from reviewhub.application.use_cases.users.login_user import LoginUserUseCase
from reviewhub.application.use_cases.users.register_user import RegisterUserUseCase
from reviewhub.domain.users.entities import AuthenticatedIdentity
from reviewhub.domain.users.exceptions import (
    UserAlreadyRegisteredError,
    UserNotRegisteredError,
    WrongPasswordError,
)
from reviewhub.infrastructure.audit import AuditAction, AuditLogger
from reviewhub.interfaces.http.auth import SessionAuthenticator, identity_required
from reviewhub.interfaces.http.dto.auth import AuthTokenDTO, LoginRequestDTO, RegisterRequestDTO
from reviewhub.shared.errors.validation import raise_validation_error


def _get_client_ip() -> str | None:
    ip_address = request.headers.get("X-Forwarded-For", request.remote_addr)
    if ip_address and "," in ip_address:
        ip_address = ip_address.split(",")[0].strip()
    return ip_address


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        authenticator: SessionAuthenticator,
        audit: AuditLogger,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._authenticator = authenticator
        self._audit = audit

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        ip_address = _get_client_ip()
        try:
            user, token = self._register_use_case.execute(dto.username, dto.password)
        except UserAlreadyRegisteredError as exc:
            self._audit.log(
                AuditAction.REGISTER_FAILED,
                ip_address=ip_address,
                details={"username": dto.username, "error": exc.code},
                success=False,
            )
            raise

        self._audit.log(
            AuditAction.REGISTER,
            user_id=user.id,
            ip_address=ip_address,
            details={"username": user.username},
            success=True,
        )
        payload = AuthTokenDTO(username=user.username, token=token).model_dump()
        return jsonify(payload), 200

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        ip_address = _get_client_ip()
        try:
            token = self._login_use_case.execute(dto.username, dto.password)
        except (UserNotRegisteredError, WrongPasswordError) as exc:
            self._audit.log(
                AuditAction.LOGIN_FAILED,
                ip_address=ip_address,
                details={"username": dto.username, "error": exc.code},
                success=False,
            )
            raise

        self._audit.log(
            AuditAction.LOGIN_SUCCESS,
            ip_address=ip_address,
            details={"username": dto.username},
            success=True,
        )
        payload = AuthTokenDTO(username=dto.username, token=token).model_dump()
        return jsonify(payload), 200

    @identity_required
    def me(self, identity: AuthenticatedIdentity) -> tuple[Response, int]:
        return jsonify(identity.to_dict()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/me", view_func=self.me, methods=["GET"])
        return bp
