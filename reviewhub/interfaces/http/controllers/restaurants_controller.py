# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from reviewhub.application.use_cases.restaurants import (
    CreateRestaurantUseCase,
    DeleteRestaurantUseCase,
    GetRestaurantUseCase,
    ListRestaurantsUseCase,
    UpdateRestaurantUseCase,
)
from reviewhub.domain.exceptions import NotOwnerError
from reviewhub.domain.users.entities import AuthenticatedIdentity
from reviewhub.infrastructure.audit import AuditAction, AuditLogger
from reviewhub.interfaces.http.auth import SessionAuthenticator, identity_required
from reviewhub.interfaces.http.dto.restaurants import (
    CreateRestaurantRequestDTO,
    UpdateRestaurantRequestDTO,
)
from reviewhub.shared.errors.validation import raise_validation_error

T = TypeVar("T")


def guarded(
    action: Callable[[], T],
    *,
    audit: AuditLogger,
    identity: AuthenticatedIdentity,
    resource: str,
    resource_id: int,
) -> T:
    """Run a mutation, recording ownership denials in the audit trail."""
    try:
        return action()
    except NotOwnerError:
        audit.log(
            AuditAction.OWNERSHIP_DENIED,
            user_id=identity.id,
            ip_address=request.remote_addr,
            details={"resource": resource, "resource_id": resource_id},
            success=False,
        )
        raise


class RestaurantsController:
    def __init__(
        self,
        *,
        authenticator: SessionAuthenticator,
        create_use_case: CreateRestaurantUseCase,
        list_use_case: ListRestaurantsUseCase,
        get_use_case: GetRestaurantUseCase,
        update_use_case: UpdateRestaurantUseCase,
        delete_use_case: DeleteRestaurantUseCase,
        audit: AuditLogger,
    ) -> None:
        self._authenticator = authenticator
        self._audit = audit
        self._create = create_use_case
        self._list = list_use_case
        self._get = get_use_case
        self._update = update_use_case
        self._delete = delete_use_case

    def list_restaurants(self) -> tuple[Response, int]:
        name = request.args.get("name") or None
        restaurants = self._list.execute(name=name)
        return jsonify([r.to_dict() for r in restaurants]), 200

    def get_restaurant(self, restaurant_id: int) -> tuple[Response, int]:
        return jsonify(self._get.execute(restaurant_id).to_dict()), 200

    @identity_required
    def create_restaurant(self, identity: AuthenticatedIdentity) -> tuple[Response, int]:
        try:
            dto = CreateRestaurantRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        restaurant = self._create.execute(identity, dto.to_domain())
        self._audit.log(
            AuditAction.RESTAURANT_CREATED,
            user_id=identity.id,
            ip_address=request.remote_addr,
            details={"restaurant_id": restaurant.id, "name": restaurant.name},
        )
        return jsonify(restaurant.to_dict()), 201

    @identity_required
    def update_restaurant(
        self, restaurant_id: int, identity: AuthenticatedIdentity
    ) -> tuple[Response, int]:
        try:
            dto = UpdateRestaurantRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        restaurant = guarded(
            lambda: self._update.execute(identity, restaurant_id, dto.to_domain()),
            audit=self._audit,
            identity=identity,
            resource="restaurant",
            resource_id=restaurant_id,
        )
        self._audit.log(
            AuditAction.RESTAURANT_UPDATED,
            user_id=identity.id,
            ip_address=request.remote_addr,
            details={"restaurant_id": restaurant_id},
        )
        return jsonify(restaurant.to_dict()), 200

    @identity_required
    def delete_restaurant(
        self, restaurant_id: int, identity: AuthenticatedIdentity
    ) -> tuple[Response, int]:
        guarded(
            lambda: self._delete.execute(identity, restaurant_id),
            audit=self._audit,
            identity=identity,
            resource="restaurant",
            resource_id=restaurant_id,
        )
        self._audit.log(
            AuditAction.RESTAURANT_DELETED,
            user_id=identity.id,
            ip_address=request.remote_addr,
            details={"restaurant_id": restaurant_id},
        )
        return Response(status=204), 204

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("restaurants", __name__, url_prefix="/api")
        bp.add_url_rule("/restaurants", view_func=self.list_restaurants, methods=["GET"])
        bp.add_url_rule("/restaurants", view_func=self.create_restaurant, methods=["POST"])
        bp.add_url_rule(
            "/restaurants/<int:restaurant_id>", view_func=self.get_restaurant, methods=["GET"]
        )
        bp.add_url_rule(
            "/restaurants/<int:restaurant_id>",
            view_func=self.update_restaurant,
            methods=["PUT"],
        )
        bp.add_url_rule(
            "/restaurants/<int:restaurant_id>",
            view_func=self.delete_restaurant,
            methods=["DELETE"],
        )
        return bp
