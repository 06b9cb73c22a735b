# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from reviewhub.application.use_cases.reviews import (
    CreateReviewUseCase,
    DeleteReviewUseCase,
    GetReviewUseCase,
    ListReviewsUseCase,
    UpdateReviewUseCase,
)
from reviewhub.domain.users.entities import AuthenticatedIdentity
from reviewhub.infrastructure.audit import AuditAction, AuditLogger
from reviewhub.interfaces.http.auth import SessionAuthenticator, identity_required
from reviewhub.interfaces.http.controllers.restaurants_controller import guarded
from reviewhub.interfaces.http.dto.reviews import ReviewContentDTO
from reviewhub.shared.errors.validation import raise_validation_error


def _content_from_request() -> str:
    try:
        dto = ReviewContentDTO.model_validate(request.get_json(silent=True) or {})
    except ValidationError as exc:
        raise_validation_error(exc)
    return dto.content


class ReviewsController:
    def __init__(
        self,
        *,
        authenticator: SessionAuthenticator,
        create_use_case: CreateReviewUseCase,
        list_use_case: ListReviewsUseCase,
        get_use_case: GetReviewUseCase,
        update_use_case: UpdateReviewUseCase,
        delete_use_case: DeleteReviewUseCase,
        audit: AuditLogger,
    ) -> None:
        self._authenticator = authenticator
        self._audit = audit
        self._create = create_use_case
        self._list = list_use_case
        self._get = get_use_case
        self._update = update_use_case
        self._delete = delete_use_case

    def list_reviews(self, restaurant_id: int) -> tuple[Response, int]:
        reviews = self._list.execute(restaurant_id)
        return jsonify([r.to_dict() for r in reviews]), 200

    def get_review(self, restaurant_id: int, review_id: int) -> tuple[Response, int]:
        return jsonify(self._get.execute(restaurant_id, review_id).to_dict()), 200

    @identity_required
    def create_review(
        self, restaurant_id: int, identity: AuthenticatedIdentity
    ) -> tuple[Response, int]:
        content = _content_from_request()
        review = self._create.execute(identity, restaurant_id, content)
        self._audit.log(
            AuditAction.REVIEW_CREATED,
            user_id=identity.id,
            ip_address=request.remote_addr,
            details={"restaurant_id": restaurant_id, "review_id": review.id},
        )
        return jsonify(review.to_dict()), 201

    @identity_required
    def update_review(
        self, restaurant_id: int, review_id: int, identity: AuthenticatedIdentity
    ) -> tuple[Response, int]:
        content = _content_from_request()
        review = guarded(
            lambda: self._update.execute(identity, restaurant_id, review_id, content),
            audit=self._audit,
            identity=identity,
            resource="review",
            resource_id=review_id,
        )
        self._audit.log(
            AuditAction.REVIEW_UPDATED,
            user_id=identity.id,
            ip_address=request.remote_addr,
            details={"restaurant_id": restaurant_id, "review_id": review_id},
        )
        return jsonify(review.to_dict()), 200

    @identity_required
    def delete_review(
        self, restaurant_id: int, review_id: int, identity: AuthenticatedIdentity
    ) -> tuple[Response, int]:
        guarded(
            lambda: self._delete.execute(identity, restaurant_id, review_id),
            audit=self._audit,
            identity=identity,
            resource="review",
            resource_id=review_id,
        )
        self._audit.log(
            AuditAction.REVIEW_DELETED,
            user_id=identity.id,
            ip_address=request.remote_addr,
            details={"restaurant_id": restaurant_id, "review_id": review_id},
        )
        return Response(status=204), 204

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("reviews", __name__, url_prefix="/api/restaurants/<int:restaurant_id>")
        bp.add_url_rule("/reviews", view_func=self.list_reviews, methods=["GET"])
        bp.add_url_rule("/reviews", view_func=self.create_review, methods=["POST"])
        bp.add_url_rule(
            "/reviews/<int:review_id>", view_func=self.get_review, methods=["GET"]
        )
        bp.add_url_rule(
            "/reviews/<int:review_id>", view_func=self.update_review, methods=["PUT"]
        )
        bp.add_url_rule(
            "/reviews/<int:review_id>", view_func=self.delete_review, methods=["DELETE"]
        )
        return bp
