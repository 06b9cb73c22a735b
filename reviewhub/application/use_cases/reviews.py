# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from reviewhub.domain.ownership import authorize_mutation
from reviewhub.domain.restaurants.exceptions import RestaurantNotFoundError
from reviewhub.domain.restaurants.repositories import RestaurantRepository
from reviewhub.domain.reviews.entities import Review
from reviewhub.domain.reviews.exceptions import ReviewNotFoundError
from reviewhub.domain.reviews.repositories import ReviewRepository
from reviewhub.domain.users.entities import AuthenticatedIdentity
from reviewhub.shared.logging import logger


class _ReviewLookup:
    def __init__(self, *, reviews: ReviewRepository) -> None:
        self._reviews = reviews

    def _load(self, restaurant_id: int, review_id: int) -> Review:
        review = self._reviews.find_by_id(review_id)
        # a review addressed through the wrong restaurant does not exist there
        if review is None or review.restaurant_id != restaurant_id:
            raise ReviewNotFoundError(review_id)
        return review


class CreateReviewUseCase:
    def __init__(
        self,
        *,
        reviews: ReviewRepository,
        restaurants: RestaurantRepository,
    ) -> None:
        self._reviews = reviews
        self._restaurants = restaurants

    def execute(
        self,
        identity: AuthenticatedIdentity,
        restaurant_id: int,
        content: str,
    ) -> Review:
        if self._restaurants.find_by_id(restaurant_id) is None:
            raise RestaurantNotFoundError(restaurant_id)
        review = self._reviews.add(identity.id, restaurant_id, content)
        logger.info(
            f"reviews.create: id={review.id} restaurant_id={restaurant_id} "
            f"author_id={identity.id}"
        )
        return review


class ListReviewsUseCase:
    def __init__(self, *, reviews: ReviewRepository) -> None:
        self._reviews = reviews

    def execute(self, restaurant_id: int) -> Sequence[Review]:
        return self._reviews.list_for_restaurant(restaurant_id)


class GetReviewUseCase(_ReviewLookup):
    def execute(self, restaurant_id: int, review_id: int) -> Review:
        return self._load(restaurant_id, review_id)


class UpdateReviewUseCase(_ReviewLookup):
    def execute(
        self,
        identity: AuthenticatedIdentity,
        restaurant_id: int,
        review_id: int,
        content: str,
    ) -> Review:
        review = self._load(restaurant_id, review_id)
        authorize_mutation(identity.id, review)

        updated = self._reviews.update(review_id, content)
        if updated is None:
            raise ReviewNotFoundError(review_id)
        logger.info(f"reviews.update: id={review_id} by user_id={identity.id}")
        return updated


class DeleteReviewUseCase(_ReviewLookup):
    def execute(self, identity: AuthenticatedIdentity, restaurant_id: int, review_id: int) -> None:
        review = self._load(restaurant_id, review_id)
        authorize_mutation(identity.id, review)

        if not self._reviews.delete(review_id):
            raise ReviewNotFoundError(review_id)
        logger.info(f"reviews.delete: id={review_id} by user_id={identity.id}")
