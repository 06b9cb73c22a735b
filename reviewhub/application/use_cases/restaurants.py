# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from reviewhub.domain.ownership import authorize_mutation
from reviewhub.domain.restaurants.entities import Restaurant, RestaurantDraft, RestaurantPatch
from reviewhub.domain.restaurants.exceptions import RestaurantNotFoundError
from reviewhub.domain.restaurants.repositories import RestaurantRepository
from reviewhub.domain.users.entities import AuthenticatedIdentity
from reviewhub.shared.logging import logger


class CreateRestaurantUseCase:
    def __init__(self, *, restaurants: RestaurantRepository) -> None:
        self._restaurants = restaurants

    def execute(self, identity: AuthenticatedIdentity, draft: RestaurantDraft) -> Restaurant:
        # the creator becomes the owner; no guard needed
        restaurant = self._restaurants.add(draft, identity.id)
        logger.info(f"restaurants.create: id={restaurant.id} owner_id={identity.id}")
        return restaurant


class ListRestaurantsUseCase:
    def __init__(self, *, restaurants: RestaurantRepository) -> None:
        self._restaurants = restaurants

    def execute(self, name: str | None = None) -> Sequence[Restaurant]:
        return self._restaurants.list(name=name)


class GetRestaurantUseCase:
    def __init__(self, *, restaurants: RestaurantRepository) -> None:
        self._restaurants = restaurants

    def execute(self, restaurant_id: int) -> Restaurant:
        restaurant = self._restaurants.find_by_id(restaurant_id)
        if restaurant is None:
            raise RestaurantNotFoundError(restaurant_id)
        return restaurant


class UpdateRestaurantUseCase:
    def __init__(self, *, restaurants: RestaurantRepository) -> None:
        self._restaurants = restaurants

    def execute(
        self,
        identity: AuthenticatedIdentity,
        restaurant_id: int,
        patch: RestaurantPatch,
    ) -> Restaurant:
        current = self._restaurants.find_by_id(restaurant_id)
        if current is None:
            raise RestaurantNotFoundError(restaurant_id)
        authorize_mutation(identity.id, current)

        if patch.is_empty():
            return current

        updated = self._restaurants.update(restaurant_id, patch)
        if updated is None:
            # deleted between the read and the write
            raise RestaurantNotFoundError(restaurant_id)
        logger.info(f"restaurants.update: id={restaurant_id} by user_id={identity.id}")
        return updated


class DeleteRestaurantUseCase:
    """Delete a restaurant together with every review that references it."""

    def __init__(self, *, restaurants: RestaurantRepository) -> None:
        self._restaurants = restaurants

    def execute(self, identity: AuthenticatedIdentity, restaurant_id: int) -> None:
        restaurant = self._restaurants.find_by_id(restaurant_id)
        if restaurant is None:
            raise RestaurantNotFoundError(restaurant_id)
        authorize_mutation(identity.id, restaurant)

        removed = self._restaurants.delete_with_reviews(restaurant_id)
        if removed is None:
            raise RestaurantNotFoundError(restaurant_id)
        logger.info(
            f"restaurants.delete: id={restaurant_id} by user_id={identity.id} "
            f"reviews_removed={removed}"
        )
