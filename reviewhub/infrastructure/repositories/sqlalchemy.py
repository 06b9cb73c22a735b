# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from reviewhub.domain.restaurants.entities import (
    Location,
    Restaurant as DomainRestaurant,
    RestaurantDraft,
    RestaurantPatch,
)
from reviewhub.domain.restaurants.exceptions import (
    RestaurantNameTakenError,
    RestaurantNotFoundError,
)
from reviewhub.domain.restaurants.repositories import RestaurantRepository
from reviewhub.domain.reviews.entities import Review as DomainReview
from reviewhub.domain.reviews.repositories import ReviewRepository
from reviewhub.infrastructure.db.models import Restaurant, Review
from reviewhub.infrastructure.unit_of_work import unit_of_work_scope


def _restaurant_to_domain(row: Restaurant) -> DomainRestaurant:
    return DomainRestaurant(
        id=row.id,
        owner_id=row.owner_id,
        name=row.name,
        description=row.description,
        location=Location(latitude=row.latitude, longitude=row.longitude),
        image_url=row.image_url,
    )


def _review_to_domain(row: Review) -> DomainReview:
    return DomainReview(
        id=row.id,
        author_id=row.author_id,
        restaurant_id=row.restaurant_id,
        content=row.content,
    )


class SqlAlchemyRestaurantRepository(RestaurantRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_id(self, restaurant_id: int) -> DomainRestaurant | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Restaurant, restaurant_id)
            return _restaurant_to_domain(row) if row else None

    def list(self, name: str | None = None) -> Sequence[DomainRestaurant]:
        with unit_of_work_scope(self._session_factory) as session:
            stmt = select(Restaurant).order_by(Restaurant.id.asc())
            if name is not None:
                stmt = stmt.where(Restaurant.name == name)
            rows = session.scalars(stmt).all()
            return [_restaurant_to_domain(row) for row in rows]

    def add(self, draft: RestaurantDraft, owner_id: int) -> DomainRestaurant:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = Restaurant(
                    owner_id=owner_id,
                    name=draft.name,
                    description=draft.description,
                    latitude=draft.location.latitude,
                    longitude=draft.location.longitude,
                    image_url=draft.image_url,
                )
                session.add(row)
                session.flush()
                return _restaurant_to_domain(row)
        except IntegrityError as exc:
            raise RestaurantNameTakenError() from exc

    def update(self, restaurant_id: int, patch: RestaurantPatch) -> DomainRestaurant | None:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = session.get(Restaurant, restaurant_id)
                if row is None:
                    return None
                if patch.name is not None:
                    row.name = patch.name
                if patch.description is not None:
                    row.description = patch.description
                if patch.location is not None:
                    row.latitude = patch.location.latitude
                    row.longitude = patch.location.longitude
                if patch.image_url is not None:
                    row.image_url = patch.image_url
                session.flush()
                return _restaurant_to_domain(row)
        except IntegrityError as exc:
            raise RestaurantNameTakenError() from exc

    def delete_with_reviews(self, restaurant_id: int) -> int | None:
        with unit_of_work_scope(self._session_factory) as session:
            removed = session.execute(
                delete(Review).where(Review.restaurant_id == restaurant_id)
            ).rowcount
            result = session.execute(delete(Restaurant).where(Restaurant.id == restaurant_id))
            if not result.rowcount:
                return None
            return removed or 0


class SqlAlchemyReviewRepository(ReviewRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_id(self, review_id: int) -> DomainReview | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Review, review_id)
            return _review_to_domain(row) if row else None

    def list_for_restaurant(self, restaurant_id: int) -> Sequence[DomainReview]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = session.scalars(
                select(Review)
                .where(Review.restaurant_id == restaurant_id)
                .order_by(Review.id.asc())
            ).all()
            return [_review_to_domain(row) for row in rows]

    def add(self, author_id: int, restaurant_id: int, content: str) -> DomainReview:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = Review(author_id=author_id, restaurant_id=restaurant_id, content=content)
                session.add(row)
                session.flush()
                return _review_to_domain(row)
        except IntegrityError as exc:
            # restaurant removed after the existence check
            raise RestaurantNotFoundError(restaurant_id) from exc

    def update(self, review_id: int, content: str) -> DomainReview | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Review, review_id)
            if row is None:
                return None
            row.content = content
            session.flush()
            return _review_to_domain(row)

    def delete(self, review_id: int) -> bool:
        with unit_of_work_scope(self._session_factory) as session:
            result = session.execute(delete(Review).where(Review.id == review_id))
            return (result.rowcount or 0) > 0
