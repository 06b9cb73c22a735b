from __future__ import annotations

import pytest
from fakes import InMemoryRestaurantRepository, InMemoryReviewRepository

from reviewhub.application.use_cases.reviews import (
    CreateReviewUseCase,
    DeleteReviewUseCase,
    GetReviewUseCase,
    ListReviewsUseCase,
    UpdateReviewUseCase,
)
from reviewhub.domain.exceptions import NotOwnerError
from reviewhub.domain.restaurants.entities import Location, RestaurantDraft
from reviewhub.domain.restaurants.exceptions import RestaurantNotFoundError
from reviewhub.domain.reviews.exceptions import ReviewNotFoundError
from reviewhub.domain.users.entities import AuthenticatedIdentity

ALICE = AuthenticatedIdentity(id=1, username="alice")
BOB = AuthenticatedIdentity(id=2, username="bob")


@pytest.fixture()
def restaurant_id(restaurants: InMemoryRestaurantRepository) -> int:
    draft = RestaurantDraft(
        name="Chez Alice",
        description="bistro",
        location=Location(latitude=0.0, longitude=0.0),
        image_url="https://img.example/a.png",
    )
    return restaurants.add(draft, ALICE.id).id


def test_create_and_list_reviews(
    reviews: InMemoryReviewRepository,
    restaurants: InMemoryRestaurantRepository,
    restaurant_id: int,
) -> None:
    create = CreateReviewUseCase(reviews=reviews, restaurants=restaurants)
    first = create.execute(BOB, restaurant_id, "good")
    create.execute(ALICE, restaurant_id, "my own place")

    listed = ListReviewsUseCase(reviews=reviews).execute(restaurant_id)

    assert first.author_id == BOB.id
    assert [r.content for r in listed] == ["good", "my own place"]


def test_create_review_for_missing_restaurant(
    reviews: InMemoryReviewRepository, restaurants: InMemoryRestaurantRepository
) -> None:
    with pytest.raises(RestaurantNotFoundError):
        CreateReviewUseCase(reviews=reviews, restaurants=restaurants).execute(BOB, 404, "x")


def test_review_addressed_through_other_restaurant_is_not_found(
    reviews: InMemoryReviewRepository, restaurant_id: int
) -> None:
    review = reviews.add(BOB.id, restaurant_id, "good")

    with pytest.raises(ReviewNotFoundError):
        GetReviewUseCase(reviews=reviews).execute(restaurant_id + 1, review.id)


def test_author_updates_review(reviews: InMemoryReviewRepository, restaurant_id: int) -> None:
    review = reviews.add(BOB.id, restaurant_id, "good")

    updated = UpdateReviewUseCase(reviews=reviews).execute(
        BOB, restaurant_id, review.id, "great"
    )

    assert updated.content == "great"


def test_restaurant_owner_cannot_edit_someone_elses_review(
    reviews: InMemoryReviewRepository, restaurant_id: int
) -> None:
    review = reviews.add(BOB.id, restaurant_id, "good")

    with pytest.raises(NotOwnerError):
        UpdateReviewUseCase(reviews=reviews).execute(ALICE, restaurant_id, review.id, "bad")
    with pytest.raises(NotOwnerError):
        DeleteReviewUseCase(reviews=reviews).execute(ALICE, restaurant_id, review.id)
    assert reviews.find_by_id(review.id) == review


def test_author_deletes_review(reviews: InMemoryReviewRepository, restaurant_id: int) -> None:
    review = reviews.add(BOB.id, restaurant_id, "good")

    DeleteReviewUseCase(reviews=reviews).execute(BOB, restaurant_id, review.id)

    assert reviews.find_by_id(review.id) is None
