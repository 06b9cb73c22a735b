from __future__ import annotations

import pytest
from fakes import InMemoryRestaurantRepository, InMemoryReviewRepository

from reviewhub.application.use_cases.restaurants import (
    CreateRestaurantUseCase,
    DeleteRestaurantUseCase,
    GetRestaurantUseCase,
    ListRestaurantsUseCase,
    UpdateRestaurantUseCase,
)
from reviewhub.domain.exceptions import InvariantViolationError, NotOwnerError
from reviewhub.domain.restaurants.entities import Location, RestaurantDraft, RestaurantPatch
from reviewhub.domain.restaurants.exceptions import (
    RestaurantNameTakenError,
    RestaurantNotFoundError,
)
from reviewhub.domain.users.entities import AuthenticatedIdentity

ALICE = AuthenticatedIdentity(id=1, username="alice")
BOB = AuthenticatedIdentity(id=2, username="bob")


def _draft(name: str = "Chez Alice") -> RestaurantDraft:
    return RestaurantDraft(
        name=name,
        description="bistro",
        location=Location(latitude=48.85, longitude=2.35),
        image_url="https://img.example/a.png",
    )


def test_creator_becomes_owner(restaurants: InMemoryRestaurantRepository) -> None:
    restaurant = CreateRestaurantUseCase(restaurants=restaurants).execute(ALICE, _draft())

    assert restaurant.owner_id == ALICE.id
    assert GetRestaurantUseCase(restaurants=restaurants).execute(restaurant.id) == restaurant


def test_duplicate_name_conflicts(restaurants: InMemoryRestaurantRepository) -> None:
    create = CreateRestaurantUseCase(restaurants=restaurants)
    create.execute(ALICE, _draft())

    with pytest.raises(RestaurantNameTakenError):
        create.execute(BOB, _draft())


def test_list_filters_by_exact_name(restaurants: InMemoryRestaurantRepository) -> None:
    create = CreateRestaurantUseCase(restaurants=restaurants)
    create.execute(ALICE, _draft("One"))
    create.execute(ALICE, _draft("Two"))
    listing = ListRestaurantsUseCase(restaurants=restaurants)

    assert [r.name for r in listing.execute()] == ["One", "Two"]
    assert [r.name for r in listing.execute(name="Two")] == ["Two"]
    assert listing.execute(name="two") == []


def test_get_missing_restaurant(restaurants: InMemoryRestaurantRepository) -> None:
    with pytest.raises(RestaurantNotFoundError):
        GetRestaurantUseCase(restaurants=restaurants).execute(99)


def test_owner_updates_restaurant(restaurants: InMemoryRestaurantRepository) -> None:
    created = CreateRestaurantUseCase(restaurants=restaurants).execute(ALICE, _draft())

    updated = UpdateRestaurantUseCase(restaurants=restaurants).execute(
        ALICE, created.id, RestaurantPatch(description="now with terrace")
    )

    assert updated.description == "now with terrace"
    assert updated.name == created.name
    assert updated.owner_id == ALICE.id


def test_non_owner_update_is_refused(restaurants: InMemoryRestaurantRepository) -> None:
    created = CreateRestaurantUseCase(restaurants=restaurants).execute(ALICE, _draft())

    with pytest.raises(NotOwnerError):
        UpdateRestaurantUseCase(restaurants=restaurants).execute(
            BOB, created.id, RestaurantPatch(name="Chez Bob")
        )
    assert restaurants.find_by_id(created.id).name == "Chez Alice"


def test_update_missing_restaurant(restaurants: InMemoryRestaurantRepository) -> None:
    with pytest.raises(RestaurantNotFoundError):
        UpdateRestaurantUseCase(restaurants=restaurants).execute(
            ALICE, 42, RestaurantPatch(name="x")
        )


def test_delete_cascades_to_reviews(
    restaurants: InMemoryRestaurantRepository, reviews: InMemoryReviewRepository
) -> None:
    create = CreateRestaurantUseCase(restaurants=restaurants)
    doomed = create.execute(ALICE, _draft("Doomed"))
    kept = create.execute(ALICE, _draft("Kept"))
    reviews.add(BOB.id, doomed.id, "meh")
    reviews.add(ALICE.id, doomed.id, "mine")
    survivor = reviews.add(BOB.id, kept.id, "fine")

    DeleteRestaurantUseCase(restaurants=restaurants).execute(ALICE, doomed.id)

    assert restaurants.find_by_id(doomed.id) is None
    assert reviews.list_for_restaurant(doomed.id) == []
    assert reviews.find_by_id(survivor.id) == survivor


def test_non_owner_delete_leaves_everything(
    restaurants: InMemoryRestaurantRepository, reviews: InMemoryReviewRepository
) -> None:
    created = CreateRestaurantUseCase(restaurants=restaurants).execute(ALICE, _draft())
    review = reviews.add(BOB.id, created.id, "nice")

    with pytest.raises(NotOwnerError):
        DeleteRestaurantUseCase(restaurants=restaurants).execute(BOB, created.id)

    assert restaurants.find_by_id(created.id) is not None
    assert reviews.find_by_id(review.id) == review


def test_location_out_of_range_is_rejected() -> None:
    with pytest.raises(InvariantViolationError):
        Location(latitude=91.0, longitude=0.0)
