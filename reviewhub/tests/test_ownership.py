from __future__ import annotations

import pytest

from reviewhub.domain import Location, Restaurant, Review, authorize_mutation, is_owner
from reviewhub.domain.exceptions import NotOwnerError
from reviewhub.shared.errors import ErrorKind


def _restaurant(owner_id: int) -> Restaurant:
    return Restaurant(
        id=1,
        owner_id=owner_id,
        name="Chez Alice",
        description="bistro",
        location=Location(latitude=48.85, longitude=2.35),
        image_url="https://img.example/alice.png",
    )


def test_owner_may_mutate() -> None:
    authorize_mutation(7, _restaurant(owner_id=7))


def test_non_owner_is_refused() -> None:
    with pytest.raises(NotOwnerError) as exc_info:
        authorize_mutation(8, _restaurant(owner_id=7))

    assert exc_info.value.kind is ErrorKind.NOT_OWNER
    assert exc_info.value.status == 403
    # the refusal never names the real owner
    assert exc_info.value.context is None


def test_review_ownership_follows_author() -> None:
    review = Review(id=3, author_id=9, restaurant_id=1, content="great")

    assert is_owner(9, review)
    assert not is_owner(7, review)
