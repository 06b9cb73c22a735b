# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from reviewhub.shared.errors.base import DomainError


class RestaurantNotFoundError(DomainError):
    code = "restaurant_not_found"
    status = HTTPStatus.NOT_FOUND

    def __init__(self, restaurant_id: int) -> None:
        super().__init__(context={"restaurant_id": restaurant_id})


class RestaurantNameTakenError(DomainError):
    code = "restaurant_name_taken"
    status = HTTPStatus.CONFLICT
