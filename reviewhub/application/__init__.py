# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.restaurants import (
    CreateRestaurantUseCase,
    DeleteRestaurantUseCase,
    GetRestaurantUseCase,
    ListRestaurantsUseCase,
    UpdateRestaurantUseCase,
)
from .use_cases.reviews import (
    CreateReviewUseCase,
    DeleteReviewUseCase,
    GetReviewUseCase,
    ListReviewsUseCase,
    UpdateReviewUseCase,
)
from .use_cases.users.login_user import LoginUserUseCase
from .use_cases.users.register_user import RegisterUserUseCase
from .use_cases.users.verify_session import VerifySessionUseCase

__all__ = [
    "CreateRestaurantUseCase",
    "CreateReviewUseCase",
    "DeleteRestaurantUseCase",
    "DeleteReviewUseCase",
    "GetRestaurantUseCase",
    "GetReviewUseCase",
    "ListRestaurantsUseCase",
    "ListReviewsUseCase",
    "LoginUserUseCase",
    "RegisterUserUseCase",
    "UpdateRestaurantUseCase",
    "UpdateReviewUseCase",
    "VerifySessionUseCase",
]
