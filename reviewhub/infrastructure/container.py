# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import timedelta
from functools import cached_property

from sqlalchemy.orm import Session

from reviewhub.application.services.password_hashing import WerkzeugPasswordHasher
from reviewhub.application.services.session_tokens import JwtSessionTokenService
from reviewhub.application.use_cases.restaurants import (
    CreateRestaurantUseCase,
    DeleteRestaurantUseCase,
    GetRestaurantUseCase,
    ListRestaurantsUseCase,
    UpdateRestaurantUseCase,
)
from reviewhub.application.use_cases.reviews import (
    CreateReviewUseCase,
    DeleteReviewUseCase,
    GetReviewUseCase,
    ListReviewsUseCase,
    UpdateReviewUseCase,
)
from reviewhub.application.use_cases.users.login_user import LoginUserUseCase
from reviewhub.application.use_cases.users.register_user import RegisterUserUseCase
from reviewhub.application.use_cases.users.verify_session import VerifySessionUseCase
from reviewhub.infrastructure.audit import AuditLogger
from reviewhub.infrastructure.db import SessionLocal
from reviewhub.infrastructure.repositories.sqlalchemy import (
    SqlAlchemyRestaurantRepository,
    SqlAlchemyReviewRepository,
)
from reviewhub.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from reviewhub.interfaces.http.auth import SessionAuthenticator
from reviewhub.interfaces.http.controllers.auth_controller import AuthController
from reviewhub.interfaces.http.controllers.restaurants_controller import (
    RestaurantsController,
)
from reviewhub.interfaces.http.controllers.reviews_controller import ReviewsController
from reviewhub.shared.config import AppConfig, load_config


class Container:
    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        session_factory: Callable[[], Session] = SessionLocal,
    ) -> None:
        self._config = config or load_config()
        self._session_factory = session_factory

    @property
    def config(self) -> AppConfig:
        return self._config

    # Credentials and sessions

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(self._config.auth.password_hash_cost)

    @cached_property
    def session_tokens(self) -> JwtSessionTokenService:
        auth = self._config.auth
        return JwtSessionTokenService(
            auth.jwt_secret,
            ttl=timedelta(seconds=auth.session_ttl_seconds),
            algorithm=auth.jwt_algorithm,
        )

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self._session_factory)

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            tokens=self.session_tokens,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.session_tokens,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def verify_session_use_case(self) -> VerifySessionUseCase:
        return VerifySessionUseCase(users=self.user_repository, tokens=self.session_tokens)

    @cached_property
    def authenticator(self) -> SessionAuthenticator:
        return SessionAuthenticator(verify_session=self.verify_session_use_case)

    @cached_property
    def audit_logger(self) -> AuditLogger:
        return AuditLogger(self._session_factory)

    # Resources

    @cached_property
    def restaurant_repository(self) -> SqlAlchemyRestaurantRepository:
        return SqlAlchemyRestaurantRepository(self._session_factory)

    @cached_property
    def review_repository(self) -> SqlAlchemyReviewRepository:
        return SqlAlchemyReviewRepository(self._session_factory)

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            authenticator=self.authenticator,
            audit=self.audit_logger,
        )

    @cached_property
    def restaurants_controller(self) -> RestaurantsController:
        restaurants = self.restaurant_repository
        return RestaurantsController(
            authenticator=self.authenticator,
            create_use_case=CreateRestaurantUseCase(restaurants=restaurants),
            list_use_case=ListRestaurantsUseCase(restaurants=restaurants),
            get_use_case=GetRestaurantUseCase(restaurants=restaurants),
            update_use_case=UpdateRestaurantUseCase(restaurants=restaurants),
            delete_use_case=DeleteRestaurantUseCase(restaurants=restaurants),
            audit=self.audit_logger,
        )

    @cached_property
    def reviews_controller(self) -> ReviewsController:
        reviews = self.review_repository
        return ReviewsController(
            authenticator=self.authenticator,
            create_use_case=CreateReviewUseCase(
                reviews=reviews,
                restaurants=self.restaurant_repository,
            ),
            list_use_case=ListReviewsUseCase(reviews=reviews),
            get_use_case=GetReviewUseCase(reviews=reviews),
            update_use_case=UpdateReviewUseCase(reviews=reviews),
            delete_use_case=DeleteReviewUseCase(reviews=reviews),
            audit=self.audit_logger,
        )


__all__ = ["Container"]
