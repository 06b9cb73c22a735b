# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from reviewhub.shared.errors.base import DomainError


class ReviewNotFoundError(DomainError):
    code = "review_not_found"
    status = HTTPStatus.NOT_FOUND

    def __init__(self, review_id: int) -> None:
        super().__init__(context={"review_id": review_id})
