from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from reviewhub.infrastructure.unit_of_work import StoreUnavailableError, unit_of_work_scope


def test_clean_exit_commits() -> None:
    session = MagicMock()

    with unit_of_work_scope(lambda: session) as active:
        assert active is session

    session.commit.assert_called_once()
    session.close.assert_called_once()


def test_driver_failure_becomes_store_unavailable() -> None:
    session = MagicMock()

    with pytest.raises(StoreUnavailableError):
        with unit_of_work_scope(lambda: session):
            raise OperationalError("SELECT 1", {}, Exception("disk I/O error"))

    session.rollback.assert_called_once()
    session.commit.assert_not_called()


def test_integrity_error_passes_through() -> None:
    session = MagicMock()

    with pytest.raises(IntegrityError):
        with unit_of_work_scope(lambda: session):
            raise IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))
