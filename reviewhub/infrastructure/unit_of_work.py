# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Database unit of work implementation."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass, field

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from reviewhub.shared.errors import InfrastructureError
from reviewhub.shared.logging import logger


class StoreUnavailableError(InfrastructureError):
    def __init__(self) -> None:
        super().__init__(code="store_unavailable")


@dataclass
class SqlAlchemyUnitOfWork(AbstractContextManager):
    """One session, committed on clean exit and rolled back otherwise."""

    session_factory: Callable[[], Session]
    _session: Session | None = field(default=None, init=False, repr=False)

    def __enter__(self) -> SqlAlchemyUnitOfWork:
        self._session = self.session_factory()
        logger.debug("uow: session opened")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        assert self._session is not None
        try:
            if exc:
                logger.debug(f"uow: rollback due to {exc_type.__name__}")
                self._session.rollback()
            else:
                self._session.commit()
                logger.debug("uow: committed")
        except Exception:
            logger.exception("uow: exception while finalising")
            self._session.rollback()
            raise
        finally:
            self._session.close()
            logger.debug("uow: session closed")
            self._session = None

    @property
    def session(self) -> Session:
        if self._session is None:
            msg = "UnitOfWork session accessed before entering context"
            raise RuntimeError(msg)
        return self._session


@contextmanager
def unit_of_work_scope(factory: Callable[[], Session]) -> Iterator[Session]:
    """Yield a transactional session; driver failures surface as StoreUnavailableError.

    IntegrityError passes through untouched so repositories can map
    constraint violations onto domain errors.
    """
    try:
        with SqlAlchemyUnitOfWork(factory) as uow:
            yield uow.session
    except IntegrityError:
        raise
    except SQLAlchemyError as exc:
        logger.exception("uow: store failure")
        raise StoreUnavailableError() from exc
