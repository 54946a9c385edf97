# vikfit/repositories/base.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from vikfit.errors import PersistenceError

T = TypeVar("T")  # SQLAlchemy model type
R = TypeVar("R")

log = logging.getLogger("vikfit.repositories")

@dataclass(slots=True)
class Page(Generic[T]):
    items: list[T]
    total: int
    limit: int
    offset: int

class BaseRepository(Generic[T]):
    """Lightweight base for repositories using SQLAlchemy 2.0 style.

    Reads and writes fail differently on purpose:

    * ``soft_read`` turns a store failure into a default value (0, [], set())
      and logs a ``degraded_read`` warning so a zero caused by a failure can
      be told apart from a real zero.
    * ``write`` rolls back and raises ``PersistenceError``.
    """
    model: type[T]

    def __init__(self, db: Session):
        self.db = db

    def page_from_stmt(self, stmt, *, limit: int = 50, offset: int = 0) -> Page[T]:
        # one query for items and one for count
        items = list(self.db.execute(stmt.limit(limit).offset(offset)).scalars().all())
        total = self.db.execute(
            select(func.count()).select_from(stmt.order_by(None).subquery())
        ).scalar_one()
        return Page(items=items, total=total, limit=limit, offset=offset)

    def add_and_refresh(self, entity: T) -> T:
        self.db.add(entity)
        self.db.flush()
        self.db.refresh(entity)
        return entity

    def soft_read(
        self,
        op: str,
        query: Callable[..., R],
        *args: Any,
        default: Callable[[], R],
        strict: bool = False,
    ) -> R:
        try:
            return query(*args)
        except SQLAlchemyError as exc:
            self.db.rollback()
            if strict:
                raise PersistenceError(op) from exc
            log.warning(
                "degraded_read op=%s args=%r: store failure, returning default",
                op, args, exc_info=True,
                extra={"degraded_read": True, "op": op},
            )
            return default()

    def write(self, op: str, work: Callable[[], R], *, conflict: str | None = None) -> R:
        """Run ``work`` and commit as one transaction; roll back on failure.

        With ``conflict`` set, an integrity violation is re-raised as
        ``ValueError(conflict)`` so a router can map it to a 4xx.
        """
        try:
            result = work()
            self.db.commit()
            return result
        except IntegrityError as exc:
            self.db.rollback()
            if conflict is None:
                log.error("write failed op=%s", op, exc_info=True)
                raise PersistenceError(op) from exc
            raise ValueError(conflict) from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            log.error("write failed op=%s", op, exc_info=True)
            raise PersistenceError(op) from exc
