# =============================================================================
# Paginated Query Executor — one page of rows plus the total match count
# =============================================================================
#
# A single statement returns both the page and the total:
#
#   SELECT advocates.*, count(*) OVER () AS total
#   FROM advocates
#   WHERE <predicate>
#   LIMIT :page_size OFFSET :offset
#
# The window aggregate is evaluated over the whole filtered set before
# LIMIT/OFFSET apply, so every returned row carries the full match count.
#
# When the page lies past the last match no row comes back to carry the
# count; only then is a plain `SELECT count(*)` issued with the same
# predicate, so `total` never depends on `page`.
#
# No ORDER BY is added unless the caller supplies one. Without it the row
# order is whatever the database yields and must not be relied upon.
# =============================================================================

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.orm import Session, sessionmaker

from advocate_directory.db.engine import get_sync_session

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class PageResult(Generic[T]):
    """One page of matching records and the size of the full matching set."""

    data: list[T] = field(default_factory=list)
    total: int = 0


def page_offset(page: int, page_size: int) -> int:
    """Rows to skip for a 1-based page number."""
    return (page - 1) * page_size


def fetch_page(
    model: type[T],
    predicate: ColumnElement[bool],
    page: int,
    page_size: int,
    session_factory: sessionmaker[Session] | None = None,
    order_by: Sequence[Any] | None = None,
) -> PageResult[T]:
    """
    Fetch one page of `model` rows matching `predicate`, plus the total.

    Args:
        model: ORM class to select.
        predicate: Compiled WHERE clause.
        page: 1-based page number (validated upstream).
        page_size: Maximum rows to return (validated upstream).
        session_factory: Where to check a session out. Defaults to the
            shared pool.
        order_by: Optional ordering, e.g. a tie-break on the primary key.

    Raises:
        sqlalchemy.exc.SQLAlchemyError: propagated unchanged from the driver.
    """
    offset = page_offset(page, page_size)

    stmt = (
        select(model, func.count().over().label("total"))
        .where(predicate)
        .limit(page_size)
        .offset(offset)
    )
    if order_by:
        stmt = stmt.order_by(*order_by)

    with get_sync_session(session_factory) as session:
        rows = session.execute(stmt).all()

        if rows:
            total = rows[0].total
        elif offset > 0:
            count_stmt = select(func.count()).select_from(model).where(predicate)
            total = session.scalar(count_stmt)
        else:
            total = 0

    logger.debug(
        "Fetched page=%d page_size=%d: %d rows of %s total",
        page, page_size, len(rows), total,
    )

    return PageResult(data=[row[0] for row in rows], total=int(total or 0))
