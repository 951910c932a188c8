# =============================================================================
# Advocate Repository — paged search and bulk insert over the advocates table
# =============================================================================
#
# Binds the fixed search field set to the Advocate model and wires the
# search chain:
#
#   search_term → parse_search_term() → compile_query() → fetch_page()
#
# Capabilities are checked once, at construction: the session factory must
# be bound to an engine whose dialect supports INSERT ... RETURNING, and
# every search field must be a column of the model. Anything the database
# raises later propagates to the caller unchanged.
# =============================================================================

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from sqlalchemy import ColumnElement, insert, inspect
from sqlalchemy.orm import Session, sessionmaker

from advocate_directory.db.engine import get_session_factory, get_sync_session
from advocate_directory.db.models import Advocate
from advocate_directory.errors import MissingCapabilityError
from advocate_directory.services.pagination import PageResult, fetch_page
from advocate_directory.services.predicates import compile_query
from advocate_directory.services.search_query import MATCH_ALL, parse_search_term

logger = logging.getLogger(__name__)

# Attributes eligible for text matching, in match order.
# `specialties` is multi-valued and is matched on its text form.
ADVOCATE_SEARCH_FIELDS: tuple[str, ...] = (
    "first_name",
    "last_name",
    "city",
    "degree",
    "specialties",
)


class AdvocateRepository:
    """
    Paged, filtered reads and bulk writes for advocates.

    Usage:
        repo = AdvocateRepository()
        result = repo.get_all(page=1, page_size=10, search_term="CBT AND Depression")
        result.data, result.total
    """

    model = Advocate
    search_fields: tuple[str, ...] = ADVOCATE_SEARCH_FIELDS

    def __init__(
        self,
        session_factory: sessionmaker[Session] | None = None,
        order_by: Sequence[Any] | None = None,
    ) -> None:
        self._session_factory = session_factory or get_session_factory()
        self._order_by = tuple(order_by) if order_by else None
        self._check_capabilities()
        self._columns = self._resolve_columns()

    # ------------------------------------------------------------------
    # Construction checks
    # ------------------------------------------------------------------

    def _check_capabilities(self) -> None:
        if not callable(self._session_factory):
            raise MissingCapabilityError(
                "Session factory is not callable; cannot open sessions.",
            )

        bind = getattr(self._session_factory, "kw", {}).get("bind")
        if bind is None:
            raise MissingCapabilityError(
                "Session factory is not bound to an engine.",
            )

        dialect = getattr(bind, "dialect", None)
        if not getattr(dialect, "insert_returning", False):
            raise MissingCapabilityError(
                f"Database dialect {getattr(dialect, 'name', '?')!r} does not "
                "support INSERT ... RETURNING.",
            )

        column_names = set(inspect(self.model).columns.keys())
        missing = [name for name in self.search_fields if name not in column_names]
        if missing:
            raise MissingCapabilityError(
                f"{self.model.__name__} has no column(s) for search "
                f"field(s): {', '.join(missing)}",
            )

    def _resolve_columns(self) -> list[ColumnElement]:
        columns = inspect(self.model).columns
        return [columns[name] for name in self.search_fields]

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_all(
        self,
        page: int,
        page_size: int,
        search_term: str | None = None,
    ) -> PageResult[Advocate]:
        """
        Return one page of advocates matching `search_term`, plus the total.

        Without a search term every advocate matches. `page` and `page_size`
        are assumed to be positive integers (checked by the API layer).

        Raises:
            sqlalchemy.exc.SQLAlchemyError: database failure, unchanged.
        """
        query = parse_search_term(search_term) if search_term else MATCH_ALL
        logger.debug("Search term %r parsed as %r", search_term, query)

        predicate = compile_query(query, self._columns)
        result = fetch_page(
            self.model,
            predicate,
            page=page,
            page_size=page_size,
            session_factory=self._session_factory,
            order_by=self._order_by,
        )

        logger.info(
            "Advocate search: term=%r page=%d page_size=%d -> %d rows, total=%d",
            search_term, page, page_size, len(result.data), result.total,
        )
        return result

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def bulk_insert(
        self,
        records: Sequence[Mapping[str, Any]],
    ) -> list[Advocate]:
        """
        Insert `records` in one statement and return the stored rows.

        The returned advocates include database-assigned fields (`id`,
        `created_at`). No validation or de-duplication happens here.

        Raises:
            sqlalchemy.exc.SQLAlchemyError: constraint or connection
                failure, unchanged. Nothing is inserted in that case.
        """
        rows = [dict(record) for record in records]
        if not rows:
            return []

        with get_sync_session(self._session_factory) as session:
            inserted = list(
                session.scalars(insert(self.model).returning(self.model), rows)
            )

        logger.info("Inserted %d advocate(s)", len(inserted))
        return inserted
