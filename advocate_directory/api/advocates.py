# =============================================================================
# Advocates API — Paged Search Endpoint
# =============================================================================
#
# GET /advocates?page=1&pageSize=10&searchTerm=CBT AND Depression
#
# FLOW:
#   1. Read page / pageSize / searchTerm from the query string
#   2. Reject a non-integer or non-positive page or pageSize with 400
#   3. Run the repository search (parse → compile → fetch page + total)
#   4. Wrap rows and total in the paging envelope
#
# Search-term syntax errors do not exist: every string is a valid query.
# Failures reach the client as {"error": ...} bodies (400 and 503 alike).
# =============================================================================

from __future__ import annotations

import logging
import math

from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import SQLAlchemyError

from advocate_directory.api.deps import error_response, get_advocate_repository
from advocate_directory.config import settings
from advocate_directory.models.responses import (
    AdvocateResponse,
    ErrorResponse,
    PaginatedAdvocatesResponse,
    PaginationMetadata,
)
from advocate_directory.services.advocates import AdvocateRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Advocates"])

INVALID_PAGINATION_MESSAGE = (
    "Invalid pagination parameters. Page and pageSize must be positive integers."
)
SEARCH_UNAVAILABLE_MESSAGE = "Advocate search is temporarily unavailable."


def parse_pagination_param(value: str | None, default: int) -> int | None:
    """Parse a raw page/pageSize value; None means it is not an integer."""
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return None


def validate_pagination_params(page: int | None, page_size: int | None) -> bool:
    return page is not None and page_size is not None and page > 0 and page_size > 0


def total_pages(total: int, page_size: int) -> int:
    return math.ceil(total / page_size)


# ---------------------------------------------------------------------------
# GET /advocates — Paged, filtered advocate listing
# ---------------------------------------------------------------------------


@router.get(
    "/advocates",
    response_model=PaginatedAdvocatesResponse,
    responses={400: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
    summary="List advocates, optionally filtered by a search term",
    description=(
        "Returns one page of advocates and the total number of matches. "
        "searchTerm supports AND, OR and NOT between terms, e.g. "
        "'Depression AND Anxiety NOT PTSD'. Each term matches "
        "case-insensitively against name, city, degree and specialties."
    ),
)
def list_advocates(
    raw_page: str | None = Query(default=None, alias="page"),
    raw_page_size: str | None = Query(default=None, alias="pageSize"),
    search_term: str | None = Query(default=None, alias="searchTerm"),
    repository: AdvocateRepository = Depends(get_advocate_repository),
):
    """Search advocates and return the requested page with paging metadata."""
    page = parse_pagination_param(raw_page, 1)
    page_size = parse_pagination_param(raw_page_size, settings.default_page_size)
    if not validate_pagination_params(page, page_size):
        logger.info(
            "Rejected pagination: page=%r, pageSize=%r", raw_page, raw_page_size,
        )
        return error_response(400, INVALID_PAGINATION_MESSAGE)

    logger.info(
        "Advocate list request: page=%d, pageSize=%d, searchTerm=%r",
        page, page_size, search_term,
    )

    try:
        result = repository.get_all(
            page=page,
            page_size=page_size,
            search_term=search_term or None,
        )
    except SQLAlchemyError as e:
        logger.exception("Advocate search failed: %s", e)
        return error_response(503, SEARCH_UNAVAILABLE_MESSAGE)

    return PaginatedAdvocatesResponse(
        data=[AdvocateResponse.model_validate(a) for a in result.data],
        meta=PaginationMetadata(
            total_advocates=result.total,
            total_pages=total_pages(result.total, page_size),
            current_page=page,
            page_size=page_size,
        ),
    )
