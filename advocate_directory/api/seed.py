# =============================================================================
# Seed API — Create an Advocate
# =============================================================================
#
# POST /seed with one advocate as the JSON body. The record goes through the
# repository's bulk insert path (a one-element batch) and the stored row,
# including its database-assigned id, is returned.
# =============================================================================

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError

from advocate_directory.api.deps import error_response, get_advocate_repository
from advocate_directory.models.requests import AdvocateCreate
from advocate_directory.models.responses import (
    AdvocateResponse,
    BulkInsertResponse,
    ErrorResponse,
)
from advocate_directory.services.advocates import AdvocateRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Seed"])

INSERT_FAILED_MESSAGE = "Advocate could not be stored."


@router.post(
    "/seed",
    response_model=BulkInsertResponse,
    responses={503: {"model": ErrorResponse}},
    summary="Add an advocate to the directory",
)
def create_advocate(
    request: AdvocateCreate,
    repository: AdvocateRepository = Depends(get_advocate_repository),
):
    """Insert one validated advocate and return it as stored."""
    try:
        records = repository.bulk_insert([request.model_dump()])
    except SQLAlchemyError as e:
        logger.exception("Advocate insert failed: %s", e)
        return error_response(503, INSERT_FAILED_MESSAGE)

    logger.info(
        "Advocate created: ids=%s", [record.id for record in records],
    )
    return BulkInsertResponse(
        advocates=[AdvocateResponse.model_validate(r) for r in records],
    )
