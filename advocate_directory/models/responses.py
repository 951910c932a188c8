# =============================================================================
# API Response Models — Pydantic V2 Schemas
# =============================================================================
#
# These models define the shape of data coming OUT of the API. They are
# serialized with camelCase keys to match the directory's JSON contract:
#
#   GET /advocates →
#     {
#       "data": [{"id": 1, "firstName": "John", ...}],
#       "meta": {"totalAdvocates": 7, "totalPages": 1,
#                "currentPage": 1, "pageSize": 10}
#     }
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_camel_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HealthResponse(BaseModel):
    """Response for GET /health — confirms the API is running."""

    status: str = "ok"
    version: str
    service: str


class ErrorResponse(BaseModel):
    """Body of a rejected request (e.g. invalid pagination)."""

    error: str


class AdvocateResponse(BaseModel):
    """A stored advocate, as returned to clients."""

    id: int
    first_name: str
    last_name: str
    city: str
    degree: str
    specialties: list[str]
    years_of_experience: int
    phone_number: int
    created_at: datetime | None = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PaginationMetadata(BaseModel):
    """Paging envelope for GET /advocates."""

    total_advocates: int = Field(description="Advocates matching the search")
    total_pages: int = Field(description="ceil(total_advocates / page_size)")
    current_page: int
    page_size: int

    model_config = _camel_config


class PaginatedAdvocatesResponse(BaseModel):
    """Response for GET /advocates — one page of advocates plus paging meta."""

    data: list[AdvocateResponse]
    meta: PaginationMetadata

    model_config = _camel_config


class BulkInsertResponse(BaseModel):
    """Response for POST /seed — the advocates as stored."""

    advocates: list[AdvocateResponse]

    model_config = _camel_config
