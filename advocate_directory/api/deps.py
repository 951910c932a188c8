# =============================================================================
# API Dependencies — FastAPI Dependency Injection
# =============================================================================
#
# Route handlers receive their repository through Depends(), so tests can
# swap in a repository bound to a throwaway database:
#
#   app.dependency_overrides[get_advocate_repository] = lambda: repo
#
# Rejected and failed requests share one body shape, {"error": "..."},
# built by error_response().
# =============================================================================

from __future__ import annotations

from fastapi.responses import JSONResponse

from advocate_directory.models.responses import ErrorResponse
from advocate_directory.services.advocates import AdvocateRepository


def get_advocate_repository() -> AdvocateRepository:
    """Repository bound to the shared, process-wide session factory."""
    return AdvocateRepository()


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )
