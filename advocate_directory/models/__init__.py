# =============================================================================
# Models Package — Pydantic V2 Schemas
# =============================================================================
# Request/response schemas for the API, separate from the ORM models in
# db/models.py. JSON keys are camelCase; Python attributes are snake_case.
# =============================================================================
