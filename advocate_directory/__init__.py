# =============================================================================
# Advocate Directory
# =============================================================================
# A paged advocate directory with a small boolean search-term language
# (terms joined by AND / OR / NOT, matched across name, city, degree and
# specialties).
#
# Package structure:
#   advocate_directory/
#   ├── api/          → FastAPI route handlers (advocates, seed)
#   ├── db/           → Database engine, session, and ORM models
#   ├── models/       → Pydantic V2 request/response schemas
#   └── services/     → Search core: query parser, predicate compiler,
#                       paginated executor, advocate repository
# =============================================================================
