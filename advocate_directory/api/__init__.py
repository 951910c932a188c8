# =============================================================================
# API Package — FastAPI Route Handlers
# =============================================================================
# Each module defines a FastAPI APIRouter for a specific feature:
#   - advocates.py: Paged, filtered advocate listing
#   - seed.py: Advocate creation through the bulk insert path
#   - deps.py: Dependency providers shared by the routers
# =============================================================================
