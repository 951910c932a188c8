# =============================================================================
# Services Package — Search Core
# =============================================================================
#   - search_query.py: search-term parser (keyword scan + shape rules)
#   - predicates.py: SearchQuery → SQLAlchemy WHERE clause
#   - pagination.py: one page of rows + total match count in one statement
#   - advocates.py: AdvocateRepository wiring the chain to the Advocate model
# =============================================================================
