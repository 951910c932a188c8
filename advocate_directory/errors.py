# =============================================================================
# Error Types
# =============================================================================
#
# Only construction-time failures have their own type. Failures raised by
# the database while a query runs are SQLAlchemy's own exceptions
# (sqlalchemy.exc.SQLAlchemyError and subclasses); the search core lets
# them propagate unchanged and the HTTP layer maps them to 503.
#
# The search-term parser has no error type: every string is a valid query.
# =============================================================================


class AdvocateDirectoryError(Exception):
    """Base class for errors raised by this package."""


class MissingCapabilityError(AdvocateDirectoryError):
    """
    The persistence handle given to a repository cannot serve it.

    Raised at repository construction when the session factory is unusable,
    is not bound to an engine, the engine's dialect cannot return inserted
    rows, or the model lacks one of the searchable columns.
    """
