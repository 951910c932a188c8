# =============================================================================
# Database Package
# =============================================================================
# Provides the shared SQLAlchemy engine, session management, and ORM models.
#
# Key exports:
#   - get_sync_session: per-call session context manager
#   - Base: SQLAlchemy declarative base for ORM models
#   - Advocate: ORM model for directory records
# =============================================================================
