# =============================================================================
# Database Engine & Session Management
# =============================================================================
#
# One process-wide SQLAlchemy engine owns the connection pool. It is created
# lazily on first use so that importing the package never opens a connection
# (tests bind their own SQLite engine instead).
#
# SESSION LIFECYCLE (per repository call):
# 1. `get_sync_session()` checks a session out of the shared factory
# 2. The caller runs exactly one logical operation
# 3. The session commits on success, rolls back on error
# 4. The session is closed on every exit path, returning its connection
#    to the pool
#
# The pool is disposed only by `dispose_engine()`, which the FastAPI
# lifespan calls at shutdown. Nothing disposes it per call.
# =============================================================================

import threading
from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from advocate_directory.config import settings

_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None
_init_lock = threading.Lock()


def get_engine() -> Engine:
    """
    Lazily create and cache the shared engine.

    Creation is double-checked under `_init_lock`, so concurrent first
    calls from the request threadpool build exactly one engine.
    """
    global _engine
    if _engine is None:
        with _init_lock:
            if _engine is None:
                _engine = create_engine(
                    settings.database_url,
                    echo=settings.debug,
                    pool_size=settings.db_pool_size,
                    max_overflow=settings.db_max_overflow,
                    pool_pre_ping=True,
                )
    return _engine


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    """
    Build a session factory bound to `engine`.

    expire_on_commit=False keeps loaded rows readable after the session
    is closed, since repository results outlive their session.
    """
    return sessionmaker(
        bind=engine,
        class_=Session,
        expire_on_commit=False,
    )


def get_session_factory() -> sessionmaker[Session]:
    """Lazily create and cache the session factory for the shared engine."""
    global _session_factory
    if _session_factory is None:
        engine = get_engine()
        with _init_lock:
            if _session_factory is None:
                _session_factory = build_session_factory(engine)
    return _session_factory


@contextmanager
def get_sync_session(
    factory: sessionmaker[Session] | None = None,
) -> Generator[Session, None, None]:
    """
    Context manager that provides a database session for one operation.

    Usage:
        with get_sync_session() as session:
            rows = session.execute(stmt).all()
            # Auto-commits on exit, auto-rollbacks on exception

    Args:
        factory: Session factory to draw from. Defaults to the shared one.
    """
    session = (factory or get_session_factory())()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def dispose_engine() -> None:
    """Close every pooled connection. Called once at application shutdown."""
    global _engine, _session_factory
    with _init_lock:
        if _engine is not None:
            _engine.dispose()
        _engine = None
        _session_factory = None
