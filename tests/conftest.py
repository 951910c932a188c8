# =============================================================================
# Shared Test Fixtures — In-Memory SQLite Advocate Directory
# =============================================================================
#
# Repository and API tests run the real SQLAlchemy code path against an
# in-memory SQLite database (StaticPool keeps one connection alive so every
# session sees the same data; check_same_thread=False lets FastAPI's
# threadpool use it).
#
# The fixture data has a defined tie-break: repositories built here order
# by Advocate.id, so page contents are deterministic.
# =============================================================================

from __future__ import annotations

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from advocate_directory.db.engine import build_session_factory
from advocate_directory.db.models import Advocate, Base
from advocate_directory.services.advocates import AdvocateRepository
from fixture_data import ADVOCATE_FIXTURES


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
def empty_repository(session_factory) -> AdvocateRepository:
    return AdvocateRepository(session_factory, order_by=[Advocate.id])


@pytest.fixture
def repository(empty_repository) -> AdvocateRepository:
    empty_repository.bulk_insert(ADVOCATE_FIXTURES)
    return empty_repository
