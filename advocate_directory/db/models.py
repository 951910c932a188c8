# =============================================================================
# Database Models — SQLAlchemy ORM
# =============================================================================
#
# SCHEMA OVERVIEW:
#
# ┌─────────────────────────────────────┐
# │  advocates                          │
# ├─────────────────────────────────────┤
# │ id (PK)                             │
# │ first_name (varchar 128)            │
# │ last_name (varchar 128)             │
# │ city (varchar 255)                  │
# │ degree (varchar 4)                  │
# │ specialties (jsonb, list of str)    │
# │ years_of_experience (int)           │
# │ phone_number (bigint)               │
# │ created_at                          │
# └─────────────────────────────────────┘
#
# `specialties` is the only multi-valued column. Text search casts it to
# text before substring matching (see services/predicates.py).
# =============================================================================

from datetime import datetime

from sqlalchemy import JSON, BigInteger, DateTime, Integer, String, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """SQLAlchemy declarative base class for all ORM models."""

    pass


class Advocate(Base):
    """A healthcare advocate listed in the directory."""

    __tablename__ = "advocates"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    first_name: Mapped[str] = mapped_column(String(128), nullable=False)
    last_name: Mapped[str] = mapped_column(String(128), nullable=False)
    city: Mapped[str] = mapped_column(String(255), nullable=False)

    # Short credential, e.g. "MD", "PhD", "MSW"
    degree: Mapped[str] = mapped_column(String(4), nullable=False)

    # JSONB on PostgreSQL, plain JSON (stored as text) elsewhere
    specialties: Mapped[list[str]] = mapped_column(
        JSON().with_variant(JSONB(), "postgresql"),
        nullable=False,
        default=list,
    )

    years_of_experience: Mapped[int] = mapped_column(Integer, nullable=False)

    # Ten-digit US number stored without formatting
    phone_number: Mapped[int] = mapped_column(BigInteger, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return (
            f"<Advocate(id={self.id}, name='{self.first_name} {self.last_name}', "
            f"city='{self.city}')>"
        )
