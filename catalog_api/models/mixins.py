"""
Catalog API — Shared Column Mixins
===================================

What:  Identifier and timestamp columns every resource table carries.
Why:   Products, schools and categories share the same server-assigned
       fields; declaring them once keeps the three tables consistent.

Column notes:
    - id: UUID4 rendered as text. Opaque to clients, non-sequential, and
      portable between PostgreSQL and SQLite (tests).
    - created_at / updated_at: timezone-aware UTC, assigned in Python so the
      values are known right after flush without a refresh round-trip.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid.uuid4())


class IdentifierMixin:
    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=new_id,
        comment="Opaque unique identifier (UUID4 text)",
    )


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        comment="When the record was created (UTC)",
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
        comment="When the record was last modified (UTC)",
    )
