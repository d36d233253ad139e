"""School model: a name, an optional logo reference, and a unique slug."""

from typing import Optional

from sqlalchemy import Index, String, text
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.database import Base
from catalog_api.models.mixins import IdentifierMixin, TimestampMixin


class School(IdentifierMixin, TimestampMixin, Base):
    __tablename__ = "schools"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    logo: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)

    __table_args__ = (
        Index("idx_schools_created_at", text("created_at DESC")),
    )

    def __repr__(self) -> str:
        return f"<School(id={self.id}, slug='{self.slug}')>"
