from __future__ import annotations
"""server/portfolio_cms/infrastructure/persistence/database/models/exposition.py
~~~~~~~~~~~~~~~~~~~~~~~~
Table expositions.
"""
import uuid
import datetime as dt
from typing import TYPE_CHECKING, Any

from sqlalchemy import JSON, DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from portfolio_cms.core.utils.datetime import utcnow
from portfolio_cms.domain.document import empty_document
from portfolio_cms.infrastructure.persistence.database.base import Base

if TYPE_CHECKING:
    from .image import Image


class Exposition(Base):
    __tablename__ = "expositions"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    title: Mapped[str] = mapped_column(String(255))
    subtitle: Mapped[str] = mapped_column(String(255))
    content: Mapped[list[dict[str, Any]]] = mapped_column(JSON, default=empty_document)
    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    images: Mapped[list["Image"]] = relationship(back_populates="exposition")
