from __future__ import annotations
"""server/portfolio_cms/infrastructure/persistence/database/models/section_about.py
~~~~~~~~~~~~~~~~~~~~~~~~
Table sections_about.
"""
import uuid
from typing import TYPE_CHECKING, Any, Optional

from sqlalchemy import JSON, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from portfolio_cms.domain.document import empty_document
from portfolio_cms.infrastructure.persistence.database.base import Base

if TYPE_CHECKING:
    from .image import Image


class SectionAbout(Base):
    __tablename__ = "sections_about"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    type: Mapped[str] = mapped_column(String(32))
    content: Mapped[list[dict[str, Any]]] = mapped_column(JSON, default=empty_document)

    image: Mapped[Optional["Image"]] = relationship(back_populates="section_about")
