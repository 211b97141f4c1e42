from __future__ import annotations
"""server/portfolio_cms/infrastructure/persistence/database/models/section_travaux.py
~~~~~~~~~~~~~~~~~~~~~~~~
Table sections_travaux.
"""
import uuid
from typing import TYPE_CHECKING, Any, Optional

from sqlalchemy import JSON, CheckConstraint, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from portfolio_cms.domain.document import empty_document
from portfolio_cms.infrastructure.persistence.database.base import Base

if TYPE_CHECKING:
    from .image import Image
    from .travaux import Travaux


class SectionTravaux(Base):
    __tablename__ = "sections_travaux"
    __table_args__ = (
        CheckConstraint("section IN ('1', '2', '3', '4')", name="ck_sections_travaux_section"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    content: Mapped[list[dict[str, Any]]] = mapped_column(JSON, default=empty_document)
    section: Mapped[str] = mapped_column(String(1))
    travaux_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid, ForeignKey("travaux.id", ondelete="SET NULL"), nullable=True, index=True
    )

    travaux: Mapped[Optional["Travaux"]] = relationship(back_populates="sections")
    image: Mapped[Optional["Image"]] = relationship(back_populates="section_travaux")
