from __future__ import annotations
"""server/portfolio_cms/infrastructure/persistence/database/models/about.py
~~~~~~~~~~~~~~~~~~~~~~~~
Tables about + about_sections (relation plusieurs-à-plusieurs à sens unique
vers sections_about).
"""
import uuid
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Column, ForeignKey, Table, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from portfolio_cms.infrastructure.persistence.database.base import Base

if TYPE_CHECKING:
    from .image import Image
    from .section_about import SectionAbout


about_sections = Table(
    "about_sections",
    Base.metadata,
    Column("about_id", Uuid, ForeignKey("about.id", ondelete="CASCADE"), primary_key=True),
    Column("section_about_id", Uuid, ForeignKey("sections_about.id", ondelete="CASCADE"), primary_key=True),
)


class About(Base):
    __tablename__ = "about"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    image: Mapped[Optional["Image"]] = relationship(back_populates="about")
    sections: Mapped[list["SectionAbout"]] = relationship(secondary=about_sections)
