from __future__ import annotations
"""server/portfolio_cms/infrastructure/persistence/database/models/image.py
~~~~~~~~~~~~~~~~~~~~~~~~
Table images.

Le propriétaire est porté par quatre FK nullables ; la contrainte
ck_images_single_owner garantit qu'au plus une est renseignée.
Les trois parents "une seule image" ont une FK unique.
"""
import uuid
import datetime as dt
from typing import TYPE_CHECKING, Optional

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from portfolio_cms.core.utils.datetime import utcnow
from portfolio_cms.infrastructure.persistence.database.base import Base

if TYPE_CHECKING:
    from .about import About
    from .exposition import Exposition
    from .section_about import SectionAbout
    from .section_travaux import SectionTravaux

SINGLE_OWNER_CHECK = (
    "(CASE WHEN exposition_id IS NULL THEN 0 ELSE 1 END"
    " + CASE WHEN section_travaux_id IS NULL THEN 0 ELSE 1 END"
    " + CASE WHEN section_about_id IS NULL THEN 0 ELSE 1 END"
    " + CASE WHEN about_id IS NULL THEN 0 ELSE 1 END) <= 1"
)


class Image(Base):
    __tablename__ = "images"
    __table_args__ = (
        CheckConstraint(SINGLE_OWNER_CHECK, name="ck_images_single_owner"),
        CheckConstraint('"order" IS NULL OR "order" >= 1', name="ck_images_order_min"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    # fichier stocké (storage local) : <file_id>.<file_extension>
    file_id: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    file_extension: Mapped[Optional[str]] = mapped_column(String(8), nullable=True)
    file_filesize: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    file_width: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    file_height: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    order: Mapped[Optional[int]] = mapped_column("order", Integer, nullable=True)
    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    exposition_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid, ForeignKey("expositions.id", ondelete="SET NULL"), nullable=True, index=True
    )
    section_travaux_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid, ForeignKey("sections_travaux.id", ondelete="SET NULL"), nullable=True, unique=True
    )
    section_about_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid, ForeignKey("sections_about.id", ondelete="SET NULL"), nullable=True, unique=True
    )
    about_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid, ForeignKey("about.id", ondelete="SET NULL"), nullable=True, unique=True
    )

    exposition: Mapped[Optional["Exposition"]] = relationship(back_populates="images")
    section_travaux: Mapped[Optional["SectionTravaux"]] = relationship(back_populates="image")
    section_about: Mapped[Optional["SectionAbout"]] = relationship(back_populates="image")
    about: Mapped[Optional["About"]] = relationship(back_populates="image")
