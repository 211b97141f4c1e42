from __future__ import annotations
"""server/portfolio_cms/infrastructure/persistence/database/models/travaux.py
~~~~~~~~~~~~~~~~~~~~~~~~
Table travaux.
"""
import uuid
import datetime as dt
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from portfolio_cms.core.utils.datetime import utcnow
from portfolio_cms.infrastructure.persistence.database.base import Base

if TYPE_CHECKING:
    from .section_travaux import SectionTravaux


class Travaux(Base):
    __tablename__ = "travaux"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    title: Mapped[str] = mapped_column(String(255))
    subtitle: Mapped[str] = mapped_column(String(255))
    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    sections: Mapped[list["SectionTravaux"]] = relationship(
        back_populates="travaux", order_by="SectionTravaux.section"
    )
