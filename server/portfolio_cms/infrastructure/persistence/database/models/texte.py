from __future__ import annotations
"""server/portfolio_cms/infrastructure/persistence/database/models/texte.py
~~~~~~~~~~~~~~~~~~~~~~~~
Table textes.
"""
import uuid
from typing import Any

from sqlalchemy import JSON, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_cms.domain.document import empty_document
from portfolio_cms.infrastructure.persistence.database.base import Base


class Texte(Base):
    __tablename__ = "textes"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    title: Mapped[str] = mapped_column(String(255))
    subtitle: Mapped[str] = mapped_column(String(255))
    content: Mapped[list[dict[str, Any]]] = mapped_column(JSON, default=empty_document)
