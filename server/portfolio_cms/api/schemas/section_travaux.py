from __future__ import annotations
"""server/portfolio_cms/api/schemas/section_travaux.py
~~~~~~~~~~~~~~~~~~~~~~~~
Schemas sections d'un travail. `section` ∈ {"1","2","3","4"}.
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from portfolio_cms.api.schemas.relationships import RelateToOne
from portfolio_cms.domain.choices import SectionNumber


class SectionTravauxCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    section: SectionNumber
    content: Optional[list[dict[str, Any]]] = None
    travaux: Optional[RelateToOne] = None
    image: Optional[RelateToOne] = None


class SectionTravauxUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    section: Optional[SectionNumber] = None
    content: Optional[list[dict[str, Any]]] = None
    travaux: Optional[RelateToOne] = None
    image: Optional[RelateToOne] = None
