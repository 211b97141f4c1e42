from __future__ import annotations
"""server/portfolio_cms/api/schemas/section_about.py
~~~~~~~~~~~~~~~~~~~~~~~~
Schemas sections de la page à propos.
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from portfolio_cms.api.schemas.relationships import RelateToOne
from portfolio_cms.domain.choices import SectionAboutType


class SectionAboutCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: SectionAboutType
    content: Optional[list[dict[str, Any]]] = None
    image: Optional[RelateToOne] = None


class SectionAboutUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Optional[SectionAboutType] = None
    content: Optional[list[dict[str, Any]]] = None
    image: Optional[RelateToOne] = None
