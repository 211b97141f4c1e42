from __future__ import annotations
"""server/portfolio_cms/api/schemas/about.py
~~~~~~~~~~~~~~~~~~~~~~~~
Schemas page à propos.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict

from portfolio_cms.api.schemas.relationships import RelateToMany, RelateToOne


class AboutCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    image: Optional[RelateToOne] = None
    sections: Optional[RelateToMany] = None


class AboutUpdate(AboutCreate):
    pass
