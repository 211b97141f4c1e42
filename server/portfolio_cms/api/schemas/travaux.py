from __future__ import annotations
"""server/portfolio_cms/api/schemas/travaux.py
~~~~~~~~~~~~~~~~~~~~~~~~
Schemas travaux. `created_at` est en lecture seule (refusé en entrée).
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from portfolio_cms.api.schemas.relationships import RelateToMany


class TravauxCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=1, max_length=255)
    subtitle: str = Field(..., min_length=1, max_length=255)
    sections: Optional[RelateToMany] = None


class TravauxUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    subtitle: Optional[str] = Field(None, min_length=1, max_length=255)
    sections: Optional[RelateToMany] = None
