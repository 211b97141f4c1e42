from __future__ import annotations
"""server/portfolio_cms/api/schemas/texte.py
~~~~~~~~~~~~~~~~~~~~~~~~
Schemas textes.
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class TexteCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=1, max_length=255)
    subtitle: str = Field(..., min_length=1, max_length=255)
    content: Optional[list[dict[str, Any]]] = None


class TexteUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    subtitle: Optional[str] = Field(None, min_length=1, max_length=255)
    content: Optional[list[dict[str, Any]]] = None
